"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from cycle_tracker.domain.settings import UserSettings
from cycle_tracker.services.user_settings import UserSettingsRepository

SETTINGS_ROW_ID = 1


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for the single settings row."""

    client: Client
    table_name: str = "user_settings"

    def get_settings(self) -> UserSettings | None:
        """Return the stored settings, defaulting any unreadable field."""
        response = (
            self.client.table(self.table_name)
            .select(
                "avg_cycle_length, avg_period_length, last_period_start_manual, theme"
            )
            .eq("id", SETTINGS_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserSettings.from_dict(
            {
                "avgCycleLength": row.get("avg_cycle_length"),
                "avgPeriodLength": row.get("avg_period_length"),
                "lastPeriodStartManual": row.get("last_period_start_manual"),
                "theme": row.get("theme"),
            }
        )

    def save_settings(self, settings: UserSettings) -> None:
        """Upsert the settings row."""
        self.client.table(self.table_name).upsert(
            {
                "id": SETTINGS_ROW_ID,
                "avg_cycle_length": settings.avg_cycle_length,
                "avg_period_length": settings.avg_period_length,
                "last_period_start_manual": settings.last_period_start_manual,
                "theme": settings.theme.value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
