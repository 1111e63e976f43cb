"""Supabase repository for day logs."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime

from supabase import Client

from cycle_tracker.domain.logs import DayLog
from cycle_tracker.services.day_logs import DayLogRepository

logger = logging.getLogger(__name__)

_COLUMNS = (
    "log_date, is_period, intensity, symptoms, moods, notes, medical_notes, "
    "water_intake, sleep_hours"
)


@dataclass
class SupabaseDayLogRepository(DayLogRepository):
    """Supabase implementation for day logs keyed by ``log_date``."""

    client: Client
    table_name: str = "day_logs"

    def list_logs(self) -> list[DayLog]:
        """Return all parsable logs, skipping corrupt rows."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .order("log_date", desc=False)
            .execute()
        )
        logs: list[DayLog] = []
        for row in response.data or []:
            try:
                logs.append(_parse_row(row))
            except ValueError:
                logger.warning(
                    "Skipping unreadable day log row",
                    extra={"log_date": row.get("log_date")},
                )
        return logs

    def upsert_log(self, log: DayLog) -> None:
        """Insert or replace the row for the log's date."""
        response = (
            self.client.table(self.table_name)
            .upsert(_to_row(log), on_conflict="log_date")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save day log")

    def delete_log(self, day: date) -> bool:
        """Delete the row for a date."""
        response = (
            self.client.table(self.table_name)
            .delete()
            .eq("log_date", day.isoformat())
            .execute()
        )
        return bool(response.data)

    def replace_all(self, logs: list[DayLog]) -> None:
        """Upsert the given logs, then delete rows for dates not among them.

        Existing rows are only removed after the new rows are stored.
        """
        payload = [_to_row(log) for log in logs]
        if payload:
            response = (
                self.client.table(self.table_name)
                .upsert(payload, on_conflict="log_date")
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to save day logs")

        kept = {row["log_date"] for row in payload}
        existing = (
            self.client.table(self.table_name).select("log_date").execute().data or []
        )
        stale = sorted({str(row.get("log_date")) for row in existing} - kept)
        if stale:
            self.client.table(self.table_name).delete().in_("log_date", stale).execute()


def _to_row(log: DayLog) -> dict[str, object]:
    record = log.to_dict()
    return {
        "log_date": record["date"],
        "is_period": record["isPeriod"],
        "intensity": record["intensity"],
        "symptoms": record["symptoms"],
        "moods": record["moods"],
        "notes": record["notes"],
        "medical_notes": record["medicalNotes"],
        "water_intake": record["waterIntake"],
        "sleep_hours": record["sleepHours"],
        "updated_at": datetime.now(tz=UTC).isoformat(),
    }


def _parse_row(row: dict[str, object]) -> DayLog:
    return DayLog.from_dict(
        {
            "date": row.get("log_date"),
            "isPeriod": row.get("is_period", False),
            "intensity": row.get("intensity"),
            "symptoms": row.get("symptoms") or [],
            "moods": row.get("moods") or [],
            "notes": row.get("notes"),
            "medicalNotes": row.get("medical_notes"),
            "waterIntake": row.get("water_intake"),
            "sleepHours": row.get("sleep_hours"),
        }
    )
