"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from cycle_tracker.adapters.supabase_day_log_repository import SupabaseDayLogRepository
from cycle_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from cycle_tracker.config import Settings
from cycle_tracker.services.backup import BackupService
from cycle_tracker.services.day_logs import DayLogService
from cycle_tracker.services.overview import CycleOverviewService
from cycle_tracker.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    day_log_service: DayLogService
    user_settings_service: UserSettingsService
    overview_service: CycleOverviewService
    backup_service: BackupService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    day_log_repository = SupabaseDayLogRepository(
        supabase_client, table_name=resolved_settings.day_logs_table
    )
    user_settings_repository = SupabaseUserSettingsRepository(
        supabase_client, table_name=resolved_settings.settings_table
    )
    return assemble_container(
        resolved_settings,
        DayLogService(day_log_repository),
        UserSettingsService(user_settings_repository),
    )


def assemble_container(
    settings: Settings,
    day_log_service: DayLogService,
    user_settings_service: UserSettingsService,
) -> AppContainer:
    """Wire the services that only depend on the two repositories."""

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        day_log_service=day_log_service,
        user_settings_service=user_settings_service,
        overview_service=CycleOverviewService(
            day_log_service=day_log_service,
            user_settings_service=user_settings_service,
        ),
        backup_service=BackupService(
            day_log_service=day_log_service,
            user_settings_service=user_settings_service,
        ),
        close_resources=close_resources,
    )
