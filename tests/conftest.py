"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, timedelta

import pytest

from cycle_tracker.config import Settings
from cycle_tracker.containers import AppContainer, assemble_container
from cycle_tracker.domain.logs import DayLog
from cycle_tracker.domain.settings import UserSettings
from cycle_tracker.services.day_logs import DayLogRepository, DayLogService
from cycle_tracker.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


@dataclass
class InMemoryDayLogRepository(DayLogRepository):
    """In-memory day log repository for tests."""

    logs: dict[date, DayLog] = field(default_factory=dict)

    def list_logs(self) -> list[DayLog]:
        return list(self.logs.values())

    def upsert_log(self, log: DayLog) -> None:
        self.logs[log.day] = log

    def delete_log(self, day: date) -> bool:
        return self.logs.pop(day, None) is not None

    def replace_all(self, logs: list[DayLog]) -> None:
        self.logs = {log.day: log for log in logs}


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    settings: UserSettings | None = None

    def get_settings(self) -> UserSettings | None:
        return self.settings

    def save_settings(self, settings: UserSettings) -> None:
        self.settings = settings


def period_logs(start: date, length: int) -> dict[date, DayLog]:
    """Return consecutive period-day logs starting at ``start``."""
    days = [start + timedelta(days=offset) for offset in range(length)]
    return {day: DayLog(day=day, is_period=True) for day in days}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def day_log_repository() -> InMemoryDayLogRepository:
    return InMemoryDayLogRepository()


@pytest.fixture
def user_settings_repository() -> InMemoryUserSettingsRepository:
    return InMemoryUserSettingsRepository()


@pytest.fixture
def container(
    settings: Settings,
    day_log_repository: InMemoryDayLogRepository,
    user_settings_repository: InMemoryUserSettingsRepository,
) -> AppContainer:
    return assemble_container(
        settings,
        DayLogService(day_log_repository),
        UserSettingsService(user_settings_repository),
    )
