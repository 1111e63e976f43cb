"""Tests for backup export and import."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

import pytest

from cycle_tracker.domain.catalogs import Symptom
from cycle_tracker.domain.logs import DayLog
from cycle_tracker.domain.settings import AppTheme, UserSettings
from cycle_tracker.services.backup import (
    BACKUP_VERSION,
    BackupFormatError,
    BackupService,
    parse_logs,
)
from cycle_tracker.services.day_logs import DayLogService
from cycle_tracker.services.user_settings import UserSettingsService
from tests.conftest import InMemoryDayLogRepository, InMemoryUserSettingsRepository


def _service(
    logs: InMemoryDayLogRepository, settings: InMemoryUserSettingsRepository
) -> BackupService:
    return BackupService(DayLogService(logs), UserSettingsService(settings))


def test_export_contains_logs_settings_and_version() -> None:
    day = date(2024, 4, 2)
    logs = InMemoryDayLogRepository(
        {day: DayLog(day=day, is_period=True, symptoms=frozenset({Symptom.CRAMPS}))}
    )
    settings = InMemoryUserSettingsRepository(UserSettings(theme=AppTheme.VIOLET))
    exported_at = datetime(2024, 4, 3, 12, 0, tzinfo=UTC)

    document = _service(logs, settings).export_document(now=exported_at)

    assert document["version"] == BACKUP_VERSION
    assert document["exportedAt"] == exported_at.isoformat()
    assert document["logs"]["2024-04-02"]["symptoms"] == ["cramps"]
    assert document["settings"]["theme"] == "violet"


def test_export_then_import_restores_dataset() -> None:
    source_logs = InMemoryDayLogRepository(
        {
            date(2024, 4, 1): DayLog(day=date(2024, 4, 1), is_period=True),
            date(2024, 4, 9): DayLog(day=date(2024, 4, 9), notes="tired"),
        }
    )
    source_settings = InMemoryUserSettingsRepository(UserSettings(avg_cycle_length=30))
    document = _service(source_logs, source_settings).export_document()

    target_logs = InMemoryDayLogRepository(
        {date(2023, 1, 1): DayLog(day=date(2023, 1, 1))}
    )
    target_settings = InMemoryUserSettingsRepository()
    result = _service(target_logs, target_settings).import_document(document)

    assert result.imported_logs == 2
    assert result.skipped_logs == 0
    assert target_logs.logs == source_logs.logs
    assert target_settings.settings == UserSettings(avg_cycle_length=30)


def test_import_skips_invalid_records() -> None:
    logs = InMemoryDayLogRepository()
    settings = InMemoryUserSettingsRepository()
    document = {
        "logs": [
            {"date": "2024-04-01", "isPeriod": True},
            {"date": "not-a-date"},
            "garbage",
        ],
        "settings": {"avgCycleLength": 26},
    }

    result = _service(logs, settings).import_document(document)

    assert result.imported_logs == 1
    assert result.skipped_logs == 2
    assert list(logs.logs) == [date(2024, 4, 1)]
    assert result.settings.avg_cycle_length == 26


def test_import_without_settings_uses_defaults() -> None:
    settings = InMemoryUserSettingsRepository(UserSettings(avg_cycle_length=40))

    result = _service(InMemoryDayLogRepository(), settings).import_document({})

    assert result.settings == UserSettings()
    assert settings.settings == UserSettings()


@pytest.mark.parametrize(
    "document",
    [[], "backup", {"logs": "x"}, {"settings": [1, 2]}],
)
def test_import_rejects_malformed_documents(document: object) -> None:
    logs = InMemoryDayLogRepository({date(2024, 1, 1): DayLog(day=date(2024, 1, 1))})
    service = _service(logs, InMemoryUserSettingsRepository())

    with pytest.raises(BackupFormatError):
        service.import_document(document)

    assert date(2024, 1, 1) in logs.logs


def test_parse_logs_accepts_mapping() -> None:
    logs, skipped = parse_logs({"2024-04-01": {"date": "2024-04-01"}})

    assert [log.day for log in logs] == [date(2024, 4, 1)]
    assert skipped == 0


@dataclass
class FlakyUserSettingsRepository(InMemoryUserSettingsRepository):
    """Settings repository whose first save fails."""

    failures: int = 1

    def save_settings(self, settings: UserSettings) -> None:
        if self.failures:
            self.failures -= 1
            raise RuntimeError("Failed to save settings")
        super().save_settings(settings)


def test_failed_import_restores_previous_data() -> None:
    original = {date(2024, 1, 1): DayLog(day=date(2024, 1, 1), is_period=True)}
    logs = InMemoryDayLogRepository(dict(original))
    settings = FlakyUserSettingsRepository(UserSettings(avg_cycle_length=30))
    document = {
        "logs": [{"date": "2024-05-01", "isPeriod": True}],
        "settings": {"avgCycleLength": 26},
    }

    with pytest.raises(RuntimeError):
        _service(logs, settings).import_document(document)

    assert logs.logs == original
    assert settings.settings == UserSettings(avg_cycle_length=30)
