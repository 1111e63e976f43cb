"""Tests for the day log service."""

from datetime import date

from cycle_tracker.domain.catalogs import FlowIntensity
from cycle_tracker.domain.logs import DayLog
from cycle_tracker.services.day_logs import DayLogService
from tests.conftest import InMemoryDayLogRepository


def test_save_upserts_by_date() -> None:
    repository = InMemoryDayLogRepository()
    service = DayLogService(repository)
    day = date(2024, 6, 1)

    service.save(DayLog(day=day, notes="first"))
    service.save(DayLog(day=day, notes="second"))

    assert len(repository.logs) == 1
    assert service.get(day).notes == "second"


def test_save_clears_intensity_on_non_period_days() -> None:
    service = DayLogService(InMemoryDayLogRepository())

    saved = service.save(
        DayLog(day=date(2024, 6, 1), is_period=False, intensity=FlowIntensity.INTENSE)
    )

    assert saved.intensity is None


def test_save_keeps_intensity_on_period_days() -> None:
    service = DayLogService(InMemoryDayLogRepository())

    saved = service.save(
        DayLog(day=date(2024, 6, 1), is_period=True, intensity=FlowIntensity.INTENSE)
    )

    assert saved.intensity == FlowIntensity.INTENSE


def test_delete_reports_missing_logs() -> None:
    repository = InMemoryDayLogRepository()
    service = DayLogService(repository)
    day = date(2024, 6, 1)
    service.save(DayLog(day=day))

    assert service.delete(day) is True
    assert service.delete(day) is False
    assert repository.logs == {}


def test_get_all_is_ordered_by_date() -> None:
    repository = InMemoryDayLogRepository()
    service = DayLogService(repository)
    for day in (date(2024, 6, 3), date(2024, 6, 1), date(2024, 6, 2)):
        service.save(DayLog(day=day))

    assert list(service.get_all()) == [
        date(2024, 6, 1),
        date(2024, 6, 2),
        date(2024, 6, 3),
    ]


def test_history_is_newest_first_and_limited() -> None:
    service = DayLogService(InMemoryDayLogRepository())
    for day in (date(2024, 6, 3), date(2024, 6, 1), date(2024, 6, 2)):
        service.save(DayLog(day=day))

    history = service.history(limit=2)

    assert [log.day for log in history] == [date(2024, 6, 3), date(2024, 6, 2)]
