"""Per-day projection of cycle stats for calendar rendering."""

from collections.abc import Mapping
from datetime import date, timedelta

from cycle_tracker.domain.cycle import CalendarDay, CalendarMonth, CycleStats, DayStatus
from cycle_tracker.domain.dates import end_of_month, end_of_week, start_of_week
from cycle_tracker.domain.logs import DayLog
from cycle_tracker.services.cycle_stats import normalize_cycle_day
from cycle_tracker.services.phases import classify_phase


def day_of_cycle(day: date, stats: CycleStats) -> int | None:
    """Return the cycle day of an arbitrary date, or None without an anchor."""
    if stats.last_period_start is None:
        return None
    return normalize_cycle_day(day, stats.last_period_start, stats.avg_cycle_length)


def resolve_day_status(
    day: date, stats: CycleStats, logs: Mapping[date, DayLog]
) -> DayStatus:
    """Combine a date with the stats and its log into calendar flags."""
    log = logs.get(day)
    cycle_day = day_of_cycle(day, stats)
    return DayStatus(
        day=day,
        is_menstruation=bool(log and log.is_period),
        is_predicted_period=stats.next_period_date == day,
        is_ovulation=stats.ovulation_date == day,
        is_fertile=day in stats.fertile_window,
        day_of_cycle=cycle_day,
        phase=classify_phase(cycle_day, stats) if cycle_day is not None else None,
        log=log,
    )


def calendar_days(year: int, month: int) -> list[date]:
    """Return every date of a Sunday-first grid covering the month."""
    start = start_of_week(date(year, month, 1))
    end = end_of_week(end_of_month(year, month))
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def build_calendar_month(
    year: int,
    month: int,
    stats: CycleStats,
    logs: Mapping[date, DayLog],
    today: date,
) -> CalendarMonth:
    """Resolve every cell of a month grid."""
    return CalendarMonth(
        year=year,
        month=month,
        days=[
            CalendarDay(
                status=resolve_day_status(day, stats, logs),
                in_month=day.month == month,
                is_today=day == today,
            )
            for day in calendar_days(year, month)
        ],
    )
