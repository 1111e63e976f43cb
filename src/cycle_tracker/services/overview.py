"""Cycle overview built from the current logs and settings snapshot."""

from dataclasses import dataclass
from datetime import date

from cycle_tracker.domain.cycle import (
    CalendarMonth,
    CycleOverview,
    CycleStats,
    DayStatus,
    PeriodStatus,
)
from cycle_tracker.domain.dates import days_between
from cycle_tracker.services.calendar import build_calendar_month, resolve_day_status
from cycle_tracker.services.cycle_stats import compute_stats
from cycle_tracker.services.day_logs import DayLogService
from cycle_tracker.services.phases import classify_phase, phase_info
from cycle_tracker.services.user_settings import UserSettingsService


@dataclass
class CycleOverviewService:
    """Service that recomputes cycle data on every call."""

    day_log_service: DayLogService
    user_settings_service: UserSettingsService

    def stats(self, today: date | None = None) -> CycleStats:
        """Return stats for the current snapshot."""
        return compute_stats(
            self.day_log_service.get_all(),
            self.user_settings_service.get(),
            today=today or date.today(),
        )

    def overview(self, today: date | None = None) -> CycleOverview:
        """Return the summary shown for today."""
        resolved_today = today or date.today()
        stats = self.stats(resolved_today)
        days_until = (
            days_between(stats.next_period_date, resolved_today)
            if stats.next_period_date is not None
            else None
        )
        phase = (
            classify_phase(stats.current_day_of_cycle, stats)
            if stats.current_day_of_cycle is not None
            else None
        )
        return CycleOverview(
            today=resolved_today,
            stats=stats,
            days_until_next_period=days_until,
            period_status=period_status(days_until),
            phase=phase,
            phase_info=phase_info(phase) if phase is not None else None,
        )

    def calendar_month(
        self, year: int, month: int, today: date | None = None
    ) -> CalendarMonth:
        """Return the resolved grid for a month."""
        resolved_today = today or date.today()
        logs = self.day_log_service.get_all()
        stats = compute_stats(
            logs, self.user_settings_service.get(), today=resolved_today
        )
        return build_calendar_month(year, month, stats, logs, resolved_today)

    def day_status(self, day: date, today: date | None = None) -> DayStatus:
        """Return the status of a single date."""
        logs = self.day_log_service.get_all()
        stats = compute_stats(
            logs, self.user_settings_service.get(), today=today or date.today()
        )
        return resolve_day_status(day, stats, logs)


def period_status(days_until_next_period: int | None) -> PeriodStatus:
    """Classify the countdown to the next predicted period."""
    if days_until_next_period is None:
        return PeriodStatus.UNKNOWN
    if days_until_next_period > 0:
        return PeriodStatus.UPCOMING
    if days_until_next_period == 0:
        return PeriodStatus.DUE_TODAY
    return PeriodStatus.LATE
