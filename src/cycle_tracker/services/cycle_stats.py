"""Cycle statistics derived from the log history."""

import logging
import math
from collections.abc import Mapping
from datetime import date, timedelta

from cycle_tracker.domain.cycle import CycleStats
from cycle_tracker.domain.dates import days_between, parse_iso_date
from cycle_tracker.domain.logs import DayLog
from cycle_tracker.domain.settings import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    UserSettings,
    length_or_default,
)

logger = logging.getLogger(__name__)

LUTEAL_PHASE_DAYS = 14
FERTILE_DAYS_BEFORE_OVULATION = 3
FERTILE_DAYS_AFTER_OVULATION = 1


def compute_stats(
    logs: Mapping[date, DayLog],
    settings: UserSettings | None = None,
    today: date | None = None,
) -> CycleStats:
    """Derive averages and predictions from logs and baseline settings.

    Period days are grouped into runs of consecutive dates. With two or more
    runs the cycle length is the rounded mean distance between run starts;
    with at least one run the period length is the rounded mean run length.
    Otherwise the settings values are used. The anchor is the start of the
    latest run, or the manual anchor from settings when nothing is logged.
    """
    resolved = settings or UserSettings()
    avg_cycle_length = length_or_default(
        resolved.avg_cycle_length, DEFAULT_CYCLE_LENGTH
    )
    avg_period_length = length_or_default(
        resolved.avg_period_length, DEFAULT_PERIOD_LENGTH
    )
    anchor = parse_iso_date(resolved.last_period_start_manual)

    groups = group_periods(
        sorted({log.day for log in logs.values() if log.is_period})
    )
    if len(groups) > 1:
        intervals = [
            days_between(groups[index][0], groups[index - 1][0])
            for index in range(1, len(groups))
        ]
        avg_cycle_length = round_half_up(sum(intervals) / len(intervals))
    if groups:
        avg_period_length = round_half_up(
            sum(len(group) for group in groups) / len(groups)
        )
        anchor = groups[-1][0]

    if anchor is None:
        return CycleStats(
            avg_cycle_length=avg_cycle_length,
            avg_period_length=avg_period_length,
        )

    try:
        next_period_date = anchor + timedelta(days=avg_cycle_length)
        ovulation_date = next_period_date - timedelta(days=LUTEAL_PHASE_DAYS)
        fertile_window = tuple(
            ovulation_date + timedelta(days=offset)
            for offset in range(
                -FERTILE_DAYS_BEFORE_OVULATION, FERTILE_DAYS_AFTER_OVULATION + 1
            )
        )
    except OverflowError:
        logger.warning(
            "Cycle projection outside the supported date range",
            extra={"anchor": anchor.isoformat()},
        )
        return CycleStats(
            avg_cycle_length=avg_cycle_length,
            avg_period_length=avg_period_length,
        )
    return CycleStats(
        avg_cycle_length=avg_cycle_length,
        avg_period_length=avg_period_length,
        last_period_start=anchor,
        next_period_date=next_period_date,
        ovulation_date=ovulation_date,
        fertile_window=fertile_window,
        current_day_of_cycle=normalize_cycle_day(
            today or date.today(), anchor, avg_cycle_length
        ),
    )


def group_periods(period_days: list[date]) -> list[list[date]]:
    """Split sorted period days into runs of consecutive calendar days.

    Any gap other than exactly one day starts a new run, so a single
    unlogged day inside a period splits it in two.
    """
    groups: list[list[date]] = []
    for day in period_days:
        if groups and days_between(day, groups[-1][-1]) == 1:
            groups[-1].append(day)
        else:
            groups.append([day])
    return groups


def normalize_cycle_day(day: date, anchor: date, cycle_length: int) -> int | None:
    """Return the 1-based day of cycle for ``day``, wrapping every cycle.

    Days before the anchor have no cycle day.
    """
    diff = days_between(day, anchor) + 1
    if diff <= 0:
        return None
    return ((diff - 1) % cycle_length) + 1


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
