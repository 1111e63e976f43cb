"""Phase classification for a day of the cycle."""

from cycle_tracker.domain.cycle import CYCLE_PHASES, CycleStats, PhaseInfo, PhaseTag
from cycle_tracker.services.cycle_stats import LUTEAL_PHASE_DAYS


def classify_phase(day_of_cycle: int, stats: CycleStats) -> PhaseTag:
    """Map a 1-based cycle day to a phase; the first matching rule wins."""
    if day_of_cycle <= stats.avg_period_length:
        return PhaseTag.MENSTRUAL
    ovulation_day = stats.avg_cycle_length - LUTEAL_PHASE_DAYS
    if day_of_cycle < ovulation_day - 2:
        return PhaseTag.FOLLICULAR
    if day_of_cycle <= ovulation_day + 1:
        return PhaseTag.OVULATORY
    return PhaseTag.LUTEAL


def phase_info(phase: PhaseTag) -> PhaseInfo:
    """Return display metadata for a phase."""
    return CYCLE_PHASES[phase]
