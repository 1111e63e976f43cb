"""Domain models for derived cycle data."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from cycle_tracker.domain.logs import DayLog


@dataclass(frozen=True)
class CycleStats:
    """Cycle averages and predictions derived from logs and settings."""

    avg_cycle_length: int
    avg_period_length: int
    last_period_start: date | None = None
    next_period_date: date | None = None
    ovulation_date: date | None = None
    fertile_window: tuple[date, ...] = ()
    current_day_of_cycle: int | None = None


class PhaseTag(str, Enum):
    """Simplified physiological cycle phases."""

    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"


@dataclass(frozen=True)
class PhaseInfo:
    """Static display metadata for a phase."""

    name: str
    description: str
    hormones: str
    advice: str
    color: str
    icon: str


CYCLE_PHASES: dict[PhaseTag, PhaseInfo] = {
    PhaseTag.MENSTRUAL: PhaseInfo(
        name="Menstrual phase",
        description="The start of your cycle. The uterine lining is shedding.",
        hormones="Low estrogen and progesterone levels.",
        advice="Prioritize rest and iron-rich foods.",
        color="#f43f5e",
        icon="🩸",
    ),
    PhaseTag.FOLLICULAR: PhaseInfo(
        name="Follicular phase",
        description="Your body is preparing an egg. Energy starts to rise.",
        hormones="Estrogen is gradually increasing.",
        advice="A great time for new projects and social exercise.",
        color="#818cf8",
        icon="🌱",
    ),
    PhaseTag.OVULATORY: PhaseInfo(
        name="Ovulatory phase",
        description="The egg is released. You are at peak fertility.",
        hormones="Estrogen and luteinizing hormone (LH) peak.",
        advice="You may feel more sociable and confident now.",
        color="#2dd4bf",
        icon="🌸",
    ),
    PhaseTag.LUTEAL: PhaseInfo(
        name="Luteal phase",
        description="Preparing for a new cycle or a possible pregnancy.",
        hormones="Progesterone is the dominant hormone.",
        advice="Cut back on salt and caffeine if you feel bloated or irritable.",
        color="#fbbf24",
        icon="🌙",
    ),
}


@dataclass(frozen=True)
class DayStatus:
    """Per-day projection of cycle stats used by the calendar."""

    day: date
    is_menstruation: bool
    is_predicted_period: bool
    is_ovulation: bool
    is_fertile: bool
    day_of_cycle: int | None
    phase: PhaseTag | None
    log: DayLog | None


class PeriodStatus(str, Enum):
    """Where today sits relative to the predicted next period."""

    UPCOMING = "upcoming"
    DUE_TODAY = "due_today"
    LATE = "late"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CycleOverview:
    """Summary of the cycle as seen from today."""

    today: date
    stats: CycleStats
    days_until_next_period: int | None
    period_status: PeriodStatus
    phase: PhaseTag | None
    phase_info: PhaseInfo | None


@dataclass(frozen=True)
class CalendarDay:
    """A calendar grid cell."""

    status: DayStatus
    in_month: bool
    is_today: bool


@dataclass(frozen=True)
class CalendarMonth:
    """A Sunday-first month grid."""

    year: int
    month: int
    days: list[CalendarDay]
