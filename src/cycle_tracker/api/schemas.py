"""Pydantic models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from cycle_tracker.domain.catalogs import FlowIntensity
from cycle_tracker.domain.cycle import (
    CalendarMonth,
    CycleOverview,
    CycleStats,
    DayStatus,
    PeriodStatus,
    PhaseInfo,
    PhaseTag,
)
from cycle_tracker.domain.logs import DayLog
from cycle_tracker.domain.settings import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    MAX_LENGTH_DAYS,
    AppTheme,
    UserSettings,
)


class DayLogPayload(BaseModel):
    """Day log request and response body."""

    day: date = Field(alias="date")
    is_period: bool = Field(default=False, alias="isPeriod")
    intensity: FlowIntensity | None = None
    symptoms: list[str] = Field(default_factory=list)
    moods: list[str] = Field(default_factory=list)
    notes: str | None = None
    medical_notes: str | None = Field(default=None, alias="medicalNotes")
    water_intake: int | None = Field(default=None, ge=0, alias="waterIntake")
    sleep_hours: int | None = Field(default=None, ge=0, alias="sleepHours")

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> DayLog:
        """Convert to the domain model, dropping unknown tags."""
        return DayLog.from_dict(self.model_dump(mode="json", by_alias=True))

    @classmethod
    def from_domain(cls, log: DayLog) -> "DayLogPayload":
        return cls.model_validate(log.to_dict())


class SettingsPayload(BaseModel):
    """Settings request and response body."""

    avg_cycle_length: int = Field(
        default=DEFAULT_CYCLE_LENGTH,
        gt=0,
        le=MAX_LENGTH_DAYS,
        alias="avgCycleLength",
    )
    avg_period_length: int = Field(
        default=DEFAULT_PERIOD_LENGTH,
        gt=0,
        le=MAX_LENGTH_DAYS,
        alias="avgPeriodLength",
    )
    last_period_start_manual: str | None = Field(
        default=None, alias="lastPeriodStartManual"
    )
    theme: str | None = AppTheme.ROSE.value

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> UserSettings:
        """Convert to the domain model, defaulting invalid values."""
        return UserSettings.from_dict(self.model_dump(by_alias=True))

    @classmethod
    def from_domain(cls, settings: UserSettings) -> "SettingsPayload":
        return cls.model_validate(settings.to_dict())


class CycleStatsResponse(BaseModel):
    """Serialized cycle stats."""

    avg_cycle_length: int = Field(alias="avgCycleLength")
    avg_period_length: int = Field(alias="avgPeriodLength")
    last_period_start: date | None = Field(alias="lastPeriodStart")
    next_period_date: date | None = Field(alias="nextPeriodDate")
    ovulation_date: date | None = Field(alias="ovulationDate")
    fertile_window: list[date] = Field(alias="fertileWindow")
    current_day_of_cycle: int | None = Field(alias="currentDayOfCycle")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, stats: CycleStats) -> "CycleStatsResponse":
        return cls(
            avg_cycle_length=stats.avg_cycle_length,
            avg_period_length=stats.avg_period_length,
            last_period_start=stats.last_period_start,
            next_period_date=stats.next_period_date,
            ovulation_date=stats.ovulation_date,
            fertile_window=list(stats.fertile_window),
            current_day_of_cycle=stats.current_day_of_cycle,
        )


class PhaseInfoResponse(BaseModel):
    """Static phase metadata."""

    tag: PhaseTag
    name: str
    description: str
    hormones: str
    advice: str
    color: str
    icon: str

    @classmethod
    def from_domain(cls, tag: PhaseTag, info: PhaseInfo) -> "PhaseInfoResponse":
        return cls(
            tag=tag,
            name=info.name,
            description=info.description,
            hormones=info.hormones,
            advice=info.advice,
            color=info.color,
            icon=info.icon,
        )


class OverviewResponse(BaseModel):
    """Today's cycle summary."""

    today: date
    stats: CycleStatsResponse
    days_until_next_period: int | None = Field(alias="daysUntilNextPeriod")
    period_status: PeriodStatus = Field(alias="periodStatus")
    phase: PhaseInfoResponse | None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, overview: CycleOverview) -> "OverviewResponse":
        phase = (
            PhaseInfoResponse.from_domain(overview.phase, overview.phase_info)
            if overview.phase is not None and overview.phase_info is not None
            else None
        )
        return cls(
            today=overview.today,
            stats=CycleStatsResponse.from_domain(overview.stats),
            days_until_next_period=overview.days_until_next_period,
            period_status=overview.period_status,
            phase=phase,
        )


class DayStatusResponse(BaseModel):
    """Calendar flags for one date."""

    day: date = Field(alias="date")
    is_menstruation: bool = Field(alias="isMenstruation")
    is_predicted_period: bool = Field(alias="isPredictedPeriod")
    is_ovulation: bool = Field(alias="isOvulation")
    is_fertile: bool = Field(alias="isFertile")
    day_of_cycle: int | None = Field(alias="dayOfCycle")
    phase: PhaseTag | None
    log: DayLogPayload | None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(
        cls, status: DayStatus, **extra: object
    ) -> "DayStatusResponse":
        return cls(
            day=status.day,
            is_menstruation=status.is_menstruation,
            is_predicted_period=status.is_predicted_period,
            is_ovulation=status.is_ovulation,
            is_fertile=status.is_fertile,
            day_of_cycle=status.day_of_cycle,
            phase=status.phase,
            log=DayLogPayload.from_domain(status.log) if status.log else None,
            **extra,
        )


class CalendarDayResponse(DayStatusResponse):
    """Calendar grid cell."""

    in_month: bool = Field(alias="inMonth")
    is_today: bool = Field(alias="isToday")


class CalendarMonthResponse(BaseModel):
    """Sunday-first month grid."""

    year: int
    month: int
    days: list[CalendarDayResponse]

    @classmethod
    def from_domain(cls, calendar: CalendarMonth) -> "CalendarMonthResponse":
        days = [
            CalendarDayResponse.from_domain(
                cell.status, in_month=cell.in_month, is_today=cell.is_today
            )
            for cell in calendar.days
        ]
        return cls(year=calendar.year, month=calendar.month, days=days)


class CatalogEntryResponse(BaseModel):
    """Catalog entry exposed to clients."""

    id: str
    label: str
    icon: str


class CatalogsResponse(BaseModel):
    """All static catalogs."""

    symptoms: list[CatalogEntryResponse]
    moods: list[CatalogEntryResponse]
    intensities: list[FlowIntensity]
    phases: list[PhaseInfoResponse]


class ImportResponse(BaseModel):
    """Backup import summary."""

    imported_logs: int = Field(alias="importedLogs")
    skipped_logs: int = Field(alias="skippedLogs")
    settings: SettingsPayload

    model_config = ConfigDict(populate_by_name=True)

