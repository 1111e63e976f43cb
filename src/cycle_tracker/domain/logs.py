"""Domain models for daily health logs."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from cycle_tracker.domain.catalogs import FlowIntensity, Mood, Symptom
from cycle_tracker.domain.dates import format_date, parse_iso_date

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"true", "1", "yes"})


@dataclass(frozen=True)
class DayLog:
    """A single day's entry, keyed by calendar day."""

    day: date
    is_period: bool = False
    intensity: FlowIntensity | None = None
    symptoms: frozenset[Symptom] = field(default_factory=frozenset)
    moods: frozenset[Mood] = field(default_factory=frozenset)
    notes: str | None = None
    medical_notes: str | None = None
    water_intake: int | None = None
    sleep_hours: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the flat JSON-compatible record."""
        return {
            "date": format_date(self.day),
            "isPeriod": self.is_period,
            "intensity": self.intensity.value if self.intensity else None,
            "symptoms": [entry.id for entry in Symptom.ordered(self.symptoms)],
            "moods": [entry.id for entry in Mood.ordered(self.moods)],
            "notes": self.notes,
            "medicalNotes": self.medical_notes,
            "waterIntake": self.water_intake,
            "sleepHours": self.sleep_hours,
        }

    @staticmethod
    def from_dict(obj: dict[str, Any]) -> "DayLog":
        """Build a log from a flat record; only the date is mandatory."""
        day = parse_iso_date(obj.get("date"))
        if day is None:
            raise ValueError(f"Invalid log date: {obj.get('date')!r}")
        return DayLog(
            day=day,
            is_period=_parse_flag(obj.get("isPeriod")),
            intensity=FlowIntensity.parse(obj.get("intensity")),
            symptoms=_parse_tags(Symptom, obj.get("symptoms")),
            moods=_parse_tags(Mood, obj.get("moods")),
            notes=_optional_text(obj.get("notes")),
            medical_notes=_optional_text(obj.get("medicalNotes")),
            water_intake=_optional_count(obj.get("waterIntake")),
            sleep_hours=_optional_count(obj.get("sleepHours")),
        )


def _parse_tags(catalog, raw: object) -> frozenset:  # type: ignore[no-untyped-def]
    if not isinstance(raw, list | tuple | set | frozenset):
        return frozenset()
    resolved = set()
    for item in raw:
        entry = catalog.resolve(item)
        if entry is None:
            logger.warning(
                "Dropping unknown tag", extra={"catalog": catalog.__name__, "tag": item}
            )
            continue
        resolved.add(entry)
    return frozenset(resolved)


def _optional_text(raw: object) -> str | None:
    if raw is None:
        return None
    return str(raw)


def _optional_count(raw: object) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value >= 0 else None


def _parse_flag(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw == 1
    if isinstance(raw, str):
        return raw.strip().casefold() in _TRUE_STRINGS
    return False
