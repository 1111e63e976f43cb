"""Tag catalogs for symptoms, moods and flow intensity."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class CatalogEntry:
    """Declarative catalog entry with a stable id and display metadata."""

    id: str
    label: str
    icon: str


class _Catalog(Enum):
    """Base for catalogs keyed by stable ids (single source of truth)."""

    @property
    def id(self) -> str:
        return self.value.id

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def icon(self) -> str:
        return self.value.icon

    @classmethod
    def resolve(cls, raw: object) -> Self | None:
        """Match an id, a label, or a legacy label+icon string."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        needle = raw.strip().casefold()
        if not needle:
            return None
        for entry in cls:
            candidates = {
                entry.id,
                entry.label.casefold(),
                f"{entry.label}{entry.icon}".casefold(),
                f"{entry.label} {entry.icon}".casefold(),
            }
            if needle in candidates:
                return entry
        return None

    @classmethod
    def ordered(cls, entries: "frozenset[Self]") -> list[Self]:
        """Return entries in catalog declaration order."""
        return [entry for entry in cls if entry in entries]


class Symptom(_Catalog):
    """Physical and emotional symptoms a user can log."""

    CRAMPS = CatalogEntry("cramps", "Cramps", "🌀")
    BLOATING = CatalogEntry("bloating", "Bloating", "🎈")
    HEADACHE = CatalogEntry("headache", "Headache", "🤕")
    ACNE = CatalogEntry("acne", "Acne", "🔴")
    BACK_PAIN = CatalogEntry("back_pain", "Back pain", "🦴")
    TENDER_BREASTS = CatalogEntry("tender_breasts", "Tender breasts", "💗")
    FATIGUE = CatalogEntry("fatigue", "Fatigue", "🥱")
    NAUSEA = CatalogEntry("nausea", "Nausea", "🤢")
    INSOMNIA = CatalogEntry("insomnia", "Insomnia", "🌙")
    SWEET_CRAVINGS = CatalogEntry("sweet_cravings", "Sweet cravings", "🍫")
    DIZZINESS = CatalogEntry("dizziness", "Dizziness", "💫")
    CHILLS = CatalogEntry("chills", "Chills", "🥶")
    ANXIETY = CatalogEntry("anxiety", "Anxiety", "😟")
    LOW_FOCUS = CatalogEntry("low_focus", "Low focus", "🌫️")


class Mood(_Catalog):
    """Moods a user can log."""

    HAPPY = CatalogEntry("happy", "Happy", "😊")
    SAD = CatalogEntry("sad", "Sad", "😢")
    ANXIOUS = CatalogEntry("anxious", "Anxious", "😰")
    IRRITABLE = CatalogEntry("irritable", "Irritable", "😠")
    CALM = CatalogEntry("calm", "Calm", "😌")
    ENERGIZED = CatalogEntry("energized", "Energized", "⚡")
    TIRED = CatalogEntry("tired", "Tired", "😴")
    SENSITIVE = CatalogEntry("sensitive", "Sensitive", "🥺")
    FRUSTRATED = CatalogEntry("frustrated", "Frustrated", "😤")
    PRODUCTIVE = CatalogEntry("productive", "Productive", "✅")
    INSPIRED = CatalogEntry("inspired", "Inspired", "💡")
    LAZY = CatalogEntry("lazy", "Lazy", "🛋️")
    LOVING = CatalogEntry("loving", "Loving", "🥰")
    DISTANT = CatalogEntry("distant", "Distant", "🌁")


class FlowIntensity(str, Enum):
    """Menstrual flow intensity, meaningful only on period days."""

    SCANT = "scant"
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"

    @classmethod
    def parse(cls, raw: object) -> "FlowIntensity | None":
        """Return the matching intensity, or None for missing or unknown values."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return None


def catalog_entries(catalog: type[_Catalog]) -> list[dict[str, str]]:
    """Return a catalog formatted for API clients."""
    return [
        {"id": entry.id, "label": entry.label, "icon": entry.icon}
        for entry in catalog
    ]
