"""Domain model for the user's cycle settings."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5
MAX_LENGTH_DAYS = 365


class AppTheme(str, Enum):
    """Cosmetic color themes."""

    ROSE = "rose"
    SKY = "sky"
    EMERALD = "emerald"
    VIOLET = "violet"
    MIDNIGHT = "midnight"


@dataclass(frozen=True)
class UserSettings:
    """Baseline values used when the log history is too short."""

    avg_cycle_length: int = DEFAULT_CYCLE_LENGTH
    avg_period_length: int = DEFAULT_PERIOD_LENGTH
    last_period_start_manual: str | None = None
    theme: AppTheme = AppTheme.ROSE

    def to_dict(self) -> dict[str, Any]:
        """Return the flat JSON-compatible record."""
        return {
            "avgCycleLength": self.avg_cycle_length,
            "avgPeriodLength": self.avg_period_length,
            "lastPeriodStartManual": self.last_period_start_manual,
            "theme": self.theme.value,
        }

    @staticmethod
    def from_dict(obj: dict[str, Any] | None) -> "UserSettings":
        """Build settings from a record, defaulting every bad or missing field."""
        if not isinstance(obj, dict):
            return UserSettings()
        return UserSettings(
            avg_cycle_length=length_or_default(
                obj.get("avgCycleLength"), DEFAULT_CYCLE_LENGTH
            ),
            avg_period_length=length_or_default(
                obj.get("avgPeriodLength"), DEFAULT_PERIOD_LENGTH
            ),
            last_period_start_manual=_optional_anchor(obj.get("lastPeriodStartManual")),
            theme=parse_theme(obj.get("theme")),
        )


def length_or_default(raw: object, default: int) -> int:
    """Return ``raw`` as an int in ``1..MAX_LENGTH_DAYS``, else ``default``."""
    if isinstance(raw, bool):
        return default
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return value if 0 < value <= MAX_LENGTH_DAYS else default


def _optional_anchor(raw: object) -> str | None:
    if raw is None:
        return None
    cleaned = str(raw).strip()
    return cleaned or None


def parse_theme(raw: object) -> AppTheme:
    """Return the matching theme, falling back to rose."""
    try:
        return AppTheme(str(raw).strip().lower())
    except ValueError:
        return AppTheme.ROSE
