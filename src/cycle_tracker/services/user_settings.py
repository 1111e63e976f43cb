"""User settings service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from cycle_tracker.domain.settings import UserSettings

logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for the single settings record."""

    def get_settings(self) -> UserSettings | None:
        """Return the stored settings if any."""

    def save_settings(self, settings: UserSettings) -> None:
        """Replace the stored settings."""


@dataclass
class UserSettingsService:
    """Service for the user's cycle settings."""

    repository: UserSettingsRepository

    def get(self) -> UserSettings:
        """Return the stored settings or the defaults if unset."""
        return self.repository.get_settings() or UserSettings()

    def update(self, settings: UserSettings) -> UserSettings:
        """Persist settings wholesale and return them."""
        self.repository.save_settings(settings)
        logger.info(
            "Saved settings",
            extra={
                "avg_cycle_length": settings.avg_cycle_length,
                "avg_period_length": settings.avg_period_length,
            },
        )
        return settings
