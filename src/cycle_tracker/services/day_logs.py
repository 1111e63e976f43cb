"""Daily log service."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol

from cycle_tracker.domain.logs import DayLog

logger = logging.getLogger(__name__)


class DayLogRepository(Protocol):
    """Persistence interface for day logs keyed by date."""

    def list_logs(self) -> list[DayLog]:
        """Return every stored log in any order."""

    def upsert_log(self, log: DayLog) -> None:
        """Insert or replace the log for its date."""

    def delete_log(self, day: date) -> bool:
        """Delete the log for a date, returning True if one existed."""

    def replace_all(self, logs: list[DayLog]) -> None:
        """Replace the whole collection."""


@dataclass
class DayLogService:
    """Service for reading and writing daily logs."""

    repository: DayLogRepository

    def get_all(self) -> dict[date, DayLog]:
        """Return all logs keyed by date in ascending date order."""
        logs = sorted(self.repository.list_logs(), key=lambda log: log.day)
        return {log.day: log for log in logs}

    def get(self, day: date) -> DayLog | None:
        """Return the log for a date, if present."""
        return self.get_all().get(day)

    def save(self, log: DayLog) -> DayLog:
        """Upsert a log; intensity is only kept on period days."""
        stored = log if log.is_period else replace(log, intensity=None)
        self.repository.upsert_log(stored)
        logger.info(
            "Saved day log",
            extra={"day": stored.day.isoformat(), "is_period": stored.is_period},
        )
        return stored

    def delete(self, day: date) -> bool:
        """Delete the log for a date."""
        deleted = self.repository.delete_log(day)
        if deleted:
            logger.info("Deleted day log", extra={"day": day.isoformat()})
        return deleted

    def history(self, limit: int | None = None) -> list[DayLog]:
        """Return logs newest first."""
        logs = sorted(
            self.repository.list_logs(), key=lambda log: log.day, reverse=True
        )
        return logs[:limit] if limit is not None else logs

    def replace_all(self, logs: list[DayLog]) -> None:
        """Replace the collection, keeping the last log seen for each date."""
        by_day = {log.day: log for log in logs}
        self.repository.replace_all(sorted(by_day.values(), key=lambda log: log.day))
