"""Bulk export and import of logs and settings."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from cycle_tracker.domain.logs import DayLog
from cycle_tracker.domain.settings import UserSettings
from cycle_tracker.services.day_logs import DayLogService
from cycle_tracker.services.user_settings import UserSettingsService

logger = logging.getLogger(__name__)

BACKUP_VERSION = 1


class BackupFormatError(ValueError):
    """Raised when a backup document does not have the expected shape."""


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a backup import."""

    imported_logs: int
    skipped_logs: int
    settings: UserSettings


@dataclass
class BackupService:
    """Service for exporting and restoring the full dataset."""

    day_log_service: DayLogService
    user_settings_service: UserSettingsService

    def export_document(self, now: datetime | None = None) -> dict[str, Any]:
        """Return a JSON-compatible backup document."""
        logs = self.day_log_service.get_all()
        exported_at = (now or datetime.now(tz=UTC)).isoformat()
        logger.info("Exporting backup", extra={"log_count": len(logs)})
        return {
            "logs": {day.isoformat(): log.to_dict() for day, log in logs.items()},
            "settings": self.user_settings_service.get().to_dict(),
            "version": BACKUP_VERSION,
            "exportedAt": exported_at,
        }

    def import_document(self, document: object) -> ImportResult:
        """Replace all logs and settings with the contents of a backup.

        When a write fails the previous logs and settings are written back
        and the error is re-raised.
        """
        if not isinstance(document, dict):
            raise BackupFormatError("Backup document must be a JSON object")
        logs, skipped = parse_logs(document.get("logs"))
        raw_settings = document.get("settings")
        if raw_settings is not None and not isinstance(raw_settings, dict):
            raise BackupFormatError("Backup settings must be a JSON object")
        settings = UserSettings.from_dict(raw_settings)

        previous_logs = list(self.day_log_service.get_all().values())
        previous_settings = self.user_settings_service.get()
        try:
            self.day_log_service.replace_all(logs)
            self.user_settings_service.update(settings)
        except Exception:
            logger.exception("Backup import failed, restoring previous data")
            self.day_log_service.replace_all(previous_logs)
            self.user_settings_service.update(previous_settings)
            raise
        logger.info(
            "Imported backup",
            extra={
                "imported_logs": len(logs),
                "skipped_logs": skipped,
                "version": document.get("version"),
            },
        )
        return ImportResult(
            imported_logs=len(logs), skipped_logs=skipped, settings=settings
        )


def parse_logs(raw: object) -> tuple[list[DayLog], int]:
    """Parse logs given as a date-keyed mapping or a list of records."""
    if raw is None:
        return [], 0
    if isinstance(raw, dict):
        records = list(raw.values())
    elif isinstance(raw, list):
        records = raw
    else:
        raise BackupFormatError("Backup logs must be a JSON object or array")

    logs: list[DayLog] = []
    skipped = 0
    for record in records:
        if not isinstance(record, dict):
            skipped += 1
            continue
        try:
            logs.append(DayLog.from_dict(record))
        except ValueError:
            logger.warning(
                "Skipping backup log with invalid date", extra={"record": record}
            )
            skipped += 1
    return logs, skipped
