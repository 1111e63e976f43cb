"""FastAPI application factory."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status

from cycle_tracker.api.schemas import (
    CalendarMonthResponse,
    CatalogEntryResponse,
    CatalogsResponse,
    CycleStatsResponse,
    DayLogPayload,
    DayStatusResponse,
    ImportResponse,
    OverviewResponse,
    PhaseInfoResponse,
    SettingsPayload,
)
from cycle_tracker.app_logging import configure_logging
from cycle_tracker.containers import AppContainer
from cycle_tracker.domain.catalogs import (
    FlowIntensity,
    Mood,
    Symptom,
    catalog_entries,
)
from cycle_tracker.domain.cycle import CYCLE_PHASES
from cycle_tracker.services.backup import BackupFormatError

MIN_MONTH = 1
MAX_MONTH = 12


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/stats", response_model=CycleStatsResponse)
    async def get_stats(request: Request) -> CycleStatsResponse:
        """Return stats recomputed from the current logs and settings."""
        state_container: AppContainer = request.app.state.container
        stats = state_container.overview_service.stats()
        return CycleStatsResponse.from_domain(stats)

    @app.get("/overview", response_model=OverviewResponse)
    async def get_overview(request: Request) -> OverviewResponse:
        """Return today's summary with the current phase."""
        state_container: AppContainer = request.app.state.container
        return OverviewResponse.from_domain(
            state_container.overview_service.overview()
        )

    @app.get("/calendar/{year}/{month}", response_model=CalendarMonthResponse)
    async def get_calendar(
        year: int, month: int, request: Request
    ) -> CalendarMonthResponse:
        """Return the month grid with per-day cycle flags."""
        valid_year = date.min.year < year < date.max.year
        if not valid_year or not MIN_MONTH <= month <= MAX_MONTH:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid month"
            )
        state_container: AppContainer = request.app.state.container
        calendar = state_container.overview_service.calendar_month(year, month)
        return CalendarMonthResponse.from_domain(calendar)

    @app.get("/days/{day}", response_model=DayStatusResponse)
    async def get_day_status(day: date, request: Request) -> DayStatusResponse:
        """Return cycle flags for a single date."""
        state_container: AppContainer = request.app.state.container
        return DayStatusResponse.from_domain(
            state_container.overview_service.day_status(day)
        )

    @app.get("/logs", response_model=list[DayLogPayload])
    async def list_logs(
        request: Request, limit: int | None = None
    ) -> list[DayLogPayload]:
        """Return logged days, newest first."""
        state_container: AppContainer = request.app.state.container
        history = state_container.day_log_service.history(limit)
        return [DayLogPayload.from_domain(log) for log in history]

    @app.get("/logs/{day}", response_model=DayLogPayload)
    async def get_log(day: date, request: Request) -> DayLogPayload:
        """Return the log for a date."""
        state_container: AppContainer = request.app.state.container
        log = state_container.day_log_service.get(day)
        if log is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return DayLogPayload.from_domain(log)

    @app.put("/logs/{day}", response_model=DayLogPayload)
    async def put_log(
        day: date, payload: DayLogPayload, request: Request
    ) -> DayLogPayload:
        """Create or replace the log for a date."""
        if payload.day != day:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Body date does not match path",
            )
        state_container: AppContainer = request.app.state.container
        saved = state_container.day_log_service.save(payload.to_domain())
        return DayLogPayload.from_domain(saved)

    @app.delete("/logs/{day}")
    async def delete_log(day: date, request: Request) -> dict[str, str]:
        """Delete the log for a date."""
        state_container: AppContainer = request.app.state.container
        if not state_container.day_log_service.delete(day):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "deleted"}

    @app.get("/settings", response_model=SettingsPayload)
    async def get_settings(request: Request) -> SettingsPayload:
        """Return the user settings, or defaults when unset."""
        state_container: AppContainer = request.app.state.container
        return SettingsPayload.from_domain(state_container.user_settings_service.get())

    @app.put("/settings", response_model=SettingsPayload)
    async def put_settings(
        payload: SettingsPayload, request: Request
    ) -> SettingsPayload:
        """Replace the user settings."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.user_settings_service.update(payload.to_domain())
        return SettingsPayload.from_domain(saved)

    @app.get("/catalogs", response_model=CatalogsResponse)
    async def get_catalogs() -> CatalogsResponse:
        """Return the symptom, mood, intensity and phase catalogs."""
        return CatalogsResponse(
            symptoms=[
                CatalogEntryResponse(**entry) for entry in catalog_entries(Symptom)
            ],
            moods=[CatalogEntryResponse(**entry) for entry in catalog_entries(Mood)],
            intensities=list(FlowIntensity),
            phases=[
                PhaseInfoResponse.from_domain(tag, info)
                for tag, info in CYCLE_PHASES.items()
            ],
        )

    @app.get("/backup")
    async def export_backup(request: Request) -> dict[str, object]:
        """Return a full export of logs and settings."""
        state_container: AppContainer = request.app.state.container
        return state_container.backup_service.export_document()

    @app.post("/backup", response_model=ImportResponse)
    async def import_backup(request: Request) -> ImportResponse:
        """Replace logs and settings with an uploaded export."""
        state_container: AppContainer = request.app.state.container
        try:
            document = json.loads(await request.body())
        except ValueError as exc:
            logger.warning("Rejected backup with invalid JSON")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON"
            ) from exc
        try:
            result = state_container.backup_service.import_document(document)
        except BackupFormatError as exc:
            logger.warning("Rejected malformed backup", extra={"reason": str(exc)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return ImportResponse(
            imported_logs=result.imported_logs,
            skipped_logs=result.skipped_logs,
            settings=SettingsPayload.from_domain(result.settings),
        )

    return app
