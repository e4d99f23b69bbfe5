from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from src.adapters.api.controllers.schedules import router as schedules_router
from src.adapters.api.dependencies import get_gtfs_repository
from src.app.services.schedule_service import ScheduleQueryService
from src.domain.exceptions import TableLoadError

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the schedule tables before the server starts accepting requests.

    A load failure is fatal: it is logged and re-raised so the server aborts
    startup instead of serving a partially built index.
    """

    try:
        repository = get_gtfs_repository().load_schedule()
    except TableLoadError as exc:
        logger.error("Failed to load GTFS schedule: %s", exc)
        raise

    logger.info(
        "Schedule ready: %d routes, %d trips, %d stop times",
        len(repository.route_ids()),
        repository.trip_count,
        repository.stop_time_count,
    )
    app.state.schedule_service = ScheduleQueryService(repository=repository)
    try:
        yield
    finally:
        app.state.schedule_service = None


app = FastAPI(title="Transit Schedules", lifespan=lifespan)
app.include_router(schedules_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """Turn any request-time failure into a fixed plain-text 500.

    This covers response serialization errors; other in-flight requests and
    the process itself are unaffected.
    """

    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
