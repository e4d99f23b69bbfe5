from __future__ import annotations

from fastapi import Request

from src.adapters.persistence.local_gtfs_repository import LocalGtfsRepository
from src.app.ports.output import IGtfsRepository
from src.app.services.schedule_service import ScheduleQueryService


def get_gtfs_repository() -> IGtfsRepository:
    return LocalGtfsRepository()


def get_schedule_service(request: Request) -> ScheduleQueryService:
    # Published by the app lifespan only once both tables are fully loaded.
    service = getattr(request.app.state, "schedule_service", None)
    if service is None:
        raise RuntimeError("Schedule data not loaded")
    return service
