from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_schedule_service
from src.adapters.api.schemas.schedules import (
    ServiceInfoSchema,
    StopTimeSchema,
    TripScheduleSchema,
)
from src.app.services.schedule_service import ScheduleQueryService
from src.domain.models import TripSchedule

router = APIRouter(tags=["schedules"])


def _trip_to_schema(trip: TripSchedule) -> TripScheduleSchema:
    return TripScheduleSchema(
        trip_id=trip.trip_id,
        service_id=trip.service_id,
        route_id=trip.route_id,
        schedules=[
            StopTimeSchema(
                stop_id=stop.stop_id,
                arrival_time=stop.arrival_time,
                departure_time=stop.departure_time,
            )
            for stop in trip.stops
        ],
    )


@router.get("/", response_model=ServiceInfoSchema)
def service_info(
    service: ScheduleQueryService = Depends(get_schedule_service),
) -> ServiceInfoSchema:
    repo = service.repository
    return ServiceInfoSchema(
        service="Transit schedules API",
        routes=len(repo.route_ids()),
        trips=repo.trip_count,
        stop_times=repo.stop_time_count,
    )


@router.get("/schedules/{route_id}", response_model=list[TripScheduleSchema])
def get_schedules(
    route_id: str,
    service: ScheduleQueryService = Depends(get_schedule_service),
) -> list[TripScheduleSchema]:
    # Unknown routes are a normal empty result, never a 404.
    return [_trip_to_schema(trip) for trip in service.assemble_schedule(route_id)]
