from __future__ import annotations

from dataclasses import dataclass

from src.domain.models import ScheduleRepository, StopTimeEntry, TripSchedule


@dataclass(frozen=True, slots=True)
class ScheduleQueryService:
    """Application service (use case) answering route schedule queries.

    Stateless over an immutable repository, so it can be shared by
    concurrent requests.
    """

    repository: ScheduleRepository

    def assemble_schedule(self, route_id: str) -> tuple[TripSchedule, ...]:
        repo = self.repository
        return tuple(
            TripSchedule(
                trip_id=trip.trip_id,
                route_id=trip.route_id,
                service_id=trip.service_id,
                stops=tuple(
                    StopTimeEntry(
                        stop_id=st.stop_id,
                        arrival_time=st.arrival_time,
                        departure_time=st.departure_time,
                    )
                    for st in repo.stop_times_for_trip(trip.trip_id)
                ),
            )
            for trip in repo.trips_for_route(route_id)
        )
