from __future__ import annotations

from dataclasses import dataclass

from src.domain.algorithms.indexing import GroupedIndex


@dataclass(frozen=True, slots=True)
class Trip:
    trip_id: str
    route_id: str
    service_id: str


@dataclass(frozen=True, slots=True)
class StopTime:
    """A single scheduled visit of a trip to a stop.

    Times are the raw GTFS tokens (HH:MM:SS; hours may exceed 24 for
    next-day service) and are never parsed.
    """

    trip_id: str
    stop_id: str
    arrival_time: str
    departure_time: str


@dataclass(frozen=True, slots=True)
class StopTimeEntry:
    stop_id: str
    arrival_time: str
    departure_time: str


@dataclass(frozen=True, slots=True)
class TripSchedule:
    trip_id: str
    route_id: str
    service_id: str
    stops: tuple[StopTimeEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class ScheduleRepository:
    """Read-only view over the trip and stop-time indices.

    Built once at startup; lookups for unknown keys return empty tuples.
    """

    trips: GroupedIndex[Trip]
    stop_times: GroupedIndex[StopTime]

    def trips_for_route(self, route_id: str) -> tuple[Trip, ...]:
        return self.trips.group(route_id)

    def stop_times_for_trip(self, trip_id: str) -> tuple[StopTime, ...]:
        return self.stop_times.group(trip_id)

    def route_ids(self) -> tuple[str, ...]:
        return self.trips.keys()

    @property
    def trip_count(self) -> int:
        return len(self.trips)

    @property
    def stop_time_count(self) -> int:
        return len(self.stop_times)
