from __future__ import annotations

from pydantic import BaseModel


class StopTimeSchema(BaseModel):
    stop_id: str
    arrival_time: str
    departure_time: str


class TripScheduleSchema(BaseModel):
    trip_id: str
    service_id: str
    route_id: str
    schedules: list[StopTimeSchema] = []


class ServiceInfoSchema(BaseModel):
    service: str
    routes: int
    trips: int
    stop_times: int
