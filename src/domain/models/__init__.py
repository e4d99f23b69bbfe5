from .gtfs import ScheduleRepository, StopTime, StopTimeEntry, Trip, TripSchedule

__all__ = [
    "ScheduleRepository",
    "StopTime",
    "StopTimeEntry",
    "Trip",
    "TripSchedule",
]
