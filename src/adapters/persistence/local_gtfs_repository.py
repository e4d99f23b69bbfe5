from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence, TypeVar

from src.adapters.persistence.delimited_table_loader import load_table
from src.app.ports.output import IGtfsRepository
from src.domain.algorithms.indexing import GroupedIndex, IndexBuilder
from src.domain.models import ScheduleRepository, StopTime, Trip

logger = logging.getLogger(__name__)

T = TypeVar("T")

TRIP_COLUMNS = ("route_id", "service_id", "trip_id")
STOP_TIME_COLUMNS = ("trip_id", "arrival_time", "departure_time", "stop_id")


def _trip_from_fields(fields: list[str]) -> Trip:
    route_id, service_id, trip_id = fields
    return Trip(trip_id=trip_id, route_id=route_id, service_id=service_id)


def _stop_time_from_fields(fields: list[str]) -> StopTime:
    trip_id, arrival_time, departure_time, stop_id = fields
    return StopTime(
        trip_id=trip_id,
        stop_id=stop_id,
        arrival_time=arrival_time,
        departure_time=departure_time,
    )


def _index_table(
    path: Path,
    columns: Sequence[str],
    parse: Callable[[list[str]], T],
    key: Callable[[T], str],
) -> GroupedIndex[T]:
    builder: IndexBuilder[T] = IndexBuilder(key)
    started = time.perf_counter()

    load_table(path, columns, lambda fields, _ordinal: builder.add(parse(fields)))

    index = builder.build()
    logger.info(
        "Loaded %d rows from %s in %.0f ms",
        len(index),
        path.name,
        (time.perf_counter() - started) * 1000.0,
    )
    return index


@dataclass(slots=True)
class LocalGtfsRepository(IGtfsRepository):
    """Loads trips and stop times from a directory of GTFS .txt files.

    Env vars:
      - GTFS_PATH: directory containing trips.txt and stop_times.txt
      - TRIPS_FILE / STOP_TIMES_FILE: override the file names
    """

    base_path: str | Path | None = None
    trips_file: str | None = None
    stop_times_file: str | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("GTFS_PATH") or "data/gtfs"
        return Path(value)

    def trips_path(self) -> Path:
        name = self.trips_file or os.getenv("TRIPS_FILE") or "trips.txt"
        return self._base() / name

    def stop_times_path(self) -> Path:
        name = (
            self.stop_times_file or os.getenv("STOP_TIMES_FILE") or "stop_times.txt"
        )
        return self._base() / name

    def load_schedule(self) -> ScheduleRepository:
        trips = _index_table(
            self.trips_path(),
            TRIP_COLUMNS,
            _trip_from_fields,
            key=lambda trip: trip.route_id,
        )
        stop_times = _index_table(
            self.stop_times_path(),
            STOP_TIME_COLUMNS,
            _stop_time_from_fields,
            key=lambda stop_time: stop_time.trip_id,
        )
        return ScheduleRepository(trips=trips, stop_times=stop_times)
