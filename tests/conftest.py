from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest

from src.adapters.persistence.local_gtfs_repository import (
    STOP_TIME_COLUMNS,
    TRIP_COLUMNS,
)

Rows = Sequence[Sequence[str]]


def write_table(path: Path, header: Sequence[str], rows: Rows) -> Path:
    lines = [",".join(header), *(",".join(row) for row in rows)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_feed(tmp_path: Path) -> Callable[..., Path]:
    """Write trips.txt / stop_times.txt into tmp_path and return the directory."""

    def _write_feed(
        trips: Rows,
        stop_times: Rows,
        *,
        trips_header: Sequence[str] = TRIP_COLUMNS,
        stop_times_header: Sequence[str] = STOP_TIME_COLUMNS,
    ) -> Path:
        write_table(tmp_path / "trips.txt", trips_header, trips)
        write_table(tmp_path / "stop_times.txt", stop_times_header, stop_times)
        return tmp_path

    return _write_feed
