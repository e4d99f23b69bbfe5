from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.persistence.delimited_table_loader import load_table
from src.domain.exceptions import (
    MalformedRow,
    SchemaMismatch,
    TableLoadError,
    TableReadError,
)

COLUMNS = ("route_id", "service_id", "trip_id")


def _collect(path: Path) -> list[tuple[list[str], int]]:
    rows: list[tuple[list[str], int]] = []
    load_table(path, COLUMNS, lambda fields, i: rows.append((fields, i)))
    return rows


def test_streams_rows_with_zero_based_ordinals(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text("route_id,service_id,trip_id\nRed,S1,T1\nBlue,S2,T2\n")

    assert _collect(path) == [(["Red", "S1", "T1"], 0), (["Blue", "S2", "T2"], 1)]


def test_returns_row_count(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text("route_id,service_id,trip_id\nRed,S1,T1\n\nBlue,S2,T2\n")

    assert load_table(path, COLUMNS, lambda fields, i: None) == 2


def test_header_mismatch_fails_before_any_row(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text("service_id,route_id,trip_id\nS1,Red,T1\n")
    seen: list[int] = []

    with pytest.raises(SchemaMismatch) as excinfo:
        load_table(path, COLUMNS, lambda fields, i: seen.append(i))

    assert seen == []
    assert excinfo.value.expected == COLUMNS
    assert excinfo.value.actual == ("service_id", "route_id", "trip_id")
    assert "trips.txt" in str(excinfo.value)


def test_empty_file_is_a_schema_mismatch(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text("")

    with pytest.raises(SchemaMismatch) as excinfo:
        _collect(path)

    assert excinfo.value.actual == ()


def test_trailing_columns_are_tolerated_and_dropped(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text(
        "route_id,service_id,trip_id,trip_headsign\nRed,S1,T1,Alewife\n"
    )

    assert _collect(path) == [(["Red", "S1", "T1"], 0)]


def test_byte_order_mark_and_quoting(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text(
        'route_id,service_id,trip_id\n"Green-B","Winter, Weekday",T1\n',
        encoding="utf-8-sig",
    )

    assert _collect(path) == [(["Green-B", "Winter, Weekday", "T1"], 0)]


def test_short_row_raises_malformed_row(tmp_path: Path) -> None:
    path = tmp_path / "trips.txt"
    path.write_text("route_id,service_id,trip_id\nRed,S1,T1\nBlue,S2\n")

    with pytest.raises(MalformedRow) as excinfo:
        _collect(path)

    err = excinfo.value
    assert err.line == 3
    assert err.expected_fields == 3
    assert err.actual_fields == 2
    assert isinstance(err, TableLoadError)


def test_missing_file_raises_table_read_error(tmp_path: Path) -> None:
    path = tmp_path / "missing.txt"

    with pytest.raises(TableReadError) as excinfo:
        _collect(path)

    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, OSError)
