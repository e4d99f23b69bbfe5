from __future__ import annotations

import csv
from pathlib import Path
from typing import Callable, Sequence

from src.domain.exceptions import MalformedRow, SchemaMismatch, TableReadError

RowHandler = Callable[[list[str], int], None]


def _check_header(
    path: Path, header: Sequence[str], expected_columns: Sequence[str]
) -> None:
    # Trailing optional columns are allowed; the expected ones must lead.
    actual = [cell.strip() for cell in header]
    if actual[: len(expected_columns)] != list(expected_columns):
        raise SchemaMismatch(path, expected=expected_columns, actual=actual)


def load_table(
    path: str | Path,
    expected_columns: Sequence[str],
    on_row: RowHandler,
) -> int:
    """Stream the data rows of a delimited table to `on_row`.

    The header row is validated against `expected_columns` before any data
    row is delivered. Each call receives the first `len(expected_columns)`
    fields of the row and its zero-based ordinal among data rows. Returns the
    number of rows delivered.
    """

    path = Path(path)
    width = len(expected_columns)

    try:
        fp = path.open("r", encoding="utf-8-sig", newline="")
    except OSError as exc:
        raise TableReadError(path, f"cannot open table ({exc})") from exc

    with fp:
        reader = csv.reader(fp)
        try:
            header = next(reader, None)
            _check_header(path, header or [], expected_columns)

            ordinal = 0
            for row in reader:
                if not row:
                    continue
                if len(row) < width:
                    raise MalformedRow(
                        path,
                        line=reader.line_num,
                        expected_fields=width,
                        actual_fields=len(row),
                    )
                on_row(row[:width], ordinal)
                ordinal += 1
        except csv.Error as exc:
            raise TableReadError(
                path, f"parse error near line {reader.line_num} ({exc})"
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TableReadError(path, f"read failed ({exc})") from exc

    return ordinal
