from __future__ import annotations

from pathlib import Path
from typing import Sequence


class TableLoadError(Exception):
    """Base exception for failures while ingesting a delimited table."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class SchemaMismatch(TableLoadError):
    """Raised when a table's header row does not match the expected columns."""

    def __init__(
        self, path: str | Path, expected: Sequence[str], actual: Sequence[str]
    ) -> None:
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        super().__init__(
            path,
            f"header not in expected format: expected {list(self.expected)}, "
            f"got {list(self.actual)}",
        )


class MalformedRow(TableLoadError):
    """Raised when a data row carries fewer fields than the header requires."""

    def __init__(
        self, path: str | Path, *, line: int, expected_fields: int, actual_fields: int
    ) -> None:
        self.line = line
        self.expected_fields = expected_fields
        self.actual_fields = actual_fields
        super().__init__(
            path,
            f"line {line} has {actual_fields} fields, expected at least "
            f"{expected_fields}",
        )


class TableReadError(TableLoadError):
    """Raised when a table cannot be opened or read.

    The underlying `OSError` (or `csv.Error`) is chained as `__cause__`.
    """
