from .loading import MalformedRow, SchemaMismatch, TableLoadError, TableReadError

__all__ = [
    "MalformedRow",
    "SchemaMismatch",
    "TableLoadError",
    "TableReadError",
]
