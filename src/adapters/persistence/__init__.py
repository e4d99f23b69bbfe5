from .delimited_table_loader import load_table
from .local_gtfs_repository import LocalGtfsRepository

__all__ = [
    "LocalGtfsRepository",
    "load_table",
]
