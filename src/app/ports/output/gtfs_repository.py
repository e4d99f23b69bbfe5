from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import ScheduleRepository


class IGtfsRepository(ABC):
    """Port for loading static GTFS schedule tables into memory."""

    @abstractmethod
    def load_schedule(self) -> ScheduleRepository:
        raise NotImplementedError
