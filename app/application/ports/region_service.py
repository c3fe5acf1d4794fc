from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.region import CityOption, StateOption


class RegionServicePort(ABC):
    @abstractmethod
    async def list_states(self) -> list[StateOption]:
        """States ordered by name."""
        raise NotImplementedError

    @abstractmethod
    async def list_cities(self, state_code: str) -> list[CityOption]:
        """Cities of one state, ordered by name."""
        raise NotImplementedError
