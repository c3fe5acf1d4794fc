from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.coordinate import Coordinate


class GeolocationPort(ABC):
    @abstractmethod
    async def current_position(self) -> Coordinate | None:
        """
        Return the device position, or None when it is not known.
        May raise GeolocationUnavailableError when the position was denied.
        """
        raise NotImplementedError
