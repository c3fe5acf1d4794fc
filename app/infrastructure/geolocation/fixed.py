from __future__ import annotations

from app.application.ports.geolocation import GeolocationPort
from app.domain.entities.coordinate import Coordinate


class FixedGeolocation(GeolocationPort):
    def __init__(self, lat: float | None, lng: float | None) -> None:
        self._position = Coordinate(lat=lat, lng=lng) if lat is not None and lng is not None else None

    async def current_position(self) -> Coordinate | None:
        return self._position
