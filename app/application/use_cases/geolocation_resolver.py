from __future__ import annotations

import asyncio
import logging

from app.application.exceptions import GeolocationUnavailableError
from app.application.ports.geolocation import GeolocationPort
from app.application.use_cases.point_locator import PointLocator
from app.domain.entities.coordinate import Coordinate


class GeolocationResolver:
    """Ask for the device position once and seed the map with it."""

    def __init__(self, geolocation: GeolocationPort, locator: PointLocator) -> None:
        self._geolocation = geolocation
        self._locator = locator
        self._started = False
        self._done = asyncio.Event()
        self._position: Coordinate | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def done(self) -> bool:
        return self._done.is_set()

    async def wait_done(self) -> Coordinate | None:
        await self._done.wait()
        return self._position

    async def resolve(self) -> Coordinate | None:
        if self._started:
            return self._position
        self._started = True
        try:
            return await self._resolve_once()
        finally:
            self._done.set()

    async def _resolve_once(self) -> Coordinate | None:
        try:
            position = await self._geolocation.current_position()
        except GeolocationUnavailableError as e:
            self._logger.warning("Geolocation unavailable", extra={"error": str(e)})
            return None

        if position is None:
            self._logger.info("Geolocation returned no position")
            return None

        self._position = position
        self._locator.seed(position)
        self._logger.info("Geolocation resolved", extra={"lat": position.lat, "lng": position.lng})
        return position
