from __future__ import annotations

import asyncio

from app.application.exceptions import GeolocationUnavailableError
from app.application.ports.geolocation import GeolocationPort
from app.domain.entities.coordinate import Coordinate


class ClientReportedGeolocation(GeolocationPort):
    """
    Position reported by the client device, once.

    The first report() or deny() settles the answer; later ones are ignored
    and return False.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[Coordinate | None] | None = None

    def report(self, coord: Coordinate) -> bool:
        future = self._ensure_future()
        if future.done():
            return False
        future.set_result(coord)
        return True

    def deny(self, reason: str = "Position denied") -> bool:
        future = self._ensure_future()
        if future.done():
            return False
        future.set_exception(GeolocationUnavailableError(reason))
        return True

    async def current_position(self) -> Coordinate | None:
        return await self._ensure_future()

    def _ensure_future(self) -> asyncio.Future[Coordinate | None]:
        if self._future is None:
            self._future = asyncio.get_running_loop().create_future()
        return self._future
