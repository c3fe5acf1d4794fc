from __future__ import annotations

import logging

import httpx

from app.application.exceptions import UpstreamServiceError
from app.application.ports.catalog import CatalogPort
from app.domain.entities.catalog_item import CatalogItem
from app.domain.entities.form_state import CreatePointState


class CatalogLoader:
    def __init__(self, state: CreatePointState, catalog: CatalogPort) -> None:
        self._state = state
        self._catalog = catalog
        self._loaded = False
        self._logger = logging.getLogger(__name__)

    async def load(self) -> tuple[CatalogItem, ...]:
        """Fetch the catalog once. A failed fetch leaves the item grid empty."""
        if self._loaded:
            return self._state.items
        self._loaded = True

        try:
            items = await self._catalog.list_items()
        except (UpstreamServiceError, httpx.HTTPError) as e:
            self._logger.warning("Catalog fetch failed", extra={"error": str(e)})
            return self._state.items

        self._state.items = tuple(items)
        self._logger.info("Catalog loaded", extra={"count": len(self._state.items)})
        return self._state.items
