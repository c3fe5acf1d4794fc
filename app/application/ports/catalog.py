from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.catalog_item import CatalogItem


class CatalogPort(ABC):
    @abstractmethod
    async def list_items(self) -> list[CatalogItem]:
        """Fetch every recyclable-item category. Raises UpstreamServiceError on failure."""
        raise NotImplementedError
