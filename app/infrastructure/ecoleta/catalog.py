from __future__ import annotations

from app.application.exceptions import UpstreamServiceError
from app.application.ports.catalog import CatalogPort
from app.domain.entities.catalog_item import CatalogItem
from app.infrastructure.ecoleta.api_client import EcoletaApiClient


class EcoletaCatalog(CatalogPort):
    def __init__(self, client: EcoletaApiClient) -> None:
        self._client = client

    async def list_items(self) -> list[CatalogItem]:
        data = await self._client.get_json("items")
        if not isinstance(data, list):
            raise UpstreamServiceError("Catalog: expected a JSON list of items.")
        try:
            return [
                CatalogItem(
                    id=int(item["id"]),
                    title=str(item["title"]),
                    image_url=str(item.get("image_url") or item.get("imageUrl") or ""),
                )
                for item in data
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamServiceError(f"Catalog: unexpected item shape ({e})") from e
