from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.exceptions import UpstreamServiceError
from app.application.ports.region_service import RegionServicePort
from app.core.config import settings
from app.domain.entities.region import CityOption, StateOption


class IBGERegionService(RegionServicePort):
    """IBGE "localidades" API. Only id/sigla/nome are kept from each record."""

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.IBGE_BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    async def list_states(self) -> list[StateOption]:
        data = await self._get_list(f"{self._base_url}/estados")
        try:
            return [StateOption(id=int(s["id"]), code=str(s["sigla"]), name=str(s["nome"])) for s in data]
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamServiceError(f"IBGE states: unexpected record shape ({e})") from e

    async def list_cities(self, state_code: str) -> list[CityOption]:
        data = await self._get_list(f"{self._base_url}/estados/{state_code}/municipios")
        try:
            return [CityOption(id=int(c["id"]), name=str(c["nome"])) for c in data]
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamServiceError(f"IBGE cities: unexpected record shape ({e})") from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_list(self, url: str) -> list[dict[str, Any]]:
        try:
            response = await self._client.get(url, params={"orderBy": "nome"})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            self._logger.error("IBGE request failed", extra={"url": url, "error": str(e)})
            raise UpstreamServiceError(f"IBGE request failed: {e}") from e
        except ValueError as e:
            raise UpstreamServiceError(f"IBGE returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise UpstreamServiceError("IBGE: expected a JSON list.")
        return data
