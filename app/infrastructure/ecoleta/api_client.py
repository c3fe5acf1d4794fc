from __future__ import annotations

import logging

import httpx

from app.application.exceptions import UpstreamServiceError
from app.core.config import settings


class EcoletaApiClient:
    """Thin async client for the collection-point backend."""

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=(base_url or settings.API_BASE_URL).rstrip("/"),
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        self._logger = logging.getLogger(__name__)

    async def get_json(self, path: str) -> object:
        try:
            resp = await self._client.get(path)
        except httpx.HTTPError as e:
            raise UpstreamServiceError(f"GET {path} failed: {e}") from e
        self._raise_for_status(resp, path)
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamServiceError(f"GET {path} returned invalid JSON: {e}") from e

    async def post_json(self, path: str, payload: dict) -> None:
        try:
            resp = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamServiceError(f"POST {path} failed: {e}") from e
        self._raise_for_status(resp, path)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _raise_for_status(self, resp: httpx.Response, path: str) -> None:
        if resp.is_success:
            return
        self._logger.error(
            "Backend request failed",
            extra={"path": path, "status": resp.status_code, "error": resp.text[:200]},
        )
        raise UpstreamServiceError(f"{resp.request.method} {path} answered {resp.status_code}")
