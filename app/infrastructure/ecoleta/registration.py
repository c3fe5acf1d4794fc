from __future__ import annotations

import logging

from app.application.ports.registration import RegistrationPort
from app.domain.entities.submission_payload import SubmissionPayload
from app.infrastructure.ecoleta.api_client import EcoletaApiClient


class EcoletaRegistration(RegistrationPort):
    def __init__(self, client: EcoletaApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    async def create_point(self, payload: SubmissionPayload) -> None:
        await self._client.post_json("points", payload.to_dict())
        self._logger.info("Point created", extra={"state_code": payload.state, "city": payload.city})
