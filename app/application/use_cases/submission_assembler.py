from __future__ import annotations

import logging

import httpx

from app.application.exceptions import MissingRequiredFieldError, SubmissionBlockedError, UpstreamServiceError
from app.application.ports.notifier import NotifierPort
from app.application.ports.registration import RegistrationPort
from app.domain.entities.form_state import CreatePointState
from app.domain.entities.submission_payload import SubmissionPayload


def missing_required_fields(state: CreatePointState) -> list[str]:
    """Required-presence check only; no format validation."""
    missing = [name for name in ("name", "email", "whatsapp") if not getattr(state.fields, name).strip()]
    if not state.region.has_state:
        missing.append("state")
    if not state.region.has_city:
        missing.append("city")
    return missing


class SubmissionAssembler:
    def __init__(
        self,
        registration: RegistrationPort,
        notifier: NotifierPort,
        confirmation_text: str,
    ) -> None:
        self._registration = registration
        self._notifier = notifier
        self._confirmation_text = confirmation_text
        self._logger = logging.getLogger(__name__)

    def assemble(self, state: CreatePointState) -> SubmissionPayload:
        """Snapshot the form as it is right now."""
        if state.current_point is None:
            raise SubmissionBlockedError("No point selected on the map yet.")
        return SubmissionPayload(
            name=state.fields.name,
            email=state.fields.email,
            phones=(str(state.fields.whatsapp),),
            state=state.region.state_code,
            city=state.region.city_name,
            coordinates=state.current_point,
            items=state.selected_items.ids(),
        )

    async def submit(self, state: CreatePointState) -> SubmissionPayload:
        missing = missing_required_fields(state)
        if missing:
            raise MissingRequiredFieldError(missing)

        payload = self.assemble(state)
        self._logger.debug("Submitting collection point", extra={"payload": payload.to_dict()})

        try:
            await self._registration.create_point(payload)
        except (UpstreamServiceError, httpx.HTTPError) as e:
            state.submission_status = "failed"
            state.notice = None
            self._logger.error("Collection point registration failed", extra={"error": str(e)})
            raise

        state.submission_status = "sent"
        state.notice = self._confirmation_text
        self._notifier.notify(self._confirmation_text)
        return payload
