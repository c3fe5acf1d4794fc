from __future__ import annotations

import logging
from collections import OrderedDict

from app.application.exceptions import FormNotFoundError
from app.application.use_cases.create_point_form import CreatePointForm


class MemoryFormStore:
    """In-memory form sessions. Nothing survives a restart; the oldest session is evicted past the limit."""

    def __init__(self, limit: int = 500) -> None:
        self._forms: OrderedDict[str, CreatePointForm] = OrderedDict()
        self._limit = limit
        self._logger = logging.getLogger(__name__)

    def put(self, form: CreatePointForm) -> None:
        self._forms[form.form_id] = form
        self._forms.move_to_end(form.form_id)
        while len(self._forms) > self._limit:
            evicted_id, evicted = self._forms.popitem(last=False)
            evicted.close()
            self._logger.info("Form session evicted", extra={"form_id": evicted_id})

    def get(self, form_id: str) -> CreatePointForm:
        form = self._forms.get(form_id)
        if form is None:
            raise FormNotFoundError(form_id)
        return form

    def discard(self, form_id: str) -> None:
        form = self._forms.pop(form_id, None)
        if form is None:
            raise FormNotFoundError(form_id)
        form.close()

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, form_id: object) -> bool:
        return form_id in self._forms
