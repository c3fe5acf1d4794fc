from __future__ import annotations

import logging

from app.application.ports.notifier import NotifierPort


class LogNotifier(NotifierPort):
    """Keeps the notices shown to the user; the view reads the last one."""

    def __init__(self) -> None:
        self.notices: list[str] = []
        self._logger = logging.getLogger(__name__)

    def notify(self, text: str) -> None:
        self.notices.append(text)
        self._logger.info("Notice shown", extra={"notice": text})
