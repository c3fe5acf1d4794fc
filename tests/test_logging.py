"""
Tests for the context-aware log formatter.
"""

from __future__ import annotations

import asyncio
import logging

from app.main import ContextFormatter

from tests.fakes import make_form, settle


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.lines.append(self.format(record))


def _capture(logger_name: str) -> tuple[logging.Logger, _ListHandler, int]:
    logger = logging.getLogger(logger_name)
    handler = _ListHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger, handler, previous_level


def test_submitted_payload_is_logged():
    logger, handler, previous_level = _capture("app.application.use_cases.submission_assembler")
    try:
        async def scenario():
            form = make_form()
            await form.mount()
            await settle()
            form.update_fields(name="ACME", email="a@b.com", whatsapp="5511999999999")
            form.handle_select_state_change("SP")
            await form.wait_idle()
            form.handle_select_city_change("São Paulo")
            await form.handle_submit()

        asyncio.run(scenario())
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)

    submitted = [line for line in handler.lines if "Submitting collection point" in line]
    assert len(submitted) == 1
    assert "payload=" in submitted[0]
    assert "'state': 'SP'" in submitted[0]


def test_discarded_city_list_keeps_its_context():
    record = logging.LogRecord("app.x", logging.DEBUG, __file__, 1, "Discarding superseded city list", None, None)
    record.state_code = "SP"
    record.generation = 1
    record.latest = 2
    record.url = "https://ibge.test/estados"

    line = ContextFormatter("%(message)s").format(record)

    assert line == "Discarding superseded city list | state_code=SP generation=1 latest=2 url=https://ibge.test/estados"
