from __future__ import annotations

import asyncio

import pytest

from app.application.exceptions import MissingRequiredFieldError, SubmissionBlockedError, UpstreamServiceError
from app.infrastructure.geolocation.fixed import FixedGeolocation
from app.infrastructure.notifier.log_notifier import LogNotifier

from tests.fakes import FakeCatalog, FakeRegistration, make_form, settle


async def _filled_form(**kwargs):
    form = make_form(**kwargs)
    await form.mount()
    await settle()
    form.handle_input_change("name", "ACME")
    form.handle_input_change("email", "a@b.com")
    form.handle_input_change("whatsapp", "5511999999999")
    form.handle_select_state_change("SP")
    await settle()
    form.handle_select_city_change("São Paulo")
    return form


def test_submit_sends_exact_payload_once():
    async def scenario():
        registration = FakeRegistration()
        notifier = LogNotifier()
        form = await _filled_form(registration=registration, notifier=notifier)
        await form.wait_idle()
        form.handle_item_click(3)
        form.handle_item_click(1)

        payload = await form.handle_submit()

        expected = {
            "name": "ACME",
            "email": "a@b.com",
            "phones": ["5511999999999"],
            "state": "SP",
            "city": "São Paulo",
            "coordinates": {"lat": -23.5, "lng": -46.6},
            "items": [1, 3],
        }
        assert payload.to_dict() == expected
        assert registration.payloads == [expected]
        assert notifier.notices == ["Ponto de Coleta cadastrado com sucesso."]
        assert form.state.submission_status == "sent"
        assert form.render().notice == "Ponto de Coleta cadastrado com sucesso."

    asyncio.run(scenario())


def test_submit_reads_snapshot_at_submit_time():
    async def scenario():
        registration = FakeRegistration()
        form = await _filled_form(registration=registration)
        form.handle_map_click(10, 20)
        form.handle_marker_dragend(30, 40)
        form.handle_input_change("name", "ACME Reciclagem")

        await form.handle_submit()

        sent = registration.payloads[0]
        assert sent["name"] == "ACME Reciclagem"
        assert sent["email"] == "a@b.com"
        assert sent["coordinates"] == {"lat": 30.0, "lng": 40.0}

    asyncio.run(scenario())


def test_catalog_that_never_answers_does_not_block_submit():
    async def scenario():
        registration = FakeRegistration()
        form = await _filled_form(catalog=FakeCatalog(never=True), registration=registration)

        assert form.render().items == ()
        await form.handle_submit()

        assert registration.payloads[0]["items"] == []
        form.close()

    asyncio.run(scenario())


def test_missing_required_fields_are_reported():
    async def scenario():
        registration = FakeRegistration()
        form = make_form(registration=registration)
        await form.mount()
        await settle()
        form.handle_input_change("name", "  ")

        with pytest.raises(MissingRequiredFieldError) as exc:
            await form.handle_submit()

        assert exc.value.fields == ["name", "email", "whatsapp", "state", "city"]
        assert registration.payloads == []
        assert not form.render().can_submit

    asyncio.run(scenario())


def test_submit_blocked_until_point_resolved():
    async def scenario():
        registration = FakeRegistration()
        form = await _filled_form(geolocation=FixedGeolocation(None, None), registration=registration)

        with pytest.raises(SubmissionBlockedError):
            await form.handle_submit()
        assert registration.payloads == []

        form.handle_map_click(-23.5, -46.6)
        await form.handle_submit()
        assert len(registration.payloads) == 1

    asyncio.run(scenario())


def test_failed_registration_shows_no_notice():
    async def scenario():
        notifier = LogNotifier()
        form = await _filled_form(registration=FakeRegistration(fail=True), notifier=notifier)

        with pytest.raises(UpstreamServiceError):
            await form.handle_submit()

        assert notifier.notices == []
        assert form.state.submission_status == "failed"
        assert form.render().notice is None

    asyncio.run(scenario())
