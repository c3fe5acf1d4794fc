from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.application.exceptions import UpstreamServiceError
from app.domain.entities.catalog_item import CatalogItem
from app.domain.entities.coordinate import Coordinate
from app.domain.entities.region import CityOption, StateOption
from app.domain.entities.submission_payload import SubmissionPayload
from app.infrastructure.ecoleta.api_client import EcoletaApiClient
from app.infrastructure.ecoleta.catalog import EcoletaCatalog
from app.infrastructure.ecoleta.mock_backend import MockCatalog, MockRegistration
from app.infrastructure.ecoleta.registration import EcoletaRegistration
from app.infrastructure.ibge.ibge_client import IBGERegionService

IBGE = "https://ibge.test/api/v1/localidades"


def _ibge_handler(request: httpx.Request) -> httpx.Response:
    assert request.url.params.get("orderBy") == "nome"
    if request.url.path.endswith("/estados"):
        return httpx.Response(
            200,
            json=[
                {"id": 12, "sigla": "AC", "nome": "Acre", "regiao": {"id": 1, "sigla": "N", "nome": "Norte"}},
                {"id": 35, "sigla": "SP", "nome": "São Paulo", "regiao": {"id": 3, "sigla": "SE", "nome": "Sudeste"}},
            ],
        )
    if request.url.path.endswith("/estados/SP/municipios"):
        return httpx.Response(
            200,
            json=[{"id": 3550308, "nome": "São Paulo", "microrregiao": {"id": 35061, "nome": "São Paulo"}}],
        )
    return httpx.Response(404)


def test_ibge_states_and_cities_are_projected():
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(_ibge_handler))
        service = IBGERegionService(base_url=IBGE, client=client)

        states = await service.list_states()
        cities = await service.list_cities("SP")
        await service.aclose()

        assert states == [StateOption(12, "AC", "Acre"), StateOption(35, "SP", "São Paulo")]
        assert cities == [CityOption(3550308, "São Paulo")]

    asyncio.run(scenario())


def test_ibge_error_status_raises_upstream_error():
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(_ibge_handler))
        service = IBGERegionService(base_url=IBGE, client=client)
        with pytest.raises(UpstreamServiceError):
            await service.list_cities("XX")
        await service.aclose()

    asyncio.run(scenario())


def test_catalog_reads_items_endpoint():
    async def scenario():
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/items"
            return httpx.Response(
                200,
                json=[
                    {"id": 1, "title": "Lâmpadas", "image_url": "http://api.test/uploads/lampadas.svg"},
                    {"id": 2, "title": "Pilhas e Baterias", "imageUrl": "http://api.test/uploads/baterias.svg"},
                ],
            )

        api = EcoletaApiClient(client=httpx.AsyncClient(base_url="http://api.test", transport=httpx.MockTransport(handler)))
        items = await EcoletaCatalog(api).list_items()
        await api.aclose()

        assert items == [
            CatalogItem(1, "Lâmpadas", "http://api.test/uploads/lampadas.svg"),
            CatalogItem(2, "Pilhas e Baterias", "http://api.test/uploads/baterias.svg"),
        ]

    asyncio.run(scenario())


def test_registration_posts_payload_and_ignores_body():
    async def scenario():
        seen: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/points"
            seen.append(json.loads(request.content))
            return httpx.Response(201, text="not json")

        api = EcoletaApiClient(client=httpx.AsyncClient(base_url="http://api.test", transport=httpx.MockTransport(handler)))
        payload = SubmissionPayload(
            name="ACME",
            email="a@b.com",
            phones=("5511999999999",),
            state="SP",
            city="São Paulo",
            coordinates=Coordinate(-23.5, -46.6),
            items=(1, 3),
        )
        await EcoletaRegistration(api).create_point(payload)
        await api.aclose()

        assert seen == [payload.to_dict()]

    asyncio.run(scenario())


def test_registration_failure_raises_upstream_error():
    async def scenario():
        api = EcoletaApiClient(
            client=httpx.AsyncClient(
                base_url="http://api.test",
                transport=httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"})),
            )
        )
        payload = SubmissionPayload("A", "a@b.com", ("1",), "SP", "Santos", Coordinate(0, 0), ())
        with pytest.raises(UpstreamServiceError):
            await EcoletaRegistration(api).create_point(payload)
        await api.aclose()

    asyncio.run(scenario())


def test_mock_backend_serves_catalog_and_records_points():
    async def scenario():
        items = await MockCatalog().list_items()
        registration = MockRegistration()
        payload = SubmissionPayload("A", "a@b.com", ("1",), "SP", "Santos", Coordinate(-23.9, -46.3), (1,))
        await registration.create_point(payload)
        await registration.create_point(payload)
        return items, registration

    items, registration = asyncio.run(scenario())

    assert [item.id for item in items] == [1, 2, 3, 4, 5, 6]
    assert registration.created_count == 2
    assert registration.last_created["city"] == "Santos"
    assert registration.last_created["phones"] == ["1"]
