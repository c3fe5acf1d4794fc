from __future__ import annotations

import logging

from app.application.ports.catalog import CatalogPort
from app.application.ports.registration import RegistrationPort
from app.domain.entities.catalog_item import CatalogItem
from app.domain.entities.submission_payload import SubmissionPayload

_ITEMS = (
    CatalogItem(id=1, title="Lâmpadas", image_url="http://localhost:3333/uploads/lampadas.svg"),
    CatalogItem(id=2, title="Pilhas e Baterias", image_url="http://localhost:3333/uploads/baterias.svg"),
    CatalogItem(id=3, title="Papéis e Papelão", image_url="http://localhost:3333/uploads/papeis-papelao.svg"),
    CatalogItem(id=4, title="Resíduos Eletrônicos", image_url="http://localhost:3333/uploads/eletronicos.svg"),
    CatalogItem(id=5, title="Resíduos Orgânicos", image_url="http://localhost:3333/uploads/organicos.svg"),
    CatalogItem(id=6, title="Óleo de Cozinha", image_url="http://localhost:3333/uploads/oleo.svg"),
)


class MockCatalog(CatalogPort):
    async def list_items(self) -> list[CatalogItem]:
        return list(_ITEMS)


class MockRegistration(RegistrationPort):
    def __init__(self) -> None:
        self.last_created: dict | None = None
        self.created_count = 0
        self._logger = logging.getLogger(__name__)

    async def create_point(self, payload: SubmissionPayload) -> None:
        self.last_created = payload.to_dict()
        self.created_count += 1
        self._logger.info("Mock point created", extra={"state_code": payload.state, "city": payload.city})
