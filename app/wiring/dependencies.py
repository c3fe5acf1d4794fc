from functools import lru_cache
import logging
import uuid

from app.core.config import settings
from app.application.dto.form_view import MapConfig
from app.application.ports.catalog import CatalogPort
from app.application.ports.geolocation import GeolocationPort
from app.application.ports.notifier import NotifierPort
from app.application.ports.region_service import RegionServicePort
from app.application.ports.registration import RegistrationPort
from app.application.use_cases.create_point_form import CreatePointForm
from app.infrastructure.ecoleta.api_client import EcoletaApiClient
from app.infrastructure.ecoleta.catalog import EcoletaCatalog
from app.infrastructure.ecoleta.mock_backend import MockCatalog, MockRegistration
from app.infrastructure.ecoleta.registration import EcoletaRegistration
from app.infrastructure.geolocation.client_reported import ClientReportedGeolocation
from app.infrastructure.ibge.ibge_client import IBGERegionService
from app.infrastructure.notifier.log_notifier import LogNotifier
from app.infrastructure.store.memory_form_store import MemoryFormStore


_form_store: MemoryFormStore | None = None


def _use_mock_backend() -> bool:
    return settings.BACKEND_PROVIDER.lower() == "mock"


@lru_cache
def get_api_client() -> EcoletaApiClient:
    return EcoletaApiClient(base_url=settings.API_BASE_URL)


@lru_cache
def get_catalog() -> CatalogPort:
    if _use_mock_backend():
        logging.getLogger(__name__).info("Using MockCatalog (BACKEND_PROVIDER=mock)")
        return MockCatalog()
    return EcoletaCatalog(client=get_api_client())


@lru_cache
def get_registration() -> RegistrationPort:
    if _use_mock_backend():
        logging.getLogger(__name__).info("Using MockRegistration (BACKEND_PROVIDER=mock)")
        return MockRegistration()
    return EcoletaRegistration(client=get_api_client())


@lru_cache
def get_region_service() -> RegionServicePort:
    return IBGERegionService(base_url=settings.IBGE_BASE_URL)


def get_notifier() -> NotifierPort:
    return LogNotifier()


def get_map_config() -> MapConfig:
    return MapConfig(
        zoom=settings.MAP_ZOOM,
        style_id=settings.MAP_STYLE_ID,
        tile_url=settings.MAP_TILE_URL,
        access_token=settings.MAPBOX_ACCESS_TOKEN,
        attribution=settings.MAP_ATTRIBUTION,
    )


def get_form_store() -> MemoryFormStore:
    global _form_store
    if _form_store is None:
        _form_store = MemoryFormStore(limit=settings.FORM_SESSION_LIMIT)
    return _form_store


def build_form(geolocation: GeolocationPort | None = None) -> CreatePointForm:
    return CreatePointForm(
        form_id=uuid.uuid4().hex,
        catalog=get_catalog(),
        regions=get_region_service(),
        geolocation=geolocation or ClientReportedGeolocation(),
        registration=get_registration(),
        notifier=get_notifier(),
        map_config=get_map_config(),
        confirmation_text=settings.CONFIRMATION_NOTICE,
    )
