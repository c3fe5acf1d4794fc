from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from app.application.dto.form_view import FormView, MapConfig, build_form_view
from app.application.ports.catalog import CatalogPort
from app.application.ports.geolocation import GeolocationPort
from app.application.ports.notifier import NotifierPort
from app.application.ports.region_service import RegionServicePort
from app.application.ports.registration import RegistrationPort
from app.application.use_cases.catalog_loader import CatalogLoader
from app.application.use_cases.geolocation_resolver import GeolocationResolver
from app.application.use_cases.point_locator import PointLocator
from app.application.use_cases.region_cascade import RegionCascade
from app.application.use_cases.submission_assembler import SubmissionAssembler
from app.domain.entities.coordinate import Coordinate
from app.domain.entities.form_state import CreatePointState
from app.domain.entities.submission_payload import SubmissionPayload


class CreatePointForm:
    """
    One collection-point registration form.

    Owns the state aggregate and adapts UI events to the cooperating parts:
    geolocation, catalog, region cascade, selection set, point locator and
    submission. Background fetches run as tasks on the current event loop;
    handlers never await them.
    """

    def __init__(
        self,
        form_id: str,
        catalog: CatalogPort,
        regions: RegionServicePort,
        geolocation: GeolocationPort,
        registration: RegistrationPort,
        notifier: NotifierPort,
        map_config: MapConfig,
        confirmation_text: str,
    ) -> None:
        self.form_id = form_id
        self.geolocation = geolocation
        self.state = CreatePointState()
        self._map_config = map_config

        self.locator = PointLocator(self.state)
        self.resolver = GeolocationResolver(geolocation, self.locator)
        self.catalog = CatalogLoader(self.state, catalog)
        self.cascade = RegionCascade(self.state, regions)
        self.assembler = SubmissionAssembler(registration, notifier, confirmation_text)

        self._mounted = False
        self._tasks: set[asyncio.Task[Any]] = set()
        self._logger = logging.getLogger(__name__)

    async def mount(self) -> None:
        """Start the one-shot loads. Returns without waiting for them."""
        if self._mounted:
            return
        self._mounted = True
        self._spawn(self.resolver.resolve())
        self._spawn(self.catalog.load())
        self._spawn(self.cascade.load_states())
        self._logger.info("Form mounted", extra={"form_id": self.form_id})

    async def wait_idle(self, timeout: float | None = None) -> bool:
        """
        Wait until every fetch started so far (and any started meanwhile) has finished.

        Returns False if the timeout ran out first. Nothing is cancelled.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return True
            remaining = None if deadline is None else deadline - loop.time()
            if remaining is not None and remaining <= 0:
                return False
            await asyncio.wait(pending, timeout=remaining)

    @property
    def pending(self) -> int:
        return sum(1 for task in self._tasks if not task.done())

    def handle_input_change(self, name: str, value: str) -> None:
        self.state.fields = self.state.fields.patch(**{name: value})

    def update_fields(self, **changes: str) -> None:
        self.state.fields = self.state.fields.patch(**changes)

    def handle_select_state_change(self, code: str) -> None:
        fetch = self.cascade.select_state(code)
        self._logger.info(
            "State selected",
            extra={"form_id": self.form_id, "state_code": code, "generation": self.cascade.generation},
        )
        if fetch is not None:
            self._spawn(fetch)

    def handle_select_city_change(self, name: str) -> None:
        self.cascade.select_city(name)

    def handle_item_click(self, item_id: int) -> bool:
        selected = self.state.selected_items.toggle(item_id)
        self._logger.debug(
            "Item toggled", extra={"form_id": self.form_id, "item_id": item_id, "selected": selected}
        )
        return selected

    def handle_map_click(self, lat: float, lng: float) -> Coordinate:
        return self.locator.on_map_click(lat, lng)

    def handle_marker_dragend(self, lat: float, lng: float) -> Coordinate:
        return self.locator.on_marker_dragend(lat, lng)

    async def handle_submit(self) -> SubmissionPayload:
        payload = await self.assembler.submit(self.state)
        self._logger.info("Collection point registered", extra={"form_id": self.form_id, "status": "sent"})
        return payload

    def render(self) -> FormView:
        return build_form_view(self.form_id, self.state, self._map_config)

    def close(self) -> None:
        """Drop the session: fetches still in flight are cancelled."""
        for task in list(self._tasks):
            if not task.done():
                task.cancel()

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
