from __future__ import annotations

import logging
from collections.abc import Coroutine
from typing import Any

import httpx

from app.application.exceptions import UnknownCityError, UpstreamServiceError
from app.application.ports.region_service import RegionServicePort
from app.domain.entities.form_state import CreatePointState
from app.domain.entities.region import NONE_SELECTED, CityOption, SelectedRegion, StateOption, is_selected


class RegionCascade:
    """
    State -> city cascading selector.

    Every state change bumps a generation counter and empties the city list
    before anything is fetched. A city response is committed only if it
    carries the latest generation, so a slow answer for a superseded state
    can never overwrite the list of the current one.
    """

    def __init__(self, state: CreatePointState, regions: RegionServicePort) -> None:
        self._state = state
        self._regions = regions
        self._generation = 0
        self._states_loaded = False
        self._logger = logging.getLogger(__name__)

    @property
    def generation(self) -> int:
        return self._generation

    async def load_states(self) -> tuple[StateOption, ...]:
        if self._states_loaded:
            return self._state.states
        self._states_loaded = True

        try:
            states = await self._regions.list_states()
        except (UpstreamServiceError, httpx.HTTPError) as e:
            self._logger.warning("State list fetch failed", extra={"error": str(e)})
            return self._state.states

        self._state.states = tuple(StateOption(id=s.id, code=s.code, name=s.name) for s in states)
        return self._state.states

    def select_state(self, code: str) -> Coroutine[Any, Any, tuple[CityOption, ...]] | None:
        """
        Apply a state selection synchronously.

        Returns the city fetch to schedule, or None for the sentinel and for
        a repeat of the current state whose cities are already loaded.
        """
        if code == self._state.region.state_code and self._state.cities:
            return None

        self._generation += 1
        self._state.region = SelectedRegion(state_code=code or NONE_SELECTED)
        self._state.cities = ()

        if not is_selected(code):
            return None
        return self.load_cities(code, self._generation)

    async def load_cities(self, code: str, generation: int) -> tuple[CityOption, ...]:
        try:
            cities = await self._regions.list_cities(code)
        except (UpstreamServiceError, httpx.HTTPError) as e:
            self._logger.warning("City list fetch failed", extra={"state_code": code, "error": str(e)})
            return ()

        if generation != self._generation or self._state.region.state_code != code:
            self._logger.debug(
                "Discarding superseded city list",
                extra={"state_code": code, "generation": generation, "latest": self._generation},
            )
            return ()

        self._state.cities = tuple(CityOption(id=c.id, name=c.name) for c in cities)
        return self._state.cities

    def select_city(self, name: str) -> None:
        """Only the sentinel or a city loaded for the current state is accepted."""
        if is_selected(name) and name not in {c.name for c in self._state.cities}:
            raise UnknownCityError(name, self._state.region.state_code)
        self._state.region = SelectedRegion(
            state_code=self._state.region.state_code,
            city_name=name or NONE_SELECTED,
        )
