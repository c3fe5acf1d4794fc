from __future__ import annotations

from dataclasses import dataclass

NONE_SELECTED = "0"


@dataclass(frozen=True)
class StateOption:
    id: int
    code: str  # IBGE "sigla", e.g. "SP"
    name: str


@dataclass(frozen=True)
class CityOption:
    id: int
    name: str


@dataclass(frozen=True)
class SelectedRegion:
    state_code: str = NONE_SELECTED
    city_name: str = NONE_SELECTED

    @property
    def has_state(self) -> bool:
        return is_selected(self.state_code)

    @property
    def has_city(self) -> bool:
        return is_selected(self.city_name)


def is_selected(value: str | None) -> bool:
    return bool(value) and value != NONE_SELECTED
