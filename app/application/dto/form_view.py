from __future__ import annotations

from dataclasses import dataclass

from app.application.use_cases.point_locator import PointLocator
from app.application.use_cases.submission_assembler import missing_required_fields
from app.domain.entities.coordinate import Coordinate
from app.domain.entities.form_fields import FormFields
from app.domain.entities.form_state import CreatePointState
from app.domain.entities.region import NONE_SELECTED, SelectedRegion, StateOption

CITY_PLACEHOLDER = "Selecione uma cidade..."
CITY_LOADING = "..."
STATE_PLACEHOLDER = "Selecione um estado..."


@dataclass(frozen=True)
class MapConfig:
    zoom: int
    style_id: str
    tile_url: str
    access_token: str
    attribution: str


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str


@dataclass(frozen=True)
class ItemTile:
    id: int
    title: str
    image_url: str
    selected: bool


@dataclass(frozen=True)
class MapView:
    center: Coordinate
    marker: Coordinate
    config: MapConfig


@dataclass(frozen=True)
class FormView:
    form_id: str
    fields: FormFields
    region: SelectedRegion
    state_options: tuple[SelectOption, ...]
    city_options: tuple[SelectOption, ...]
    items: tuple[ItemTile, ...]
    map: MapView
    point_resolved: bool
    missing_fields: tuple[str, ...]
    can_submit: bool
    submission_status: str
    notice: str | None


def state_options(states: tuple[StateOption, ...]) -> tuple[SelectOption, ...]:
    return (SelectOption(NONE_SELECTED, STATE_PLACEHOLDER),) + tuple(
        SelectOption(s.code, s.name) for s in states
    )


def city_options(state: CreatePointState) -> tuple[SelectOption, ...]:
    if not state.cities:
        return (SelectOption("", CITY_LOADING),)
    return (SelectOption(NONE_SELECTED, CITY_PLACEHOLDER),) + tuple(
        SelectOption(c.name, c.name) for c in state.cities
    )


def build_form_view(form_id: str, state: CreatePointState, map_config: MapConfig) -> FormView:
    """Render the form from state alone; nothing here is stored back."""
    locator = PointLocator(state)
    missing = tuple(missing_required_fields(state))
    return FormView(
        form_id=form_id,
        fields=state.fields,
        region=state.region,
        state_options=state_options(state.states),
        city_options=city_options(state),
        items=tuple(
            ItemTile(
                id=item.id,
                title=item.title,
                image_url=item.image_url,
                selected=item.id in state.selected_items,
            )
            for item in state.items
        ),
        map=MapView(center=locator.center, marker=locator.marker, config=map_config),
        point_resolved=locator.is_resolved,
        missing_fields=missing,
        can_submit=locator.is_resolved and not missing,
        submission_status=state.submission_status,
        notice=state.notice,
    )
