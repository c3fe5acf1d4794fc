from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities.catalog_item import CatalogItem
from app.domain.entities.coordinate import Coordinate
from app.domain.entities.form_fields import FormFields
from app.domain.entities.region import CityOption, SelectedRegion, StateOption
from app.domain.entities.selection_set import SelectionSet


@dataclass
class CreatePointState:
    """Mutable aggregate owned by one form session."""

    fields: FormFields = field(default_factory=FormFields)
    region: SelectedRegion = field(default_factory=SelectedRegion)
    items: tuple[CatalogItem, ...] = ()
    states: tuple[StateOption, ...] = ()
    cities: tuple[CityOption, ...] = ()
    # None until geolocation resolves or the user picks a point
    initial_coordinate: Coordinate | None = None
    current_point: Coordinate | None = None
    selected_items: SelectionSet = field(default_factory=SelectionSet)
    submission_status: str = "idle"  # "idle", "sent", "failed"
    notice: str | None = None
