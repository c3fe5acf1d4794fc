from __future__ import annotations

from app.domain.entities.coordinate import Coordinate
from app.domain.entities.form_state import CreatePointState

ORIGIN = Coordinate(lat=0.0, lng=0.0)


class PointLocator:
    """Single writer of the marker position; map click and marker drag both land here."""

    def __init__(self, state: CreatePointState) -> None:
        self._state = state

    def seed(self, coord: Coordinate) -> None:
        if self._state.initial_coordinate is None:
            self._state.initial_coordinate = coord
        self._state.current_point = coord

    def set_current_point(self, coord: Coordinate) -> None:
        self._state.current_point = coord

    def on_map_click(self, lat: float, lng: float) -> Coordinate:
        coord = Coordinate(lat=float(lat), lng=float(lng))
        self.set_current_point(coord)
        return coord

    def on_marker_dragend(self, lat: float, lng: float) -> Coordinate:
        coord = Coordinate(lat=float(lat), lng=float(lng))
        self.set_current_point(coord)
        return coord

    @property
    def is_resolved(self) -> bool:
        return self._state.current_point is not None

    @property
    def center(self) -> Coordinate:
        return self._state.initial_coordinate or ORIGIN

    @property
    def marker(self) -> Coordinate:
        return self._state.current_point or self.center
