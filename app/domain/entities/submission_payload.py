from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.entities.coordinate import Coordinate


@dataclass(frozen=True)
class SubmissionPayload:
    name: str
    email: str
    phones: tuple[str, ...]
    state: str
    city: str
    coordinates: Coordinate
    items: tuple[int, ...]

    def to_dict(self) -> dict[str, Any]:
        """Body of the ``POST points`` request."""
        return {
            "name": self.name,
            "email": self.email,
            "phones": list(self.phones),
            "state": self.state,
            "city": self.city,
            "coordinates": self.coordinates.to_dict(),
            "items": list(self.items),
        }
