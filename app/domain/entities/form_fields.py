from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class FormFields:
    name: str = ""
    email: str = ""
    whatsapp: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def patch(self, **changes: str) -> FormFields:
        """Return a copy with only the given fields replaced."""
        unknown = sorted(set(changes) - set(self.field_names()))
        if unknown:
            raise ValueError(f"Unknown form field(s): {', '.join(unknown)}")
        return replace(self, **changes)
