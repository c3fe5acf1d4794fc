from __future__ import annotations

from collections.abc import Iterable, Iterator


class SelectionSet:
    """Selected catalog-item ids, mutated only through toggle()."""

    def __init__(self, initial: Iterable[int] = ()) -> None:
        self._ids: set[int] = set(initial)

    def toggle(self, item_id: int) -> bool:
        """Add the id if absent, remove it if present. Returns membership after the toggle."""
        if item_id in self._ids:
            self._ids.remove(item_id)
            return False
        self._ids.add(item_id)
        return True

    def ids(self) -> tuple[int, ...]:
        return tuple(sorted(self._ids))

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids())

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"SelectionSet({list(self.ids())!r})"
