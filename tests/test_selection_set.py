from __future__ import annotations

import random

from app.domain.entities.selection_set import SelectionSet


def test_toggle_adds_then_removes():
    """Toggling an id twice returns the set to where it started."""
    selection = SelectionSet()

    assert selection.toggle(3) is True
    assert 3 in selection
    assert len(selection) == 1

    assert selection.toggle(3) is False
    assert 3 not in selection
    assert len(selection) == 0


def test_membership_is_parity_of_toggles():
    """An id is selected iff it was toggled an odd number of times."""
    rng = random.Random(1234)
    for _ in range(50):
        sequence = [rng.randint(1, 6) for _ in range(rng.randint(0, 30))]
        selection = SelectionSet()
        expected: set[int] = set()
        for item_id in sequence:
            selection.toggle(item_id)
            expected ^= {item_id}

        assert set(selection) == expected
        for item_id in range(1, 7):
            assert (item_id in selection) == (sequence.count(item_id) % 2 == 1)


def test_ids_are_sorted_and_unique():
    selection = SelectionSet([5, 1])
    selection.toggle(3)
    selection.toggle(3)
    selection.toggle(2)

    assert selection.ids() == (1, 2, 5)
