from __future__ import annotations

from types import SimpleNamespace

import pytest

from playsim.errors import InvalidRangeError
from playsim.runtime.combo import max_combo, nested_count, resolve_combo
from playsim.types import JudgedObject


def _objs(counts):
    return [JudgedObject(nested=tuple(range(n))) for n in counts]


def test_nested_sub_units_add_combo():
    assert max_combo(_objs([1, 4, 1])) == 6


def test_empty_sequence():
    assert max_combo([]) == 0


def test_plain_objects_count_once():
    assert max_combo(_objs([0, 0, 0, 0])) == 4


def test_single_nested_unit_adds_nothing():
    assert max_combo(_objs([1])) == 1


def test_duck_typed_objects():
    objs = [
        SimpleNamespace(nested=[0.1, 0.2, 0.3]),
        SimpleNamespace(nested_count=5),
        SimpleNamespace(),
    ]
    assert [nested_count(o) for o in objs] == [3, 5, 0]
    assert max_combo(objs) == 3 + 2 + 4


def test_generator_input():
    assert max_combo(o for o in _objs([2, 3])) == 2 + 1 + 2


def test_resolve_combo_defaults_to_max():
    assert resolve_combo(600) == 600


def test_resolve_combo_percent():
    assert resolve_combo(600, percent_combo=50) == 300
    assert resolve_combo(600, percent_combo=0) == 0
    # round half to even
    assert resolve_combo(5, percent_combo=50) == 2


def test_resolve_combo_explicit_wins():
    assert resolve_combo(600, combo=123, percent_combo=10) == 123


@pytest.mark.parametrize("combo,pct", [(601, 100.0), (-1, 100.0), (None, 100.5), (None, -3.0)])
def test_resolve_combo_out_of_range(combo, pct):
    with pytest.raises(InvalidRangeError):
        resolve_combo(600, combo=combo, percent_combo=pct)
