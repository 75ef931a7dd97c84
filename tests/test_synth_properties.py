from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from playsim.runtime.accuracy import evaluate, weighted_sum
from playsim.runtime.synth import shift_coarse, shift_fine, synthesize
from playsim.types import Distribution


@st.composite
def plays(draw):
    total = draw(st.integers(min_value=1, max_value=5000))
    miss = draw(st.integers(min_value=0, max_value=total))
    target = draw(st.floats(min_value=0.0, max_value=1.0, allow_nan=False))
    return total, miss, target


@settings(max_examples=500, deadline=None)
@given(plays())
def test_synthesize_properties(play):
    total, miss, target = play
    d = synthesize(total, miss, target)

    assert d.total == total
    assert d.miss == miss
    assert min(d.perfect, d.good, d.acceptable) >= 0

    all_perfect = Distribution(perfect=total - miss, miss=miss)
    if target <= evaluate(all_perfect):
        assert evaluate(d) >= target
    else:
        assert d == all_perfect

    state = (d.perfect, d.good, d.acceptable)
    if d.perfect > 0:
        assert evaluate(Distribution(*shift_coarse(state), miss)) < target
    if d.good > 0:
        assert evaluate(Distribution(*shift_fine(state), miss)) < target


@settings(max_examples=300, deadline=None)
@given(plays())
def test_acceptable_swap_at_coarse_overshoot_never_reaches_target(play):
    total, miss, target = play
    d = synthesize(total, miss, target)
    if d.perfect == 0:
        return
    # the coarse step the search stopped at, with its new GOOD made ACCEPTABLE
    over = shift_coarse((d.perfect, d.good + d.acceptable, 0))
    swapped = shift_fine(over)
    assert weighted_sum(*swapped) == weighted_sum(*over) - 1
    assert evaluate(Distribution(*swapped, miss)) < target
