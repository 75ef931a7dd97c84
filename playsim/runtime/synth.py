from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..errors import InvalidRangeError, NegativeCountError
from ..types import MAX_WEIGHT, Distribution
from .accuracy import weighted_sum

logger = logging.getLogger(__name__)

# (perfect, good, acceptable); MISS is fixed outside the search.
State = Tuple[int, int, int]


def shift_coarse(st: State) -> State:
    p, g, a = st
    return p - 1, g + 1, a


def shift_fine(st: State) -> State:
    p, g, a = st
    return p, g - 1, a + 1


def _state_acc(st: State, total: int) -> float:
    p, g, a = st
    return float(weighted_sum(p, g, a)) / float(MAX_WEIGHT * total)


def _check_range(total: int, miss: int, target: float) -> None:
    if total < 0:
        raise InvalidRangeError(f"total must be non-negative, got {total}")
    if miss < 0 or miss > total:
        raise InvalidRangeError(f"miss count must be within 0..{total}, got {miss}")
    if not (0.0 <= target <= 1.0):
        raise InvalidRangeError(f"target accuracy must be within 0..1, got {target}")


def _search(total: int, miss: int, target: float) -> State:
    st: State = (total - miss, 0, 0)
    acc0 = _state_acc(st, total)
    if acc0 <= target:
        logger.debug("all-perfect accuracy %.6f already <= target %.6f", acc0, target)
        return st

    # coarse: PERFECT -> GOOD while the next state stays at or above target
    while st[0] > 0:
        cand = shift_coarse(st)
        if _state_acc(cand, total) < target:
            # The overshoot with its last GOOD turned ACCEPTABLE weighs one
            # less than the overshoot itself, so it cannot reach target either.
            break
        st = cand
    logger.debug("coarse candidate %s acc=%.6f", st, _state_acc(st, total))

    # fine: GOOD -> ACCEPTABLE while the next state stays at or above target
    while st[1] > 0:
        cand = shift_fine(st)
        if _state_acc(cand, total) < target:
            break
        st = cand
    logger.debug("fine result %s acc=%.6f", st, _state_acc(st, total))
    return st


def synthesize(
    total: int,
    miss: int,
    target: float,
    good: Optional[int] = None,
    acceptable: Optional[int] = None,
) -> Distribution:
    """Build a judgement distribution for a play of `total` judged objects.

    With explicit `good` and/or `acceptable` counts the remainder becomes
    PERFECT and no search is done. Otherwise PERFECTs are traded for GOODs,
    then GOODs for ACCEPTABLEs, stopping each phase before accuracy would drop
    below `target`. `miss` is never altered.
    """
    total = int(total)
    miss = int(miss)
    target = float(target)
    _check_range(total, miss, target)

    if good is not None or acceptable is not None:
        g = int(good or 0)
        a = int(acceptable or 0)
        if g < 0 or a < 0:
            raise InvalidRangeError(f"explicit counts must be non-negative, got good={g} acceptable={a}")
        p = total - miss - g - a
        if p < 0:
            raise NegativeCountError(
                f"explicit counts exceed the play: total={total} miss={miss} good={g} acceptable={a}"
            )
        return Distribution(perfect=p, good=g, acceptable=a, miss=miss)

    if total == 0:
        return Distribution()

    p, g, a = _search(total, miss, target)
    return Distribution(perfect=p, good=g, acceptable=a, miss=miss)
