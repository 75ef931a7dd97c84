from __future__ import annotations

import math

import numpy as np

from ..errors import InvalidRangeError
from ..types import ACCEPTABLE, GOOD, JUDGE_WEIGHT, MAX_WEIGHT, PERFECT, Distribution
from .accuracy import evaluate


def closest_distribution(total: int, miss: int, target: float) -> Distribution:
    """Exhaustive counterpart of synthesize(): lowest accuracy still >= target.

    For each GOOD count the lightest split still reaching target takes as many
    ACCEPTABLEs as possible, so only one candidate per GOOD count is scored.
    Ties prefer more PERFECT, then more GOOD. When even all-perfect falls short
    of target, all-perfect is returned.
    """
    total = int(total)
    miss = int(miss)
    target = float(target)
    if total < 0 or miss < 0 or miss > total:
        raise InvalidRangeError(f"invalid total/miss: total={total} miss={miss}")
    if not (0.0 <= target <= 1.0):
        raise InvalidRangeError(f"target accuracy must be within 0..1, got {target}")
    n = total - miss
    if total == 0:
        return Distribution()

    wp, wg, wa = JUDGE_WEIGHT[PERFECT], JUDGE_WEIGHT[GOOD], JUDGE_WEIGHT[ACCEPTABLE]
    step = wp - wa  # weight lost per PERFECT turned ACCEPTABLE
    scale = float(MAX_WEIGHT * total)

    g = np.arange(n + 1, dtype=np.int64)
    room = n - g
    base = wp * room + wg * g  # weight with no ACCEPTABLE

    def acc(a):
        return (base - step * a).astype(np.float64) / scale

    need = int(math.ceil(target * scale))
    a = np.clip(np.floor_divide(base - need, step), 0, room)
    # ceil() of a float product can be off by one unit; settle on the same
    # float comparison synthesize() uses
    for _ in range(2):
        a = np.where((a < room) & (acc(a + 1) >= target), a + 1, a)
        a = np.where((a > 0) & (acc(a) < target), a - 1, a)

    ok = acc(a) >= target
    if not ok.any():
        return Distribution(perfect=n, miss=miss)

    gi = g[ok]
    ai = a[ok]
    wi = base[ok] - step * ai
    pi = n - gi - ai
    # lexsort: last key is primary
    best = int(np.lexsort((-gi, -pi, wi))[0])
    return Distribution(perfect=int(pi[best]), good=int(gi[best]), acceptable=int(ai[best]), miss=miss)


def accuracy_gap(dist: Distribution, target: float) -> float:
    """How far `dist` sits above the exhaustive optimum for the same play."""
    best = closest_distribution(dist.total, dist.miss, target)
    return evaluate(dist) - evaluate(best)
