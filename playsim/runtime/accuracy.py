from __future__ import annotations

from typing import Any, Mapping, Union

from ..errors import DivisionByZeroError, InvalidRangeError
from ..types import ACCEPTABLE, GOOD, JUDGE_WEIGHT, MAX_WEIGHT, PERFECT, Distribution


def weighted_sum(perfect: int, good: int, acceptable: int) -> int:
    return (
        JUDGE_WEIGHT[PERFECT] * int(perfect)
        + JUDGE_WEIGHT[GOOD] * int(good)
        + JUDGE_WEIGHT[ACCEPTABLE] * int(acceptable)
    )


def evaluate(distribution: Union[Distribution, Mapping[str, Any]]) -> float:
    """Weighted accuracy of a judgement distribution, as a fraction in [0, 1].

    Accepts a Distribution or any tier-keyed mapping of counts.
    """
    if not isinstance(distribution, Distribution):
        distribution = Distribution.from_mapping(distribution)
    total = distribution.total
    if total <= 0:
        raise DivisionByZeroError("accuracy is undefined for a play with no judged objects")
    return float(distribution.weight) / float(MAX_WEIGHT * total)


def percent_to_fraction(percent: float) -> float:
    v = float(percent)
    if not (0.0 <= v <= 100.0):
        raise InvalidRangeError(f"accuracy must be within 0..100, got {v}")
    return v / 100.0
