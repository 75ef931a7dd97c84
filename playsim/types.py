from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from .errors import InvalidRangeError

PERFECT = "PERFECT"
GOOD = "GOOD"
ACCEPTABLE = "ACCEPTABLE"
MISS = "MISS"

TIERS: Tuple[str, ...] = (PERFECT, GOOD, ACCEPTABLE, MISS)

JUDGE_WEIGHT: Dict[str, int] = {
    PERFECT: 6,
    GOOD: 2,
    ACCEPTABLE: 1,
    MISS: 0,
}

MAX_WEIGHT = JUDGE_WEIGHT[PERFECT]


@dataclass(frozen=True)
class Distribution:
    perfect: int = 0
    good: int = 0
    acceptable: int = 0
    miss: int = 0

    @property
    def total(self) -> int:
        return self.perfect + self.good + self.acceptable + self.miss

    @property
    def weight(self) -> int:
        return (
            JUDGE_WEIGHT[PERFECT] * self.perfect
            + JUDGE_WEIGHT[GOOD] * self.good
            + JUDGE_WEIGHT[ACCEPTABLE] * self.acceptable
            + JUDGE_WEIGHT[MISS] * self.miss
        )

    def as_dict(self) -> Dict[str, int]:
        return {
            PERFECT: self.perfect,
            GOOD: self.good,
            ACCEPTABLE: self.acceptable,
            MISS: self.miss,
        }

    @classmethod
    def from_mapping(cls, counts: Mapping[str, Any]) -> Distribution:
        """Build a distribution from a tier-keyed mapping.

        Keys are matched case-insensitively; tiers that are absent count as 0.
        Keys that name no tier raise InvalidRangeError.
        """
        norm = {str(k).strip().upper(): int(v) for k, v in counts.items()}
        unknown = sorted(k for k in norm if k not in JUDGE_WEIGHT)
        if unknown:
            raise InvalidRangeError(f"unknown judgement tiers: {', '.join(unknown)}")
        return cls(
            perfect=norm.get(PERFECT, 0),
            good=norm.get(GOOD, 0),
            acceptable=norm.get(ACCEPTABLE, 0),
            miss=norm.get(MISS, 0),
        )


@dataclass(frozen=True)
class JudgedObject:
    kind: str = "circle"   # circle / slider / spinner / ...
    nested: Tuple[Any, ...] = ()  # nested sub-units (ticks, repeats, tail)

    @property
    def nested_count(self) -> int:
        return len(self.nested)
