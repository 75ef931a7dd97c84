from __future__ import annotations

from typing import Any, Iterable, Optional

from ..errors import InvalidRangeError


def nested_count(obj: Any) -> int:
    n = getattr(obj, "nested_count", None)
    if n is not None:
        return int(n)
    nested = getattr(obj, "nested", None)
    if nested is None:
        return 0
    return len(nested)


def max_combo(objects: Iterable[Any]) -> int:
    """Maximum combo reachable over a sequence of judged objects.

    Every object counts once; an object with nested sub-units adds one combo
    per sub-unit beyond the first (the first is the object itself).
    """
    combo = 0
    for obj in objects:
        combo += 1 + max(0, nested_count(obj) - 1)
    return combo


def resolve_combo(max_combo_value: int, combo: Optional[int] = None, percent_combo: float = 100.0) -> int:
    """Combo achieved in the simulated play.

    An explicit combo wins; otherwise it is percent_combo (0..100) of the
    maximum, rounded to the nearest integer.
    """
    mc = int(max_combo_value)
    if mc < 0:
        raise InvalidRangeError(f"max combo must be non-negative, got {mc}")
    if combo is not None:
        c = int(combo)
        if c < 0 or c > mc:
            raise InvalidRangeError(f"combo must be within 0..{mc}, got {c}")
        return c
    pct = float(percent_combo)
    if pct < 0.0 or pct > 100.0:
        raise InvalidRangeError(f"percent combo must be within 0..100, got {pct}")
    return int(round(pct / 100.0 * mc))
