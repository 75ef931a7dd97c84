from __future__ import annotations

from typing import Any, List

from ..config import loads_jsonc
from ..errors import PlayFormatError
from ..types import JudgedObject


def _parse_object(raw: Any, idx: int) -> JudgedObject:
    if isinstance(raw, bool):
        raise PlayFormatError(f"objects[{idx}]: expected int or object, got bool")
    if isinstance(raw, int):
        if raw < 0:
            raise PlayFormatError(f"objects[{idx}]: nested count must be non-negative")
        return JudgedObject(kind="slider" if raw > 0 else "circle", nested=tuple(range(raw)))
    if not isinstance(raw, dict):
        raise PlayFormatError(f"objects[{idx}]: expected int or object, got {type(raw).__name__}")

    kind = str(raw.get("kind", "circle"))
    nested = raw.get("nested")
    if nested is None:
        nested = ()
    elif isinstance(nested, bool) or not isinstance(nested, (int, list)):
        raise PlayFormatError(f"objects[{idx}].nested: expected int or list")
    elif isinstance(nested, int):
        if nested < 0:
            raise PlayFormatError(f"objects[{idx}].nested: count must be non-negative")
        nested = range(nested)
    return JudgedObject(kind=kind, nested=tuple(nested))


def parse_play(data: Any) -> List[JudgedObject]:
    """Turn a decoded play document into judged objects.

    Accepted shapes: a list of objects, or {"objects": [...]}. Each object is
    either a nested count or {"kind": ..., "nested": <count or list>}.
    """
    if isinstance(data, dict):
        if "objects" not in data:
            raise PlayFormatError("play document has no 'objects' list")
        data = data["objects"]
    if not isinstance(data, list):
        raise PlayFormatError("play objects must be a list")
    return [_parse_object(raw, i) for i, raw in enumerate(data)]


def load_play(path: str) -> List[JudgedObject]:
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    try:
        return parse_play(loads_jsonc(raw, source=str(path)))
    except PlayFormatError as e:
        if str(e).startswith(str(path)):
            raise
        raise PlayFormatError(f"{path}: {e}") from e
