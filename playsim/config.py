from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Tuple

from .errors import PlayFormatError
from .i18n import normalize_lang


def strip_jsonc_comments(src: str) -> str:
    # Removes //, # and /* */ comments while preserving string literals.
    out: List[str] = []
    i = 0
    n = len(src)

    in_str = False
    quote = '"'
    escape = False

    while i < n:
        ch = src[i]
        nxt = src[i + 1] if i + 1 < n else ""

        if in_str:
            out.append(ch)
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == quote:
                in_str = False
            i += 1
            continue

        if ch in ("\"", "'"):
            in_str = True
            quote = ch
            out.append(ch)
            i += 1
            continue

        if ch == "#" or (ch == "/" and nxt == "/"):
            # keep the newline so json error positions stay on the right line
            j = src.find("\n", i)
            i = n if j < 0 else j
            continue

        if ch == "/" and nxt == "*":
            j = src.find("*/", i + 2)
            i = n if j < 0 else j + 2
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def loads_jsonc(raw: str, *, source: str = "<string>") -> Any:
    raw = raw.lstrip("\ufeff")
    try:
        return json.loads(strip_jsonc_comments(raw))
    except json.JSONDecodeError as e:
        raise PlayFormatError(f"{source}: {e}") from e


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    data = loads_jsonc(raw, source=str(path))
    if not isinstance(data, dict):
        raise PlayFormatError(f"{path}: config root must be an object")
    return data


def _as_int(v: Any) -> int:
    if isinstance(v, bool) or isinstance(v, float):
        raise ValueError(f"expected an integer, got {v!r}")
    return int(v)


def _as_float(v: Any) -> float:
    if isinstance(v, bool):
        raise ValueError(f"expected a number, got {v!r}")
    return float(v)


def _as_bool(v: Any) -> bool:
    if not isinstance(v, bool):
        raise ValueError(f"expected true/false, got {v!r}")
    return v


def _optional(conv: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda v: None if v is None else conv(v)


# (flat attribute, section, key, converter)
_FIELDS: Tuple[Tuple[str, str, str, Callable[[Any], Any]], ...] = (
    ("accuracy", "play", "accuracy", _as_float),
    ("misses", "play", "misses", _as_int),
    ("goods", "play", "goods", _optional(_as_int)),
    ("acceptables", "play", "acceptables", _optional(_as_int)),
    ("combo", "play", "combo", _optional(_as_int)),
    ("percent_combo", "play", "percent_combo", _as_float),
    ("exact", "play", "exact", _as_bool),
    ("lang", "ui", "lang", _optional(str)),
    ("quiet", "ui", "quiet", _as_bool),
    ("no_color", "ui", "no_color", _as_bool),
    ("as_json", "ui", "as_json", _as_bool),
    ("basic_debug", "debug", "basic_debug", _as_bool),
)


def flatten_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Map config sections onto CLI attribute names, converting each value.

    Raises PlayFormatError naming the offending key when a value has the
    wrong type.
    """
    flat: Dict[str, Any] = {}
    for dst, section, key, conv in _FIELDS:
        sec = cfg.get(section)
        if not isinstance(sec, dict) or key not in sec:
            continue
        try:
            flat[dst] = conv(sec[key])
        except (TypeError, ValueError) as e:
            raise PlayFormatError(f"config {section}.{key}: {e}") from e
    return flat


def dump_config(args: Any, *, lang: str = "en") -> str:
    lng = normalize_lang(lang or getattr(args, "lang", None))
    cfg: Dict[str, Any] = {"version": 1}
    for dst, section, key, _ in _FIELDS:
        cfg.setdefault(section, {})[key] = getattr(args, dst, None)
    cfg["ui"]["lang"] = lng

    if lng == "zh-CN":
        header_lines = [
            "// playsim 配置（支持注释的 JSON）",
            "//",
            "// 基本用法：",
            "//   python3 -m playsim --play <play.json> --config <this_file>",
            "//   python3 -m playsim --objects 500 --save_config config.jsonc",
            "//",
            "// 说明：",
            "// - play.accuracy 以百分比填写（0-100）。",
            "// - 填写 goods 或 acceptables 时不再按准确率搜索。",
            "// - 命令行参数优先级高于配置文件。",
            "",
        ]
    else:
        header_lines = [
            "// playsim config (JSON with comments)",
            "//",
            "// Basic usage:",
            "//   python3 -m playsim --play <play.json> --config <this_file>",
            "//   python3 -m playsim --objects 500 --save_config config.jsonc",
            "//",
            "// Notes:",
            "// - play.accuracy is a percent (0-100).",
            "// - Setting goods or acceptables skips the accuracy search.",
            "// - CLI args override config values.",
            "",
        ]

    body = json.dumps(cfg, ensure_ascii=False, indent=2)
    return "\n".join(header_lines) + body + "\n"
