from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..i18n import tr
from ..runtime.accuracy import evaluate
from ..types import Distribution


def combo_percent(combo: int, max_combo: int) -> float:
    if max_combo <= 0:
        return 0.0
    return round(100.0 * float(combo) / float(max_combo), 2)


def play_info(dist: Distribution, combo: int, max_combo: int, *, lang: str = "en") -> List[Tuple[str, str]]:
    rows: List[Tuple[str, str]] = []
    acc = evaluate(dist) if dist.total > 0 else 0.0
    rows.append((tr(lang, "report.accuracy"), f"{acc * 100.0:.2f}%"))
    rows.append((tr(lang, "report.combo"), f"{int(combo)} ({combo_percent(combo, max_combo)}%)"))
    for tier, count in dist.as_dict().items():
        rows.append((tr(lang, f"tier.{tier}", tier), str(int(count))))
    return rows


def format_report(
    dist: Distribution,
    combo: int,
    max_combo: int,
    *,
    lang: str = "en",
    exact: Optional[Distribution] = None,
    color: bool = True,
) -> str:
    rows = play_info(dist, combo, max_combo, lang=lang)
    if exact is not None:
        counts = "/".join(str(v) for v in exact.as_dict().values())
        rows.append((tr(lang, "report.exact"), counts))
        if dist.total > 0:
            gap = evaluate(dist) - evaluate(exact)
            rows.append((tr(lang, "report.gap"), f"{gap * 100.0:.4f}%"))

    width = max(len(k) for k, _ in rows)
    out: List[str] = []
    for k, v in rows:
        key = k.ljust(width)
        if color:
            key = f"\x1b[1;36m{key}\x1b[0m"
        out.append(f"{key} : {v}")
    return "\n".join(out)


def report_dict(
    dist: Distribution,
    combo: int,
    max_combo: int,
    *,
    exact: Optional[Distribution] = None,
) -> Dict[str, Any]:
    doc: Dict[str, Any] = {
        "accuracy": evaluate(dist) if dist.total > 0 else None,
        "combo": int(combo),
        "max_combo": int(max_combo),
        "statistics": dist.as_dict(),
    }
    if exact is not None:
        doc["exact"] = {
            "accuracy": evaluate(exact) if exact.total > 0 else None,
            "statistics": exact.as_dict(),
        }
    return doc
