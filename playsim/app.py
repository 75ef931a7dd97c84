from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Set

from .config import dump_config, flatten_config, load_config
from .errors import SimulationError
from .i18n import normalize_lang, tr
from .io.play_loader import load_play
from .logging_setup import setup_logging
from .runtime.accuracy import percent_to_fraction
from .runtime.combo import max_combo, resolve_combo
from .runtime.grid import closest_distribution
from .runtime.synth import synthesize
from .types import JudgedObject
from .ui.report import format_report, report_dict

logger = logging.getLogger(__name__)


def build_parser(*, defaults: bool = True) -> argparse.ArgumentParser:
    """CLI parser. With defaults=False every default is suppressed, so the
    parsed namespace holds only the options actually given."""

    def d(v: Any) -> Any:
        return v if defaults else argparse.SUPPRESS

    ap = argparse.ArgumentParser(prog="playsim", description="Simulate judgement counts and combo for a play.")

    g_in = ap.add_argument_group("Input")
    g_in.add_argument("--play", type=str, default=d(None), help="Play file (.json/.jsonc) listing judged objects")
    g_in.add_argument("--objects", type=int, default=d(None), help="Number of judged objects (no nested sub-units)")

    g_play = ap.add_argument_group("Play")
    g_play.add_argument("-a", "--accuracy", type=float, default=d(100.0), help="Accuracy as percent 0-100")
    g_play.add_argument("-c", "--combo", type=int, default=d(None), help="Maximum combo during play (defaults to the play's maximum)")
    g_play.add_argument("-C", "--percent_combo", type=float, default=d(100.0), help="Percent of the maximum combo achieved, 0-100")
    g_play.add_argument("-X", "--misses", type=int, default=d(0))
    g_play.add_argument("-M", "--acceptables", "--mehs", dest="acceptables", type=int, default=d(None), help="Overrides accuracy if used")
    g_play.add_argument("-G", "--goods", type=int, default=d(None), help="Overrides accuracy if used")
    g_play.add_argument("--exact", action="store_true", default=d(False), help="Also run the exhaustive search and report the gap")

    g_cfg = ap.add_argument_group("Config")
    g_cfg.add_argument("--config", type=str, default=d(None), help="Config (JSONC) path")
    g_cfg.add_argument("--save_config", type=str, default=d(None), help="Write config (JSONC) to this path")

    g_cui = ap.add_argument_group("CUI")
    g_cui.add_argument("--lang", type=str, default=d(None), help="Language: zh-CN / en")
    g_cui.add_argument("--quiet", action="store_true", default=d(False), help="Less console output")
    g_cui.add_argument("--no_color", action="store_true", default=d(False), help="Disable ANSI colors")
    g_cui.add_argument("--json", dest="as_json", action="store_true", default=d(False), help="Print the result as JSON")

    g_dbg = ap.add_argument_group("Debug")
    g_dbg.add_argument("--basic_debug", action="store_true", default=d(False))
    return ap


def _explicit_dests(argv: Sequence[str]) -> Set[str]:
    return set(vars(build_parser(defaults=False).parse_args(argv)))


def _apply_config(args: argparse.Namespace, cfg: Dict[str, Any], explicit: Set[str]) -> None:
    for k, v in flatten_config(cfg).items():
        if not hasattr(args, k) or k in explicit:
            continue
        setattr(args, k, v)


def _objects_from_args(args: argparse.Namespace) -> List[Any]:
    if args.play:
        return load_play(str(args.play))
    n = int(args.objects)
    if n < 0:
        raise SimulationError(f"--objects must be non-negative, got {n}")
    return [JudgedObject() for _ in range(n)]


def run(args: argparse.Namespace, *, lang: str = "en") -> str:
    objects = _objects_from_args(args)
    total = len(objects)
    target = percent_to_fraction(args.accuracy)

    dist = synthesize(total, int(args.misses or 0), target, good=args.goods, acceptable=args.acceptables)
    mc = max_combo(objects)
    combo = resolve_combo(mc, args.combo, float(args.percent_combo))
    logger.debug("total=%d max_combo=%d dist=%s", total, mc, dist)

    exact = None
    if args.exact:
        if args.goods is not None or args.acceptables is not None:
            logger.warning("--exact ignored: explicit goods/acceptables skip the accuracy search")
        else:
            exact = closest_distribution(total, dist.miss, target)

    if args.as_json:
        return json.dumps(report_dict(dist, combo, mc, exact=exact), ensure_ascii=False, indent=2)
    return format_report(dist, combo, mc, lang=lang, exact=exact, color=not bool(args.no_color))


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.config:
        try:
            _apply_config(args, load_config(str(args.config)), _explicit_dests(argv))
        except (OSError, SimulationError) as e:
            raise SystemExit(f"error: cannot load config: {e}")

    setup_logging(args)
    logger.debug("CLI args parsed")

    # config ui.lang only fills in when --lang was not given
    lang = normalize_lang(args.lang)

    if args.save_config:
        with open(args.save_config, "w", encoding="utf-8") as f:
            f.write(dump_config(args, lang=lang))
        logger.info("config written to %s", args.save_config)

    if (args.play is None) == (args.objects is None):
        if args.save_config:
            return 0
        ap.error("exactly one of --play or --objects must be provided")

    if not args.quiet:
        logger.info(tr(lang, "cui.title"))
        if args.config:
            logger.info("%s: %s", tr(lang, "cui.config"), args.config)
        logger.info("%s: %s", tr(lang, "cui.input"), args.play or f"{tr(lang, 'cui.objects')}={args.objects}")
        logger.info("%s: %s%%", tr(lang, "cui.target"), args.accuracy)

    try:
        out = run(args, lang=lang)
    except (OSError, SimulationError) as e:
        raise SystemExit(f"error: {e}")

    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
