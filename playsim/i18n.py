from __future__ import annotations

from typing import Dict, Optional


_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "cui.title": "Play Simulator",
        "cui.config": "Config",
        "cui.input": "Input",
        "cui.objects": "Objects",
        "cui.target": "Target accuracy",
        "cui.value.none": "(none)",
        "cui.help.hint": "Tip: --save_config writes a commented config template.",
        "report.accuracy": "Accuracy",
        "report.combo": "Combo",
        "report.exact": "Exact",
        "report.gap": "Gap",
        "tier.PERFECT": "Perfect",
        "tier.GOOD": "Good",
        "tier.ACCEPTABLE": "Acceptable",
        "tier.MISS": "Miss",
    },
    "zh-CN": {
        "cui.title": "模拟成绩",
        "cui.config": "配置",
        "cui.input": "输入",
        "cui.objects": "物件数",
        "cui.target": "目标准确率",
        "cui.value.none": "(无)",
        "cui.help.hint": "提示：--save_config 会导出带注释的配置模板。",
        "report.accuracy": "准确率",
        "report.combo": "连击",
        "report.exact": "精确解",
        "report.gap": "差值",
        "tier.PERFECT": "完美",
        "tier.GOOD": "良好",
        "tier.ACCEPTABLE": "一般",
        "tier.MISS": "失误",
    },
}


_ALIASES: Dict[str, str] = {
    "zh": "zh-CN",
    "zh-cn": "zh-CN",
    "zh_cn": "zh-CN",
    "cn": "zh-CN",
    "en-us": "en",
    "en_us": "en",
    "us": "en",
}


def normalize_lang(lang: Optional[str]) -> str:
    """Map a user-supplied language name onto a translation table; unknown
    names fall back to English."""
    low = str(lang or "").strip().lower()
    code = _ALIASES.get(low, low)
    for known in _TRANSLATIONS:
        if known.lower() == code.lower():
            return known
    return "en"


def tr(lang: str, key: str, default: Optional[str] = None) -> str:
    tbl = _TRANSLATIONS[normalize_lang(lang)]
    if key in tbl:
        return tbl[key]
    return _TRANSLATIONS["en"].get(key, default if default is not None else key)
