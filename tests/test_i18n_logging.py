from __future__ import annotations

import argparse
import logging

from playsim.i18n import normalize_lang, tr
from playsim.logging_setup import resolve_level


def test_normalize_lang():
    assert normalize_lang(None) == "en"
    assert normalize_lang(" ") == "en"
    assert normalize_lang("zh_cn") == "zh-CN"
    assert normalize_lang("ZH-CN") == "zh-CN"
    assert normalize_lang("EN-us") == "en"


def test_unsupported_lang_falls_back_to_english():
    assert normalize_lang("fr") == "en"
    assert tr("fr", "report.combo") == "Combo"


def test_tr_falls_back_to_english_then_default():
    assert tr("zh-CN", "tier.MISS") == "失误"
    assert tr("zh-CN", "no.such.key", "dflt") == "dflt"
    assert tr("en", "no.such.key") == "no.such.key"


def test_resolve_level(monkeypatch):
    monkeypatch.delenv("PLAYSIM_LOG_LEVEL", raising=False)
    assert resolve_level(None) == logging.INFO
    assert resolve_level(argparse.Namespace(quiet=True, basic_debug=False)) == logging.WARNING
    assert resolve_level(argparse.Namespace(quiet=True, basic_debug=True)) == logging.DEBUG
    monkeypatch.setenv("PLAYSIM_LOG_LEVEL", "error")
    assert resolve_level(argparse.Namespace(quiet=False, basic_debug=True)) == logging.ERROR
    monkeypatch.setenv("PLAYSIM_LOG_LEVEL", "bogus")
    assert resolve_level(None) == logging.INFO
