from __future__ import annotations

import pytest

from playsim.errors import PlayFormatError
from playsim.io.play_loader import load_play, parse_play
from playsim.runtime.combo import max_combo


def test_counts_list():
    objs = parse_play([0, 4, 0])
    assert [o.nested_count for o in objs] == [0, 4, 0]
    assert [o.kind for o in objs] == ["circle", "slider", "circle"]
    assert max_combo(objs) == 6


def test_object_form():
    objs = parse_play({"objects": [
        {"kind": "slider", "nested": [0.0, 0.5, 1.0]},
        {"kind": "spinner"},
        {"nested": 2},
        {"nested": None},
    ]})
    assert [(o.kind, o.nested_count) for o in objs] == [("slider", 3), ("spinner", 0), ("circle", 2), ("circle", 0)]
    assert objs[0].nested == (0.0, 0.5, 1.0)


@pytest.mark.parametrize("doc", [
    {"notes": []},
    "objects",
    [-1],
    [True],
    ["x"],
    [{"nested": -2}],
    [{"nested": "3"}],
    [{"nested": False}],
])
def test_malformed(doc):
    with pytest.raises(PlayFormatError):
        parse_play(doc)


def test_load_from_file(tmp_path):
    p = tmp_path / "play.jsonc"
    p.write_text('// three objects\n{"objects": [1, 4, {"kind": "circle"}]}\n', encoding="utf-8")
    assert max_combo(load_play(str(p))) == 6


def test_load_error_names_the_file(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text('{"objects": [-1]}', encoding="utf-8")
    with pytest.raises(PlayFormatError, match="bad.json"):
        load_play(str(p))
