# -*- coding: utf-8 -*-
"""
HARMONYWHEEL: Interactive color harmony engine
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""
import os
import subprocess
import sys
from pathlib import Path

import pytest
from PySide6.QtGui import QColor

from harmonywheel import (HarmonyConfig, HarmonyEngine, InvalidColorError,
                          InvalidModeError, Marker, MarkerLookupError, Mode)


def test_bind_colors_switches_to_custom(make_engine):
    engine = make_engine(["red", "green", "blue"])
    assert engine.mode is Mode.CUSTOM
    assert [m.index for m in engine.markers] == [0, 1, 2]


def test_read_back_is_sorted_by_hue(make_engine):
    expected = ["#ff0000", "#008000", "#0000ff"]
    assert make_engine(["red", "green", "blue"]).colors_as("hex") == expected
    assert make_engine(["blue", "red", "green"]).colors_as("hex") == expected


@pytest.mark.parametrize("encoding, expected", [
    ("rgb", ["rgb(255, 0, 0)", "rgb(0, 0, 255)"]),
    ("hsl", ["hsl(0, 100%, 50%)", "hsl(240, 100%, 50%)"]),
    ("hsv", ["hsv(0, 100%, 100%)", "hsv(240, 100%, 100%)"]),
])
def test_read_back_encodings(make_engine, encoding, expected):
    assert make_engine(["blue", "red"]).colors_as(encoding) == expected


def test_equal_hues_keep_sequence_order(make_engine):
    engine = make_engine(["#800000", "#ff0000", "#400000"])
    assert engine.colors_as("hex") == ["#800000", "#ff0000", "#400000"]


def test_bind_dicts_with_labels(make_engine):
    engine = make_engine([
        {"color": "red", "label": "Primary"},
        {"color": QColor("#00ff00"), "name": "Accent"},
        {"color": "blue", "visible": False},
    ])
    assert [m.label for m in engine.markers] == ["Primary", "Accent", None]
    assert [m.visible for m in engine.markers] == [True, True, False]
    assert engine.colors_as("hex") == ["#ff0000", "#00ff00"]


def test_bind_count_uses_initial_root_color(make_engine):
    engine = make_engine(3, initial_root_color="#0000ff", initial_mode="Complementary")
    assert engine.root.hue == pytest.approx(240.0, abs=1e-6)
    assert len(engine.markers) == 3


def test_bind_none_uses_marker_count(make_engine):
    assert len(make_engine(marker_count=7).markers) == 7


def test_rebind_replaces_set_and_resets_state(make_engine):
    engine = make_engine(5, default_slice=20)
    engine.drag_start()
    engine.bind(["red", "blue"])
    assert len(engine.markers) == 2
    assert engine.mode is Mode.CUSTOM
    assert not engine.is_dragging
    assert engine.slice == 20.0


def test_bind_invalid_color_keeps_previous_set(make_engine):
    engine = make_engine(["red", "blue"])
    markers = engine.markers
    with pytest.raises(InvalidColorError):
        engine.bind(["red", "definitely-not-a-color"])
    assert engine.markers == markers


def test_bind_rejects_bad_entries(make_engine):
    engine = make_engine(2)
    with pytest.raises(TypeError):
        engine.bind("red")
    with pytest.raises(TypeError):
        engine.bind([1.5])
    with pytest.raises(ValueError):
        engine.bind([{"label": "no color"}])
    with pytest.raises(ValueError):
        engine.bind(-1)


def test_bind_validates_initial_mode(make_engine):
    engine = make_engine(3)
    engine.config.initial_mode = "Bogus"
    with pytest.raises(InvalidModeError):
        engine.bind(4)
    assert len(engine.markers) == 3


def test_bind_empty_is_allowed(make_engine):
    engine = make_engine([])
    assert engine.markers == ()
    assert engine.root is None
    assert engine.colors_as("hex") == []


def test_bind_generated_notifies(recorder):
    engine = HarmonyEngine([])
    rec = recorder(engine)
    engine.bind(4)
    assert (rec.changed, rec.commits) == (1, 1)
    engine.bind(["red"])
    assert (rec.changed, rec.commits) == (2, 2)


def test_marker_lookup(make_engine):
    engine = make_engine(3)
    m = engine.markers[2]
    assert engine.marker(m) is m
    assert engine.marker(2) is m
    with pytest.raises(MarkerLookupError):
        engine.marker(3)
    with pytest.raises(MarkerLookupError):
        engine.marker(Marker(0.0, 1.0, 1.0, index=0))
    with pytest.raises(MarkerLookupError):
        engine.marker(True)


def test_marker_normalizes_its_color():
    m = Marker(-30.0, 2.0, -1.0, index=0)
    assert (m.hue, m.saturation, m.value) == (330.0, 1.0, 0.0)
    m.set_hsv(725.0, 0.5, 0.5)
    assert m.hue == pytest.approx(5.0)


def test_marker_artistic_hue():
    assert Marker(47.5, 1.0, 1.0, index=0).artistic_hue == pytest.approx(91.0)
    assert Marker(0.0, 1.0, 1.0, index=0).artistic_hue == 0.0


def test_set_marker_value(make_engine, recorder):
    engine = make_engine(3)
    rec = recorder(engine)
    engine.set_marker_value(1, 0.4)
    engine.set_marker_value(engine.markers[2], 1.7)
    assert engine.markers[1].value == 0.4
    assert engine.markers[2].value == 1.0
    assert (rec.changed, rec.commits) == (2, 0)
    engine.commit()
    assert rec.commits == 1


def test_set_marker_value_keeps_hue(make_engine):
    engine = make_engine(3, initial_mode="Triad")
    hues = [m.hue for m in engine.markers]
    engine.set_marker_value(0, 0.1)
    assert [m.hue for m in engine.markers] == hues


def test_color_strings_use_configured_formatter(make_engine):
    engine = make_engine(["blue", "red"],
                         color_string=lambda h, s, v: f"{h:.0f}/{s:.1f}/{v:.1f}")
    # Sequence order, not hue order
    assert engine.color_strings() == ["240/1.0/1.0", "0/1.0/1.0"]


def test_mapping_config_is_accepted():
    engine = HarmonyEngine(3, config={"initial_mode": "Tetrad"}, rng=0)
    assert engine.mode is Mode.TETRAD
    assert isinstance(engine.config, HarmonyConfig)


def test_engine_module_runs_as_script():
    from harmonywheel import engine as engine_module

    script = Path(engine_module.__file__)
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(script.parent.parent),
                                                      env.get("PYTHONPATH")]))
    result = subprocess.run([sys.executable, str(script)], env=env,
                            capture_output=True, text=True, timeout=60)
    assert result.returncode == 0, result.stderr
    assert "Analogous:" in result.stdout
    assert "Custom:" in result.stdout
