"""Tests for the finished gauges and the style registry."""

from __future__ import annotations

import pytest

from designdemos.domain.color import BLUE, RED, WHITE, Color
from designdemos.domain.drawing import GaugeGeometry, Group, Label, Layer, Line, count_commands
from designdemos.domain.gauge import GaugeModel
from designdemos.domain.gauges import (
    GAUGE_REGISTRY,
    builtin_gauge_styles,
    get_gauge_builder,
    inside_out_gauge,
    list_gauge_styles,
    register_gauge_style,
    simple_gauge,
    standard_gauge,
    uber_gauge,
)


def _layer(layers: list[Layer], name: str) -> Layer:
    return next(layer for layer in layers if layer.name == name)


class TestMonolithic:
    def test_simple_gauge(self) -> None:
        layers = simple_gauge(0.25)
        assert [layer.name for layer in layers] == ["background", "needle"]
        assert _layer(layers, "background").commands[0].fill == BLUE
        needle = _layer(layers, "needle").commands[0]
        assert isinstance(needle, Group)
        assert needle.rotation == 90.0
        line = needle.children[0]
        assert isinstance(line, Line)
        assert line.color == RED
        assert line.width == 4.0
        assert line.end.y == 25.0

    def test_uber_defaults_match_simple(self) -> None:
        assert uber_gauge(0.6) == simple_gauge(0.6)

    def test_uber_parameters(self) -> None:
        green = Color(red=0.0, green=1.0, blue=0.0)
        layers = uber_gauge(
            0.5,
            background_size=100.0,
            background_color=green,
            needle_width=2.0,
            needle_length=30.0,
            needle_color=WHITE,
        )
        circle = _layer(layers, "background").commands[0]
        assert circle.radius == 50.0
        assert circle.fill == green
        group = _layer(layers, "needle").commands[0]
        assert group.rotation == 180.0
        line = group.children[0]
        assert (line.width, line.color, line.end.y) == (2.0, WHITE, 20.0)


class TestComposed:
    def test_standard_layer_order(self) -> None:
        layers = standard_gauge(GaugeModel.standard(5.0), GaugeGeometry())
        assert [layer.name for layer in layers] == [
            "background",
            "ticks",
            "needles",
            "indicators",
            "outline",
        ]

    def test_standard_ticks_are_labelled(self) -> None:
        layers = standard_gauge(GaugeModel.standard(), GaugeGeometry())
        ticks = _layer(layers, "ticks").commands
        assert len(ticks) == 11
        labels = [c.text for g in ticks for c in g.children if isinstance(c, Label)]
        assert labels[:3] == ["0", "1", "2"]

    def test_standard_one_needle_per_value(self) -> None:
        layers = standard_gauge(GaugeModel.standard(1.0, 4.0, 9.0), GaugeGeometry())
        assert len(_layer(layers, "needles").commands) == 3

    def test_inside_out_layers(self) -> None:
        layers = inside_out_gauge(GaugeModel.standard(5.0), GaugeGeometry())
        assert [layer.name for layer in layers] == [
            "background",
            "indicators",
            "outline",
            "needles",
            "seconds_hand",
        ]

    def test_inside_out_background_follows_mood(self) -> None:
        model = GaugeModel.standard(5.0)
        layers = inside_out_gauge(model, GaugeGeometry())
        assert _layer(layers, "background").commands[0].fill == model.mood_color()

    def test_inside_out_ring_turns_counter_clockwise(self) -> None:
        layers = inside_out_gauge(GaugeModel.standard(2.5), GaugeGeometry())
        ring = _layer(layers, "needles").commands[0]
        assert ring.rotation == -90.0
        faces = [c.text for g in ring.children for c in g.children if isinstance(c, Label)]
        assert faces[0] == "😄"
        assert faces[5] == "😐"
        assert len(faces) == 11

    def test_inside_out_indicator_shows_title_and_face(self) -> None:
        layers = inside_out_gauge(GaugeModel.standard(5.0), GaugeGeometry())
        texts = [c.text for c in _layer(layers, "indicators").commands[0].children]
        assert texts == ["Inside Out", "😐"]

    def test_command_counts(self) -> None:
        counts = count_commands(standard_gauge(GaugeModel.standard(), GaugeGeometry()))
        assert counts["line"] == 12  # 11 ticks + 1 needle
        assert counts["text"] == 12  # 11 tick labels + readout


class TestRegistry:
    def test_builtins_registered(self) -> None:
        assert builtin_gauge_styles() == ["simple", "uber", "standard", "inside-out"]
        for name in builtin_gauge_styles():
            assert name in GAUGE_REGISTRY

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError):
            get_gauge_builder("nope")

    def test_register_and_list(self) -> None:
        register_gauge_style("zebra", standard_gauge)
        register_gauge_style("aardvark", standard_gauge)
        assert list_gauge_styles()[-2:] == ["aardvark", "zebra"]
        assert get_gauge_builder("zebra") is standard_gauge

    def test_register_same_builder_twice_is_noop(self) -> None:
        register_gauge_style("twice", standard_gauge)
        register_gauge_style("twice", standard_gauge)
        assert get_gauge_builder("twice") is standard_gauge

    def test_register_conflicting_builder(self) -> None:
        register_gauge_style("taken", standard_gauge)
        with pytest.raises(ValueError, match="already registered"):
            register_gauge_style("taken", inside_out_gauge)

    def test_builtin_names_reserved(self) -> None:
        with pytest.raises(ValueError, match="built-in"):
            register_gauge_style("standard", inside_out_gauge)

    def test_empty_name(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            register_gauge_style("  ", standard_gauge)

    def test_not_callable(self) -> None:
        with pytest.raises(TypeError):
            register_gauge_style("broken", "not-a-builder")  # type: ignore[arg-type]
