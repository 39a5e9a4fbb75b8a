"""Tests for GaugeRange and GaugeModel derived values."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from designdemos.domain.gauge import MAX_TICKS, GaugeModel, GaugeRange


class TestGaugeRange:
    def test_defaults(self) -> None:
        rng = GaugeRange()
        assert (rng.lower, rng.upper, rng.span) == (0.0, 10.0, 10.0)

    @pytest.mark.parametrize("lower,upper", [(5.0, 5.0), (10.0, 0.0)])
    def test_requires_lower_below_upper(self, lower: float, upper: float) -> None:
        with pytest.raises(ValidationError, match="must be below"):
            GaugeRange(lower=lower, upper=upper)

    def test_normalize_clamps(self) -> None:
        rng = GaugeRange(lower=2.0, upper=4.0)
        assert rng.normalize(3.0) == 0.5
        assert rng.normalize(-100.0) == 0.0
        assert rng.normalize(100.0) == 1.0


class TestGaugeModel:
    def test_standard_defaults(self) -> None:
        model = GaugeModel.standard()
        assert model.values == (0.0,)
        assert model.tick_step == 1.0

    def test_requires_a_value(self) -> None:
        with pytest.raises(ValidationError):
            GaugeModel(values=())

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValidationError):
            GaugeModel(values=(float("nan"),))

    def test_rejects_non_positive_tick_step(self) -> None:
        with pytest.raises(ValidationError):
            GaugeModel(values=(1.0,), tick_step=0.0)

    def test_rejects_too_many_ticks(self) -> None:
        with pytest.raises(ValidationError, match="tick intervals"):
            GaugeModel(values=(0.0,), range=GaugeRange(lower=0.0, upper=2_000_000.0))

    def test_rejects_tiny_tick_step(self) -> None:
        with pytest.raises(ValidationError, match="tick intervals"):
            GaugeModel(values=(0.0,), tick_step=1e-6)

    def test_tick_limit_is_inclusive(self) -> None:
        model = GaugeModel(values=(0.0,), range=GaugeRange(lower=0.0, upper=float(MAX_TICKS)))
        assert len(model.tick_values) == MAX_TICKS + 1

    def test_midpoint_derived_values(self) -> None:
        model = GaugeModel.standard(5.0)
        assert model.normalized() == 0.5
        assert model.needle_angle_degrees() == 180.0
        assert model.mood_face() == "😐"
        assert model.mood_color().to_hex() == "#ff8000"

    def test_out_of_range_value_is_clamped_in_derived(self) -> None:
        model = GaugeModel.standard(25.0)
        assert model.value() == 25.0
        assert model.normalized() == 1.0
        assert model.needle_angle_degrees() == 360.0
        assert model.mood_face() == "🔥"

    def test_shared_range_across_values(self) -> None:
        model = GaugeModel(values=(2.0, 3.0, 4.0), range=GaugeRange(lower=2.0, upper=4.0))
        assert len(model) == 3
        assert [model.normalized(i) for i in range(3)] == [0.0, 0.5, 1.0]

    def test_tick_values_inclusive(self) -> None:
        assert GaugeModel.standard().tick_values == tuple(float(v) for v in range(11))

    def test_fractional_tick_step(self) -> None:
        model = GaugeModel(values=(0.0,), range=GaugeRange(lower=0.0, upper=1.0), tick_step=0.1)
        ticks = model.tick_values
        assert len(ticks) == 11
        assert ticks[3] == 0.3
        assert ticks[-1] == 1.0

    def test_ticks_angles(self) -> None:
        ticks = GaugeModel.standard().ticks
        assert ticks[0].angle == 0.0
        assert ticks[5].angle == 180.0
        assert ticks[-1].angle == 360.0

    def test_with_value_returns_new_model(self) -> None:
        model = GaugeModel.standard(1.0, 2.0)
        updated = model.with_value(1, 7.0)
        assert updated.values == (1.0, 7.0)
        assert model.values == (1.0, 2.0)

    def test_with_value_validates(self) -> None:
        with pytest.raises(ValidationError):
            GaugeModel.standard(1.0).with_value(0, float("inf"))

    def test_frozen(self) -> None:
        model = GaugeModel.standard(1.0)
        with pytest.raises(ValidationError):
            model.tick_step = 2.0  # type: ignore[misc]

    def test_derived_snapshot(self) -> None:
        derived = GaugeModel.standard(0.0).derived()
        assert derived == {
            "value": 0.0,
            "normalized": 0.0,
            "needle_angle": 0.0,
            "mood_color": "#ffff00",
            "mood_face": "😄",
        }


class TestNeedleSweep:
    VALUES = [-5.0, 0.0, 0.5, 1.0, 2.5, 4.999, 5.0, 7.25, 9.9, 10.0, 15.0]

    @pytest.mark.parametrize("value", VALUES)
    def test_angle_is_full_turn_of_normalized(self, value: float) -> None:
        model = GaugeModel.standard(value)
        assert model.needle_angle_degrees() == 360.0 * model.normalized()
        assert 0.0 <= model.needle_angle_degrees() <= 360.0

    def test_angle_never_decreases(self) -> None:
        angles = [GaugeModel.standard(v).needle_angle_degrees() for v in self.VALUES]
        assert angles == sorted(angles)

    def test_shifted_range_never_decreases(self) -> None:
        rng = GaugeRange(lower=-3.0, upper=7.0)
        model = GaugeModel(values=(-3.0,), range=rng)
        angles = [model.with_value(0, -3.0 + k * 0.5).needle_angle_degrees() for k in range(21)]
        assert angles == sorted(angles)
        assert (angles[0], angles[-1]) == (0.0, 360.0)


class TestDerivedValuesAreStable:
    @pytest.mark.parametrize("value", [0.0, 3.3, 10.0])
    def test_repeated_calls_agree(self, value: float) -> None:
        model = GaugeModel.standard(value)
        first = (model.normalized(), model.mood_color(), model.mood_face(), model.tick_values)
        for _ in range(3):
            again = (model.normalized(), model.mood_color(), model.mood_face(), model.tick_values)
            assert again == first

    def test_with_value_leaves_original_derived_values(self) -> None:
        model = GaugeModel.standard(2.0)
        before = model.derived()
        model.with_value(0, 8.0)
        assert model.derived() == before
