"""Tests for pixel offset <-> value mapping."""

import numpy as np
import pytest

from betterslider.core.mapping import (
    Bounds, Geometry, Edge,
    normalize_step, value_to_offset, offset_to_value,
    pointer_from_location, step_count, step_marker_offsets,
)


GEO = Geometry(track_width=220, handle_size=20)  # travel 200


def test_bounds_defaults():
    b = Bounds()
    assert b.lower == 0.0
    assert b.upper == 1.0
    assert b.span == 1.0


@pytest.mark.parametrize("lower,upper", [(1.0, 1.0), (5.0, -5.0)])
def test_bounds_rejects_empty_span(lower, upper):
    with pytest.raises(ValueError):
        Bounds(lower, upper)


def test_bounds_clamp_and_fraction():
    b = Bounds(-10, 10)
    assert b.clamp(-20) == -10
    assert b.clamp(15) == 10
    assert b.clamp(3) == 3
    assert b.fraction(0) == 0.5
    assert b.contains(10)
    assert not b.contains(10.5)


def test_geometry_travel():
    assert GEO.travel == 200
    assert Geometry(10, 20).travel == 0.0
    assert Geometry(20, 20).is_degenerate
    assert not GEO.is_degenerate


def test_normalize_step():
    assert normalize_step(None) is None
    assert normalize_step(0) is None
    assert normalize_step(-5) is None
    assert normalize_step(2) == 2.0


def test_handle_offset():
    b = Bounds(0, 100)
    assert value_to_offset(0, b, GEO) == 0.0
    assert value_to_offset(25, b, GEO) == 50.0
    assert value_to_offset(100, b, GEO) == 200.0


def test_trailing_trim_offset():
    b = Bounds(0, 100)
    # handle at 50, centre at 60, inset from the trailing edge
    assert value_to_offset(25, b, GEO, for_handle=False) == 160.0
    assert value_to_offset(25, b, GEO, for_handle=False, edge=Edge.TRAILING) == 160.0


def test_leading_trim_offset():
    b = Bounds(0, 100)
    assert value_to_offset(25, b, GEO, for_handle=False, edge=Edge.LEADING) == 60.0
    assert value_to_offset(0, b, GEO, for_handle=False, edge=Edge.LEADING) == 10.0


def test_value_to_offset_degenerate_geometry():
    b = Bounds(0, 100)
    for geo in (Geometry(20, 20), Geometry(5, 20), Geometry(0, 0)):
        assert value_to_offset(50, b, geo) == 0.0
        assert value_to_offset(50, b, geo, for_handle=False) == 0.0
        assert value_to_offset(50, b, geo, for_handle=False, edge=Edge.LEADING) == 0.0


@pytest.mark.parametrize("value", [-3.5, -1.0, 0.0, 0.1, 2.71828, 7.0, 12.25])
def test_round_trip_without_step(value):
    b = Bounds(-3.5, 12.25)
    geo = Geometry(317.5, 28)
    offset = value_to_offset(value, b, geo, for_handle=True)
    assert offset_to_value(offset, b, geo) == pytest.approx(value, rel=1e-9, abs=1e-12)


def test_end_to_end_midpoint():
    assert offset_to_value(100, Bounds(0, 1), GEO) == 0.5


@pytest.mark.parametrize("step", [None, 10])
def test_pointer_outside_track_clamps(step):
    b = Bounds(0, 100)
    assert offset_to_value(-1, b, GEO, step) == 0
    assert offset_to_value(-500, b, GEO, step) == 0
    assert offset_to_value(201, b, GEO, step) == 100
    assert offset_to_value(10_000, b, GEO, step) == 100


def test_step_quantization():
    b = Bounds(0, 100)
    geo = Geometry(300, 20)
    pointer = 0.46 * geo.travel
    assert offset_to_value(pointer, b, geo, step=10) == 50.0


def test_step_values_are_exact_multiples():
    b = Bounds(0, 100)
    for pointer in range(0, 201, 7):
        value = offset_to_value(pointer, b, GEO, step=10)
        assert value % 10 == 0


def test_step_rounds_half_away_from_zero():
    # 2.5 steps: a round-half-to-even would give 40
    assert offset_to_value(100, Bounds(0, 100), GEO, step=20) == 60.0
    assert offset_to_value(100, Bounds(-100, 0), GEO, step=20) == -40.0


def test_non_positive_step_is_continuous():
    b = Bounds(0, 100)
    assert offset_to_value(93, b, GEO, step=0) == pytest.approx(46.5)
    assert offset_to_value(93, b, GEO, step=-10) == pytest.approx(46.5)


def test_partial_final_step():
    b = Bounds(0, 100)
    # 100 / 30 leaves a partial last step; the track end snaps to 90
    assert offset_to_value(200, b, GEO, step=30) == 90.0
    # far enough past the end rounds up and clamps to the bound
    assert offset_to_value(240, b, GEO, step=30) == 100.0


def test_offset_to_value_degenerate_geometry():
    b = Bounds(5, 10)
    assert offset_to_value(50, b, Geometry(20, 20)) == 5
    assert offset_to_value(50, b, Geometry(0, 20), step=1) == 5


def test_pointer_from_location():
    assert pointer_from_location(110, GEO) == 100
    assert offset_to_value(pointer_from_location(110, GEO), Bounds(0, 1), GEO) == 0.5


def test_step_count():
    assert step_count(Bounds(0, 100), 10) == 10
    assert step_count(Bounds(0, 100), 30) == 3
    assert step_count(Bounds(0, 1), 0.1) == 10
    assert step_count(Bounds(0, 100), None) == 0
    assert step_count(Bounds(0, 100), 0) == 0


def test_step_marker_offsets():
    markers = step_marker_offsets(Bounds(0, 100), GEO, 25)
    np.testing.assert_allclose(markers, [10, 60, 110, 160, 210])


def test_step_marker_offsets_partial_step():
    markers = step_marker_offsets(Bounds(0, 100), GEO, 30)
    np.testing.assert_allclose(markers, [10, 70, 130, 190])


def test_step_marker_offsets_continuous():
    assert step_marker_offsets(Bounds(0, 100), GEO, None).size == 0
    assert step_marker_offsets(Bounds(0, 100), GEO, -1).size == 0
