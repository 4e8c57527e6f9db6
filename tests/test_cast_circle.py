from __future__ import annotations

import pytest

from raykernel.numeric import NotNan
from raykernel.ray import CastResult, Ray
from raykernel.vec2 import vec2

CENTER = vec2(0.0, 0.0)


@pytest.mark.parametrize("direction", [vec2(1.0, 0.0), vec2(0.3, -2.0), vec2(-1.0, -1.0)])
def test_origin_at_center_is_inside(direction) -> None:
    assert Ray(vec2(0.0, 0.0), direction).cast_to_circle(CENTER, 1.0) == CastResult.inside()


def test_origin_inside_off_center_is_inside() -> None:
    result = Ray(vec2(0.5, 0.2), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0)
    assert result.is_inside


def test_pointing_away_is_no_hit() -> None:
    assert Ray(vec2(5.0, 0.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0).is_no_hit
    assert Ray(vec2(-3.0, 4.0), vec2(-1.0, 2.0)).cast_to_circle(CENTER, 1.0).is_no_hit


def test_tangent_reports_single_root() -> None:
    assert Ray(vec2(-5.0, 1.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0) == CastResult.hit(5.0)


def test_tangent_behind_is_no_hit() -> None:
    assert Ray(vec2(5.0, 1.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0).is_no_hit


def test_hit_reports_nearer_crossing() -> None:
    assert Ray(vec2(-5.0, 0.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0) == CastResult.hit(4.0)


def test_hit_distance_is_in_direction_units() -> None:
    assert Ray(vec2(-5.0, 0.0), vec2(2.0, 0.0)).cast_to_circle(CENTER, 1.0) == CastResult.hit(2.0)


def test_off_center_circle() -> None:
    result = Ray(vec2(0.0, 0.0), vec2(0.0, 1.0)).cast_to_circle(vec2(0.0, 10.0), 2.0)
    assert result.is_hit
    assert result.tval == pytest.approx(8.0)


def test_miss() -> None:
    assert Ray(vec2(-5.0, 2.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0).is_no_hit


def test_zero_direction_has_no_roots() -> None:
    assert Ray(vec2(-5.0, 0.0), vec2(0.0, 0.0)).cast_to_circle(CENTER, 1.0).is_no_hit


def test_integer_inputs() -> None:
    result = Ray(vec2(-5, 0), vec2(1, 0)).cast_to_circle(vec2(0, 0), 1)
    assert result == CastResult.hit(4.0)


def test_not_nan_inputs() -> None:
    ray = Ray(vec2(-5.0, 0.0).not_nan(), vec2(1.0, 0.0).not_nan())
    result = ray.cast_to_circle(CENTER.not_nan(), NotNan(1.0))
    assert result.is_hit
    assert float(result.tval) == pytest.approx(4.0)


def test_origin_on_circle_leaving_is_inside() -> None:
    # roots are -2 and 0: the ray exits exactly at its origin
    assert Ray(vec2(1.0, 0.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0) == CastResult.inside()


def test_origin_on_circle_entering_hits_at_zero() -> None:
    # roots are 0 and 2
    assert Ray(vec2(-1.0, 0.0), vec2(1.0, 0.0)).cast_to_circle(CENTER, 1.0) == CastResult.hit(0.0)
