from __future__ import annotations

import inspect

import numpy as np
import pytest

from raykernel.axis import Axis
from raykernel.exceptions import ConversionOutOfRangeError
from raykernel.interval import Ordering, Range
from raykernel.protocols import OrderedField, RealField
from raykernel.ray import CastResult, Ray
from raykernel.vec2 import Vec2, vec2


def test_point_at_tval() -> None:
    ray = Ray(vec2(1, 2), vec2(3, -1))
    assert ray.point_at_tval(0) == vec2(1, 2)
    assert ray.point_at_tval(2) == vec2(7, 0)
    assert ray.point_at_tval(-1) == vec2(-2, 3)


def test_range_side() -> None:
    ray = Ray(vec2(5, -3), vec2(1, 0))
    r = Range(0, 10)
    assert ray.range_side(Axis.X, r) is Ordering.EQUAL
    assert ray.range_side(Axis.Y, r) is Ordering.LESS
    assert Ray(vec2(12, 0), vec2(1, 0)).range_side(Axis.X, r) is Ordering.GREATER


def test_inner_into_and_back() -> None:
    ray = Ray(Vec2(np.int32(1), np.int32(-2)), Vec2(np.int32(3), np.int32(4)))
    widened = ray.inner_into(np.float64)
    assert widened.dir.y.dtype == np.float64
    back = widened.inner_try_into(np.int32)
    assert back.point == ray.point
    assert back.dir == ray.dir


@pytest.mark.parametrize(
    ("ray", "component"),
    [
        (Ray(vec2(300, 300), vec2(300, 300)), "point.x"),
        (Ray(vec2(1, 300), vec2(300, 300)), "point.y"),
        (Ray(vec2(1, 2), vec2(300, 300)), "dir.x"),
        (Ray(vec2(1, 2), vec2(3, 300)), "dir.y"),
    ],
)
def test_inner_try_into_stops_at_first_failure(ray: Ray, component: str) -> None:
    with pytest.raises(ConversionOutOfRangeError) as err:
        ray.inner_try_into(np.int8)
    assert err.value.component == component
    assert err.value.value == 300


def test_inner_as() -> None:
    ray = Ray(vec2(1.9, -1.9), vec2(0.5, 2.5)).inner_as(np.int64)
    assert ray.point == vec2(1, -1)
    assert ray.dir == vec2(0, 2)


def test_cast_result_variants() -> None:
    hit = CastResult.hit(2.5)
    assert hit.is_hit and hit.tval == 2.5
    assert CastResult.inside().is_inside
    assert CastResult.inside().tval is None
    assert CastResult.no_hit().is_no_hit
    assert CastResult.no_hit() == CastResult.no_hit()


def test_casts_declare_minimal_numeric_capability() -> None:
    circle = inspect.signature(Ray.cast_to_circle).parameters
    rect = inspect.signature(Ray.cast_to_rect).parameters
    assert circle["radius"].annotation == "RealField"
    assert circle["center"].annotation == "Vec2[RealField]"
    assert rect["rect"].annotation == "Rect[OrderedField]"
    assert OrderedField in RealField.__mro__
