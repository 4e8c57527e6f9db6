from __future__ import annotations

from fractions import Fraction

import pytest

from raykernel.geometry import Rect
from raykernel.interval import Range
from raykernel.ray import CastResult, Ray
from raykernel.vec2 import vec2

RECT = Rect(Range(0, 10), Range(0, 10))


@pytest.mark.parametrize(
    ("origin", "direction", "expected"),
    [
        # literal cases
        ((-5, 5), (1, 0), CastResult.hit(5)),
        ((5, 5), (1, 0), CastResult.inside()),
        ((-5, 15), (1, 0), CastResult.no_hit()),
        ((-5, -5), (1, 1), CastResult.hit(5)),
        # axis-parallel, both directions on both axes
        ((15, 5), (-1, 0), CastResult.hit(5)),
        ((-5, 5), (-1, 0), CastResult.no_hit()),
        ((5, -5), (0, 1), CastResult.hit(5)),
        ((5, -5), (0, -1), CastResult.no_hit()),
        ((5, 12), (0, -3), CastResult.hit(2)),
        ((15, 5), (0, 1), CastResult.no_hit()),
        # zero direction
        ((5, 5), (0, 0), CastResult.inside()),
        ((-5, 5), (0, 0), CastResult.no_hit()),
        # general case
        ((5, -3), (1, 2), CastResult.hit(1.5)),
        ((-2, -1), (1, 1), CastResult.hit(2)),
        ((12, 14), (-1, -2), CastResult.hit(2)),
        ((-5, 20), (1, 1), CastResult.no_hit()),
        ((15, 5), (1, 1), CastResult.no_hit()),
        ((5, 5), (1, 1), CastResult.inside()),
        ((5, 5), (-1, 1), CastResult.inside()),
        ((0, 5), (1, 1), CastResult.inside()),
    ],
)
def test_cast_to_rect(origin, direction, expected) -> None:
    assert Ray(vec2(*origin), vec2(*direction)).cast_to_rect(RECT) == expected


def test_axis_parallel_on_boundary_line_is_inside() -> None:
    assert Ray(vec2(0, 5), vec2(0, 1)).cast_to_rect(RECT).is_inside


def test_grazing_an_edge_counts_as_hit() -> None:
    # travels along the line y == 10, entering at the top-left corner
    assert Ray(vec2(-4, 10), vec2(2, 0)).cast_to_rect(RECT) == CastResult.hit(4)


def test_float_rect() -> None:
    rect = Rect.from_bounds(1.0, 4.0, 5.0, 8.0)
    result = Ray(vec2(0.0, 0.0), vec2(0.5, 1.0)).cast_to_rect(rect)
    assert result.is_hit
    assert result.tval == pytest.approx(5.0)


def test_exact_rationals_stay_exact() -> None:
    rect = Rect.from_bounds(Fraction(0), Fraction(1), Fraction(0), Fraction(1))
    ray = Ray(vec2(Fraction(-1, 3), Fraction(1, 2)), vec2(Fraction(1), Fraction(1, 3)))
    result = ray.cast_to_rect(rect)
    assert result == CastResult.hit(Fraction(1, 3))
    assert isinstance(result.tval, Fraction)


def test_rect_cast_delegates_to_ray() -> None:
    ray = Ray(vec2(-5, 5), vec2(1, 0))
    assert RECT.cast(ray) == ray.cast_to_rect(RECT)
