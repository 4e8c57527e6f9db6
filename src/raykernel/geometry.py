from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np

from raykernel.axis import Axis
from raykernel.interval import Range
from raykernel.protocols import Castable, Drawable2D, OrderedRing
from raykernel.vec2 import Vec2

if TYPE_CHECKING:
    from raykernel.ray import CastResult, Ray

N = TypeVar("N", bound=OrderedRing)


@dataclass(frozen=True, slots=True, eq=True, unsafe_hash=False)
class Rect(Castable, Drawable2D, Generic[N]):
    """Axis-aligned rectangle made of one closed range per axis.

    Fields cannot be reassigned, but the ranges themselves are mutable, so
    rectangles compare by value and are not hashable.
    """

    x: Range[N]
    y: Range[N]

    @classmethod
    def from_bounds(cls, left: N, right: N, bottom: N, top: N) -> Rect[N]:
        return cls(Range(left, right), Range(bottom, top))

    def get_range(self, axis: Axis) -> Range[N]:
        return self.x if axis is Axis.X else self.y

    def contains_point(self, p: Vec2[N]) -> bool:
        return self.x.contains(p.x) and self.y.contains(p.y)

    def cast(self, ray: Ray[N]) -> CastResult[Any]:
        return ray.cast_to_rect(self)

    def polyline(self, num: int = 600) -> Any:
        # corners only; num is part of the drawable contract
        x0, x1 = float(self.x.left), float(self.x.right)
        y0, y1 = float(self.y.left), float(self.y.right)
        return np.asarray(
            [[x0, y0], [x1, y0], [x1, y1], [x0, y1], [x0, y0]],
            dtype=np.float64,
        )


@dataclass(frozen=True, slots=True, eq=True, unsafe_hash=False)
class Circle(Castable, Drawable2D, Generic[N]):
    """Circle given by center and radius. Not hashable: ``center`` is mutable."""

    center: Vec2[N]
    radius: N

    def contains_point(self, p: Vec2[N]) -> bool:
        return (p - self.center).magnitude2() <= self.radius * self.radius

    def cast(self, ray: Ray[N]) -> CastResult[Any]:
        return ray.cast_to_circle(self.center, self.radius)

    def polyline(self, num: int = 600) -> Any:
        theta = np.linspace(0.0, 2.0 * np.pi, num, dtype=np.float64)
        center = np.asarray([float(self.center.x), float(self.center.y)], dtype=np.float64)
        return center[None, :] + np.stack(
            [np.cos(theta), np.sin(theta)], axis=-1,
        ) * float(self.radius)
