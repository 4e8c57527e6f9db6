from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from raykernel.axis import Axis, component_of
from raykernel.exceptions import ConversionOutOfRangeError
from raykernel.math_utils import solve_quadratic
from raykernel.numeric import sign
from raykernel.protocols import OrderedField, OrderedRing, RealField
from raykernel.vec2 import Vec2, prefix_conversion_error

if TYPE_CHECKING:
    from raykernel.geometry import Rect
    from raykernel.interval import Ordering, Range

N = TypeVar("N", bound=OrderedRing)

CastKind = Literal["hit", "inside", "no_hit"]


@dataclass(frozen=True, slots=True)
class CastResult(Generic[N]):
    """Outcome of casting a ray against a shape.

    ``kind`` is ``"hit"`` (``tval`` holds the ray parameter of the first
    boundary crossing), ``"inside"`` (the ray starts within the shape) or
    ``"no_hit"``.
    """

    kind: CastKind
    tval: N | None = None

    @classmethod
    def hit(cls, tval: N) -> CastResult[N]:
        return cls("hit", tval)

    @classmethod
    def inside(cls) -> CastResult[Any]:
        return cls("inside")

    @classmethod
    def no_hit(cls) -> CastResult[Any]:
        return cls("no_hit")

    @property
    def is_hit(self) -> bool:
        return self.kind == "hit"

    @property
    def is_inside(self) -> bool:
        return self.kind == "inside"

    @property
    def is_no_hit(self) -> bool:
        return self.kind == "no_hit"


@dataclass(slots=True)
class Ray(Generic[N]):
    """Half-line ``point + dir * t`` for ``t >= 0``.

    ``dir`` is not required to be normalized; hit distances are expressed in
    units of ``dir``.
    """

    point: Vec2[N]
    dir: Vec2[N]

    def point_at_tval(self, tval: Any) -> Vec2[N]:
        return self.point + self.dir * tval

    def range_side(self, axis: Axis, range_: Range[N]) -> Ordering:
        """Where the ray origin lies relative to ``range_`` along ``axis``."""
        return range_.left_or_right_or_contain(component_of(self.point, axis))

    def inner_into(self, target: Any) -> Ray[Any]:
        return Ray(self.point.inner_into(target), self.dir.inner_into(target))

    def inner_try_into(self, target: Any) -> Ray[Any]:
        """Checked conversion of all four components.

        The error names the first component that failed, in the order
        ``point.x``, ``point.y``, ``dir.x``, ``dir.y``.
        """
        try:
            point = self.point.inner_try_into(target)
        except ConversionOutOfRangeError as exc:
            raise prefix_conversion_error(exc, "point") from exc
        try:
            dir_ = self.dir.inner_try_into(target)
        except ConversionOutOfRangeError as exc:
            raise prefix_conversion_error(exc, "dir") from exc
        return Ray(point, dir_)

    def inner_as(self, target: Any) -> Ray[Any]:
        return Ray(self.point.inner_as(target), self.dir.inner_as(target))

    def cast_to_circle(self, center: Vec2[RealField], radius: RealField) -> CastResult[RealField]:
        """Intersect with the circle ``|p - center| = radius``.

        Substituting the ray into the circle equation gives
        ``a*t^2 + b*t + c = 0`` with

            a = dir.x^2 + dir.y^2
            b = 2*dir.x*(point.x - center.x) + 2*dir.y*(point.y - center.y)
            c = (point.x - center.x)^2 + (point.y - center.y)^2 - radius^2

        Requires a numeric type with division and square roots.
        """
        offset = self.point - center
        a = self.dir.magnitude2()
        b = 2 * self.dir.dot(offset)
        c = offset.magnitude2() - radius * radius

        roots = solve_quadratic(a, b, c)
        if not roots:
            return CastResult.no_hit()
        if len(roots) == 1:
            (root,) = roots
            if root < 0:
                return CastResult.no_hit()
            return CastResult.hit(root)

        closer, further = roots
        if further < 0:
            # circle is entirely behind the ray
            return CastResult.no_hit()
        if closer < 0:
            return CastResult.inside()
        return CastResult.hit(closer)

    def cast_to_rect(self, rect: Rect[OrderedField]) -> CastResult[OrderedField]:
        """Intersect with an axis-aligned rectangle.

        Axis-parallel rays are resolved first as a 1D problem on the other
        axis. Otherwise each axis yields one candidate crossing of the face the
        ray approaches; the nearest candidate that lands on the rectangle wins.
        Requires exact comparison against zero on the direction components.
        """
        parallel = self._cast_to_rect_axis_parallel(rect)
        if parallel is not None:
            return parallel

        candidates = []
        for axis in (Axis.X, Axis.Y):
            tval = self._rect_face_tval(rect, axis)
            if tval is None:
                continue
            other = axis.other
            landing = component_of(self.point_at_tval(tval), other)
            if rect.get_range(other).contains(landing):
                candidates.append(tval)

        if candidates:
            return CastResult.hit(min(candidates))
        if rect.contains_point(self.point):
            return CastResult.inside()
        return CastResult.no_hit()

    def _cast_to_rect_axis_parallel(self, rect: Rect[OrderedField]) -> CastResult[OrderedField] | None:
        for axis in (Axis.X, Axis.Y):
            if component_of(self.dir, axis) != 0:
                continue
            if not rect.get_range(axis).contains(component_of(self.point, axis)):
                return CastResult.no_hit()

            other = axis.other
            diff = rect.get_range(other).difference_to_point(component_of(self.point, other))
            if diff is None:
                return CastResult.inside()
            # closing the gap means moving against the offset
            if sign(diff) == -sign(component_of(self.dir, other)):
                return CastResult.hit(abs(diff))
            return CastResult.no_hit()
        return None

    def _rect_face_tval(self, rect: Rect[OrderedField], axis: Axis) -> OrderedField | None:
        d = component_of(self.dir, axis)
        range_ = rect.get_range(axis)
        target = range_.right if d < 0 else range_.left
        tval = (target - component_of(self.point, axis)) / d
        if tval > 0:
            return tval
        return None
