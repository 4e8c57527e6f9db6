from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from raykernel.axis import Axis
from raykernel.exceptions import ConversionOutOfRangeError
from raykernel.numeric import NotNan, checked_cast, primitive_cast, sqrt, widen
from raykernel.protocols import OrderedRing

N = TypeVar("N", bound=OrderedRing)


@dataclass(slots=True)
class Vec2(Generic[N]):
    """A 2D vector.

    Binary operators return new vectors; the in-place operators mutate the
    receiver.
    """

    x: N
    y: N

    @classmethod
    def zero(cls) -> Vec2[Any]:
        return cls(0, 0)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __add__(self, other: Vec2[N]) -> Vec2[N]:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2[N]) -> Vec2[N]:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Any) -> Vec2[N]:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Vec2[N]:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2[N]:
        return Vec2(-self.x, -self.y)

    def __iadd__(self, other: Vec2[N]) -> Vec2[N]:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2[N]) -> Vec2[N]:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: Any) -> Vec2[N]:
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: Any) -> Vec2[N]:
        self.x /= scalar
        self.y /= scalar
        return self

    def dot(self, other: Vec2[N]) -> N:
        return self.x * other.x + self.y * other.y

    def magnitude2(self) -> N:
        """Squared length; avoids the square root."""
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> Any:
        return sqrt(self.magnitude2())

    def normalize_to(self, mag: Any) -> Vec2[Any]:
        """Scale to length ``mag``. The vector must not be zero-length."""
        return self * (mag / self.magnitude())

    def get_axis(self, axis: Axis) -> N:
        return self.x if axis is Axis.X else self.y

    def set_axis(self, axis: Axis, value: N) -> None:
        if axis is Axis.X:
            self.x = value
        else:
            self.y = value

    def inner_into(self, target: Any) -> Vec2[Any]:
        """Lossless per-component conversion to the numpy dtype ``target``."""
        return Vec2(widen(self.x, target, "x"), widen(self.y, target, "y"))

    def inner_try_into(self, target: Any) -> Vec2[Any]:
        """Checked per-component conversion.

        Raises ConversionOutOfRangeError for the first component (``x`` before
        ``y``) that ``target`` cannot represent.
        """
        x = checked_cast(self.x, target, "x")
        y = checked_cast(self.y, target, "y")
        return Vec2(x, y)

    def inner_as(self, target: Any) -> Vec2[Any]:
        return Vec2(primitive_cast(self.x, target), primitive_cast(self.y, target))

    def not_nan(self) -> Vec2[NotNan]:
        return Vec2(NotNan(self.x), NotNan(self.y))

    def as_float(self) -> Vec2[float]:
        """Raw floats of a ``Vec2[NotNan]``, read field by field."""
        return Vec2(self.x.value, self.y.value)


def vec2(x: Any, y: Any) -> Vec2[Any]:
    return Vec2(x, y)


def vec2same(a: Any) -> Vec2[Any]:
    """Vector with both components equal to ``a``."""
    return Vec2(a, a)


def prefix_conversion_error(exc: ConversionOutOfRangeError, prefix: str) -> ConversionOutOfRangeError:
    return ConversionOutOfRangeError(f"{prefix}.{exc.component}", exc.value, exc.target)
