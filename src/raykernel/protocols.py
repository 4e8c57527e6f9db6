from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from raykernel.ray import CastResult, Ray


class Ordered(Protocol):
    """Totally ordered value with closed addition and subtraction."""

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...


class OrderedRing(Ordered, Protocol):
    """Ordered value with multiplication and negation (ints, exact rationals)."""

    def __mul__(self, other: Any) -> Any:
        ...

    def __neg__(self) -> Any:
        ...

    def __abs__(self) -> Any:
        ...


class OrderedField(OrderedRing, Protocol):
    """Ordered ring that also divides."""

    def __truediv__(self, other: Any) -> Any:
        ...


class RealField(OrderedField, Protocol):
    """Ordered field whose values can be square-rooted (floats, Decimal, NotNan)."""

    def __float__(self) -> float:
        ...


class Drawable2D(Protocol):
    """2D debug drawable contract."""

    def polyline(self, num: int = 600) -> Any:
        """Return a (N,2) polyline suitable for plotting."""
        ...


class Castable(Protocol):
    """Shape that can be queried with a ray."""

    def cast(self, ray: Ray) -> CastResult:
        """Cast ``ray`` against the shape."""
        ...
