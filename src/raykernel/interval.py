from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

from raykernel.protocols import Ordered

T = TypeVar("T", bound=Ordered)


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(slots=True)
class Range(Generic[T]):
    """Closed 1D interval ``[left, right]``.

    Stored as two endpoints rather than start and length, so subdividing a
    range never recomputes a floating-point length. ``left <= right`` is
    assumed and not checked; results for a degenerate range (``left > right``)
    are unspecified.
    """

    left: T
    right: T

    def contains(self, pos: T) -> bool:
        """True if ``pos`` is inside the range or on one of its endpoints."""
        return self.left <= pos <= self.right

    def contains_range(self, other: Range[T]) -> bool:
        return self.contains(other.left) and self.contains(other.right)

    def intersects(self, other: Range[T]) -> bool:
        return self.left <= other.right and other.left <= self.right

    def get_intersection(self, other: Range[T]) -> Range[T] | None:
        """Overlap of the two ranges, or None when they are disjoint."""
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        if left > right:
            return None
        return Range(left, right)

    def grow_to_fit(self, other: Range[T]) -> None:
        """Extend the endpoints outward so that ``other`` is covered."""
        if other.left < self.left:
            self.left = other.left
        if other.right > self.right:
            self.right = other.right

    def grow(self, radius: Any) -> Range[T]:
        self.right = self.right + radius
        self.left = self.left - radius
        return self

    def left_or_right_or_contain(self, pos: T) -> Ordering:
        """Classify ``pos`` as left of, right of, or touching the range."""
        if pos < self.left:
            return Ordering.LESS
        if pos > self.right:
            return Ordering.GREATER
        return Ordering.EQUAL

    def difference_to_point(self, pos: T) -> Any | None:
        """Signed offset of ``pos`` from the nearer endpoint.

        None when ``pos`` is inside the range. Negative when ``pos`` lies to
        the left, positive when it lies to the right.
        """
        if pos < self.left:
            return pos - self.left
        if pos > self.right:
            return pos - self.right
        return None

    def len(self) -> T:
        return self.right - self.left

    @property
    def length(self) -> T:
        return self.len()
