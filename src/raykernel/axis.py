from __future__ import annotations

from enum import Enum
from typing import Any


class Axis(Enum):
    """One of the two coordinate axes."""

    X = "x"
    Y = "y"

    @property
    def other(self) -> Axis:
        return Axis.Y if self is Axis.X else Axis.X

    @property
    def is_xaxis(self) -> bool:
        return self is Axis.X


def component_of(vector: Any, axis: Axis) -> Any:
    """Read the ``axis`` component of anything with ``x``/``y`` attributes."""
    return vector.x if axis is Axis.X else vector.y
