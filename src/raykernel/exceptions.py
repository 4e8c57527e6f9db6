from __future__ import annotations

from typing import Any


class RayKernelError(Exception):
    """Base class for raykernel errors."""


class ConversionOutOfRangeError(RayKernelError, ValueError):
    """A component could not be represented in the requested numeric type."""

    def __init__(self, component: str, value: Any, target: Any) -> None:
        self.component = component
        self.value = value
        self.target = target
        super().__init__(f"{component}={value!r} is out of range for {target}")
