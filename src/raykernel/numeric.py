from __future__ import annotations

import logging
import math
from functools import total_ordering
from typing import Any

import numpy as np

from raykernel.exceptions import ConversionOutOfRangeError

_LOG = logging.getLogger("raykernel.numeric")


@total_ordering
class NotNan:
    """Float that is guaranteed not to be NaN.

    Validity is checked once at construction; every arithmetic result is
    wrapped again, so a NaN produced by e.g. ``inf - inf`` raises instead of
    leaking into comparisons.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        if isinstance(value, NotNan):
            value = value.value
        value = float(value)
        if math.isnan(value):
            msg = "NotNan cannot hold NaN"
            raise ValueError(msg)
        self.value = value

    def __repr__(self) -> str:
        return f"NotNan({self.value!r})"

    def __float__(self) -> float:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        raw = _raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value == raw

    def __lt__(self, other: Any) -> bool:
        raw = _raw(other)
        if raw is NotImplemented:
            return NotImplemented
        return self.value < raw

    def __add__(self, other: Any) -> NotNan:
        return NotNan(self.value + _raw_or_fail(other))

    __radd__ = __add__

    def __sub__(self, other: Any) -> NotNan:
        return NotNan(self.value - _raw_or_fail(other))

    def __rsub__(self, other: Any) -> NotNan:
        return NotNan(_raw_or_fail(other) - self.value)

    def __mul__(self, other: Any) -> NotNan:
        return NotNan(self.value * _raw_or_fail(other))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> NotNan:
        return NotNan(self.value / _raw_or_fail(other))

    def __rtruediv__(self, other: Any) -> NotNan:
        return NotNan(_raw_or_fail(other) / self.value)

    def __neg__(self) -> NotNan:
        return NotNan(-self.value)

    def __abs__(self) -> NotNan:
        return NotNan(abs(self.value))

    def sqrt(self) -> NotNan:
        # negative input raises ValueError here rather than producing NaN
        return NotNan(math.sqrt(self.value))


def _raw(other: Any) -> Any:
    if isinstance(other, NotNan):
        return other.value
    if isinstance(other, (int, float, np.integer, np.floating)):
        return other
    return NotImplemented


def _raw_or_fail(other: Any) -> float:
    raw = _raw(other)
    if raw is NotImplemented:
        msg = f"unsupported operand for NotNan: {type(other).__name__}"
        raise TypeError(msg)
    return raw


def sign(value: Any) -> int:
    """Return -1, 0 or 1."""
    return (value > 0) - (value < 0)


def sqrt(value: Any) -> Any:
    """Square root through numpy; object values dispatch to their own ``sqrt``."""
    return np.sqrt(value)


def widen(value: Any, target: Any, component: str = "value") -> Any:
    """Lossless conversion of ``value`` to the numpy dtype ``target``.

    Raises TypeError when numpy's ``safe`` casting rule does not allow the
    conversion for the value's type, regardless of the concrete value.
    """
    if isinstance(value, NotNan):
        value = value.value
    dtype = np.dtype(target)
    source = np.asarray(value).dtype
    if not np.can_cast(source, dtype, casting="safe"):
        msg = f"{component}: cannot losslessly convert {source} to {dtype}"
        raise TypeError(msg)
    return dtype.type(value)


def checked_cast(value: Any, target: Any, component: str = "value") -> Any:
    """Convert ``value`` to ``target`` if it lies inside the target's range.

    Integer targets accept integral values inside the type's bounds. Float
    targets accept any finite value up to the type's largest finite
    magnitude and round it to the nearest representable float; infinities
    pass through unchanged.
    """
    if isinstance(value, NotNan):
        value = value.value
    dtype = np.dtype(target)

    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        if not _is_integral(value) or not int(info.min) <= int(value) <= int(info.max):
            _LOG.debug("checked cast failed: %s=%r -> %s", component, value, dtype)
            raise ConversionOutOfRangeError(component, value, dtype)
        return dtype.type(int(value))

    if dtype.kind == "f":
        try:
            as_float = float(value)
        except OverflowError as exc:
            raise ConversionOutOfRangeError(component, value, dtype) from exc
        finite_max = float(np.finfo(dtype).max)
        # float() may round a finite Decimal or Fraction up to inf without raising
        overflowed = math.isinf(as_float) and abs(value) != math.inf
        if overflowed or (math.isfinite(as_float) and abs(as_float) > finite_max):
            _LOG.debug("checked cast failed: %s=%r -> %s", component, value, dtype)
            raise ConversionOutOfRangeError(component, value, dtype)
        return dtype.type(as_float)

    msg = f"unsupported conversion target: {dtype}"
    raise TypeError(msg)


def primitive_cast(value: Any, target: Any) -> Any:
    """C-style ``as`` cast: truncates floats and wraps integers."""
    if isinstance(value, NotNan):
        value = value.value
    return np.asarray(value).astype(np.dtype(target))[()]


def _is_integral(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    as_float = float(value)
    return math.isfinite(as_float) and as_float.is_integer()
