from __future__ import annotations

import logging
from typing import Any, Literal

import numpy as np

try:
    import cupy as cp  # type: ignore
except ImportError:  # pragma: no cover
    cp = None

_LOG = logging.getLogger("raykernel.backend")

ArrayModule = Any
BackendName = Literal["auto", "numpy", "cupy"]
BACKEND_NAMES: tuple[str, ...] = ("auto", "numpy", "cupy")


def get_array_module(backend: BackendName = "auto") -> ArrayModule:
    """Return numpy or cupy depending on availability and request."""
    if backend not in BACKEND_NAMES:
        msg = f"Unknown backend {backend!r}; expected one of {BACKEND_NAMES}"
        raise ValueError(msg)
    if backend == "numpy":
        return np
    if cp is not None:
        return cp
    if backend == "cupy":
        _LOG.warning("cupy backend requested but cupy is not importable; using numpy")
    return np


def is_cupy(xp: ArrayModule) -> bool:
    """Return True if xp is the CuPy module."""
    return cp is not None and xp is cp


def to_numpy(xp: ArrayModule, a: Any) -> np.ndarray:
    """Convert xp array to NumPy for matplotlib."""
    if is_cupy(xp):
        return cp.asnumpy(a)  # type: ignore[union-attr]
    return np.asarray(a)
