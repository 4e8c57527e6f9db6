"""Environment-driven settings for the batch backend, plotting and logging."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, cast

from raykernel.backend import BACKEND_NAMES, BackendName


@dataclass(frozen=True, slots=True)
class KernelSettings:
    backend: BackendName = "auto"
    mpl_backend: str = ""
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> KernelSettings:
    """Read RAYKERNEL_* variables; unset or blank values keep the defaults."""
    env = os.environ if environ is None else environ
    defaults = KernelSettings()

    backend = env.get("RAYKERNEL_BACKEND", "").strip().lower() or defaults.backend
    if backend not in BACKEND_NAMES:
        msg = f"RAYKERNEL_BACKEND must be one of {BACKEND_NAMES}, got {backend!r}"
        raise ValueError(msg)

    return KernelSettings(
        backend=cast(BackendName, backend),
        mpl_backend=env.get("RAYKERNEL_MPL_BACKEND", "").strip(),
        log_level=env.get("RAYKERNEL_LOG_LEVEL", "").strip().upper() or defaults.log_level,
    )
