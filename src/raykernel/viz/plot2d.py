from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import matplotlib as mpl

# IMPORTANT: set backend before importing pyplot
_BACKEND = os.environ.get("RAYKERNEL_MPL_BACKEND", "").strip()
if _BACKEND:
    mpl.use(_BACKEND, force=True)
else:
    # Try stable interactive backends first; fallback to Agg.
    for candidate in ("TkAgg", "QtAgg", "Agg"):
        # noinspection PyBroadException
        try:
            mpl.use(candidate, force=True)
            break
        except Exception:  # pragma: no cover  # noqa: BLE001, S112
            continue

import matplotlib.pyplot as plt  # noqa: E402

if TYPE_CHECKING:
    from raykernel.protocols import Drawable2D
    from raykernel.ray import CastResult, Ray
    from raykernel.vec2 import Vec2


class Plotter2D:
    """Matplotlib plotter for ray casts."""

    def __init__(self, title: str = "raykernel - 2D ray casting") -> None:
        """Initialize the plotter."""
        fig, ax = plt.subplots(figsize=(8, 8))
        self.fig = fig
        self.ax = ax
        ax.set_aspect("equal", "box")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(title)

    def draw_drawable(self, drawable: Drawable2D, linewidth: float = 2.0) -> None:
        pts = drawable.polyline()
        self.ax.plot(pts[:, 0], pts[:, 1], linewidth=linewidth)

    def draw_point(self, p: Vec2[Any], label: str | None = None) -> None:
        self.ax.scatter([float(p.x)], [float(p.y)], s=80)
        if label:
            self.ax.text(float(p.x) + 0.1, float(p.y) + 0.1, label)

    def draw_cast(self, ray: Ray[Any], result: CastResult[Any], far: float = 20.0) -> None:
        """Draw the ray up to its hit point, or up to ``far`` otherwise."""
        tval = float(result.tval) if result.is_hit else far
        start = ray.point
        end = ray.point_at_tval(tval)
        self.ax.plot([float(start.x), float(end.x)], [float(start.y), float(end.y)], linewidth=1)

        if result.is_hit:
            self.ax.scatter([float(end.x)], [float(end.y)], marker="x", s=70)
            return

        if result.is_inside:
            self.ax.scatter([float(start.x)], [float(start.y)], marker="o", s=40)
            return

        self.ax.scatter([float(end.x)], [float(end.y)], marker=".", s=25)

    def show(self, xlim: tuple[float, float], ylim: tuple[float, float]) -> None:
        self.ax.set_xlim(*xlim)
        self.ax.set_ylim(*ylim)
        plt.tight_layout()
        plt.show()

    def save(self, path: str, xlim: tuple[float, float], ylim: tuple[float, float], dpi: int = 150) -> None:
        """Save figure to disk (useful if running headless with Agg)."""
        self.ax.set_xlim(*xlim)
        self.ax.set_ylim(*ylim)
        self.fig.tight_layout()
        self.fig.savefig(path, dpi=dpi)

    def close(self) -> None:
        plt.close(self.fig)
