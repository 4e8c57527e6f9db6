from __future__ import annotations

import importlib

from raykernel.geometry import Circle, Rect
from raykernel.ray import Ray
from raykernel.vec2 import vec2
from raykernel.viz import plot2d
from raykernel.viz.plot2d import Plotter2D


def test_plotter_draws_all_cast_kinds(tmp_path) -> None:
    rect = Rect.from_bounds(0.0, 10.0, 0.0, 10.0)
    circle = Circle(vec2(15.0, 5.0), 2.0)
    rays = [
        Ray(vec2(-5.0, 5.0), vec2(1.0, 0.0)),
        Ray(vec2(5.0, 5.0), vec2(1.0, 0.0)),
        Ray(vec2(-5.0, 15.0), vec2(1.0, 0.0)),
    ]

    plotter = Plotter2D()
    try:
        plotter.draw_drawable(rect)
        plotter.draw_drawable(circle)
        plotter.draw_point(vec2(-5.0, 5.0), label="origin")
        for ray in rays:
            plotter.draw_cast(ray, rect.cast(ray), far=10.0)
        out = tmp_path / "casts.png"
        plotter.save(str(out), xlim=(-6.0, 18.0), ylim=(-1.0, 16.0), dpi=40)
    finally:
        plotter.close()

    assert out.exists()
    assert out.stat().st_size > 0


def test_import_ignores_array_backend_setting(monkeypatch) -> None:
    monkeypatch.setenv("RAYKERNEL_BACKEND", "opencl")
    reloaded = importlib.reload(plot2d)
    assert reloaded.Plotter2D is not None
