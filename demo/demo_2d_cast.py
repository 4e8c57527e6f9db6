from __future__ import annotations

from raykernel.backend import get_array_module
from raykernel.batch import cast_rays_to_circle, cast_rays_to_rect
from raykernel.camera import Camera2D
from raykernel.config import load_settings
from raykernel.geometry import Circle, Rect
from raykernel.log import configure_logging
from raykernel.ray import CastResult
from raykernel.vec2 import vec2
from raykernel.viz.plot2d import Plotter2D

# ============================================================
# TOP-LEVEL PARAMETERS (extract everything tweakable here)
# ============================================================

# Scene
RECT_BOUNDS = (1.0, 4.0, 5.0, 8.0)  # left, right, bottom, top
CIRCLE_CENTER = (-2.0, 6.0)
CIRCLE_RADIUS = 1.2

# Camera
CAMERA_POS = (0.0, 0.0)
CAMERA_LOOK_AT = (0.5, 6.0)
CAMERA_FOV_DEG = 90.0
CAMERA_NUM_RAYS = 41

# Plot
FAR_DISTANCE = 12.0
PLOT_XLIM = (-6, 6)
PLOT_YLIM = (-1, 11)


def nearest(results: list[CastResult]) -> CastResult:
    """Closest hit among the results; inside wins over any hit."""
    if any(r.is_inside for r in results):
        return CastResult.inside()
    hits = [r for r in results if r.is_hit]
    if not hits:
        return CastResult.no_hit()
    return min(hits, key=lambda r: r.tval)


def main() -> None:
    settings = load_settings()
    log = configure_logging(settings.log_level)
    xp = get_array_module(settings.backend)

    rect = Rect.from_bounds(*RECT_BOUNDS)
    circle = Circle(center=vec2(*CIRCLE_CENTER), radius=CIRCLE_RADIUS)
    camera = Camera2D.from_look_at(
        position=vec2(*CAMERA_POS),
        look_at=vec2(*CAMERA_LOOK_AT),
        fov_deg=CAMERA_FOV_DEG,
        num_rays=CAMERA_NUM_RAYS,
    )

    points, dirs = camera.ray_arrays(xp)
    rect_hits = cast_rays_to_rect(xp, points, dirs, rect).to_results()
    circle_hits = cast_rays_to_circle(xp, points, dirs, circle.center, circle.radius).to_results()

    plotter = Plotter2D()
    plotter.draw_drawable(rect)
    plotter.draw_drawable(circle)
    plotter.draw_point(camera.position, label="camera")

    hit_count = 0
    for ray, from_rect, from_circle in zip(camera.rays(), rect_hits, circle_hits):
        result = nearest([from_rect, from_circle])
        hit_count += result.is_hit
        plotter.draw_cast(ray, result, far=FAR_DISTANCE)

    log.info("%d of %d rays hit a shape", hit_count, CAMERA_NUM_RAYS)
    plotter.show(PLOT_XLIM, PLOT_YLIM)


if __name__ == "__main__":
    main()
