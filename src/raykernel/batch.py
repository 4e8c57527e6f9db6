from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from raykernel.backend import is_cupy, to_numpy
from raykernel.ray import CastResult

if TYPE_CHECKING:
    from raykernel.backend import ArrayModule
    from raykernel.geometry import Rect
    from raykernel.vec2 import Vec2

_LOG = logging.getLogger("raykernel.batch")

CAST_NO_HIT = 0
CAST_HIT = 1
CAST_INSIDE = 2


@dataclass(frozen=True, slots=True)
class BatchCastResult:
    """Per-ray outcome of a batch cast.

    kind: (N,) int8, one of CAST_NO_HIT / CAST_HIT / CAST_INSIDE
    tval: (N,) float64, NaN unless kind == CAST_HIT
    """

    xp: ArrayModule
    kind: Any
    tval: Any

    def to_results(self) -> list[CastResult[float]]:
        kinds = to_numpy(self.xp, self.kind)
        tvals = to_numpy(self.xp, self.tval)
        out: list[CastResult[float]] = []
        for k, t in zip(kinds, tvals):
            if k == CAST_HIT:
                out.append(CastResult.hit(float(t)))
            elif k == CAST_INSIDE:
                out.append(CastResult.inside())
            else:
                out.append(CastResult.no_hit())
        return out


def _as_rays(xp: ArrayModule, points: Any, dirs: Any) -> tuple[Any, Any]:
    p = xp.asarray(points, dtype=xp.float64)
    d = xp.asarray(dirs, dtype=xp.float64)
    if p.ndim != 2 or p.shape[-1] != 2:
        msg = f"points must have shape (N, 2), got {tuple(p.shape)}"
        raise ValueError(msg)
    if d.shape != p.shape:
        msg = f"dirs must match points shape {tuple(p.shape)}, got {tuple(d.shape)}"
        raise ValueError(msg)
    return p, d


def _finish(xp: ArrayModule, kind: Any, t: Any) -> BatchCastResult:
    kind = kind.astype(xp.int8)
    tval = xp.where(kind == CAST_HIT, t, xp.nan)
    return BatchCastResult(xp=xp, kind=kind, tval=tval)


def cast_rays_to_circle(
        xp: ArrayModule,
        points: Any,
        dirs: Any,
        center: Vec2[Any],
        radius: float,
) -> BatchCastResult:
    """Vectorized Ray.cast_to_circle over (N, 2) origin and direction arrays."""
    p, d = _as_rays(xp, points, dirs)
    _LOG.debug("casting %d rays to circle (cupy=%s)", p.shape[0], is_cupy(xp))

    ox = p[:, 0] - float(center.x)
    oy = p[:, 1] - float(center.y)
    dx, dy = d[:, 0], d[:, 1]
    r = float(radius)

    a = dx * dx + dy * dy
    b = 2.0 * (dx * ox + dy * oy)
    c = ox * ox + oy * oy - r * r
    disc = b * b - 4.0 * a * c

    s = xp.sqrt(xp.maximum(disc, 0.0))
    q = xp.where(b >= 0.0, -(b + s) / 2.0, -(b - s) / 2.0)
    safe_a = xp.where(a == 0.0, 1.0, a)
    safe_q = xp.where(q == 0.0, 1.0, q)
    tangent = -b / (2.0 * safe_a)
    r0 = xp.where(disc == 0.0, tangent, q / safe_a)
    r1 = xp.where(disc == 0.0, tangent, c / safe_q)
    closer = xp.minimum(r0, r1)
    further = xp.maximum(r0, r1)

    # a == 0 implies b == 0: a zero direction has no roots
    miss = (disc < 0.0) | (a == 0.0) | (further < 0.0)
    kind = xp.where(miss, CAST_NO_HIT, xp.where(closer < 0.0, CAST_INSIDE, CAST_HIT))
    return _finish(xp, kind, closer)


def _parallel_kind(
        xp: ArrayModule,
        origin_in_axis: Any,
        other_pos: Any,
        other_dir: Any,
        lo: float,
        hi: float,
) -> tuple[Any, Any]:
    diff = xp.where(other_pos < lo, other_pos - lo, xp.where(other_pos > hi, other_pos - hi, 0.0))
    inside = diff == 0.0
    approaching = xp.sign(diff) == -xp.sign(other_dir)
    kind = xp.where(
        ~origin_in_axis,
        CAST_NO_HIT,
        xp.where(inside, CAST_INSIDE, xp.where(approaching, CAST_HIT, CAST_NO_HIT)),
    )
    return kind, xp.abs(diff)


def _face_tval(
        xp: ArrayModule,
        pos: Any,
        direction: Any,
        lo: float,
        hi: float,
        other_pos: Any,
        other_dir: Any,
        other_lo: float,
        other_hi: float,
) -> tuple[Any, Any]:
    safe_dir = xp.where(direction == 0.0, 1.0, direction)
    target = xp.where(direction < 0.0, hi, lo)
    t = (target - pos) / safe_dir
    landing = other_pos + other_dir * t
    valid = (direction != 0.0) & (t > 0.0) & (other_lo <= landing) & (landing <= other_hi)
    return t, valid


def cast_rays_to_rect(xp: ArrayModule, points: Any, dirs: Any, rect: Rect[Any]) -> BatchCastResult:
    """Vectorized Ray.cast_to_rect over (N, 2) origin and direction arrays."""
    p, d = _as_rays(xp, points, dirs)
    _LOG.debug("casting %d rays to rect (cupy=%s)", p.shape[0], is_cupy(xp))

    px, py = p[:, 0], p[:, 1]
    dx, dy = d[:, 0], d[:, 1]
    xl, xr = float(rect.x.left), float(rect.x.right)
    yl, yr = float(rect.y.left), float(rect.y.right)

    in_x = (xl <= px) & (px <= xr)
    in_y = (yl <= py) & (py <= yr)

    par_x_kind, par_x_t = _parallel_kind(xp, in_x, py, dy, yl, yr)
    par_y_kind, par_y_t = _parallel_kind(xp, in_y, px, dx, xl, xr)

    tx, valid_x = _face_tval(xp, px, dx, xl, xr, py, dy, yl, yr)
    ty, valid_y = _face_tval(xp, py, dy, yl, yr, px, dx, xl, xr)
    gen_t = xp.where(valid_x & valid_y, xp.minimum(tx, ty), xp.where(valid_x, tx, ty))
    gen_kind = xp.where(
        valid_x | valid_y,
        CAST_HIT,
        xp.where(in_x & in_y, CAST_INSIDE, CAST_NO_HIT),
    )

    # x-parallel rays take precedence over y-parallel ones, as in the scalar cast
    par_x = dx == 0.0
    par_y = dy == 0.0
    kind = xp.where(par_x, par_x_kind, xp.where(par_y, par_y_kind, gen_kind))
    t = xp.where(par_x, par_x_t, xp.where(par_y, par_y_t, gen_t))
    return _finish(xp, kind, t)
