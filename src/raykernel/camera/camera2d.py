from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from raykernel.ray import Ray
from raykernel.vec2 import Vec2

if TYPE_CHECKING:
    from raykernel.backend import ArrayModule


@dataclass(frozen=True, slots=True)
class Camera2D:
    """Simple 2D pinhole camera that emits a fan of rays.

    Coordinate convention:
    - points are (x, y)
    - angles are measured in radians from +x-axis toward +y axis (atan2)

    Parameters
    ----------
    position:
        Camera location.
    forward:
        Direction vector where the camera is looking.
        Does not need to be normalized.
    fov_deg:
        Full field of view in degrees.
    num_rays:
        Number of rays across the FOV.

    """

    position: Vec2[float]
    forward: Vec2[float]
    fov_deg: float
    num_rays: int

    def _angles(self) -> np.ndarray:
        theta0 = float(np.arctan2(float(self.forward.y), float(self.forward.x)))
        half_fov = np.deg2rad(self.fov_deg) * 0.5
        offsets = np.linspace(-half_fov, half_fov, self.num_rays, dtype=np.float64)
        return theta0 + offsets

    def ray_directions(self) -> list[Vec2[float]]:
        """Unit direction vectors spanning the camera FOV."""
        return [Vec2(float(np.cos(a)), float(np.sin(a))) for a in self._angles()]

    def rays(self) -> list[Ray[float]]:
        origin = Vec2(float(self.position.x), float(self.position.y))
        return [Ray(Vec2(origin.x, origin.y), d) for d in self.ray_directions()]

    def ray_arrays(self, xp: ArrayModule) -> tuple[Any, Any]:
        """(points, dirs) arrays of shape (num_rays, 2) for batch casting."""
        angles = self._angles()
        dirs = np.stack([np.cos(angles), np.sin(angles)], axis=-1)
        points = np.broadcast_to(
            np.asarray([float(self.position.x), float(self.position.y)], dtype=np.float64),
            dirs.shape,
        )
        return xp.asarray(points, dtype=xp.float64), xp.asarray(dirs, dtype=xp.float64)

    @classmethod
    def from_look_at(
            cls,
            position: Vec2[float],
            look_at: Vec2[float],
            fov_deg: float,
            num_rays: int,
    ) -> Camera2D:
        """Define camera by a world-space target point."""
        return cls(position=position, forward=look_at - position, fov_deg=fov_deg, num_rays=num_rays)
