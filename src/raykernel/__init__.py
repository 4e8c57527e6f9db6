from raykernel.axis import Axis, component_of
from raykernel.exceptions import ConversionOutOfRangeError, RayKernelError
from raykernel.geometry import Circle, Rect
from raykernel.interval import Ordering, Range
from raykernel.numeric import NotNan
from raykernel.ray import CastResult, Ray
from raykernel.vec2 import Vec2, vec2, vec2same

__all__ = [
    "Axis",
    "CastResult",
    "Circle",
    "ConversionOutOfRangeError",
    "NotNan",
    "Ordering",
    "Range",
    "Ray",
    "RayKernelError",
    "Rect",
    "Vec2",
    "component_of",
    "vec2",
    "vec2same",
]
