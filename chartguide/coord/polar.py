from __future__ import annotations

import math
from typing import Sequence

from ..geometry import Offset, Rect, as_offset, polar_to_offset
from ..validate import GuideContractError, ensure_range
from .base import CoordConv

TWO_PI = 2 * math.pi


class PolarCoordConv(CoordConv):
    """Polar coordinate centered in the region.

    Dim 0 is the angular dimension and dim 1 the radial one, unless
    ``transposed``. Angles are radians measured clockwise on screen from the
    positive x axis; the default sweep starts at twelve o'clock and runs a full
    turn. Radii are fractions of half the shorter region side.
    """

    def __init__(
        self,
        region: Rect,
        *,
        start_angle: float = -math.pi / 2,
        end_angle: float = 3 * math.pi / 2,
        start_radius_factor: float = 0.0,
        end_radius_factor: float = 1.0,
        angle_range: Sequence[float] = (0.0, 1.0),
        radius_range: Sequence[float] = (0.0, 1.0),
        transposed: bool = False,
    ) -> None:
        super().__init__(region, transposed)
        if start_angle == end_angle:
            raise GuideContractError("start_angle and end_angle must differ")
        if start_radius_factor == end_radius_factor:
            raise GuideContractError("start_radius_factor and end_radius_factor must differ")
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)
        self.angle_range = ensure_range(angle_range, "angle_range")
        self.radius_range = ensure_range(radius_range, "radius_range")
        self.center = region.center
        radius = min(region.width, region.height) / 2
        self.start_radius = radius * float(start_radius_factor)
        self.end_radius = radius * float(end_radius_factor)

    def convert_angle(self, value: float) -> float:
        a0, a1 = self.angle_range
        t = a0 + (a1 - a0) * value
        return self.start_angle + (self.end_angle - self.start_angle) * t

    def convert_radius(self, value: float) -> float:
        r0, r1 = self.radius_range
        t = r0 + (r1 - r0) * value
        return self.start_radius + (self.end_radius - self.start_radius) * t

    def invert_angle(self, angle: float) -> float:
        a0, a1 = self.angle_range
        t = (angle - self.start_angle) / (self.end_angle - self.start_angle)
        return (t - a0) / (a1 - a0)

    def invert_radius(self, radius: float) -> float:
        r0, r1 = self.radius_range
        t = (radius - self.start_radius) / (self.end_radius - self.start_radius)
        return (t - r0) / (r1 - r0)

    def polar_to_offset(self, angle: float, radius: float) -> Offset:
        return polar_to_offset(self.center, angle, radius)

    def convert(self, data: Offset) -> Offset:
        angle_value, radius_value = as_offset(data)
        if self.transposed:
            angle_value, radius_value = radius_value, angle_value
        return self.polar_to_offset(
            self.convert_angle(angle_value),
            self.convert_radius(radius_value),
        )

    def invert(self, canvas: Offset) -> Offset:
        x, y = as_offset(canvas)
        dx = x - self.center[0]
        dy = y - self.center[1]
        radius = math.hypot(dx, dy)
        angle = math.atan2(dy, dx)
        # Bring the angle into the turn that starts at the sweep's low end.
        low = min(self.start_angle, self.end_angle)
        while angle < low:
            angle += TWO_PI
        while angle >= low + TWO_PI:
            angle -= TWO_PI
        angle_value = self.invert_angle(angle)
        radius_value = self.invert_radius(radius)
        if self.transposed:
            return radius_value, angle_value
        return angle_value, radius_value
