"""Immutable drawable primitives produced by guides."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from matplotlib.path import Path
from matplotlib.transforms import Affine2D

from ..geometry import Offset, as_offset, polar_to_offset
from .styles import Paint


@dataclass(frozen=True)
class LinePath:
    start: Offset
    end: Offset

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_offset(self.start))
        object.__setattr__(self, "end", as_offset(self.end))

    def to_path(self) -> Path:
        return Path(np.array([self.start, self.end], dtype=float), [Path.MOVETO, Path.LINETO])


@dataclass(frozen=True)
class ArcPath:
    """Circular arc around ``center``; angles in radians, clockwise on screen."""

    center: Offset
    radius: float
    start_angle: float
    sweep_angle: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", as_offset(self.center))
        for name in ("radius", "start_angle", "sweep_angle"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def start_point(self) -> Offset:
        return polar_to_offset(self.center, self.start_angle, self.radius)

    @property
    def end_point(self) -> Offset:
        return polar_to_offset(self.center, self.end_angle, self.radius)

    def to_path(self) -> Path:
        theta1 = math.degrees(self.start_angle)
        theta2 = math.degrees(self.end_angle)
        if theta2 < theta1:
            theta1, theta2 = theta2, theta1
        unit = Path.arc(theta1, theta2)
        return Affine2D().scale(self.radius).translate(*self.center).transform_path(unit)


FigurePath = Union[LinePath, ArcPath]


@dataclass(frozen=True)
class PathFigure:
    path: FigurePath
    paint: Paint


Figure = PathFigure
