"""Canvas geometry primitives shared by coordinates, figures and scenes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .validate import GuideContractError

Offset = Tuple[float, float]


def as_offset(value: Sequence[float]) -> Offset:
    arr = np.asarray(value, dtype=float)
    if arr.shape != (2,):
        raise GuideContractError(f"offset must be length-2, got {value!r}")
    return float(arr[0]), float(arr[1])


def flip(offset: Offset) -> Offset:
    return offset[1], offset[0]


def polar_to_offset(center: Offset, angle: float, radius: float) -> Offset:
    """Return the canvas point at ``angle`` (radians) and ``radius`` around ``center``."""

    return (
        center[0] + math.cos(angle) * radius,
        center[1] + math.sin(angle) * radius,
    )


def mean_offset(points: Iterable[Offset]) -> Optional[Offset]:
    """Arithmetic mean of ``points``, or ``None`` when there are none."""

    pts = np.asarray(list(points), dtype=float)
    if pts.shape[0] == 0:
        return None
    center = pts.mean(axis=0)
    return float(center[0]), float(center[1])


@dataclass(frozen=True)
class Rect:
    """Axis-aligned canvas rectangle; ``top`` is above ``bottom`` (y grows downward)."""

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Offset:
        return (self.left + self.right) * 0.5, (self.top + self.bottom) * 0.5

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0


__all__ = [
    "Offset",
    "Rect",
    "as_offset",
    "flip",
    "polar_to_offset",
    "mean_offset",
]
