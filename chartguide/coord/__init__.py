"""Coordinate conversions between data space and canvas space."""

from .base import CoordConv
from .polar import PolarCoordConv
from .rect import RectCoordConv

__all__ = [
    "CoordConv",
    "PolarCoordConv",
    "RectCoordConv",
]
