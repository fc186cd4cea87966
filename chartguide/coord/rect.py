from __future__ import annotations

from typing import Sequence

from ..geometry import Offset, Rect, as_offset, flip
from ..validate import ensure_range
from .base import CoordConv


class RectCoordConv(CoordConv):
    """Cartesian coordinate: dim 0 runs left to right, dim 1 bottom to top.

    ``horizontal_range`` and ``vertical_range`` give the fraction of the region
    each axis spans, so ``(0.1, 0.9)`` leaves a 10% margin on both sides.
    """

    def __init__(
        self,
        region: Rect,
        *,
        horizontal_range: Sequence[float] = (0.0, 1.0),
        vertical_range: Sequence[float] = (0.0, 1.0),
        transposed: bool = False,
    ) -> None:
        super().__init__(region, transposed)
        self.horizontal_range = ensure_range(horizontal_range, "horizontal_range")
        self.vertical_range = ensure_range(vertical_range, "vertical_range")

    def convert(self, data: Offset) -> Offset:
        x, y = as_offset(data)
        if self.transposed:
            x, y = y, x
        h0, h1 = self.horizontal_range
        v0, v1 = self.vertical_range
        region = self.region
        return (
            region.left + region.width * (h0 + (h1 - h0) * x),
            region.bottom - region.height * (v0 + (v1 - v0) * y),
        )

    def invert(self, canvas: Offset) -> Offset:
        cx, cy = as_offset(canvas)
        h0, h1 = self.horizontal_range
        v0, v1 = self.vertical_range
        region = self.region
        x = ((cx - region.left) / region.width - h0) / (h1 - h0)
        y = ((region.bottom - cy) / region.height - v0) / (v1 - v0)
        return flip((x, y)) if self.transposed else (x, y)
