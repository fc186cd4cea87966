from __future__ import annotations

from abc import ABC, abstractmethod

from ..geometry import Offset, Rect
from ..validate import GuideContractError


class CoordConv(ABC):
    """Bidirectional mapping between the chart's data space and canvas space.

    Data space is the normalized abstract space of the chart, where each
    dimension runs over ``[0, 1]``. Canvas space is in pixels with y growing
    downward. ``transposed`` swaps which data dimension drives which canvas
    axis.
    """

    def __init__(self, region: Rect, transposed: bool = False) -> None:
        if not isinstance(region, Rect):
            raise GuideContractError(f"region must be a Rect, got {type(region).__name__}")
        if region.is_empty:
            raise GuideContractError(f"region must have a positive area, got {region}")
        self.region = region
        self.transposed = bool(transposed)

    @abstractmethod
    def convert(self, data: Offset) -> Offset:
        """Map a data-space point onto the canvas."""

    @abstractmethod
    def invert(self, canvas: Offset) -> Offset:
        """Map a canvas point back into data space."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(region={self.region}, transposed={self.transposed})"
