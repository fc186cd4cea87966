from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from matplotlib import colors as mcolors

from ..validate import GuideContractError

RGBA = Tuple[float, float, float, float]


class PaintingStyle(str, Enum):
    FILL = "fill"
    STROKE = "stroke"


def _as_dash(value: Optional[Tuple[float, ...]]) -> Optional[Tuple[float, ...]]:
    if value is None:
        return None
    dash = tuple(float(v) for v in value)
    if not dash or len(dash) % 2 or any(v <= 0 for v in dash):
        raise GuideContractError(f"dash must be an even number of positive lengths, got {value!r}")
    return dash


@dataclass(frozen=True)
class Paint:
    """Resolved paint handed to a canvas; colors are RGBA floats in ``[0, 1]``."""

    color: RGBA
    stroke_width: float = 1.0
    dash: Optional[Tuple[float, ...]] = None
    style: PaintingStyle = PaintingStyle.STROKE


@dataclass(frozen=True)
class StrokeStyle:
    """Stroke description as written in a guide config.

    ``color`` is anything matplotlib understands as a color (``"#bfbfbf"``,
    ``"tab:red"``, an RGB(A) tuple).
    """

    color: object = "#bfbfbf"
    width: float = 1.0
    dash: Optional[Tuple[float, ...]] = None

    def __post_init__(self) -> None:
        if not mcolors.is_color_like(self.color):
            raise GuideContractError(f"unknown stroke color {self.color!r}")
        if isinstance(self.color, list):
            object.__setattr__(self, "color", tuple(self.color))
        width = float(self.width)
        if width < 0:
            raise GuideContractError(f"stroke width must be non-negative, got {width}")
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "dash", _as_dash(self.dash))

    @property
    def rgba(self) -> RGBA:
        return tuple(float(c) for c in mcolors.to_rgba(self.color))  # type: ignore[return-value]

    def to_paint(self, style: PaintingStyle = PaintingStyle.STROKE) -> Paint:
        return Paint(color=self.rgba, stroke_width=self.width, dash=self.dash, style=style)
