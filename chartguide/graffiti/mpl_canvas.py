"""matplotlib painting backend for scenes."""

from __future__ import annotations

from pathlib import Path as FsPath
from typing import List, Optional, Union

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure as MplFigure
from matplotlib.patches import PathPatch, Rectangle

from ..geometry import Rect
from .figure import FigurePath
from .scene import Graffiti
from .styles import Paint, PaintingStyle


class MatplotlibCanvas:
    """Canvas adapter drawing onto an ``Axes`` whose data units are canvas pixels.

    The axes are expected to have an inverted y axis so that canvas y grows
    downward, as :func:`save_png` sets up.
    """

    def __init__(self, ax: Axes) -> None:
        self.ax = ax
        self.patches: List[PathPatch] = []
        self._clip: Optional[Rect] = None
        self._stack: List[Optional[Rect]] = []

    def save(self) -> None:
        self._stack.append(self._clip)

    def restore(self) -> None:
        self._clip = self._stack.pop()

    def clip_rect(self, rect: Rect) -> None:
        self._clip = rect

    def draw_path(self, path: FigurePath, paint: Paint) -> None:
        filled = paint.style == PaintingStyle.FILL
        patch = PathPatch(
            path.to_path(),
            fill=filled,
            facecolor=paint.color if filled else "none",
            edgecolor=paint.color,
            linewidth=paint.stroke_width,
            linestyle=(0, paint.dash) if paint.dash else "solid",
        )
        self.ax.add_patch(patch)
        if self._clip is not None:
            clip = self._clip
            patch.set_clip_path(
                Rectangle(
                    (clip.left, clip.top),
                    clip.width,
                    clip.height,
                    transform=self.ax.transData,
                )
            )
        self.patches.append(patch)


def save_png(
    graffiti: Graffiti,
    bounds: Rect,
    path: Union[str, FsPath],
    *,
    dpi: int = 100,
) -> int:
    """Rasterize ``graffiti`` over ``bounds`` into a PNG file; return scenes painted."""

    fig = MplFigure(figsize=(bounds.width / dpi, bounds.height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(bounds.left, bounds.right)
    ax.set_ylim(bounds.bottom, bounds.top)
    ax.set_axis_off()
    painted = graffiti.paint(MatplotlibCanvas(ax))
    fig.savefig(str(path), dpi=dpi)
    return painted
