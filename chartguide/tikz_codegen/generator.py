"""TikZ painting backend for composed scenes."""

from __future__ import annotations

import math
from typing import List, Optional

from ..geometry import Rect
from ..graffiti import ArcPath, FigurePath, Graffiti, LinePath, Paint, PaintingStyle
from .utils import format_float, format_point, latex_escape

DEFAULT_CM_PER_PX = 0.02

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage{tikz}
\begin{document}
%s%s
\end{document}
"""


def _color_spec(paint: Paint) -> str:
    red, green, blue, _ = paint.color
    return "{{rgb,1:red,{r};green,{g};blue,{b}}}".format(
        r=format_float(red), g=format_float(green), b=format_float(blue)
    )


def _paint_options(paint: Paint) -> str:
    filled = paint.style == PaintingStyle.FILL
    key = "fill" if filled else "draw"
    tokens = [f"{key}={_color_spec(paint)}"]
    alpha = paint.color[3]
    if alpha < 1.0:
        tokens.append(f"{key} opacity={format_float(alpha)}")
    if not filled:
        tokens.append(f"line width={format_float(paint.stroke_width)}pt")
        if paint.dash:
            pattern = " ".join(
                f"{'on' if idx % 2 == 0 else 'off'} {format_float(length)}pt"
                for idx, length in enumerate(paint.dash)
            )
            tokens.append(f"dash pattern={pattern}")
    return ", ".join(tokens)


class TikzCanvas:
    """Canvas adapter collecting TikZ commands.

    Coordinates are written in canvas pixels; the picture's unit vectors flip
    the y axis so the drawing keeps the canvas orientation.
    """

    def __init__(self) -> None:
        self.lines: List[str] = []
        self._depth = 1

    def _emit(self, line: str) -> None:
        self.lines.append("  " * self._depth + line)

    def save(self) -> None:
        self._emit("\\begin{scope}")
        self._depth += 1

    def restore(self) -> None:
        self._depth -= 1
        self._emit("\\end{scope}")

    def clip_rect(self, rect: Rect) -> None:
        self._emit(
            f"\\clip {format_point((rect.left, rect.top))} rectangle "
            f"{format_point((rect.right, rect.bottom))};"
        )

    def draw_path(self, path: FigurePath, paint: Paint) -> None:
        command = "\\fill" if paint.style == PaintingStyle.FILL else "\\draw"
        options = _paint_options(paint)
        if isinstance(path, LinePath):
            self._emit(f"{command}[{options}] {format_point(path.start)} -- {format_point(path.end)};")
        elif isinstance(path, ArcPath):
            self._emit(
                "{cmd}[{opts}] {start} arc[start angle={a}, end angle={b}, radius={r}];".format(
                    cmd=command,
                    opts=options,
                    start=format_point(path.start_point),
                    a=format_float(math.degrees(path.start_angle)),
                    b=format_float(math.degrees(path.end_angle)),
                    r=format_float(path.radius),
                )
            )
        else:
            raise TypeError(f"unsupported path type {type(path).__name__}")


def generate_tikz_code(graffiti: Graffiti, *, cm_per_px: float = DEFAULT_CM_PER_PX) -> str:
    """Paint ``graffiti`` into a ``tikzpicture`` environment."""

    if cm_per_px <= 0:
        raise ValueError("cm_per_px must be positive")
    canvas = TikzCanvas()
    graffiti.paint(canvas)
    scale = format_float(cm_per_px)
    lines = [f"\\begin{{tikzpicture}}[x={scale}cm, y=-{scale}cm]"]
    lines.extend(canvas.lines)
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def generate_tikz_document(
    graffiti: Graffiti,
    *,
    title: Optional[str] = None,
    cm_per_px: float = DEFAULT_CM_PER_PX,
) -> str:
    """Render a standalone document around :func:`generate_tikz_code`."""

    header = ""
    if title:
        header = "\\textbf{" + latex_escape(title.strip()) + "}\\par\n"
    return standalone_tpl % (header, generate_tikz_code(graffiti, cm_per_px=cm_per_px))
