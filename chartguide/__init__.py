from .validate import GuideContractError
from .geometry import Offset, Rect
from .coord import CoordConv, PolarCoordConv, RectCoordConv
from .interaction import ActiveSelection, Selector, resolve_selection, single_intersection
from .aes import Aes, AesGroups, find_represent_points, mean_represent_point
from .graffiti import (
    ArcPath,
    Canvas,
    Figure,
    Graffiti,
    Layer,
    LinePath,
    Paint,
    PaintingStyle,
    PathFigure,
    Scene,
    StrokeStyle,
)
from .guide import (
    CrosshairGuide,
    CrosshairParams,
    CrosshairRenderOp,
    default_crosshair_styles,
    render_crosshair,
)
from .chart import ChartState, CrosshairBinding, crosshair_params
from .tikz_codegen import generate_tikz_code, generate_tikz_document

__all__ = [
    "GuideContractError",
    "Offset",
    "Rect",
    "CoordConv",
    "PolarCoordConv",
    "RectCoordConv",
    "ActiveSelection",
    "Selector",
    "resolve_selection",
    "single_intersection",
    "Aes",
    "AesGroups",
    "find_represent_points",
    "mean_represent_point",
    "ArcPath",
    "Canvas",
    "Figure",
    "Graffiti",
    "Layer",
    "LinePath",
    "Paint",
    "PaintingStyle",
    "PathFigure",
    "Scene",
    "StrokeStyle",
    "CrosshairGuide",
    "CrosshairParams",
    "CrosshairRenderOp",
    "default_crosshair_styles",
    "render_crosshair",
    "ChartState",
    "CrosshairBinding",
    "crosshair_params",
    "generate_tikz_code",
    "generate_tikz_document",
]
