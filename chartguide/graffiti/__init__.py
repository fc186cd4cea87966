"""Vector figures, layered scenes and their compositor."""

from .figure import ArcPath, Figure, FigurePath, LinePath, PathFigure
from .scene import Canvas, Graffiti, Layer, Scene, SceneSource
from .styles import Paint, PaintingStyle, StrokeStyle

__all__ = [
    "ArcPath",
    "Canvas",
    "Figure",
    "FigurePath",
    "Graffiti",
    "Layer",
    "LinePath",
    "Paint",
    "PaintingStyle",
    "PathFigure",
    "Scene",
    "SceneSource",
    "StrokeStyle",
]
