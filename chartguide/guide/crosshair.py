"""Crosshair guide: lines through the pointer or the selected points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, List, Optional, Tuple

from ..aes import AesGroups, mean_represent_point
from ..coord import CoordConv, PolarCoordConv, RectCoordConv
from ..geometry import Offset
from ..graffiti import ArcPath, Figure, Layer, LinePath, PaintingStyle, PathFigure, Scene, StrokeStyle
from ..interaction.selection import SelectMap, SelectorMap, resolve_selection
from ..logging_utils import debug_log_call
from ..validate import GuideContractError, ensure_bool_pair, ensure_pair

logger = logging.getLogger(__name__)

StylePair = Tuple[Optional[StrokeStyle], Optional[StrokeStyle]]


def default_crosshair_styles() -> StylePair:
    """Light gray hairlines of width 1 on both dimensions."""

    style = StrokeStyle()
    return style, style


def _as_style_pair(value: object) -> StylePair:
    first, second = ensure_pair(value, "styles")
    for style in (first, second):
        if style is not None and not isinstance(style, StrokeStyle):
            raise GuideContractError(f"styles entries must be StrokeStyle or None, got {style!r}")
    return first, second


def _as_selections(value: object) -> Optional[FrozenSet[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        raise GuideContractError("selections must be a collection of names, not a single string")
    return frozenset(value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class CrosshairGuide:
    """Specification of a crosshair.

    The crosshair marks the pointer position or the selected points and is
    hidden while nothing is selected.

    ``selections`` names the selections it reacts to, ``None`` meaning any of
    them. Callers must make sure those selections are never active at the same
    time. ``styles`` and ``follow_pointer`` hold one entry per dimension; a
    ``None`` style hides that dimension's line. ``element`` is the index of the
    element series whose points are tracked. Passing ``None`` for any field
    picks its default.
    """

    selections: Optional[FrozenSet[str]] = None
    styles: Optional[StylePair] = None
    follow_pointer: Optional[Tuple[bool, bool]] = None
    z_index: Optional[int] = None
    element: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "selections", _as_selections(self.selections))
        styles = default_crosshair_styles() if self.styles is None else _as_style_pair(self.styles)
        object.__setattr__(self, "styles", styles)
        follow = (False, False) if self.follow_pointer is None else ensure_bool_pair(self.follow_pointer, "follow_pointer")
        object.__setattr__(self, "follow_pointer", follow)
        object.__setattr__(self, "z_index", 0 if self.z_index is None else int(self.z_index))
        element = 0 if self.element is None else int(self.element)
        if element < 0:
            raise GuideContractError(f"element must be a non-negative index, got {element}")
        object.__setattr__(self, "element", element)


@dataclass(frozen=True)
class CrosshairParams:
    """Everything one crosshair recompute reads, checked on construction."""

    selections: Optional[AbstractSet[str]]
    selectors: Optional[SelectorMap]
    selects: Optional[SelectMap]
    coord: CoordConv
    groups: AesGroups
    styles: StylePair
    follow_pointer: Tuple[bool, bool]

    def __post_init__(self) -> None:
        if not isinstance(self.coord, CoordConv):
            raise GuideContractError(f"coord must be a CoordConv, got {type(self.coord).__name__}")
        object.__setattr__(self, "styles", _as_style_pair(self.styles))
        object.__setattr__(self, "follow_pointer", ensure_bool_pair(self.follow_pointer, "follow_pointer"))
        object.__setattr__(self, "selections", _as_selections(self.selections))


def _rect_figures(coord: RectCoordConv, cross: Offset, style_x, style_y) -> List[Figure]:
    figures: List[Figure] = []
    region = coord.region
    cx, cy = coord.convert(cross)
    if style_x is not None:
        figures.append(PathFigure(LinePath((cx, region.top), (cx, region.bottom)), style_x.to_paint()))
    if style_y is not None:
        figures.append(PathFigure(LinePath((region.left, cy), (region.right, cy)), style_y.to_paint()))
    return figures


def _polar_figures(coord: PolarCoordConv, cross: Offset, style_x, style_y) -> List[Figure]:
    figures: List[Figure] = []
    angle_value, radius_value = (cross[1], cross[0]) if coord.transposed else cross
    if style_x is not None:
        angle = coord.convert_angle(angle_value)
        figures.append(
            PathFigure(
                LinePath(
                    coord.polar_to_offset(angle, coord.start_radius),
                    coord.polar_to_offset(angle, coord.end_radius),
                ),
                style_x.to_paint(),
            )
        )
    if style_y is not None:
        radius = coord.convert_radius(radius_value)
        figures.append(
            PathFigure(
                ArcPath(coord.center, radius, coord.start_angle, coord.end_angle - coord.start_angle),
                style_y.to_paint(PaintingStyle.STROKE),
            )
        )
    return figures


def _idle(coord: CoordConv, z_index: int) -> Scene:
    return Scene(Layer.CROSSHAIR, z_index, None, coord.region)


@debug_log_call(logger, name="render_crosshair")
def render_crosshair(params: CrosshairParams, *, z_index: int = 0) -> Scene:
    """Compute the crosshair scene for one snapshot of its inputs.

    The cross point is assembled in data space: the pointer is inverted from
    the selector's last canvas point, the selected point is the canvas mean of
    the selected records inverted the same way, and each dimension takes one
    or the other according to ``follow_pointer``.
    """

    coord = params.coord
    active = resolve_selection(params.selections, params.selectors, params.selects)
    if active is None:
        logger.debug("crosshair idle: no single active selection")
        return _idle(coord, z_index)

    selected_canvas = mean_represent_point(params.groups, active.indexes)
    if selected_canvas is None:
        logger.debug(
            "crosshair idle: selection %r matched no records for indexes %s",
            active.name,
            sorted(active.indexes),
        )
        return _idle(coord, z_index)

    pointer = coord.invert(active.selector.last_point)
    selected = coord.invert(selected_canvas)
    cross = (
        pointer[0] if params.follow_pointer[0] else selected[0],
        pointer[1] if params.follow_pointer[1] else selected[1],
    )

    first, second = params.styles
    style_x, style_y = (second, first) if coord.transposed else (first, second)
    if isinstance(coord, RectCoordConv):
        figures = _rect_figures(coord, cross, style_x, style_y)
    elif isinstance(coord, PolarCoordConv):
        figures = _polar_figures(coord, cross, style_x, style_y)
    else:
        raise GuideContractError(f"crosshair cannot render on {type(coord).__name__}")

    return Scene(Layer.CROSSHAIR, z_index, tuple(figures), coord.region)


class CrosshairRenderOp:
    """Owns the current crosshair scene and replaces it on every render."""

    def __init__(self, z_index: int = 0) -> None:
        self.z_index = z_index
        self.scene = Scene(Layer.CROSSHAIR, z_index)

    def render(self, params: CrosshairParams) -> Scene:
        self.scene = render_crosshair(params, z_index=self.z_index)
        return self.scene
