"""Small synthetic chart used by the CLI and the examples."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .aes import Aes
from .chart import ChartState
from .coord import CoordConv, PolarCoordConv, RectCoordConv
from .geometry import Offset, Rect
from .interaction.selection import Selector

BOUNDS = Rect(0, 0, 400, 300)
REGION = Rect(40, 20, 380, 280)

SERIES = {
    "revenue": [0.12, 0.35, 0.28, 0.55, 0.61, 0.48, 0.77, 0.9],
    "cost": [0.1, 0.2, 0.25, 0.3, 0.42, 0.4, 0.52, 0.6],
}


def build_coord(kind: str = "rect", *, transposed: bool = False) -> CoordConv:
    if kind == "rect":
        return RectCoordConv(
            REGION,
            horizontal_range=(0.05, 0.95),
            transposed=transposed,
        )
    if kind == "polar":
        return PolarCoordConv(REGION, end_radius_factor=0.9, transposed=transposed)
    raise ValueError(f"unknown coordinate kind {kind!r}")


def build_groups(coord: CoordConv) -> List[List[Aes]]:
    groups: List[List[Aes]] = []
    for values in SERIES.values():
        last = len(values) - 1
        groups.append(
            [Aes(index, coord.convert((index / last, value))) for index, value in enumerate(values)]
        )
    return groups


def build_demo_state(
    kind: str = "rect",
    *,
    transposed: bool = False,
    select: Sequence[int] = (3,),
    pointer: Optional[Offset] = None,
    selection: str = "hover",
) -> ChartState:
    """Chart snapshot with one active selection over the demo series.

    Without an explicit ``pointer`` the pointer rests on the first selected
    record of the first series.
    """

    coord = build_coord(kind, transposed=transposed)
    groups = build_groups(coord)
    selectors = None
    selects = None
    if select:
        if pointer is None:
            matches = [aes.represent_point for aes in groups[0] if aes.index in select]
            pointer = matches[0] if matches else REGION.center
        selectors = {selection: Selector((pointer,))}
        selects = {selection: frozenset(select)}
    return ChartState(
        coord=coord,
        element_groups=[groups],
        selection_names=frozenset({selection}),
        selectors=selectors,
        selects=selects,
    )
