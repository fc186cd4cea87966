"""Wiring between a chart's state snapshot and its crosshair guides."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Sequence

from .aes import AesGroups
from .coord import CoordConv
from .graffiti import Scene
from .guide.crosshair import CrosshairGuide, CrosshairParams, CrosshairRenderOp
from .interaction.selection import SelectMap, SelectorMap
from .validate import GuideContractError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartState:
    """Upstream values a guide recompute observes, taken as one consistent snapshot."""

    coord: CoordConv
    element_groups: Sequence[AesGroups]
    selection_names: FrozenSet[str] = field(default_factory=frozenset)
    selectors: Optional[SelectorMap] = None
    selects: Optional[SelectMap] = None


def crosshair_params(guide: CrosshairGuide, state: ChartState) -> CrosshairParams:
    """Bind ``guide`` to the element series and selections of ``state``."""

    if guide.element >= len(state.element_groups):
        raise GuideContractError(
            f"crosshair element {guide.element} out of range for "
            f"{len(state.element_groups)} element series"
        )
    selections = guide.selections
    if selections is None:
        selections = frozenset(state.selection_names)
    return CrosshairParams(
        selections=selections,
        selectors=state.selectors,
        selects=state.selects,
        coord=state.coord,
        groups=state.element_groups[guide.element],
        styles=guide.styles,
        follow_pointer=guide.follow_pointer,
    )


class CrosshairBinding:
    """Keeps one render operator per crosshair guide.

    The operator is rebuilt only when the guide changes by value, so an equal
    guide supplied again keeps the existing operator and scene.
    """

    def __init__(self, guide: CrosshairGuide) -> None:
        self.guide = guide
        self.op = CrosshairRenderOp(guide.z_index)

    @property
    def scene(self) -> Scene:
        return self.op.scene

    def update(self, guide: CrosshairGuide) -> bool:
        if guide == self.guide:
            return False
        logger.debug("Crosshair guide changed, rebuilding operator")
        self.guide = guide
        self.op = CrosshairRenderOp(guide.z_index)
        return True

    def recompute(self, state: ChartState) -> Scene:
        return self.op.render(crosshair_params(self.guide, state))
