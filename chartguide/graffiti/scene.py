"""Layered scenes and the compositor that paints them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Protocol, Sequence, Tuple

from ..geometry import Rect
from .figure import Figure, FigurePath
from .styles import Paint

logger = logging.getLogger(__name__)


class Layer(IntEnum):
    """Rendering layer classes, painted in ascending order."""

    BACKGROUND = 0
    REGION = 1
    ELEMENT = 2
    ELEMENT_LABEL = 3
    AXIS = 4
    ANNOTATION = 5
    CROSSHAIR = 6
    TOOLTIP = 7


@dataclass(frozen=True)
class Scene:
    """Snapshot of one guide's drawing for one frame.

    ``figures is None`` means there is nothing to draw; an empty sequence is
    normalized to ``None``.
    """

    layer: Layer
    z_index: int = 0
    figures: Optional[Tuple[Figure, ...]] = None
    clip_region: Optional[Rect] = None

    def __post_init__(self) -> None:
        if self.figures is not None:
            figures = tuple(self.figures)
            object.__setattr__(self, "figures", figures or None)

    @property
    def is_idle(self) -> bool:
        return self.figures is None


class Canvas(Protocol):
    def save(self) -> None:
        ...

    def restore(self) -> None:
        ...

    def clip_rect(self, rect: Rect) -> None:
        ...

    def draw_path(self, path: FigurePath, paint: Paint) -> None:
        ...


class SceneSource(Protocol):
    @property
    def scene(self) -> Scene:
        ...


class Graffiti:
    """Compositor painting every registered scene source in layer order.

    Scenes are ordered by ``(layer, z_index)``; ties keep registration order.
    Sources are read at paint time, so a source that replaced its scene since
    the last frame is painted with the new snapshot.
    """

    def __init__(self, sources: Sequence[SceneSource] = ()) -> None:
        self._sources: List[SceneSource] = list(sources)

    def add(self, source: SceneSource) -> None:
        self._sources.append(source)

    def remove(self, source: SceneSource) -> None:
        self._sources.remove(source)

    def scenes(self) -> List[Scene]:
        snapshots = [source.scene for source in self._sources]
        return sorted(snapshots, key=lambda scene: (int(scene.layer), scene.z_index))

    def paint(self, canvas: Canvas) -> int:
        """Paint all non-idle scenes onto ``canvas``; return how many were painted."""

        painted = 0
        for scene in self.scenes():
            if scene.is_idle:
                continue
            canvas.save()
            if scene.clip_region is not None:
                canvas.clip_rect(scene.clip_region)
            for figure in scene.figures:
                canvas.draw_path(figure.path, figure.paint)
            canvas.restore()
            painted += 1
        logger.debug("Painted %d of %d scene(s)", painted, len(self._sources))
        return painted
