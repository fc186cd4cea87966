"""Selection state consumed by guides and the resolution of the active selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, Mapping, Optional, Tuple

from ..geometry import Offset, as_offset
from ..validate import GuideContractError

SelectorMap = Mapping[str, "Selector"]
SelectMap = Mapping[str, AbstractSet[int]]


@dataclass(frozen=True)
class Selector:
    """Pointer trail backing one named selection.

    Points are canvas positions in the order they were recorded; guides only
    look at the latest one.
    """

    points: Tuple[Offset, ...]

    def __post_init__(self) -> None:
        points = tuple(as_offset(point) for point in self.points)
        if not points:
            raise GuideContractError("a selector needs at least one recorded point")
        object.__setattr__(self, "points", points)

    @property
    def last_point(self) -> Offset:
        return self.points[-1]


@dataclass(frozen=True)
class ActiveSelection:
    name: str
    selector: Selector
    indexes: FrozenSet[int]


def single_intersection(
    candidates: Optional[Iterable[str]],
    allowed: Optional[AbstractSet[str]],
) -> Optional[str]:
    """Return the one name in ``candidates`` that ``allowed`` admits.

    ``allowed`` of ``None`` or empty admits every name. Returns ``None`` when
    no name or more than one name qualifies.
    """

    if candidates is None:
        return None
    matches = {name for name in candidates if not allowed or name in allowed}
    if len(matches) != 1:
        return None
    return next(iter(matches))


def resolve_selection(
    selections: Optional[AbstractSet[str]],
    selectors: Optional[SelectorMap],
    selects: Optional[SelectMap],
) -> Optional[ActiveSelection]:
    if not selectors or not selects:
        return None
    name = single_intersection(selectors.keys(), selections)
    if name is None:
        return None
    selector = selectors.get(name)
    indexes = selects.get(name)
    if selector is None or not indexes:
        return None
    return ActiveSelection(name, selector, frozenset(indexes))
