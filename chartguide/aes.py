from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, List, Optional, Sequence

from .geometry import Offset, as_offset, mean_offset


@dataclass(frozen=True)
class Aes:
    """A rendered data point: its data index and representative canvas point."""

    index: int
    represent_point: Offset

    def __post_init__(self) -> None:
        object.__setattr__(self, "represent_point", as_offset(self.represent_point))


AesGroup = Sequence[Aes]
AesGroups = Sequence[AesGroup]


def find_represent_points(groups: AesGroups, indexes: AbstractSet[int]) -> List[Offset]:
    """Collect the representative point of every record whose index is selected.

    All groups are scanned; an index present in several groups contributes
    once per occurrence.
    """

    return [aes.represent_point for group in groups for aes in group if aes.index in indexes]


def mean_represent_point(groups: AesGroups, indexes: AbstractSet[int]) -> Optional[Offset]:
    return mean_offset(find_represent_points(groups, indexes))
