from .selection import (
    ActiveSelection,
    Selector,
    resolve_selection,
    single_intersection,
)

__all__ = [
    "ActiveSelection",
    "Selector",
    "resolve_selection",
    "single_intersection",
]
