from typing import Any, Sequence, Tuple


class GuideContractError(ValueError):
    """Raised when a guide is wired with inputs of the wrong shape or kind."""


def ensure_pair(value: Any, name: str) -> Tuple[Any, Any]:
    if value is None or isinstance(value, (str, bytes)):
        raise GuideContractError(f"{name} must be a pair, got {value!r}")
    try:
        items = tuple(value)
    except TypeError as exc:
        raise GuideContractError(f"{name} must be a pair, got {value!r}") from exc
    if len(items) != 2:
        raise GuideContractError(f"{name} must have exactly 2 entries, got {len(items)}")
    return items[0], items[1]


def ensure_bool_pair(value: Any, name: str) -> Tuple[bool, bool]:
    first, second = ensure_pair(value, name)
    for item in (first, second):
        if not isinstance(item, bool):
            raise GuideContractError(f"{name} entries must be booleans, got {item!r}")
    return first, second


def ensure_range(value: Sequence[float], name: str) -> Tuple[float, float]:
    lo, hi = ensure_pair(value, name)
    lo, hi = float(lo), float(hi)
    if lo == hi:
        raise GuideContractError(f"{name} must not be degenerate (both ends are {lo})")
    return lo, hi
