"""Dense sibling positions.

Every parent (a board's columns, a column's tasks) numbers its children
0..n-1 in display order. Any change to a sibling list is followed by a
full renumber of that list.
"""

from typing import Iterable, Mapping


def renumber(ids: Iterable[str]) -> dict[str, int]:
    """Map each id to its index in the sequence."""
    return {id_: index for index, id_ in enumerate(ids)}


def is_dense(positions: Iterable[int]) -> bool:
    """True if positions are exactly 0..n-1 with no gaps or duplicates."""
    values = sorted(positions)
    return values == list(range(len(values)))


def check_dense(positions: Mapping[str, int] | Iterable[int], what: str = "siblings") -> None:
    """Fail loudly if positions break the dense sequence rule."""
    values = list(positions.values()) if isinstance(positions, Mapping) else list(positions)
    if not is_dense(values):
        raise AssertionError(f"{what} positions are not dense: {sorted(values)}")
