"""Adjacent-swap reordering for ordered lists.

Pure functions. Persisting the resulting order is a separate step
(QuestionCatalog.save_order) so it can be retried on its own.
"""

from enum import StrEnum
from typing import Sequence, TypeVar

T = TypeVar("T")


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"


def neighbor_index(index: int, direction: Direction, length: int) -> int | None:
    """Return the index to swap with, or None when the move is a no-op."""
    if index < 0 or index >= length:
        return None
    target = index - 1 if direction == Direction.UP else index + 1
    if target < 0 or target >= length:
        return None
    return target


def move_adjacent(items: Sequence[T], index: int, direction: Direction) -> list[T]:
    """Return a new list with ``items[index]`` swapped with its neighbor.

    Out-of-bounds moves return an unchanged copy.
    """
    moved = list(items)
    target = neighbor_index(index, direction, len(moved))
    if target is None:
        return moved
    moved[index], moved[target] = moved[target], moved[index]
    return moved
