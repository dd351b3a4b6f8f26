"""Identifier allocation for in-memory collections."""

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def next_object_id(objects: Iterable[T], get_id: Callable[[T], int]) -> int:
    """
    Compute the next free integer ID for a collection.

    Every element is scanned, so unordered and non-contiguous IDs are
    handled. IDs start at 1 for an empty collection.

    Args:
        objects: Existing records
        get_id: Extracts the integer ID of a record

    Returns:
        One more than the largest existing ID
    """
    max_id = 0
    for obj in objects:
        max_id = max(max_id, get_id(obj))
    return max_id + 1
