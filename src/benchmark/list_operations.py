"""Primitive list operations shared by both container kinds.

``list`` and ``deque`` expose the same method names for every operation
benchmarked here, so each helper is a thin wrapper that also turns the
container's "absent value" and "empty" failures into no-ops.
"""
from typing import Any

from .constants import BenchmarkConstants
from .models import IntList


def add_last(container: IntList, value: int) -> None:
    container.append(value)


def add_first(container: IntList, value: int) -> None:
    # deque.insert(0, x) delegates to appendleft
    container.insert(0, value)


def get(container: IntList, index: int) -> Any:
    return container[index]


def index_of(container: IntList, value: int) -> int:
    """Position of the first element equal to ``value``, or -1 when absent."""
    try:
        return container.index(value)
    except ValueError:
        return BenchmarkConstants.NOT_FOUND


def remove_value(container: IntList, value: int) -> bool:
    """Remove the first element equal to ``value``; False when absent."""
    try:
        container.remove(value)
    except ValueError:
        return False
    return True


def delete_last(container: IntList) -> bool:
    """Drop the tail element; False when the container is already empty."""
    try:
        container.pop()
    except IndexError:
        return False
    return True
