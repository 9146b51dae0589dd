"""Data models for the benchmarking system."""
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from .constants import BenchmarkConstants


IntList = Union[list, deque]


class ListKind(Enum):
    """Backing kind of a benchmarked list."""
    ARRAY = "Array"
    LINKED = "Linked"

    @property
    def container_factory(self) -> Callable[..., IntList]:
        """Standard library container type backing this kind."""
        return _CONTAINER_FACTORIES[self]


_CONTAINER_FACTORIES = {
    ListKind.ARRAY: list,
    ListKind.LINKED: deque,
}


class Operation(str, Enum):
    """Benchmarked list operations, in reporting order."""
    ADD_LAST = "addLast"
    ADD_FIRST = "addFirst"
    GET = "get"
    INDEX_OF = "indexOf"
    REMOVE_VALUE = "remove(value)"
    DELETE_LAST = "deleteLast"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one timed operation on one list kind."""
    list_kind: ListKind
    operation: Operation
    iterations: int
    elapsed_ns: int

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / BenchmarkConstants.NANOS_PER_MILLI


@dataclass(frozen=True)
class TrialTiming:
    """Measured span of a timed trial."""
    iterations: int
    elapsed_ns: int


@dataclass(frozen=True)
class ComparisonRow:
    """One line of the comparison table."""
    operation: str
    array_ms: Optional[float]
    linked_ms: Optional[float]
    speedup: str

    @property
    def has_data(self) -> bool:
        return self.array_ms is not None and self.linked_ms is not None
