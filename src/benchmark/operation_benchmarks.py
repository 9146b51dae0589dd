"""Timed benchmarks for the individual list operations."""
import logging
from typing import Any, Callable, Dict, Optional

from src.shared.config import Config

from . import list_operations
from .list_factory import ListFactory
from .models import BenchmarkResult, IntList, ListKind, Operation
from .timed_trial import TimedTrial


# Configure logging
logger = logging.getLogger(__name__)

Step = Callable[[IntList, int], Any]


class OperationBenchmarks:
    """Runs each operation with the warmup -> measure -> result protocol.

    Warmup executes the same step on a throwaway container built exactly like
    the measured one, so the measured container always starts from its
    documented initial state.
    """

    def __init__(self, config: Config):
        self.config = config
        self.factory = ListFactory(config.list_size)
        self.trial = TimedTrial(config.warmup_rounds, config.warmup_repetitions)
        self._benchmarks: Dict[Operation, Callable[[ListKind], BenchmarkResult]] = {
            Operation.ADD_LAST: self.benchmark_add_last,
            Operation.ADD_FIRST: self.benchmark_add_first,
            Operation.GET: self.benchmark_get,
            Operation.INDEX_OF: self.benchmark_index_of,
            Operation.REMOVE_VALUE: self.benchmark_remove_by_value,
            Operation.DELETE_LAST: self.benchmark_delete_last,
        }

    def run(self, kind: ListKind, operation: Operation) -> BenchmarkResult:
        """Run the benchmark for a single operation on one list kind."""
        return self._benchmarks[operation](kind)

    def benchmark_add_last(self, kind: ListKind) -> BenchmarkResult:
        return self._run_trial(kind, Operation.ADD_LAST, self.factory.create_empty,
                               list_operations.add_last, self.config.iterations)

    def benchmark_add_first(self, kind: ListKind) -> BenchmarkResult:
        return self._run_trial(kind, Operation.ADD_FIRST, self.factory.create_empty,
                               list_operations.add_first, self.config.iterations)

    def benchmark_get(self, kind: ListKind) -> BenchmarkResult:
        size = self.config.list_size
        if size == 0:
            return self._skipped(kind, Operation.GET)

        def step(container: IntList, i: int) -> Any:
            return list_operations.get(container, i % size)

        return self._run_trial(kind, Operation.GET, self.factory.create_populated,
                               step, self.config.iterations)

    def benchmark_index_of(self, kind: ListKind) -> BenchmarkResult:
        size = self.config.list_size
        if size == 0:
            return self._skipped(kind, Operation.INDEX_OF)
        # Targets cycle through the upper half so every search scans at least half the list
        lower = size // 2
        span = size - lower

        def step(container: IntList, i: int) -> int:
            return list_operations.index_of(container, lower + i % span)

        return self._run_trial(kind, Operation.INDEX_OF, self.factory.create_populated,
                               step, self.config.iterations)

    def benchmark_remove_by_value(self, kind: ListKind) -> BenchmarkResult:
        count = min(self.config.iterations, self.config.list_size)
        return self._run_trial(kind, Operation.REMOVE_VALUE, self.factory.create_populated,
                               list_operations.remove_value, count)

    def benchmark_delete_last(self, kind: ListKind) -> BenchmarkResult:
        def step(container: IntList, i: int) -> bool:
            return list_operations.delete_last(container)

        return self._run_trial(kind, Operation.DELETE_LAST, self.factory.create_populated,
                               step, self.config.iterations, stop_when_empty=True)

    def _run_trial(self, kind: ListKind, operation: Operation, build: Callable[[ListKind], IntList],
                   step: Step, repetitions: int, stop_when_empty: bool = False) -> BenchmarkResult:
        throwaway = build(kind)
        self.trial.warmup(lambda i: step(throwaway, i), self._empty_check(throwaway, stop_when_empty))

        container = build(kind)
        timing = self.trial.measure(lambda i: step(container, i), repetitions,
                                    self._empty_check(container, stop_when_empty))

        result = BenchmarkResult(
            list_kind=kind,
            operation=operation,
            iterations=timing.iterations,
            elapsed_ns=timing.elapsed_ns,
        )
        logger.debug(f"{kind.value} {operation}: {result.iterations} iterations in {result.elapsed_ns} ns")
        return result

    @staticmethod
    def _empty_check(container: IntList, enabled: bool) -> Optional[Callable[[], bool]]:
        if not enabled:
            return None
        return lambda: not container

    @staticmethod
    def _skipped(kind: ListKind, operation: Operation) -> BenchmarkResult:
        logger.warning(f"Skipping {operation} on {kind.value}: list is empty")
        return BenchmarkResult(list_kind=kind, operation=operation, iterations=0, elapsed_ns=0)
