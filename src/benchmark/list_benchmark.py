"""Orchestrates the operation benchmarks for both list kinds."""
import logging
from typing import List

from src.shared.config import Config

from .models import BenchmarkResult, ListKind, Operation
from .operation_benchmarks import OperationBenchmarks


# Configure logging
logger = logging.getLogger(__name__)


class ListBenchmark:
    """Runs every operation benchmark once per list kind."""

    def __init__(self, config: Config):
        self.config = config
        self.operation_benchmarks = OperationBenchmarks(config)

    def run_all(self) -> List[BenchmarkResult]:
        """
        Run all benchmarks for every list kind.

        Returns:
            Results ordered by kind (Array first), then by operation in
            reporting order.
        """
        results = []
        for kind in ListKind:
            logger.info(f"Measuring {kind.value} list ({kind.container_factory.__name__})...")
            for operation in Operation:
                results.append(self.operation_benchmarks.run(kind, operation))
        return results
