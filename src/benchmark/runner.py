"""Benchmark runner to orchestrate the execution of benchmarks."""
import logging
from typing import List, Optional, TextIO
import sys

from src.const import PARAMETERS_BANNER, START_BANNER
from src.shared.config import Config
from src.shared.logging import LoggingManager

from .exceptions import BenchmarkExecutionError
from .list_benchmark import ListBenchmark
from .models import BenchmarkResult, ListKind
from .result_reporter import ResultReporter


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Orchestrates the execution of benchmarks and prints the comparison."""

    def __init__(self, config: Config, output: Optional[TextIO] = None):
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.benchmark = ListBenchmark(config)
        self.reporter = ResultReporter()

    def header(self) -> str:
        """Banner announcing the compared kinds and the run parameters."""
        return "\n".join([
            START_BANNER.format(array=ListKind.ARRAY.value, linked=ListKind.LINKED.value),
            PARAMETERS_BANNER.format(list_size=self.config.list_size, iterations=self.config.iterations),
            "",
        ])

    def run(self) -> List[BenchmarkResult]:
        """Run the complete benchmarking process."""
        print(self.header(), file=self.output)
        logger.info(
            f"Running benchmarks: list_size={self.config.list_size}, iterations={self.config.iterations}, "
            f"warmup={self.config.warmup_rounds}x{self.config.warmup_repetitions}"
        )
        try:
            results = self.benchmark.run_all()
        except Exception as e:
            logger.error(f"Benchmark failed: {e}", stack_info=True)
            raise BenchmarkExecutionError("List benchmark run failed") from e

        print(self.reporter.report(results), file=self.output)
        logger.info("Benchmark completed successfully!")
        return results


def main() -> int:
    """Command-line entry point."""
    config = Config()
    LoggingManager.setup_logging(config.log_level, config)
    BenchmarkRunner(config).run()
    return 0
