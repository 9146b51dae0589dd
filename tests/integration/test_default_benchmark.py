"""Integration test running the benchmark with its default configuration."""

import io

from src.benchmark.list_benchmark import ListBenchmark
from src.benchmark.models import Operation
from src.benchmark.runner import BenchmarkRunner
from src.shared.config import Config
from tests.test_const import DEFAULT_ITERATIONS, DEFAULT_LIST_SIZE


class TestDefaultBenchmark:
    """Full run with N=10,000 and 5,000 iterations."""

    def test_all_operations_complete(self):
        """Test every operation completes for both kinds under defaults."""
        results = ListBenchmark(Config()).run_all()

        assert len(results) == 12
        for result in results:
            expected = DEFAULT_ITERATIONS
            if result.operation in (Operation.REMOVE_VALUE, Operation.DELETE_LAST):
                expected = min(DEFAULT_ITERATIONS, DEFAULT_LIST_SIZE)
            assert result.iterations == expected
            assert result.elapsed_ns > 0

    def test_console_output(self):
        """Test the default run prints the parameter echo and a complete table."""
        output = io.StringIO()
        BenchmarkRunner(Config(), output=output).run()

        text = output.getvalue()
        assert "Parameters: LIST_SIZE=10000, ITERATIONS=5000" in text
        assert "no data" not in text
