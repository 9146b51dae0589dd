"""Benchmark package initialization."""
from .models import BenchmarkResult, ComparisonRow, ListKind, Operation, TrialTiming
from .constants import BenchmarkConstants, ReportConstants
from .exceptions import BenchmarkExecutionError, ReportError
from .list_factory import ListFactory
from .timed_trial import TimedTrial, timed_operation
from .operation_benchmarks import OperationBenchmarks
from .list_benchmark import ListBenchmark
from .result_reporter import ResultReporter
from .runner import BenchmarkRunner, main

__all__ = [
    'BenchmarkResult',
    'ComparisonRow',
    'ListKind',
    'Operation',
    'TrialTiming',
    'BenchmarkConstants',
    'ReportConstants',
    'BenchmarkExecutionError',
    'ReportError',
    'ListFactory',
    'TimedTrial',
    'timed_operation',
    'OperationBenchmarks',
    'ListBenchmark',
    'ResultReporter',
    'BenchmarkRunner',
    'main',
]
