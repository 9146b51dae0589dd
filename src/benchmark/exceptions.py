"""Custom exceptions for the benchmarking system."""


class BenchmarkExecutionError(Exception):
    """Custom exception for benchmark execution failures."""
    pass


class ReportError(Exception):
    """Exception raised when results cannot be turned into a report."""
    pass
