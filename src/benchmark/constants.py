"""Constants for the benchmarking system."""


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    NANOS_PER_MILLI = 1_000_000
    NOT_FOUND = -1


class ReportConstants:
    """Labels and layouts used by the comparison table."""
    TITLE = "## Check performance time: {array} vs {linked}"
    HEADER_FORMAT = "%-12s | %-14s | %-15s | %s"
    ROW_FORMAT = "%-12s | %-14.2f | %-15.2f | %s"
    SEPARATOR = "-------------|----------------|-----------------|----------------------------"
    OPERATION_COLUMN = "Operation"
    SPEEDUP_COLUMN = "Speedup"
    MS_COLUMN = "{kind}, ms"
    MISSING_VALUE = "-"
    NO_DATA = "no data"
    EQUAL = "equal"
    WINNER = "{kind} (x{ratio:.1f})"
