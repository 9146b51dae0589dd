"""Turns benchmark results into a side-by-side comparison."""
import logging
import math
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .constants import ReportConstants
from .exceptions import ReportError
from .models import BenchmarkResult, ComparisonRow, ListKind


# Configure logging
logger = logging.getLogger(__name__)


class ResultReporter:
    """Groups results per operation and renders the comparison table."""

    @staticmethod
    def group_by_operation(results: Iterable[BenchmarkResult]) -> Dict[str, Dict[ListKind, BenchmarkResult]]:
        """
        Group a flat result sequence by operation label.

        Args:
            results: Results in any order.

        Returns:
            Mapping operation label -> {list kind -> result}, in first-seen
            operation order.

        Raises:
            ReportError: If an item is not a BenchmarkResult.
        """
        grouped: Dict[str, Dict[ListKind, BenchmarkResult]] = {}
        for result in results:
            if not isinstance(result, BenchmarkResult):
                raise ReportError(f"Cannot report on {type(result).__name__}: expected BenchmarkResult")
            grouped.setdefault(str(result.operation), {})[result.list_kind] = result
        return grouped

    @staticmethod
    def speedup_label(array_ms: float, linked_ms: float) -> str:
        """
        Name the faster kind together with its speedup ratio.

        Args:
            array_ms: Elapsed milliseconds of the array-backed list.
            linked_ms: Elapsed milliseconds of the linked list.

        Returns:
            "<kind> (x<ratio>)" for the strictly faster kind, or "equal".
        """
        if array_ms < linked_ms:
            winner, faster, slower = ListKind.ARRAY, array_ms, linked_ms
        elif linked_ms < array_ms:
            winner, faster, slower = ListKind.LINKED, linked_ms, array_ms
        else:
            return ReportConstants.EQUAL
        ratio = slower / faster if faster > 0 else math.inf
        return ReportConstants.WINNER.format(kind=winner.value, ratio=ratio)

    @classmethod
    def build_rows(cls, results: Iterable[BenchmarkResult]) -> List[ComparisonRow]:
        """Build one comparison row per operation; incomplete pairs read "no data"."""
        rows = []
        for operation, by_kind in cls.group_by_operation(results).items():
            array_result = by_kind.get(ListKind.ARRAY)
            linked_result = by_kind.get(ListKind.LINKED)
            if array_result is None or linked_result is None:
                logger.warning(f"Missing result for operation {operation}")
                rows.append(ComparisonRow(
                    operation=operation,
                    array_ms=cls._ms_or_none(array_result),
                    linked_ms=cls._ms_or_none(linked_result),
                    speedup=ReportConstants.NO_DATA,
                ))
                continue
            rows.append(ComparisonRow(
                operation=operation,
                array_ms=array_result.elapsed_ms,
                linked_ms=linked_result.elapsed_ms,
                speedup=cls.speedup_label(array_result.elapsed_ms, linked_result.elapsed_ms),
            ))
        return rows

    @classmethod
    def to_dataframe(cls, results: Iterable[BenchmarkResult]) -> pd.DataFrame:
        """
        Structured equivalent of the comparison table.

        The CLI prints only the text table; this frame is the output for
        library callers that want to sort, filter or export the comparison.

        Args:
            results: Flat result sequence from the orchestrator.

        Returns:
            DataFrame with columns operation, array_ms, linked_ms, speedup;
            "no data" rows carry NaN for the missing kind.
        """
        rows = cls.build_rows(results)
        return pd.DataFrame(
            [{
                'operation': row.operation,
                'array_ms': row.array_ms,
                'linked_ms': row.linked_ms,
                'speedup': row.speedup,
            } for row in rows],
            columns=['operation', 'array_ms', 'linked_ms', 'speedup'],
        )

    @classmethod
    def report(cls, results: Iterable[BenchmarkResult]) -> str:
        """
        Render the comparison table.

        Args:
            results: Flat result sequence from the orchestrator.

        Returns:
            The titled, fixed-width text table.
        """
        array_name = ListKind.ARRAY.value
        linked_name = ListKind.LINKED.value
        lines = [
            ReportConstants.TITLE.format(array=array_name, linked=linked_name),
            "",
            ReportConstants.HEADER_FORMAT % (
                ReportConstants.OPERATION_COLUMN,
                ReportConstants.MS_COLUMN.format(kind=array_name),
                ReportConstants.MS_COLUMN.format(kind=linked_name),
                ReportConstants.SPEEDUP_COLUMN,
            ),
            ReportConstants.SEPARATOR,
        ]
        for row in cls.build_rows(results):
            if row.has_data:
                lines.append(ReportConstants.ROW_FORMAT % (row.operation, row.array_ms, row.linked_ms, row.speedup))
            else:
                lines.append(ReportConstants.HEADER_FORMAT % (
                    row.operation,
                    ReportConstants.MISSING_VALUE,
                    ReportConstants.MISSING_VALUE,
                    row.speedup,
                ))
        return "\n".join(lines)

    @staticmethod
    def _ms_or_none(result: Optional[BenchmarkResult]) -> Optional[float]:
        return None if result is None else result.elapsed_ms
