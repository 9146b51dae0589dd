"""Shared test configuration and fixtures for all tests."""

import pytest

from src.benchmark.models import BenchmarkResult, ListKind, Operation
from src.shared.config import Config
from tests.test_const import (
    TEST_ITERATIONS, TEST_LIST_SIZE, TEST_WARMUP_REPETITIONS, TEST_WARMUP_ROUNDS
)


@pytest.fixture
def small_config():
    """Small benchmark configuration fixture."""
    return Config(
        list_size=TEST_LIST_SIZE,
        iterations=TEST_ITERATIONS,
        warmup_rounds=TEST_WARMUP_ROUNDS,
        warmup_repetitions=TEST_WARMUP_REPETITIONS,
    )


@pytest.fixture
def empty_config():
    """Configuration with a zero-length list."""
    return Config(
        list_size=0,
        iterations=TEST_ITERATIONS,
        warmup_rounds=TEST_WARMUP_ROUNDS,
        warmup_repetitions=TEST_WARMUP_REPETITIONS,
    )


class ResultBuilder:
    """Builder for creating benchmark results with specific timings."""

    def __init__(self):
        self.results = []

    def with_result(self, kind, operation, elapsed_ns, iterations=1):
        self.results.append(BenchmarkResult(
            list_kind=kind,
            operation=operation,
            iterations=iterations,
            elapsed_ns=elapsed_ns,
        ))
        return self

    def with_pair(self, operation, array_ns, linked_ns):
        self.with_result(ListKind.ARRAY, operation, array_ns)
        return self.with_result(ListKind.LINKED, operation, linked_ns)

    def build(self):
        return list(self.results)


@pytest.fixture
def result_builder():
    """Builder fixture for creating benchmark results."""
    return ResultBuilder()


@pytest.fixture
def full_results(result_builder):
    """Twelve results covering every operation for both kinds."""
    for position, operation in enumerate(Operation, start=1):
        result_builder.with_pair(operation, position * 1_000_000, position * 2_000_000)
    return result_builder.build()
