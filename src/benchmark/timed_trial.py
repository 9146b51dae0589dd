"""Warmup and measurement of repeated operations."""
import logging
import time
from typing import Any, Callable, Optional

from .models import TrialTiming


# Configure logging
logger = logging.getLogger(__name__)


class TimedTrial:
    """Runs an operation repeatedly, first discarding warmup timings."""

    def __init__(self, warmup_rounds: int, warmup_repetitions: int):
        self.warmup_rounds = warmup_rounds
        self.warmup_repetitions = warmup_repetitions

    def warmup(self, operation: Callable[[int], Any], exhausted: Optional[Callable[[], bool]] = None) -> int:
        """
        Execute ``operation`` for every warmup round without timing it.

        Args:
            operation: Callable receiving the repetition index.
            exhausted: Optional predicate; a round stops early once it is true.

        Returns:
            Number of warmup executions actually performed.
        """
        performed = 0
        for _ in range(self.warmup_rounds):
            for i in range(self.warmup_repetitions):
                if exhausted is not None and exhausted():
                    break
                operation(i)
                performed += 1
        return performed

    @staticmethod
    def measure(operation: Callable[[int], Any], repetitions: int,
                exhausted: Optional[Callable[[], bool]] = None) -> TrialTiming:
        """
        Time ``repetitions`` calls of ``operation`` on the monotonic clock.

        Args:
            operation: Callable receiving the repetition index.
            repetitions: Upper bound on the number of calls.
            exhausted: Optional predicate checked before each call; the loop
                ends as soon as it returns true.

        Returns:
            TrialTiming with the calls performed and elapsed nanoseconds.
        """
        performed = 0
        start = time.perf_counter_ns()
        if exhausted is None:
            for i in range(repetitions):
                operation(i)
            performed = repetitions
        else:
            for i in range(repetitions):
                if exhausted():
                    break
                operation(i)
                performed += 1
        end = time.perf_counter_ns()
        return TrialTiming(iterations=performed, elapsed_ns=end - start)

    def run(self, operation: Callable[[int], Any], repetitions: int,
            exhausted: Optional[Callable[[], bool]] = None) -> TrialTiming:
        """Warm up then measure the same operation."""
        self.warmup(operation, exhausted)
        return self.measure(operation, repetitions, exhausted)


def timed_operation(scenario: Callable[[], Any], warmup_rounds: int, warmup_repetitions: int) -> int:
    """
    Warm up a whole scenario, then time a single run of it.

    Args:
        scenario: Zero-argument callable building and exercising its own data.
        warmup_rounds: Number of warmup rounds.
        warmup_repetitions: Scenario runs per warmup round.

    Returns:
        Elapsed nanoseconds of the measured run.
    """
    trial = TimedTrial(warmup_rounds, warmup_repetitions)
    trial.warmup(lambda _: scenario())
    timing = trial.measure(lambda _: scenario(), 1)
    logger.debug(f"Scenario {getattr(scenario, '__name__', scenario)!r} took {timing.elapsed_ns} ns")
    return timing.elapsed_ns
