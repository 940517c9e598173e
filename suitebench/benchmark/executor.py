"""
Suite executor for running benchmark groups with progress reporting.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from ..config import Config
from ..errors import BenchmarkExecutionFailure
from ..runners import BaseRunner, get_runner
from .definitions import BenchmarkGroup, flatten
from .progress import FINAL_HEADER, STARTING_MESSAGE, ProgressReporter, notify
from .results import CycleResult, RunOutcome

logger = logging.getLogger(__name__)


class SuiteExecutor:
    """
    Runs every benchmark of a group, one at a time, in order.

    Features:
        - Sequential execution in suite order
        - Progress callback after start, each benchmark, and completion
        - Blocking ``run`` or future-returning ``submit``

    Example:
        executor = SuiteExecutor()
        outcome = executor.run(
            Suite([make_benchmark("sum", lambda: sum(range(100)))]),
            on_progress=print,
        )
        print(outcome.final_report_text)
    """

    def __init__(self, runner: Optional[BaseRunner] = None):
        """
        Initialize suite executor.

        Args:
            runner: Statistical runner (default: Config.DEFAULT_RUNNER)
        """
        self.runner = runner or get_runner(Config.DEFAULT_RUNNER)

        # Callbacks
        self._on_progress: Optional[ProgressReporter] = None

    def on_progress(self, callback: ProgressReporter) -> "SuiteExecutor":
        """
        Set default progress callback.

        Args:
            callback: Function(text) called for every progress event
        """
        self._on_progress = callback
        return self

    def run(
        self,
        group: BenchmarkGroup,
        on_progress: Optional[ProgressReporter] = None,
    ) -> RunOutcome:
        """
        Run all benchmarks in a group.

        Args:
            group: Single benchmark or Suite
            on_progress: Progress callback for this run (overrides on_progress())

        Returns:
            RunOutcome with the final report text and per-benchmark results

        Raises:
            MalformedDefinition: Before any progress event, if a definition
                cannot be run
            BenchmarkExecutionFailure: If measuring a benchmark fails
        """
        reporter = on_progress if on_progress is not None else self._on_progress
        benchmarks = flatten(group)

        logger.info(f"Starting {len(benchmarks)} benchmark(s) with {self.runner.name} runner")
        notify(reporter, STARTING_MESSAGE)

        results: List[CycleResult] = []
        report = ""

        for definition in benchmarks:
            try:
                measurement = self.runner.measure(definition)
            except BenchmarkExecutionFailure:
                logger.error(f"Benchmark {definition.name!r} failed")
                raise
            except Exception as e:
                logger.error(f"Benchmark {definition.name!r} failed: {e}")
                raise BenchmarkExecutionFailure(definition.name, e) from e

            results.append(measurement.result)
            report += measurement.summary + "\n"
            notify(reporter, measurement.summary)

        final_text = FINAL_HEADER + report
        notify(reporter, final_text)

        logger.info(f"Suite complete: {len(results)} benchmark(s)")
        return RunOutcome(final_report_text=final_text, results=tuple(results))

    def submit(
        self,
        group: BenchmarkGroup,
        on_progress: Optional[ProgressReporter] = None,
    ) -> "Future[RunOutcome]":
        """
        Run a group on a background thread.

        Progress callbacks are invoked on that thread, in the same order as
        ``run``. The future completes once, with the RunOutcome or the error.

        Returns:
            Future resolving to RunOutcome
        """
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="suitebench")
        try:
            return pool.submit(self.run, group, on_progress)
        finally:
            pool.shutdown(wait=False)


def run_with_progress(
    group: BenchmarkGroup,
    on_progress: Optional[ProgressReporter],
    runner: Optional[BaseRunner] = None,
) -> RunOutcome:
    """
    Run a group with a progress callback using a fresh executor.

    Args:
        group: Single benchmark or Suite
        on_progress: Progress callback, or None
        runner: Statistical runner (default: Config.DEFAULT_RUNNER)

    Returns:
        RunOutcome
    """
    return SuiteExecutor(runner).run(group, on_progress)
