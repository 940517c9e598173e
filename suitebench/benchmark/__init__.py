"""
Benchmark definitions, execution and progress reporting package.
"""

from .definitions import BenchmarkDefinition, BenchmarkGroup, Single, Suite, make_benchmark, flatten
from .results import CycleResult, RunOutcome
from .progress import ProgressReporter, LoggingProgress, ConsoleProgress, STARTING_MESSAGE, FINAL_HEADER
from .executor import SuiteExecutor, run_with_progress

__all__ = [
    "BenchmarkDefinition",
    "BenchmarkGroup",
    "Single",
    "Suite",
    "make_benchmark",
    "flatten",
    "CycleResult",
    "RunOutcome",
    "ProgressReporter",
    "LoggingProgress",
    "ConsoleProgress",
    "STARTING_MESSAGE",
    "FINAL_HEADER",
    "SuiteExecutor",
    "run_with_progress",
]
