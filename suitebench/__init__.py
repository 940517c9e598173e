"""
suitebench - sequential micro-benchmark suites with progress reporting.
"""

from .benchmark import (
    BenchmarkDefinition,
    Single,
    Suite,
    make_benchmark,
    CycleResult,
    RunOutcome,
    SuiteExecutor,
    run_with_progress,
)
from .errors import (
    BenchError,
    MalformedDefinition,
    EmptyWorkUnit,
    BenchmarkExecutionFailure,
    ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "BenchmarkDefinition",
    "Single",
    "Suite",
    "make_benchmark",
    "CycleResult",
    "RunOutcome",
    "SuiteExecutor",
    "run_with_progress",
    "BenchError",
    "MalformedDefinition",
    "EmptyWorkUnit",
    "BenchmarkExecutionFailure",
    "ConfigurationError",
]
