"""
Base runner interface for statistical benchmark measurement.
All runners must implement this interface.
"""

import math
import logging
import statistics
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence

from ..benchmark.definitions import BenchmarkDefinition
from ..benchmark.results import CycleResult

logger = logging.getLogger(__name__)

# Two-sided 95% Student's t critical values, keyed by degrees of freedom.
T_TABLE = {
    1: 12.706, 2: 4.303, 3: 3.182, 4: 2.776, 5: 2.571, 6: 2.447,
    7: 2.365, 8: 2.306, 9: 2.262, 10: 2.228, 11: 2.201, 12: 2.179,
    13: 2.16, 14: 2.145, 15: 2.131, 16: 2.12, 17: 2.11, 18: 2.101,
    19: 2.093, 20: 2.086, 21: 2.08, 22: 2.074, 23: 2.069, 24: 2.064,
    25: 2.06, 26: 2.056, 27: 2.052, 28: 2.048, 29: 2.045, 30: 2.042,
}
T_INFINITY = 1.96


@dataclass(frozen=True)
class Measurement:
    """
    What a runner reports for one benchmark.

    Attributes:
        result: Converged statistics
        summary: Human-readable summary line
        sample_count: Number of samples the statistics were computed from
    """
    result: CycleResult
    summary: str
    sample_count: int


def critical_value(df: int) -> float:
    """Student's t critical value for the given degrees of freedom."""
    return T_TABLE.get(max(df, 1), T_INFINITY)


def format_summary(name: str, hz: float, moe_percent: float, sample_count: int) -> str:
    """
    Format a benchmark summary line.

    Example:
        >>> format_summary("sort", 1234567.8, 0.5, 89)
        'sort x 1,234,568 ops/sec ±0.50% (89 runs sampled)'
    """
    hz_text = f"{hz:,.2f}" if hz < 100 else f"{hz:,.0f}"
    runs = "run" if sample_count == 1 else "runs"
    return f"{name} x {hz_text} ops/sec ±{moe_percent:.2f}% ({sample_count} {runs} sampled)"


def summarize_samples(name: str, periods: Sequence[float]) -> Measurement:
    """
    Compute throughput statistics from per-operation periods.

    Args:
        name: Benchmark name
        periods: Seconds per operation, one entry per sample

    Returns:
        Measurement with hz, margin of error and relative margin of error
    """
    n = len(periods)
    if n == 0:
        raise ValueError(f"No samples collected for {name!r}")

    mean = statistics.fmean(periods)
    deviation = statistics.stdev(periods) if n > 1 else 0.0
    sem = deviation / math.sqrt(n)
    moe = sem * critical_value(n - 1)

    if mean > 0:
        hz = 1.0 / mean
        moe_percent = moe / mean * 100
    else:
        hz = 0.0
        moe_percent = 0.0

    result = CycleResult(
        name=name,
        hz=hz,
        margin_of_error=hz * moe_percent / 100,
        moe_percent=moe_percent,
    )
    return Measurement(
        result=result,
        summary=format_summary(name, hz, moe_percent, n),
        sample_count=n,
    )


class BaseRunner(ABC):
    """
    Abstract base class for statistical runners.

    A runner times one benchmark repeatedly and reports converged
    statistics. The suite executor only ever calls ``measure``.

    Example:
        class MyRunner(BaseRunner):
            name = "myrunner"

            def _load_config(self):
                return {}

            def collect_samples(self, work):
                start = time.perf_counter()
                work()
                return [time.perf_counter() - start]
    """

    # Runner identification
    name: str = "base"
    display_name: str = "Base Runner"

    def __init__(self, **overrides: Any):
        """
        Initialize runner with configuration.

        Args:
            **overrides: Values replacing the loaded configuration
        """
        self.config = self._load_config()
        self.config.update(overrides)
        self._validate_config()

    @abstractmethod
    def _load_config(self) -> Dict[str, Any]:
        """
        Load runner-specific configuration.

        Returns:
            Dictionary containing runner configuration
        """
        pass

    def _validate_config(self) -> None:
        """
        Validate that the configuration is usable.
        Raises ConfigurationError if validation fails.
        """
        pass

    @abstractmethod
    def collect_samples(self, work: Callable[[], Any]) -> List[float]:
        """
        Time the work repeatedly.

        Args:
            work: Zero-argument callable to time

        Returns:
            Seconds per operation, one entry per sample
        """
        pass

    def measure(self, definition: BenchmarkDefinition) -> Measurement:
        """
        Measure one benchmark to convergence.

        Args:
            definition: Benchmark to measure

        Returns:
            Measurement for the benchmark
        """
        periods = self.collect_samples(definition.work)
        measurement = summarize_samples(definition.name, periods)
        logger.debug(f"{self.name}: {measurement.summary}")
        return measurement

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(name={self.name})>"
