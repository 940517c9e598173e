"""
Time-budgeted sampling runner.
"""

import time
import logging
from typing import Any, Callable, Dict, List, Optional

from .base import BaseRunner
from ..config import Config
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class SamplingRunner(BaseRunner):
    """
    Runner that samples until a time budget is spent.

    The iteration count per sample is doubled from ``init_count`` until one
    sample takes at least ``min_sample_time``. Samples are then taken until
    both ``min_samples`` and ``min_time`` are reached, or until ``max_time``
    or ``max_samples`` stops the run.

    Example:
        runner = SamplingRunner(min_time=0.1, max_time=1.0)
        measurement = runner.measure(make_benchmark("noop", lambda: None))
    """

    name = "sampling"
    display_name = "Time-budgeted Sampling"

    def __init__(self, timer: Optional[Callable[[], float]] = None, **overrides: Any):
        """
        Initialize sampling runner.

        Args:
            timer: Clock returning seconds (default: time.perf_counter)
            **overrides: Values replacing the loaded configuration
        """
        self.timer = timer or time.perf_counter
        super().__init__(**overrides)

    def _load_config(self) -> Dict[str, Any]:
        return Config.get_sampling_config()

    def _validate_config(self) -> None:
        cfg = self.config
        if cfg["init_count"] < 1:
            raise ConfigurationError("init_count must be at least 1")
        if cfg["max_count"] < cfg["init_count"]:
            raise ConfigurationError("max_count must not be below init_count")
        if cfg["min_samples"] < 1:
            raise ConfigurationError("min_samples must be at least 1")
        if cfg["max_samples"] < cfg["min_samples"]:
            raise ConfigurationError("max_samples must not be below min_samples")
        if cfg["min_time"] < 0 or cfg["max_time"] < cfg["min_time"]:
            raise ConfigurationError("time budget requires 0 <= min_time <= max_time")

    def _sample(self, work: Callable[[], Any], count: int) -> float:
        """Run the work ``count`` times and return elapsed seconds."""
        start = self.timer()
        for _ in range(count):
            work()
        return self.timer() - start

    def _calibrate(self, work: Callable[[], Any]) -> int:
        """Find an iteration count long enough for the timer to resolve."""
        count = self.config["init_count"]
        elapsed = self._sample(work, count)
        while elapsed < self.config["min_sample_time"] and count < self.config["max_count"]:
            count = min(count * 2, self.config["max_count"])
            elapsed = self._sample(work, count)
        logger.debug(f"Calibrated to {count} iterations per sample ({elapsed:.6f}s)")
        return count

    def _converged(self, samples: int, total: float) -> bool:
        cfg = self.config
        if samples == 0:
            return False
        if samples >= cfg["max_samples"] or total >= cfg["max_time"]:
            return True
        return samples >= cfg["min_samples"] and total >= cfg["min_time"]

    def collect_samples(self, work: Callable[[], Any]) -> List[float]:
        count = self._calibrate(work)

        periods: List[float] = []
        total = 0.0
        while not self._converged(len(periods), total):
            elapsed = self._sample(work, count)
            periods.append(elapsed / count)
            total += elapsed

        return periods
