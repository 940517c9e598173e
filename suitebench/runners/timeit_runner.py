"""
Runner backed by the standard library timeit module.
"""

import time
import timeit
import logging
from typing import Any, Callable, Dict, List, Optional

from .base import BaseRunner
from ..config import Config
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class TimeitRunner(BaseRunner):
    """
    Runner using ``timeit.Timer.autorange`` and ``Timer.repeat``.

    Takes a fixed number of samples instead of working to a time budget.
    """

    name = "timeit"
    display_name = "timeit"

    def __init__(self, timer: Optional[Callable[[], float]] = None, **overrides: Any):
        self.timer = timer or time.perf_counter
        super().__init__(**overrides)

    def _load_config(self) -> Dict[str, Any]:
        return Config.get_timeit_config()

    def _validate_config(self) -> None:
        if self.config["repeat"] < 1:
            raise ConfigurationError("repeat must be at least 1")

    def collect_samples(self, work: Callable[[], Any]) -> List[float]:
        timer = timeit.Timer(stmt=work, timer=self.timer)
        number, _ = timer.autorange()
        logger.debug(f"autorange chose {number} iterations per sample")

        totals = timer.repeat(repeat=self.config["repeat"], number=number)
        return [t / number for t in totals]
