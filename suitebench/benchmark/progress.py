"""
Progress reporting for suite runs.

A progress reporter is any callable taking one string. The executor calls it
with ``STARTING_MESSAGE`` first, then once per finished benchmark with that
benchmark's summary line, then once with the final report.
"""

import logging
from typing import Callable, Optional

from rich.console import Console

logger = logging.getLogger(__name__)

ProgressReporter = Callable[[str], None]

STARTING_MESSAGE = "Starting Benchmarks"
FINAL_HEADER = "Final results:\n\n"


def notify(reporter: Optional[ProgressReporter], text: str) -> None:
    """
    Deliver one progress event.

    A reporter that raises is logged and ignored; progress delivery never
    fails a run.
    """
    if reporter is None:
        return
    try:
        reporter(text)
    except Exception:
        logger.exception(f"Progress reporter raised while handling {text[:80]!r}")


class LoggingProgress:
    """
    Progress reporter that writes every event to a logger.

    Example:
        executor.run(suite, LoggingProgress(level=logging.DEBUG))
    """

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.log = log or logger
        self.level = level

    def __call__(self, text: str) -> None:
        self.log.log(self.level, text)


class ConsoleProgress:
    """
    Progress reporter that prints every event on a rich console.

    Text is printed verbatim, without markup or highlighting.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def __call__(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)
