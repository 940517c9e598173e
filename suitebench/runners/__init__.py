"""
Statistical runners package.
Each runner implements the BaseRunner interface.
"""

from .base import BaseRunner, Measurement, summarize_samples, format_summary
from .sampling import SamplingRunner
from .timeit_runner import TimeitRunner

# Registry of available runners
RUNNERS = {
    "sampling": SamplingRunner,
    "timeit": TimeitRunner,
}


def get_runner(name: str, **overrides) -> BaseRunner:
    """
    Get a runner instance by name.

    Args:
        name: Runner name (e.g., 'sampling', 'timeit')
        **overrides: Configuration values passed to the runner

    Returns:
        Runner instance

    Raises:
        ValueError: If runner is not found
    """
    runner_class = RUNNERS.get(name.lower())
    if not runner_class:
        available = ", ".join(RUNNERS.keys())
        raise ValueError(f"Unknown runner: {name}. Available: {available}")

    return runner_class(**overrides)


def list_runners() -> list:
    """List all available runner names."""
    return list(RUNNERS.keys())


__all__ = [
    "BaseRunner",
    "Measurement",
    "summarize_samples",
    "format_summary",
    "SamplingRunner",
    "TimeitRunner",
    "get_runner",
    "list_runners",
    "RUNNERS",
]
