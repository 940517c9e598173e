"""
Configuration management for suitebench.
Loads settings from environment variables and .env file.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# Load .env file from project root
PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")


class Config:
    """Central configuration management."""

    # ==========================================================================
    # Runner Selection
    # ==========================================================================
    DEFAULT_RUNNER: str = os.getenv("BENCH_RUNNER", "sampling")

    # ==========================================================================
    # Sampling Settings
    # ==========================================================================
    INIT_COUNT: int = int(os.getenv("BENCH_INIT_COUNT", "1"))
    MAX_COUNT: int = int(os.getenv("BENCH_MAX_COUNT", "1048576"))
    MIN_SAMPLE_TIME: float = float(os.getenv("BENCH_MIN_SAMPLE_TIME", "0.005"))
    MIN_TIME: float = float(os.getenv("BENCH_MIN_TIME", "0.5"))
    MAX_TIME: float = float(os.getenv("BENCH_MAX_TIME", "5.0"))
    MIN_SAMPLES: int = int(os.getenv("BENCH_MIN_SAMPLES", "5"))
    MAX_SAMPLES: int = int(os.getenv("BENCH_MAX_SAMPLES", "1000"))
    TIMEIT_REPEAT: int = int(os.getenv("BENCH_TIMEIT_REPEAT", "5"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    # ==========================================================================
    # Runner Configurations
    # ==========================================================================

    @classmethod
    def get_sampling_config(cls) -> Dict[str, Any]:
        """Get time-budgeted sampling runner configuration."""
        return {
            "init_count": cls.INIT_COUNT,
            "max_count": cls.MAX_COUNT,
            "min_sample_time": cls.MIN_SAMPLE_TIME,
            "min_time": cls.MIN_TIME,
            "max_time": cls.MAX_TIME,
            "min_samples": cls.MIN_SAMPLES,
            "max_samples": cls.MAX_SAMPLES,
        }

    @classmethod
    def get_timeit_config(cls) -> Dict[str, Any]:
        """Get timeit runner configuration."""
        return {
            "repeat": cls.TIMEIT_REPEAT,
        }

    @classmethod
    def get_runner_config(cls, runner_name: str) -> Optional[Dict[str, Any]]:
        """Get configuration for a specific runner by name."""
        config_methods = {
            "sampling": cls.get_sampling_config,
            "timeit": cls.get_timeit_config,
        }

        method = config_methods.get(runner_name.lower())
        if method:
            return method()
        return None


def setup_logging(verbose: bool = False, debug: bool = False) -> int:
    """
    Configure logging level.

    Without either flag the level comes from ``Config.LOG_LEVEL``.

    Returns:
        The numeric level that was applied
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(Config.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Also set level for our package
    logging.getLogger('suitebench').setLevel(level)

    return level
