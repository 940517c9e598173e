"""
Exceptions raised by the suite executor and the statistical runners.
"""

from typing import Optional


class BenchError(Exception):
    """Base exception for benchmark errors."""
    pass


class MalformedDefinition(BenchError):
    """Raised when a benchmark definition cannot be run at all."""

    def __init__(self, name: Optional[str], reason: str):
        self.name = name
        self.reason = reason
        label = repr(name) if name else "<unnamed>"
        super().__init__(f"Malformed benchmark {label}: {reason}")


# Name used for a definition whose work callable is missing.
EmptyWorkUnit = MalformedDefinition


class BenchmarkExecutionFailure(BenchError):
    """Raised when the runner fails while measuring a benchmark."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Benchmark {name!r} failed: {cause}")


class ConfigurationError(BenchError):
    """Raised when runner configuration is invalid."""
    pass
