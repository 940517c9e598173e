"""
Result types produced by a suite run.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple


@dataclass(frozen=True)
class CycleResult:
    """
    Converged statistics for one benchmark.

    Attributes:
        name: Benchmark name
        hz: Operations per second
        margin_of_error: Absolute uncertainty on hz (ops/sec)
        moe_percent: Margin of error relative to hz, in percent
    """
    name: str
    hz: float
    margin_of_error: float
    moe_percent: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "hz": self.hz,
            "margin_of_error": self.margin_of_error,
            "moe_percent": self.moe_percent,
        }


@dataclass(frozen=True)
class RunOutcome:
    """
    Final aggregate of a completed suite run.

    Unpacks as ``(final_report_text, results)``.
    """
    final_report_text: str
    results: Tuple[CycleResult, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        yield self.final_report_text
        yield self.results

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "final_report_text": self.final_report_text,
            "results": [r.to_dict() for r in self.results],
        }
