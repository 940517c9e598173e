"""
Benchmark definitions and the groups they are submitted in.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple, Union

from ..errors import MalformedDefinition


@dataclass(frozen=True)
class BenchmarkDefinition:
    """
    A named, runnable unit of work.

    Attributes:
        name: Label used in results and summary lines
        work: Zero-argument callable timed by the runner
    """
    name: str
    work: Callable[[], Any]


@dataclass(frozen=True)
class Single:
    """A group holding exactly one benchmark."""
    benchmark: BenchmarkDefinition


@dataclass(frozen=True)
class Suite:
    """
    An ordered collection of benchmarks.

    Order is both execution order and report order. A suite may be empty.
    """
    benchmarks: Tuple[BenchmarkDefinition, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "benchmarks", tuple(self.benchmarks))

    def __len__(self) -> int:
        return len(self.benchmarks)


BenchmarkGroup = Union[Single, Suite]


def make_benchmark(name: str, work: Callable[[], Any]) -> BenchmarkDefinition:
    """
    Create a benchmark definition.

    Example:
        suite = Suite([
            make_benchmark("sum", lambda: sum(range(100))),
            make_benchmark("sorted", lambda: sorted(range(100, 0, -1))),
        ])
    """
    return BenchmarkDefinition(name=name, work=work)


def validate(definition: BenchmarkDefinition) -> BenchmarkDefinition:
    """
    Check that a definition can be handed to a runner.

    Raises:
        MalformedDefinition: If it is not a definition, the name is empty,
            or the work is missing or not callable
    """
    if not isinstance(definition, BenchmarkDefinition):
        raise MalformedDefinition(None, f"expected BenchmarkDefinition, got {type(definition).__name__}")

    name = definition.name
    if not isinstance(name, str) or not name:
        raise MalformedDefinition(None, "name must be a non-empty string")

    if definition.work is None:
        raise MalformedDefinition(name, "work callable is missing")
    if not callable(definition.work):
        raise MalformedDefinition(name, "work is not callable")

    return definition


def flatten(group: BenchmarkGroup) -> List[BenchmarkDefinition]:
    """
    Turn a group into its ordered list of validated definitions.

    Args:
        group: Single or Suite

    Returns:
        Definitions in execution order
    """
    if isinstance(group, Single):
        benchmarks: Sequence[BenchmarkDefinition] = (group.benchmark,)
    elif isinstance(group, Suite):
        benchmarks = group.benchmarks
    else:
        raise MalformedDefinition(None, f"unsupported benchmark group: {type(group).__name__}")

    return [validate(b) for b in benchmarks]
