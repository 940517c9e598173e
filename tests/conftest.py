"""Shared fixtures for suitebench tests."""

from typing import List

import pytest

from suitebench.benchmark.definitions import make_benchmark

from .doubles import FakeClock, StubRunner


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def stub_runner() -> StubRunner:
    return StubRunner()


@pytest.fixture
def events() -> List[str]:
    return []


@pytest.fixture
def three_benchmarks():
    return [
        make_benchmark("alpha", lambda: None),
        make_benchmark("beta", lambda: None),
        make_benchmark("gamma", lambda: None),
    ]
