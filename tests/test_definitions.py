"""Tests for benchmark definitions, groups and flattening."""

import dataclasses

import pytest

from suitebench.benchmark.definitions import (
    BenchmarkDefinition,
    Single,
    Suite,
    flatten,
    make_benchmark,
)
from suitebench.errors import EmptyWorkUnit, MalformedDefinition


def _work():
    return 1


class TestMakeBenchmark:
    def test_builds_definition(self):
        b = make_benchmark("add", _work)
        assert b == BenchmarkDefinition(name="add", work=_work)

    def test_definition_is_immutable(self):
        b = make_benchmark("add", _work)
        with pytest.raises(dataclasses.FrozenInstanceError):
            b.name = "other"


class TestSuite:
    def test_stores_sequence_as_tuple(self):
        a, b = make_benchmark("a", _work), make_benchmark("b", _work)
        suite = Suite([a, b])
        assert suite.benchmarks == (a, b)
        assert len(suite) == 2

    def test_empty_suite(self):
        assert Suite().benchmarks == ()
        assert Suite([]).benchmarks == ()


class TestFlatten:
    def test_single_becomes_one_element_list(self):
        b = make_benchmark("only", _work)
        assert flatten(Single(b)) == [b]

    def test_suite_keeps_insertion_order(self, three_benchmarks):
        assert flatten(Suite(three_benchmarks)) == three_benchmarks

    def test_empty_suite_is_valid(self):
        assert flatten(Suite([])) == []

    def test_single_without_work_is_malformed(self):
        with pytest.raises(EmptyWorkUnit) as exc:
            flatten(Single(BenchmarkDefinition(name="broken", work=None)))
        assert exc.value.name == "broken"
        assert "missing" in exc.value.reason

    def test_non_callable_work_is_malformed(self):
        with pytest.raises(MalformedDefinition, match="not callable"):
            flatten(Suite([make_benchmark("ok", _work), BenchmarkDefinition("bad", 42)]))

    def test_empty_name_is_malformed(self):
        with pytest.raises(MalformedDefinition, match="non-empty"):
            flatten(Single(make_benchmark("", _work)))

    def test_foreign_member_is_malformed(self):
        with pytest.raises(MalformedDefinition, match="expected BenchmarkDefinition"):
            flatten(Suite([("name", _work)]))

    def test_unknown_group_is_malformed(self):
        with pytest.raises(MalformedDefinition, match="unsupported benchmark group"):
            flatten([make_benchmark("a", _work)])
