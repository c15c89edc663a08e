from __future__ import annotations

import pytest

from recordsync.records.nullability import (
    NullabilityInferencer,
    is_nullable_wrapper,
    is_type_non_nullable,
    prior_nullable_parameters,
)
from recordsync.syntax.factory import type_ref
from tests.tree_helpers import modifier


@pytest.mark.parametrize(
    "text",
    ["int", "long", "sbyte", "ushort", "double", "bool", "char", "decimal",
     "Guid", "System.Guid", "DateTime", "System.DateTimeOffset", "TimeSpan"],
)
def test_allow_listed_types_are_non_nullable(text: str) -> None:
    assert is_type_non_nullable(type_ref(text))


@pytest.mark.parametrize(
    "text", ["string", "object", "SomeStruct", "int?", "DateTime?", "List<int>", "Nullable<int>"]
)
def test_other_types_default_to_nullable(text: str) -> None:
    assert not is_type_non_nullable(type_ref(text))


def test_extra_names_extend_the_allow_list() -> None:
    assert is_type_non_nullable(type_ref("Money"), frozenset({"Money"}))


def test_nullable_wrappers() -> None:
    assert is_nullable_wrapper(type_ref("SomeStruct?"))
    assert is_nullable_wrapper(type_ref("Nullable<SomeStruct>"))
    assert not is_nullable_wrapper(type_ref("SomeStruct"))
    assert not is_nullable_wrapper(None)


def test_prior_modifier_marks_wrapped_parameters() -> None:
    previous = modifier("Foo", [("Bar", "string"), ("Something", "SomeStruct?")])
    assert prior_nullable_parameters(previous) == frozenset({"Something"})
    assert prior_nullable_parameters(None) == frozenset()


def test_prior_modifier_takes_precedence_over_allow_list() -> None:
    inferencer = NullabilityInferencer(prior_nullable=frozenset({"Something", "N"}))
    # A user struct wrapped by the previous round is recognized as non-nullable.
    assert inferencer.is_non_nullable("Something", type_ref("SomeStruct"))
    # A member already declared nullable never gets a second wrapper.
    assert not inferencer.is_non_nullable("N", type_ref("decimal?"))
    # Members unknown to the previous modifier fall back to the allow-list.
    assert inferencer.is_non_nullable("Count", type_ref("int"))
    assert not inferencer.is_non_nullable("Bar", type_ref("string"))
