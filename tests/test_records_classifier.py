from __future__ import annotations

from recordsync.records.classifier import classify, classify_member, is_computed
from recordsync.records.model import MemberCategory
from recordsync.syntax.factory import type_ref
from recordsync.syntax.nodes import Accessor, FieldDeclaration, PropertyDeclaration
from tests.tree_helpers import (
    auto_property,
    constructor,
    expression_property,
    getter_with_body,
    modifier,
    mutable_field,
    readonly_field,
    record,
)


def test_readonly_field_and_get_only_property_are_value_members() -> None:
    declaration = record(
        "Foo",
        readonly_field("A", "int"),
        auto_property("Bar", "string"),
    )
    classification = classify(declaration)
    assert classification.value_names == ("A", "Bar")
    assert classification.mutable_members == ()
    assert classification.value_members[0].declaration is declaration.members[0]


def test_field_declares_one_member_per_variable() -> None:
    field = FieldDeclaration(type_ref("int"), ("X", "Y"), modifiers=("public", "readonly"))
    members = classify_member(field)
    assert [m.name for m in members] == ["X", "Y"]
    assert all(m.category is MemberCategory.VALUE for m in members)


def test_mutable_field_and_settable_property_are_mutable() -> None:
    classification = classify(
        record(
            "Foo",
            mutable_field("Count", "int"),
            auto_property("Name", "string", "get", "set"),
            auto_property("Tag", "string", "get", "init"),
        )
    )
    assert classification.value_members == ()
    assert [m.name for m in classification.mutable_members] == ["Count", "Name", "Tag"]


def test_static_const_and_non_public_members_are_ignored() -> None:
    classification = classify(
        record(
            "Foo",
            FieldDeclaration(type_ref("int"), ("Shared",), modifiers=("public", "static")),
            FieldDeclaration(type_ref("int"), ("Max",), modifiers=("public", "const")),
            FieldDeclaration(type_ref("int"), ("hidden",), modifiers=("private",)),
            auto_property("Internal", "int", modifiers=("internal",)),
            auto_property("Cached", "int", "get", "set", modifiers=("public", "static")),
        )
    )
    assert classification.value_members == ()
    assert classification.mutable_members == ()


def test_computed_properties_are_never_classified() -> None:
    getter_body = getter_with_body("X", "int").accessors[0].body
    settable_with_body = PropertyDeclaration(
        type_ref("int"),
        "Total",
        accessors=(Accessor("get"), Accessor("set", body=getter_body)),
        modifiers=("public",),
    )
    for prop in (
        expression_property("Twice", "int"),
        getter_with_body("Twice", "int"),
        settable_with_body,
    ):
        assert is_computed(prop)
        assert classify_member(prop) == ()


def test_bodiless_accessors_are_not_computed() -> None:
    assert not is_computed(auto_property("Bar", "string"))
    assert not is_computed(auto_property("Bar", "string", "get", "set"))


def test_constructors_and_methods_are_not_members() -> None:
    classification = classify(
        record(
            "Foo",
            constructor("Foo", [("Bar", "string")]),
            modifier("Foo", [("Bar", "string")]),
        )
    )
    assert classification.value_members == ()
    assert classification.mutable_members == ()


def test_duplicate_names_keep_the_first_declaration() -> None:
    first = readonly_field("A", "int")
    classification = classify(record("Foo", first, readonly_field("A", "long")))
    assert len(classification.value_members) == 1
    assert classification.value_members[0].declaration is first
