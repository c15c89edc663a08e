from __future__ import annotations

from recordsync.records.docs import (
    member_summary,
    merge_documentation,
    retained_entries,
    with_documentation,
)
from recordsync.records.model import DEFAULT_CONSTRUCTOR_SUMMARY, ValueMember
from recordsync.records.synthesizer import update_constructor, update_constructor_and_modifier
from recordsync.syntax.factory import doc_comment, param_entry, summary_element, type_ref
from recordsync.syntax.nodes import (
    Comment,
    ConstructorDeclaration,
    DocComment,
    DocElement,
    DocText,
    MethodDeclaration,
    leading_doc,
)
from tests.tree_helpers import constructor, doc, modifier, readonly_field, record


def _member(name: str, summary: str | None = None) -> ValueMember:
    return ValueMember(
        name=name,
        type=type_ref("int"),
        is_non_nullable=True,
        summary=summary_element(summary) if summary else None,
    )


def _texts(entry: DocElement) -> tuple[str, ...]:
    return tuple(node.text for node in entry.content if isinstance(node, DocText))


def test_member_summary_reads_leading_doc() -> None:
    assert member_summary(readonly_field("A", "int", summary="My A")) == summary_element("My A")
    assert member_summary(readonly_field("A", "int")) is None


def test_new_constructor_gets_default_summary_and_one_param_per_member() -> None:
    declaration = record(
        "Foo",
        readonly_field("A", "int", summary="My A"),
        readonly_field("B", "int"),
    )
    updated = update_constructor(declaration)
    (ctor,) = [m for m in updated.members if isinstance(m, ConstructorDeclaration)]
    documentation = leading_doc(ctor)
    assert documentation is not None
    summary, first, second = documentation.content
    assert summary == summary_element(DEFAULT_CONSTRUCTOR_SUMMARY)
    assert first.attribute("name") == "A"
    assert _texts(first) == ("My A",)
    assert second.attribute("name") == "B"
    assert second.content == ()


def test_no_documentation_without_previous_block_or_member_summaries() -> None:
    assert merge_documentation(None, [_member("A"), _member("B")], "unused") is None
    updated = update_constructor_and_modifier(record("Foo", readonly_field("A", "int")))
    assert all(leading_doc(member) is None for member in updated.members)


def test_previous_constructor_documentation_is_kept() -> None:
    previous = doc_comment(
        summary_element("The Ctor"),
        param_entry("A", (DocText("Stale text"),)),
        DocElement("remarks", (), (DocText("Keep me"),)),
        DocText("\n"),
    )
    declaration = record(
        "Foo",
        readonly_field("A", "int", summary="My A"),
        readonly_field("B", "int"),
        constructor("Foo", [("A", "int")], leading_trivia=(previous,)),
    )
    updated = update_constructor(declaration)
    (ctor,) = [m for m in updated.members if isinstance(m, ConstructorDeclaration)]
    content = leading_doc(ctor).content
    assert content[0] == summary_element("The Ctor")
    assert content[1].name == "remarks"
    assert [entry.attribute("name") for entry in content[2:]] == ["A", "B"]
    assert _texts(content[2]) == ("My A",)


def test_previous_modifier_documentation_is_kept() -> None:
    previous = doc_comment(
        summary_element("The With method"),
        param_entry("A", (DocText("My A"),)),
    )
    declaration = record(
        "Foo",
        readonly_field("A", "int", summary="My A"),
        readonly_field("B", "int"),
        constructor("Foo", [("A", "int")]),
        modifier("Foo", [("A", "int?")], leading_trivia=(previous,)),
    )
    updated = update_constructor_and_modifier(declaration)
    (method,) = [m for m in updated.members if isinstance(m, MethodDeclaration)]
    content = leading_doc(method).content
    assert content[0] == summary_element("The With method")
    assert [entry.attribute("name") for entry in content[1:]] == ["A", "B"]


def test_member_text_wins_over_previous_param_text() -> None:
    previous = doc_comment(param_entry("A", (DocText("Old"),)))
    merged = merge_documentation(previous, [_member("A", "New")], "unused")
    assert merged == DocComment((param_entry("A", (DocText("New"),)),))


def test_retained_entries_drop_params_and_trailing_text() -> None:
    content = (
        DocText("\n"),
        summary_element("S"),
        param_entry("X"),
        DocText(" "),
        DocElement("returns", (), ()),
        DocText("\n"),
    )
    assert retained_entries(content) == (
        DocText("\n"),
        summary_element("S"),
        DocText(" "),
        DocElement("returns", (), ()),
    )


def test_with_documentation_preserves_other_trivia() -> None:
    comment = Comment("// generated")
    old = doc_comment(summary_element("old"))
    new = doc_comment(summary_element("new"))
    assert with_documentation((comment, old), new) == (comment, new)
    assert with_documentation((comment,), new) == (comment, new)
    assert with_documentation((comment,), None) == (comment,)


def test_doc_helper_builds_summary_comment() -> None:
    (comment,) = doc("text")
    assert comment == DocComment((summary_element("text"),))
