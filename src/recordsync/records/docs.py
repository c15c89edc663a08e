"""Documentation merging for regenerated constructors and modifiers.

The merge is a pure function of three inputs: the previous node's doc block,
the members' own ``<summary>`` fragments, and a default summary text. Param
entries are the only entries rebuilt; everything else passes through.
"""

from __future__ import annotations

from typing import Sequence

from recordsync.records.model import ValueMember
from recordsync.syntax.factory import param_entry, summary_element
from recordsync.syntax.nodes import DocComment, DocElement, DocNode, Node, Trivia, leading_doc


def member_summary(declaration: Node) -> DocElement | None:
    doc = leading_doc(declaration)
    if doc is None:
        return None
    for entry in doc.content:
        if isinstance(entry, DocElement) and entry.name == "summary":
            return entry
    return None


def _is_param_entry(entry: DocNode) -> bool:
    return isinstance(entry, DocElement) and entry.name == "param"


def retained_entries(content: Sequence[DocNode]) -> tuple[DocNode, ...]:
    """Non-param entries up to and including the last structured element."""
    last = -1
    for index, entry in enumerate(content):
        if isinstance(entry, DocElement):
            last = index
    return tuple(entry for entry in content[: last + 1] if not _is_param_entry(entry))


def param_entries(members: Sequence[ValueMember]) -> tuple[DocElement, ...]:
    return tuple(
        param_entry(member.name, member.summary.content if member.summary else ())
        for member in members
    )


def merge_documentation(
    previous: DocComment | None,
    members: Sequence[ValueMember],
    default_summary: str,
) -> DocComment | None:
    if previous is None and not any(member.summary for member in members):
        return None
    start: tuple[DocNode, ...] = (
        previous.content if previous is not None else (summary_element(default_summary),)
    )
    return DocComment(retained_entries(start) + param_entries(members))


def with_documentation(
    trivia: tuple[Trivia, ...], doc: DocComment | None
) -> tuple[Trivia, ...]:
    """Swap the doc block inside ``trivia``; a new block goes last, next to the node."""
    if doc is None:
        return trivia
    for index, entry in enumerate(trivia):
        if isinstance(entry, DocComment):
            return trivia[:index] + (doc,) + trivia[index + 1 :]
    return trivia + (doc,)
