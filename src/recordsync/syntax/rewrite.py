from __future__ import annotations

from dataclasses import fields
from typing import Iterator

from recordsync.exceptions import HostContractError
from recordsync.syntax.nodes import Node, NodeT, TypeDeclaration


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and every descendant in pre-order."""
    yield node
    for child in node.children():
        yield from walk(child)


def type_declarations(root: Node) -> Iterator[TypeDeclaration]:
    for node in walk(root):
        if isinstance(node, TypeDeclaration):
            yield node


def find_type_at(root: Node, position: int) -> TypeDeclaration | None:
    """Return the innermost type declaration whose span holds ``position``."""
    found: TypeDeclaration | None = None
    for declaration in type_declarations(root):
        # Pre-order visits an enclosing type before the types nested in it.
        if declaration.span.contains(position):
            found = declaration
    return found


def replace_node(root: NodeT, old: Node, new: Node) -> NodeT:
    """Return a copy of ``root`` with ``old`` swapped for ``new``.

    ``old`` is matched by identity, so structurally equal siblings are left
    alone. Only the ancestors of ``old`` are rebuilt; every other subtree is
    shared with ``root``.
    """
    replaced = _replace(root, old, new)
    if replaced is None:
        raise HostContractError(
            "node to replace is not part of the tree",
            node_kind=type(old).__name__,
        )
    return replaced  # type: ignore[return-value]


def _replace(node: Node, old: Node, new: Node) -> Node | None:
    if node is old:
        return new
    for item in fields(node):
        value = getattr(node, item.name)
        if isinstance(value, Node):
            updated = _replace(value, old, new)
            if updated is not None:
                return node.with_changes(**{item.name: updated})
        elif isinstance(value, tuple):
            for index, entry in enumerate(value):
                if not isinstance(entry, Node):
                    continue
                updated = _replace(entry, old, new)
                if updated is not None:
                    spliced = value[:index] + (updated,) + value[index + 1 :]
                    return node.with_changes(**{item.name: spliced})
    return None
