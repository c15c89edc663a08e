"""Immutable syntax tree consumed and produced by the record engine.

Nodes are frozen dataclasses. A tree is never edited in place: callers derive
new nodes with :meth:`Node.with_changes` and splice them into a copy of the
parent with :func:`recordsync.syntax.rewrite.replace_node`. Node identity
matters for replacement, value equality matters for comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Iterator, TypeAlias, TypeVar, Union

NodeT = TypeVar("NodeT", bound="Node")


@dataclass(frozen=True)
class Node:
    def with_changes(self: NodeT, **changes: object) -> NodeT:
        return replace(self, **changes)

    def children(self) -> Iterator[Node]:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, tuple):
                for entry in value:
                    if isinstance(entry, Node):
                        yield entry


@dataclass(frozen=True)
class TextSpan(Node):
    start: int = 0
    end: int = 0

    def contains(self, position: int) -> bool:
        return self.start <= position < self.end


# Trivia


@dataclass(frozen=True)
class DocText(Node):
    text: str


@dataclass(frozen=True)
class DocElement(Node):
    """A structured documentation entry such as ``<summary>`` or ``<param>``."""

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    content: tuple[DocNode, ...] = ()

    def attribute(self, key: str) -> str | None:
        for name, value in self.attributes:
            if name == key:
                return value
        return None


@dataclass(frozen=True)
class DocComment(Node):
    content: tuple[DocNode, ...] = ()


@dataclass(frozen=True)
class Comment(Node):
    text: str


# Types


@dataclass(frozen=True)
class PredefinedType(Node):
    keyword: str


@dataclass(frozen=True)
class NamedType(Node):
    name: str


@dataclass(frozen=True)
class GenericType(Node):
    name: str
    arguments: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class NullableType(Node):
    inner: TypeRef


# Expressions


@dataclass(frozen=True)
class Name(Node):
    identifier: str


@dataclass(frozen=True)
class SelfExpression(Node):
    pass


@dataclass(frozen=True)
class MemberAccess(Node):
    target: Expression
    name: str


@dataclass(frozen=True)
class Assignment(Node):
    target: Expression
    value: Expression


@dataclass(frozen=True)
class Coalesce(Node):
    left: Expression
    right: Expression


@dataclass(frozen=True)
class NullLiteral(Node):
    pass


@dataclass(frozen=True)
class Literal(Node):
    text: str


@dataclass(frozen=True)
class ObjectCreation(Node):
    type: TypeRef
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Invocation(Node):
    target: Expression
    arguments: tuple[Expression, ...] = ()


# Statements


@dataclass(frozen=True)
class ExpressionStatement(Node):
    expression: Expression


@dataclass(frozen=True)
class ReturnStatement(Node):
    expression: Expression | None = None


@dataclass(frozen=True)
class Block(Node):
    statements: tuple[Statement, ...] = ()


# Declarations


@dataclass(frozen=True)
class Attribute(Node):
    name: str
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class AttributeList(Node):
    attributes: tuple[Attribute, ...] = ()
    target: str | None = None


@dataclass(frozen=True)
class Parameter(Node):
    name: str
    type: TypeRef | None = None
    default: Expression | None = None
    attribute_lists: tuple[AttributeList, ...] = ()
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldDeclaration(Node):
    type: TypeRef
    variables: tuple[str, ...]
    modifiers: tuple[str, ...] = ()
    attribute_lists: tuple[AttributeList, ...] = ()
    leading_trivia: tuple[Trivia, ...] = ()


@dataclass(frozen=True)
class Accessor(Node):
    kind: str
    body: Block | None = None
    expression_body: Expression | None = None
    modifiers: tuple[str, ...] = ()

    @property
    def has_body(self) -> bool:
        return self.body is not None or self.expression_body is not None


@dataclass(frozen=True)
class PropertyDeclaration(Node):
    type: TypeRef
    name: str
    # None marks an expression-bodied property (``int X => ...``).
    accessors: tuple[Accessor, ...] | None = ()
    expression_body: Expression | None = None
    modifiers: tuple[str, ...] = ()
    attribute_lists: tuple[AttributeList, ...] = ()
    leading_trivia: tuple[Trivia, ...] = ()


@dataclass(frozen=True)
class ConstructorDeclaration(Node):
    name: str
    parameters: tuple[Parameter, ...] = ()
    body: Block | None = None
    modifiers: tuple[str, ...] = ()
    attribute_lists: tuple[AttributeList, ...] = ()
    leading_trivia: tuple[Trivia, ...] = ()


@dataclass(frozen=True)
class MethodDeclaration(Node):
    return_type: TypeRef
    name: str
    parameters: tuple[Parameter, ...] = ()
    body: Block | None = None
    modifiers: tuple[str, ...] = ()
    attribute_lists: tuple[AttributeList, ...] = ()
    leading_trivia: tuple[Trivia, ...] = ()
    type_parameters: tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeDeclaration(Node):
    name: str
    members: tuple[Member, ...] = ()
    kind: str = "class"
    type_parameters: tuple[str, ...] = ()
    modifiers: tuple[str, ...] = ()
    attribute_lists: tuple[AttributeList, ...] = ()
    leading_trivia: tuple[Trivia, ...] = ()
    span: TextSpan = TextSpan()
    open_brace: TextSpan = TextSpan()

    @property
    def finding_span(self) -> TextSpan:
        """Declaration start through the end of its opening brace."""
        return TextSpan(self.span.start, self.open_brace.end)


@dataclass(frozen=True)
class NamespaceDeclaration(Node):
    name: str
    members: tuple[Union[TypeDeclaration, NamespaceDeclaration], ...] = ()


@dataclass(frozen=True)
class CompilationUnit(Node):
    members: tuple[Union[TypeDeclaration, NamespaceDeclaration], ...] = ()


DocNode: TypeAlias = Union[DocElement, DocText]
Trivia: TypeAlias = Union[Comment, DocComment]
TypeRef: TypeAlias = Union[PredefinedType, NamedType, GenericType, NullableType]
Expression: TypeAlias = Union[
    Name,
    SelfExpression,
    MemberAccess,
    Assignment,
    Coalesce,
    NullLiteral,
    Literal,
    ObjectCreation,
    Invocation,
]
Statement: TypeAlias = Union[ExpressionStatement, ReturnStatement, Block]
Member: TypeAlias = Union[
    FieldDeclaration,
    PropertyDeclaration,
    ConstructorDeclaration,
    MethodDeclaration,
    TypeDeclaration,
]

NODE_TYPES: tuple[type[Node], ...] = (
    TextSpan,
    DocText,
    DocElement,
    DocComment,
    Comment,
    PredefinedType,
    NamedType,
    GenericType,
    NullableType,
    Name,
    SelfExpression,
    MemberAccess,
    Assignment,
    Coalesce,
    NullLiteral,
    Literal,
    ObjectCreation,
    Invocation,
    ExpressionStatement,
    ReturnStatement,
    Block,
    Attribute,
    AttributeList,
    Parameter,
    FieldDeclaration,
    Accessor,
    PropertyDeclaration,
    ConstructorDeclaration,
    MethodDeclaration,
    TypeDeclaration,
    NamespaceDeclaration,
    CompilationUnit,
)


def has_modifier(node: Node, keyword: str) -> bool:
    return keyword in getattr(node, "modifiers", ())


def leading_doc(node: Node | None) -> DocComment | None:
    if node is None:
        return None
    for trivia in getattr(node, "leading_trivia", ()):
        if isinstance(trivia, DocComment):
            return trivia
    return None
