"""Immutable syntax tree, rewrite primitives and JSON transport."""

from recordsync.syntax.codec import decode, decode_text, encode, encode_text
from recordsync.syntax.factory import type_ref, type_syntax
from recordsync.syntax.nodes import (
    Accessor,
    Assignment,
    Attribute,
    AttributeList,
    Block,
    Coalesce,
    Comment,
    CompilationUnit,
    ConstructorDeclaration,
    DocComment,
    DocElement,
    DocText,
    ExpressionStatement,
    FieldDeclaration,
    GenericType,
    Invocation,
    Literal,
    MemberAccess,
    MethodDeclaration,
    Name,
    NamedType,
    NamespaceDeclaration,
    Node,
    NullableType,
    NullLiteral,
    ObjectCreation,
    Parameter,
    PredefinedType,
    PropertyDeclaration,
    ReturnStatement,
    SelfExpression,
    TextSpan,
    TypeDeclaration,
)
from recordsync.syntax.rewrite import find_type_at, replace_node, type_declarations, walk

__all__ = [
    "Accessor",
    "Assignment",
    "Attribute",
    "AttributeList",
    "Block",
    "Coalesce",
    "Comment",
    "CompilationUnit",
    "ConstructorDeclaration",
    "DocComment",
    "DocElement",
    "DocText",
    "ExpressionStatement",
    "FieldDeclaration",
    "GenericType",
    "Invocation",
    "Literal",
    "MemberAccess",
    "MethodDeclaration",
    "Name",
    "NamedType",
    "NamespaceDeclaration",
    "Node",
    "NullLiteral",
    "NullableType",
    "ObjectCreation",
    "Parameter",
    "PredefinedType",
    "PropertyDeclaration",
    "ReturnStatement",
    "SelfExpression",
    "TextSpan",
    "TypeDeclaration",
    "decode",
    "decode_text",
    "encode",
    "encode_text",
    "find_type_at",
    "replace_node",
    "type_declarations",
    "type_ref",
    "type_syntax",
    "walk",
]
