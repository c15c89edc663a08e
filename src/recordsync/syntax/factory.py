"""Helpers for building syntax nodes."""

from __future__ import annotations

import re
from typing import Iterable

from recordsync.syntax.nodes import (
    Assignment,
    Attribute,
    AttributeList,
    Coalesce,
    DocComment,
    DocElement,
    DocNode,
    DocText,
    ExpressionStatement,
    GenericType,
    MemberAccess,
    Name,
    NamedType,
    NullableType,
    PredefinedType,
    SelfExpression,
    TypeRef,
)

PREDEFINED_KEYWORDS: frozenset[str] = frozenset(
    {
        "bool",
        "byte",
        "char",
        "decimal",
        "double",
        "float",
        "int",
        "long",
        "nint",
        "nuint",
        "object",
        "sbyte",
        "short",
        "string",
        "uint",
        "ulong",
        "ushort",
        "void",
    }
)

_TYPE_TOKEN_RE = re.compile(r"\s*(?:(?P<name>[A-Za-z_][A-Za-z0-9_.]*)|(?P<punct>[<>,?]))")


def type_syntax(identifier: str, *arguments: str | TypeRef) -> TypeRef:
    """Build a type reference, generic when type arguments are given.

    String arguments become plain named types, so ``type_syntax("Foo", "T")``
    reads as ``Foo<T>``.
    """
    if not arguments:
        return _named(identifier)
    resolved = tuple(
        _named(argument) if isinstance(argument, str) else argument
        for argument in arguments
    )
    return GenericType(identifier, resolved)


def _named(identifier: str) -> TypeRef:
    if identifier in PREDEFINED_KEYWORDS:
        return PredefinedType(identifier)
    return NamedType(identifier)


def type_ref(text: str) -> TypeRef:
    """Read a type reference such as ``int?`` or ``Dictionary<string, Foo<T>>``."""
    tokens = _tokenize_type(text)
    parsed, index = _read_type(tokens, 0, text)
    if index != len(tokens):
        raise ValueError(f"Unexpected trailing input in type {text!r}")
    return parsed


def _tokenize_type(text: str) -> list[str]:
    tokens: list[str] = []
    position = 0
    stripped = text.rstrip()
    while position < len(stripped):
        match = _TYPE_TOKEN_RE.match(stripped, position)
        if match is None:
            raise ValueError(f"Cannot read type {text!r} at offset {position}")
        tokens.append(match.group("name") or match.group("punct"))
        position = match.end()
    return tokens


def _read_type(tokens: list[str], index: int, text: str) -> tuple[TypeRef, int]:
    if index >= len(tokens) or tokens[index] in {"<", ">", ",", "?"}:
        raise ValueError(f"Expected a type name in {text!r}")
    identifier = tokens[index]
    index += 1
    result: TypeRef
    if index < len(tokens) and tokens[index] == "<":
        arguments: list[TypeRef] = []
        index += 1
        while True:
            argument, index = _read_type(tokens, index, text)
            arguments.append(argument)
            if index < len(tokens) and tokens[index] == ",":
                index += 1
                continue
            if index < len(tokens) and tokens[index] == ">":
                index += 1
                break
            raise ValueError(f"Unterminated type argument list in {text!r}")
        result = GenericType(identifier, tuple(arguments))
    else:
        result = _named(identifier)
    while index < len(tokens) and tokens[index] == "?":
        result = NullableType(result)
        index += 1
    return result, index


def self_member(name: str) -> MemberAccess:
    return MemberAccess(SelfExpression(), name)


def assign_to_self(name: str) -> ExpressionStatement:
    """``self.name = name``"""
    return ExpressionStatement(Assignment(self_member(name), Name(name)))


def coalesce_with_self(name: str) -> Coalesce:
    """``name ?? self.name``"""
    return Coalesce(Name(name), self_member(name))


def attribute_list(*names: str) -> AttributeList:
    return AttributeList(tuple(Attribute(name) for name in names))


def summary_element(text: str) -> DocElement:
    return DocElement("summary", (), (DocText(text),))


def param_entry(name: str, content: Iterable[DocNode] = ()) -> DocElement:
    return DocElement("param", (("name", name),), tuple(content))


def doc_comment(*content: DocNode) -> DocComment:
    return DocComment(tuple(content))
