from __future__ import annotations

from typing import Iterable, Sequence

from recordsync.syntax.factory import (
    assign_to_self,
    coalesce_with_self,
    doc_comment,
    summary_element,
    type_ref,
    type_syntax,
)
from recordsync.syntax.nodes import (
    Accessor,
    AttributeList,
    Block,
    ConstructorDeclaration,
    FieldDeclaration,
    Literal,
    Member,
    MethodDeclaration,
    NullLiteral,
    ObjectCreation,
    Parameter,
    PropertyDeclaration,
    ReturnStatement,
    TextSpan,
    Trivia,
    TypeDeclaration,
)


def doc(text: str) -> tuple[Trivia, ...]:
    return (doc_comment(summary_element(text)),)


def readonly_field(name: str, type_text: str, *, summary: str | None = None) -> FieldDeclaration:
    return FieldDeclaration(
        type_ref(type_text),
        (name,),
        modifiers=("public", "readonly"),
        leading_trivia=doc(summary) if summary else (),
    )


def mutable_field(name: str, type_text: str) -> FieldDeclaration:
    return FieldDeclaration(type_ref(type_text), (name,), modifiers=("public",))


def auto_property(
    name: str,
    type_text: str,
    *accessor_kinds: str,
    modifiers: tuple[str, ...] = ("public",),
    summary: str | None = None,
) -> PropertyDeclaration:
    kinds = accessor_kinds or ("get",)
    return PropertyDeclaration(
        type_ref(type_text),
        name,
        accessors=tuple(Accessor(kind) for kind in kinds),
        modifiers=modifiers,
        leading_trivia=doc(summary) if summary else (),
    )


def expression_property(name: str, type_text: str) -> PropertyDeclaration:
    return PropertyDeclaration(
        type_ref(type_text),
        name,
        accessors=None,
        expression_body=Literal("2 * A"),
        modifiers=("public",),
    )


def getter_with_body(name: str, type_text: str) -> PropertyDeclaration:
    body = Block((ReturnStatement(Literal("2 * A")),))
    return PropertyDeclaration(
        type_ref(type_text),
        name,
        accessors=(Accessor("get", body=body),),
        modifiers=("public",),
    )


def constructor(
    type_name: str,
    parameters: Sequence[tuple[str, str]],
    *,
    assigned: Iterable[str] | None = None,
    attribute_lists: tuple[AttributeList, ...] = (),
    parameter_attributes: dict[str, tuple[AttributeList, ...]] | None = None,
    leading_trivia: tuple[Trivia, ...] = (),
    modifiers: tuple[str, ...] = ("public",),
) -> ConstructorDeclaration:
    names = [name for name, _ in parameters] if assigned is None else list(assigned)
    attributes = parameter_attributes or {}
    return ConstructorDeclaration(
        type_name,
        tuple(
            Parameter(name, type_ref(type_text), attribute_lists=attributes.get(name, ()))
            for name, type_text in parameters
        ),
        Block(tuple(assign_to_self(name) for name in names)),
        modifiers=modifiers,
        attribute_lists=attribute_lists,
        leading_trivia=leading_trivia,
    )


def modifier(
    type_name: str,
    parameters: Sequence[tuple[str, str]],
    *,
    type_arguments: Sequence[str] = (),
    passed: Iterable[str] | None = None,
    attribute_lists: tuple[AttributeList, ...] = (),
    leading_trivia: tuple[Trivia, ...] = (),
    name: str = "With",
) -> MethodDeclaration:
    declaring = type_syntax(type_name, *type_arguments)
    arguments = [parameter for parameter, _ in parameters] if passed is None else list(passed)
    return MethodDeclaration(
        declaring,
        name,
        tuple(
            Parameter(parameter, type_ref(type_text), default=NullLiteral())
            for parameter, type_text in parameters
        ),
        Block(
            (
                ReturnStatement(
                    ObjectCreation(
                        declaring, tuple(coalesce_with_self(argument) for argument in arguments)
                    )
                ),
            )
        ),
        modifiers=("public",),
        attribute_lists=attribute_lists,
        leading_trivia=leading_trivia,
    )


def record(
    name: str,
    *members: Member,
    type_parameters: tuple[str, ...] = (),
    kind: str = "class",
    start: int = 0,
    length: int = 100,
) -> TypeDeclaration:
    return TypeDeclaration(
        name,
        tuple(members),
        kind=kind,
        type_parameters=type_parameters,
        modifiers=("public",),
        span=TextSpan(start, start + length),
        open_brace=TextSpan(start + 12, start + 13),
    )
