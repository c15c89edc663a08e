"""Build canonical constructor and modifier nodes for a value-shaped type.

Members are emitted in declaration order. A regenerated node keeps the
previous node's attribute lists and leading trivia, with its doc block merged,
and takes the previous node's place; a first-time node is appended.
"""

from __future__ import annotations

import logging
from typing import Sequence

from recordsync.records.classifier import classify
from recordsync.records.docs import member_summary, merge_documentation, with_documentation
from recordsync.records.matcher import previous_constructor, previous_modifier
from recordsync.records.model import DEFAULT_CONFIG, RecordsConfig, ValueMember
from recordsync.records.nullability import NullabilityInferencer, prior_nullable_parameters
from recordsync.syntax.factory import assign_to_self, coalesce_with_self, type_syntax
from recordsync.syntax.nodes import (
    AttributeList,
    Block,
    ConstructorDeclaration,
    Member,
    MethodDeclaration,
    NullableType,
    NullLiteral,
    ObjectCreation,
    Parameter,
    ReturnStatement,
    TypeDeclaration,
    leading_doc,
)
from recordsync.syntax.rewrite import replace_node

logger = logging.getLogger(__name__)

_PUBLIC = ("public",)


def collect_value_members(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> list[ValueMember]:
    inferencer = NullabilityInferencer(
        prior_nullable=prior_nullable_parameters(previous_modifier(type_declaration, config)),
        extra_names=config.non_nullable_types,
    )
    constructor = previous_constructor(type_declaration, config)
    parameter_attributes: dict[str, tuple[AttributeList, ...]] = {}
    if constructor is not None:
        for parameter in constructor.parameters:
            parameter_attributes.setdefault(parameter.name, parameter.attribute_lists)
    return [
        ValueMember(
            name=classified.name,
            type=classified.type,
            is_non_nullable=inferencer.is_non_nullable(classified.name, classified.type),
            attribute_lists=parameter_attributes.get(classified.name, ()),
            summary=member_summary(classified.declaration),
        )
        for classified in classify(type_declaration).value_members
    ]


def make_constructor(
    type_declaration: TypeDeclaration,
    members: Sequence[ValueMember],
    previous: ConstructorDeclaration | None,
    config: RecordsConfig = DEFAULT_CONFIG,
) -> ConstructorDeclaration:
    parameters = tuple(
        Parameter(member.name, member.type, attribute_lists=member.attribute_lists)
        for member in members
    )
    body = Block(tuple(assign_to_self(member.name) for member in members))
    doc = merge_documentation(leading_doc(previous), members, config.constructor_summary)
    return ConstructorDeclaration(
        name=type_declaration.name,
        parameters=parameters,
        body=body,
        modifiers=_PUBLIC,
        attribute_lists=previous.attribute_lists if previous is not None else (),
        leading_trivia=with_documentation(
            previous.leading_trivia if previous is not None else (), doc
        ),
    )


def make_modifier(
    type_declaration: TypeDeclaration,
    members: Sequence[ValueMember],
    previous: MethodDeclaration | None,
    config: RecordsConfig = DEFAULT_CONFIG,
) -> MethodDeclaration:
    parameters = tuple(
        Parameter(
            member.name,
            NullableType(member.type) if member.is_non_nullable else member.type,
            default=NullLiteral(),
            attribute_lists=member.attribute_lists,
        )
        for member in members
    )
    declaring_type = type_syntax(type_declaration.name, *type_declaration.type_parameters)
    creation = ObjectCreation(
        declaring_type,
        tuple(coalesce_with_self(member.name) for member in members),
    )
    doc = merge_documentation(leading_doc(previous), members, config.modifier_summary)
    return MethodDeclaration(
        return_type=declaring_type,
        name=config.modifier_name,
        parameters=parameters,
        body=Block((ReturnStatement(creation),)),
        modifiers=_PUBLIC,
        attribute_lists=previous.attribute_lists if previous is not None else (),
        leading_trivia=with_documentation(
            previous.leading_trivia if previous is not None else (), doc
        ),
    )


def _put_member(
    type_declaration: TypeDeclaration, previous: Member | None, member: Member
) -> TypeDeclaration:
    if previous is None:
        return type_declaration.with_changes(members=type_declaration.members + (member,))
    return replace_node(type_declaration, previous, member)


def update_or_add_constructor(
    type_declaration: TypeDeclaration,
    members: Sequence[ValueMember],
    config: RecordsConfig = DEFAULT_CONFIG,
) -> TypeDeclaration:
    previous = previous_constructor(type_declaration, config)
    constructor = make_constructor(type_declaration, members, previous, config)
    logger.debug(
        "%s: %s constructor with %d parameter(s)",
        type_declaration.name,
        "adding" if previous is None else "replacing",
        len(constructor.parameters),
    )
    return _put_member(type_declaration, previous, constructor)


def update_or_add_modifier(
    type_declaration: TypeDeclaration,
    members: Sequence[ValueMember],
    config: RecordsConfig = DEFAULT_CONFIG,
) -> TypeDeclaration:
    previous = previous_modifier(type_declaration, config)
    modifier = make_modifier(type_declaration, members, previous, config)
    logger.debug(
        "%s: %s %s method with %d parameter(s)",
        type_declaration.name,
        "adding" if previous is None else "replacing",
        config.modifier_name,
        len(modifier.parameters),
    )
    return _put_member(type_declaration, previous, modifier)


def update_constructor(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> TypeDeclaration:
    members = collect_value_members(type_declaration, config)
    return update_or_add_constructor(type_declaration, members, config)


def update_constructor_and_modifier(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> TypeDeclaration:
    members = collect_value_members(type_declaration, config)
    updated = update_or_add_constructor(type_declaration, members, config)
    return update_or_add_modifier(updated, members, config)
