"""Canonical-shape matching for generated constructors and modifier methods.

Parameter lists are compared as sets of names; generation order is a separate
concern handled by the synthesizer.
"""

from __future__ import annotations

import logging
from typing import Sequence

from recordsync.records.classifier import classify
from recordsync.records.model import (
    ABSENT,
    DEFAULT_CONFIG,
    DriftReport,
    RecordsConfig,
    ShapeMatch,
    ShapeState,
)
from recordsync.syntax.nodes import (
    Assignment,
    ConstructorDeclaration,
    ExpressionStatement,
    GenericType,
    MemberAccess,
    MethodDeclaration,
    Name,
    NamedType,
    NullLiteral,
    ObjectCreation,
    ReturnStatement,
    SelfExpression,
    Statement,
    TypeDeclaration,
    TypeRef,
    has_modifier,
)

logger = logging.getLogger(__name__)


def constructor_candidates(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> list[ConstructorDeclaration]:
    return [
        member
        for member in type_declaration.members
        if isinstance(member, ConstructorDeclaration)
        and has_modifier(member, "public")
        and config.constructor_filter(member)
    ]


def modifier_candidates(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> list[MethodDeclaration]:
    return [
        member
        for member in type_declaration.members
        if isinstance(member, MethodDeclaration)
        and has_modifier(member, "public")
        and member.name == config.modifier_name
        and all(isinstance(parameter.default, NullLiteral) for parameter in member.parameters)
    ]


def previous_constructor(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> ConstructorDeclaration | None:
    candidates = constructor_candidates(type_declaration, config)
    return candidates[0] if candidates else None


def previous_modifier(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> MethodDeclaration | None:
    for member in type_declaration.members:
        if isinstance(member, MethodDeclaration) and member.name == config.modifier_name:
            return member
    return None


def _self_assignment(statement: Statement) -> tuple[str, str] | None:
    match statement:
        case ExpressionStatement(
            expression=Assignment(
                target=MemberAccess(target=SelfExpression(), name=left),
                value=Name(identifier=right),
            )
        ):
            return left, right
        case _:
            return None


def is_canonical_constructor(
    constructor: ConstructorDeclaration, member_names: Sequence[str]
) -> bool:
    parameters = sorted(parameter.name for parameter in constructor.parameters)
    if parameters != sorted(member_names):
        return False
    if constructor.body is None:
        return False
    statements = constructor.body.statements
    if len(statements) != len(parameters):
        return False
    assigned: list[str] = []
    for statement in statements:
        pair = _self_assignment(statement)
        if pair is None or pair[0] != pair[1]:
            return False
        assigned.append(pair[0])
    return sorted(assigned) == parameters


def creates_declaring_type(type_declaration: TypeDeclaration, created: TypeRef) -> bool:
    match created:
        case NamedType(name=name):
            return name == type_declaration.name and not type_declaration.type_parameters
        case GenericType(name=name, arguments=arguments):
            argument_names = tuple(
                argument.name if isinstance(argument, NamedType) else None
                for argument in arguments
            )
            return (
                name == type_declaration.name
                and argument_names == type_declaration.type_parameters
            )
        case _:
            return False


def is_canonical_modifier(
    method: MethodDeclaration,
    type_declaration: TypeDeclaration,
    member_names: Sequence[str],
    constructor: ConstructorDeclaration,
) -> bool:
    parameters = sorted(parameter.name for parameter in method.parameters)
    if parameters != sorted(member_names):
        return False
    if method.body is None or len(method.body.statements) != 1:
        return False
    match method.body.statements[0]:
        case ReturnStatement(expression=ObjectCreation(type=created, arguments=arguments)):
            return creates_declaring_type(type_declaration, created) and len(
                arguments
            ) == len(constructor.parameters)
        case _:
            return False


def match_constructor(
    type_declaration: TypeDeclaration,
    member_names: Sequence[str],
    config: RecordsConfig = DEFAULT_CONFIG,
) -> ShapeMatch:
    candidates = constructor_candidates(type_declaration, config)
    if not candidates:
        return ABSENT
    for candidate in candidates:
        if is_canonical_constructor(candidate, member_names):
            return ShapeMatch(ShapeState.PRESENT_CORRECT, candidate)
    return ShapeMatch(ShapeState.PRESENT_DRIFTED, candidates[0])


def match_modifier(
    type_declaration: TypeDeclaration,
    member_names: Sequence[str],
    constructor: ConstructorDeclaration | None,
    config: RecordsConfig = DEFAULT_CONFIG,
) -> ShapeMatch:
    """Match the modifier against ``constructor``, the correct constructor.

    Without a correct constructor no modifier can be correct either.
    """
    candidates = modifier_candidates(type_declaration, config)
    if not candidates:
        return ABSENT
    if constructor is not None:
        for candidate in candidates:
            if is_canonical_modifier(candidate, type_declaration, member_names, constructor):
                return ShapeMatch(ShapeState.PRESENT_CORRECT, candidate)
    return ShapeMatch(ShapeState.PRESENT_DRIFTED, candidates[0])


def detect_drift(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> DriftReport:
    member_names = classify(type_declaration).value_names
    constructor = match_constructor(type_declaration, member_names, config)
    if constructor.state is ShapeState.ABSENT:
        report = DriftReport(constructor=constructor, modifier=ABSENT)
    else:
        correct: ConstructorDeclaration | None = None
        if constructor.state is ShapeState.PRESENT_CORRECT and isinstance(
            constructor.node, ConstructorDeclaration
        ):
            correct = constructor.node
        modifier = match_modifier(type_declaration, member_names, correct, config)
        report = DriftReport(constructor=constructor, modifier=modifier)
    logger.debug(
        "%s: constructor %s, modifier %s",
        type_declaration.name,
        report.constructor.state.value,
        report.modifier.state.value,
    )
    return report
