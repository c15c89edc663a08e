"""Member classification for value-shaped types.

Only public, non-static fields and properties take part. A field is a value
member when it is ``readonly``; a property is one when it exposes nothing but
bodiless ``get`` accessors. Properties with any accessor body, or an
expression body, are computed and never classified either way.
"""

from __future__ import annotations

import logging

from recordsync.records.model import Classification, ClassifiedMember, MemberCategory
from recordsync.syntax.nodes import (
    FieldDeclaration,
    Member,
    PropertyDeclaration,
    TypeDeclaration,
    has_modifier,
)

logger = logging.getLogger(__name__)

_STATIC_MODIFIERS = ("static", "const")


def _is_instance_public(member: FieldDeclaration | PropertyDeclaration) -> bool:
    if any(has_modifier(member, keyword) for keyword in _STATIC_MODIFIERS):
        return False
    return has_modifier(member, "public")


def is_computed(prop: PropertyDeclaration) -> bool:
    if prop.accessors is None or prop.expression_body is not None:
        return True
    if not prop.accessors:
        return True
    return any(accessor.has_body for accessor in prop.accessors)


def classify_member(member: Member) -> tuple[ClassifiedMember, ...]:
    match member:
        case FieldDeclaration() if _is_instance_public(member):
            category = (
                MemberCategory.VALUE
                if has_modifier(member, "readonly")
                else MemberCategory.MUTABLE
            )
            return tuple(
                ClassifiedMember(name, category, member.type, member)
                for name in member.variables
            )
        case PropertyDeclaration() if _is_instance_public(member) and not is_computed(member):
            read_only = all(accessor.kind == "get" for accessor in member.accessors or ())
            category = MemberCategory.VALUE if read_only else MemberCategory.MUTABLE
            return (ClassifiedMember(member.name, category, member.type, member),)
        case _:
            return ()


def classify(type_declaration: TypeDeclaration) -> Classification:
    value_members: list[ClassifiedMember] = []
    mutable_members: list[ClassifiedMember] = []
    seen: set[str] = set()
    for member in type_declaration.members:
        for classified in classify_member(member):
            if classified.name in seen:
                continue
            seen.add(classified.name)
            if classified.category is MemberCategory.VALUE:
                value_members.append(classified)
            else:
                mutable_members.append(classified)
    logger.debug(
        "%s: %d value member(s), %d mutable public member(s)",
        type_declaration.name,
        len(value_members),
        len(mutable_members),
    )
    return Classification(tuple(value_members), tuple(mutable_members))
