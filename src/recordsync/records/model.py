from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from recordsync.records.filters import ConstructorFilter, upper_initial_filter
from recordsync.syntax.nodes import (
    AttributeList,
    ConstructorDeclaration,
    DocElement,
    FieldDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
    TextSpan,
    TypeRef,
)

DEFAULT_MODIFIER_NAME = "With"
DEFAULT_CONSTRUCTOR_SUMMARY = "Creates a record instance."
DEFAULT_MODIFIER_SUMMARY = "Returns a copy of the instance with the new fields set."


@dataclass(frozen=True)
class RecordsConfig:
    modifier_name: str = DEFAULT_MODIFIER_NAME
    constructor_filter: ConstructorFilter = upper_initial_filter
    non_nullable_types: frozenset[str] = frozenset()
    constructor_summary: str = DEFAULT_CONSTRUCTOR_SUMMARY
    modifier_summary: str = DEFAULT_MODIFIER_SUMMARY


DEFAULT_CONFIG = RecordsConfig()


class MemberCategory(str, Enum):
    VALUE = "value"
    MUTABLE = "mutable"


@dataclass(frozen=True)
class ClassifiedMember:
    name: str
    category: MemberCategory
    type: TypeRef
    declaration: Union[FieldDeclaration, PropertyDeclaration]


@dataclass(frozen=True)
class Classification:
    value_members: tuple[ClassifiedMember, ...] = ()
    mutable_members: tuple[ClassifiedMember, ...] = ()

    @property
    def value_names(self) -> tuple[str, ...]:
        return tuple(member.name for member in self.value_members)


@dataclass(frozen=True)
class ValueMember:
    name: str
    type: TypeRef
    is_non_nullable: bool = False
    attribute_lists: tuple[AttributeList, ...] = ()
    summary: DocElement | None = None


class ShapeState(str, Enum):
    ABSENT = "absent"
    PRESENT_CORRECT = "present-correct"
    PRESENT_DRIFTED = "present-drifted"


class Verdict(str, Enum):
    NO_FINDING = "no-finding"
    CREATABLE = "creatable"
    UPDATE_NEEDED = "update-needed"


@dataclass(frozen=True)
class ShapeMatch:
    state: ShapeState
    node: Union[ConstructorDeclaration, MethodDeclaration, None] = None


ABSENT = ShapeMatch(ShapeState.ABSENT)


@dataclass(frozen=True)
class DriftReport:
    constructor: ShapeMatch
    modifier: ShapeMatch

    @property
    def verdict(self) -> Verdict:
        if self.constructor.state is ShapeState.ABSENT:
            return Verdict.CREATABLE
        if self.constructor.state is ShapeState.PRESENT_DRIFTED:
            return Verdict.UPDATE_NEEDED
        if self.modifier.state is ShapeState.PRESENT_DRIFTED:
            return Verdict.UPDATE_NEEDED
        return Verdict.NO_FINDING


class Severity(str, Enum):
    HIDDEN = "hidden"
    WARNING = "warning"

    def at_least(self, threshold: Severity) -> bool:
        return _SEVERITY_RANK[self] >= _SEVERITY_RANK[threshold]


_SEVERITY_RANK = {Severity.HIDDEN: 0, Severity.WARNING: 1}

# Verdict to (diagnostic id, severity); a missing constructor is only a suggestion.
_DIAGNOSTICS = {
    Verdict.CREATABLE: ("RecordCreate", Severity.HIDDEN),
    Verdict.UPDATE_NEEDED: ("RecordUpdate", Severity.WARNING),
}


class FixAction(str, Enum):
    CONSTRUCTOR = "constructor"
    CONSTRUCTOR_AND_MODIFIER = "constructor-and-modifier"

    @property
    def title(self) -> str:
        if self is FixAction.CONSTRUCTOR:
            return "Update immutable record constructor"
        return "Update immutable record constructor and modifier method"


@dataclass(frozen=True)
class Finding:
    type_name: str
    verdict: Verdict
    span: TextSpan

    @property
    def diagnostic_id(self) -> str | None:
        diagnostic = _DIAGNOSTICS.get(self.verdict)
        return diagnostic[0] if diagnostic else None

    @property
    def severity(self) -> Severity | None:
        diagnostic = _DIAGNOSTICS.get(self.verdict)
        return diagnostic[1] if diagnostic else None

    @property
    def fixes(self) -> tuple[FixAction, ...]:
        if self.verdict is Verdict.NO_FINDING:
            return ()
        return (FixAction.CONSTRUCTOR_AND_MODIFIER, FixAction.CONSTRUCTOR)
