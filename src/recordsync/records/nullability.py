"""Decide which members need a nullable wrapper in the modifier method.

Two sources feed the decision: a structural allow-list over the declared type,
and the parameter types of the previously generated modifier. The previous
modifier wins, which is how a user-defined struct wrapped as ``Foo?`` in an
earlier round keeps its wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass

from recordsync.syntax.nodes import (
    GenericType,
    MethodDeclaration,
    NamedType,
    NullableType,
    PredefinedType,
    TypeRef,
)

NON_NULLABLE_KEYWORDS: frozenset[str] = frozenset(
    {
        "sbyte",
        "short",
        "int",
        "byte",
        "ushort",
        "uint",
        "ulong",
        "long",
        "float",
        "double",
        "bool",
        "char",
        "decimal",
    }
)

NON_NULLABLE_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "Guid",
        "System.Guid",
        "DateTime",
        "System.DateTime",
        "DateTimeOffset",
        "System.DateTimeOffset",
        "TimeSpan",
        "System.TimeSpan",
    }
)

_NULLABLE_GENERIC_NAMES = frozenset({"Nullable", "System.Nullable"})


def is_nullable_wrapper(type_ref: TypeRef | None) -> bool:
    match type_ref:
        case NullableType():
            return True
        case GenericType(name=name, arguments=(_,)):
            return name in _NULLABLE_GENERIC_NAMES
        case _:
            return False


def is_type_non_nullable(
    type_ref: TypeRef, extra_names: frozenset[str] = frozenset()
) -> bool:
    match type_ref:
        case PredefinedType(keyword=keyword):
            return keyword in NON_NULLABLE_KEYWORDS
        case NamedType(name=name):
            return name in NON_NULLABLE_TYPE_NAMES or name in extra_names
        case _:
            return False


def prior_nullable_parameters(previous_modifier: MethodDeclaration | None) -> frozenset[str]:
    if previous_modifier is None:
        return frozenset()
    return frozenset(
        parameter.name
        for parameter in previous_modifier.parameters
        if is_nullable_wrapper(parameter.type)
    )


@dataclass(frozen=True)
class NullabilityInferencer:
    prior_nullable: frozenset[str] = frozenset()
    extra_names: frozenset[str] = frozenset()

    def is_non_nullable(self, name: str, type_ref: TypeRef) -> bool:
        if name in self.prior_nullable:
            return not is_nullable_wrapper(type_ref)
        return is_type_non_nullable(type_ref, self.extra_names)
