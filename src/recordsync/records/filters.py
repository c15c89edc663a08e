"""Strategies deciding which constructors count as generated ones."""

from __future__ import annotations

from typing import Mapping, Protocol

from recordsync.syntax.nodes import ConstructorDeclaration


class ConstructorFilter(Protocol):
    def __call__(self, constructor: ConstructorDeclaration) -> bool: ...


def upper_initial_filter(constructor: ConstructorDeclaration) -> bool:
    """Generated constructors name parameters after members, upper-case first.

    A constructor without parameters never qualifies.
    """
    return any(
        parameter.name[:1].isupper() for parameter in constructor.parameters
    )


def any_parameter_filter(constructor: ConstructorDeclaration) -> bool:
    return bool(constructor.parameters)


DEFAULT_CONSTRUCTOR_FILTER = "upper-initial"

CONSTRUCTOR_FILTERS: Mapping[str, ConstructorFilter] = {
    "upper-initial": upper_initial_filter,
    "any": any_parameter_filter,
}
