"""Value-shaped type test: a type qualifies when it has value members and no
mutable public member.
"""

from __future__ import annotations

from recordsync.records.classifier import classify
from recordsync.records.model import Classification
from recordsync.syntax.nodes import TypeDeclaration


def is_eligible(classification: Classification) -> bool:
    """At least one value member and no mutable public member."""
    return bool(classification.value_members) and not classification.mutable_members


def is_type_eligible(type_declaration: TypeDeclaration) -> bool:
    return is_eligible(classify(type_declaration))
