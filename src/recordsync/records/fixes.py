"""Host-facing analysis and fix actions.

``analyze_type`` yields one :class:`Finding` per type declaration. Each fix
action is a pure function from (document root, finding) to a new root; the
input tree is left untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from recordsync.invariants import never, require_not_none
from recordsync.records.eligibility import is_type_eligible
from recordsync.records.matcher import detect_drift
from recordsync.records.model import (
    DEFAULT_CONFIG,
    Finding,
    FixAction,
    RecordsConfig,
    Verdict,
)
from recordsync.records.synthesizer import update_constructor, update_constructor_and_modifier
from recordsync.syntax.nodes import Node, NodeT, TypeDeclaration
from recordsync.syntax.rewrite import find_type_at, replace_node, type_declarations

logger = logging.getLogger(__name__)

TypeRewrite = Callable[[TypeDeclaration, RecordsConfig], TypeDeclaration]

_REWRITES: Mapping[FixAction, TypeRewrite] = {
    FixAction.CONSTRUCTOR: update_constructor,
    FixAction.CONSTRUCTOR_AND_MODIFIER: update_constructor_and_modifier,
}


def analyze_type(
    type_declaration: TypeDeclaration, config: RecordsConfig = DEFAULT_CONFIG
) -> Finding:
    if not is_type_eligible(type_declaration):
        verdict = Verdict.NO_FINDING
    else:
        verdict = detect_drift(type_declaration, config).verdict
    logger.debug("%s: %s", type_declaration.name, verdict.value)
    return Finding(type_declaration.name, verdict, type_declaration.finding_span)


def analyze_document(root: Node | None, config: RecordsConfig = DEFAULT_CONFIG) -> list[Finding]:
    """Reportable findings for every type declaration under ``root``."""
    document = require_not_none(root, reason="document root is missing")
    findings = [analyze_type(declaration, config) for declaration in type_declarations(document)]
    return [finding for finding in findings if finding.verdict is not Verdict.NO_FINDING]


def apply_fix(
    root: NodeT | None,
    finding: Finding,
    action: FixAction,
    config: RecordsConfig = DEFAULT_CONFIG,
) -> NodeT:
    document = require_not_none(root, reason="document root is missing")
    position = finding.span.start
    declaration = require_not_none(
        find_type_at(document, position),
        reason="no type declaration encloses the finding",
        position=position,
        type_name=finding.type_name,
    )
    rewrite = _REWRITES.get(action)
    if rewrite is None:
        never("unknown fix action", action=action)
    logger.info("%s: %s", declaration.name, action.title)
    return replace_node(document, declaration, rewrite(declaration, config))


def fix_all(
    root: NodeT | None,
    action: FixAction = FixAction.CONSTRUCTOR_AND_MODIFIER,
    config: RecordsConfig = DEFAULT_CONFIG,
) -> tuple[NodeT, list[Finding]]:
    """Apply ``action`` to every finding in the document, one type at a time."""
    document = require_not_none(root, reason="document root is missing")
    findings = analyze_document(document, config)
    for finding in findings:
        document = apply_fix(document, finding, action, config)
    return document, findings
