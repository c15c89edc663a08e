from recordsync.records.classifier import classify, classify_member
from recordsync.records.eligibility import is_eligible, is_type_eligible
from recordsync.records.filters import (
    CONSTRUCTOR_FILTERS,
    ConstructorFilter,
    any_parameter_filter,
    upper_initial_filter,
)
from recordsync.records.fixes import analyze_document, analyze_type, apply_fix, fix_all
from recordsync.records.matcher import detect_drift
from recordsync.records.model import (
    Classification,
    ClassifiedMember,
    DriftReport,
    Finding,
    FixAction,
    MemberCategory,
    RecordsConfig,
    ShapeMatch,
    Severity,
    ShapeState,
    ValueMember,
    Verdict,
)
from recordsync.records.nullability import NullabilityInferencer
from recordsync.records.synthesizer import (
    collect_value_members,
    update_constructor,
    update_constructor_and_modifier,
)

__all__ = [
    "CONSTRUCTOR_FILTERS",
    "Classification",
    "ClassifiedMember",
    "ConstructorFilter",
    "DriftReport",
    "Finding",
    "FixAction",
    "MemberCategory",
    "NullabilityInferencer",
    "RecordsConfig",
    "ShapeMatch",
    "Severity",
    "ShapeState",
    "ValueMember",
    "Verdict",
    "analyze_document",
    "analyze_type",
    "any_parameter_filter",
    "apply_fix",
    "classify",
    "classify_member",
    "collect_value_members",
    "detect_drift",
    "fix_all",
    "is_eligible",
    "is_type_eligible",
    "update_constructor",
    "update_constructor_and_modifier",
    "upper_initial_filter",
]
