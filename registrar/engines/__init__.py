"""
GPA and prerequisite engines.

This package contains the pure business logic of the registrar core.
Engines take materialized records and return result values; they perform
no I/O and keep no state between calls.
"""

from .gpa import GradePointCalculator, compute_gpa
from .prerequisites import (
    PrerequisiteEvaluator,
    check_eligibility,
    find_cycle,
    map_from_rules,
    rules_from_map,
    validate_prerequisite_graph,
)

__all__ = [
    "GradePointCalculator",
    "PrerequisiteEvaluator",
    "compute_gpa",
    "check_eligibility",
    "find_cycle",
    "validate_prerequisite_graph",
    "map_from_rules",
    "rules_from_map",
]
