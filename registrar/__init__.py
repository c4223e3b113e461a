"""
Registrar Core Package
======================

Pure academic-record computations for the Algonquin College course schema:
credit-weighted GPA and prerequisite eligibility.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         BOUNDARY LAYER                                   │
│        (Turns materialized rows into validated records)                 │
│                                                                         │
│  ┌──────────────────┐  ┌─────────────────┐                              │
│  │  CatalogLoader   │  │TranscriptParser │                              │
│  │  (catalogue I/O) │  │ (row validation)│                              │
│  └──────────────────┘  └─────────────────┘                              │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│          (Pure logic - no I/O, no state between calls)                  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │  GradePointCalculator   │  │       PrerequisiteEvaluator         │  │
│  │  (GPA, term GPA)        │  │   (eligibility, DAG validation)     │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     EnrollmentAdvisor                                    │
│          (Orchestrator - connects boundary to algorithms)               │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

registrar/
├── __init__.py          # This file - main exports
├── config.py            # Grade scale and policy constants
├── errors.py            # Exception types
├── validation.py        # Grade/credit/code normalisation
├── advisor.py           # EnrollmentAdvisor orchestrator
│
├── models/              # Data classes and enums
│   ├── enrollment.py    # Enrollment, EnrollmentStatus, GradeEntry
│   ├── course.py        # Course, PrerequisiteRule
│   └── results.py       # EligibilityResult, GradeSummary
│
├── data/                # Boundary adapters
│   ├── loader.py        # CatalogLoader
│   └── parser.py        # TranscriptParser
│
└── engines/             # Business logic
    ├── gpa.py           # GradePointCalculator
    └── prerequisites.py # PrerequisiteEvaluator

USAGE
-----

    from registrar import GradeEntry, GradePointCalculator

    GradePointCalculator().compute_gpa([
        GradeEntry("A", 3), GradeEntry("B+", 3), GradeEntry("C", 4),
    ])
    # Decimal('3.05')

    from registrar import PrerequisiteEvaluator

    PrerequisiteEvaluator().check_eligibility(
        [("CST8284", "F")], "CST8285", {"CST8285": {"CST8284"}}
    )
    # EligibilityResult(course_code='CST8285', eligible=False,
    #                   unmet=frozenset({'CST8284'}))

A GPA of None means "no GPA yet" and is never the same as Decimal("0.00").
"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import EnrollmentAdvisor

# Model exports
from .models import (
    Course,
    EligibilityResult,
    Enrollment,
    EnrollmentStatus,
    GradeEntry,
    GradeSummary,
    PrerequisiteRule,
)

# Engine exports
from .engines import (
    GradePointCalculator,
    PrerequisiteEvaluator,
    check_eligibility,
    compute_gpa,
    find_cycle,
    map_from_rules,
    rules_from_map,
    validate_prerequisite_graph,
)

# Data exports
from .data import CatalogLoader, TranscriptParser

# Error exports
from .errors import (
    CatalogError,
    CyclicPrerequisiteError,
    InvalidCourseCodeError,
    InvalidCreditsError,
    InvalidGradeError,
    InvalidRecordError,
    InvalidSemesterError,
    RegistrarError,
)

# Configuration exports
from .config import (
    FAILING_GRADES,
    GRADE_SCALE,
    MAX_CREDITS,
    MIN_CREDITS,
    PASSING_GRADES,
)

__all__ = [
    # Version
    "__version__",
    # Main entry point
    "EnrollmentAdvisor",
    # Models
    "Course",
    "EligibilityResult",
    "Enrollment",
    "EnrollmentStatus",
    "GradeEntry",
    "GradeSummary",
    "PrerequisiteRule",
    # Engines
    "GradePointCalculator",
    "PrerequisiteEvaluator",
    "check_eligibility",
    "compute_gpa",
    "find_cycle",
    "map_from_rules",
    "rules_from_map",
    "validate_prerequisite_graph",
    # Data
    "CatalogLoader",
    "TranscriptParser",
    # Errors
    "CatalogError",
    "CyclicPrerequisiteError",
    "InvalidCourseCodeError",
    "InvalidCreditsError",
    "InvalidGradeError",
    "InvalidRecordError",
    "InvalidSemesterError",
    "RegistrarError",
    # Config
    "FAILING_GRADES",
    "GRADE_SCALE",
    "MAX_CREDITS",
    "MIN_CREDITS",
    "PASSING_GRADES",
]
