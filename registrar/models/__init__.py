"""
Data models for the registrar core.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the adapters and the engines.
"""

from .enrollment import Enrollment, EnrollmentStatus, GradeEntry
from .course import Course, PrerequisiteRule
from .results import EligibilityResult, GradeSummary

__all__ = [
    # Enrollment records
    "Enrollment",
    "EnrollmentStatus",
    "GradeEntry",
    # Catalogue
    "Course",
    "PrerequisiteRule",
    # Results
    "EligibilityResult",
    "GradeSummary",
]
