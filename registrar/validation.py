"""
Boundary validation for raw record values.

Grades, credits, course codes and term codes arrive from an external store
as loosely typed values. These helpers turn them into the canonical form the
engines expect, or raise the matching RegistrarError.
"""

from typing import Optional

from .config import (
    COURSE_CODE_PATTERN,
    GRADE_SCALE,
    MAX_CREDITS,
    MIN_CREDITS,
    SEMESTER_PATTERN,
    TERM_ORDER,
)
from .errors import (
    InvalidCourseCodeError,
    InvalidCreditsError,
    InvalidGradeError,
    InvalidSemesterError,
)


def normalize_grade(grade) -> Optional[str]:
    """
    Return the canonical letter grade, or None for an in-progress record.

    Surrounding whitespace and letter case are ignored ("b+ " -> "B+").
    Anything that is not a string on the grade scale raises InvalidGradeError.
    """
    if grade is None:
        return None
    if not isinstance(grade, str):
        raise InvalidGradeError(grade)
    letter = grade.strip().upper()
    if letter not in GRADE_SCALE:
        raise InvalidGradeError(grade)
    return letter


def validate_credits(credits) -> int:
    """Credits must be a plain int between MIN_CREDITS and MAX_CREDITS."""
    # bool is an int subclass; True is not a credit weight
    if isinstance(credits, bool) or not isinstance(credits, int):
        raise InvalidCreditsError(credits, f"Credits must be an integer, got {credits!r}")
    if credits <= 0:
        raise InvalidCreditsError(credits, f"Credits must be positive, got {credits}")
    if not MIN_CREDITS <= credits <= MAX_CREDITS:
        raise InvalidCreditsError(
            credits, f"Credits must be between {MIN_CREDITS} and {MAX_CREDITS}, got {credits}"
        )
    return credits


def validate_course_code(code) -> str:
    if not isinstance(code, str) or not COURSE_CODE_PATTERN.match(code):
        raise InvalidCourseCodeError(code)
    return code


def validate_semester(semester) -> str:
    if not isinstance(semester, str) or not SEMESTER_PATTERN.match(semester):
        raise InvalidSemesterError(semester)
    return semester


def semester_sort_key(semester: str) -> tuple:
    """Chronological sort key for a term code: W2024 < S2024 < F2024 < W2025."""
    match = SEMESTER_PATTERN.match(semester)
    if not match:
        raise InvalidSemesterError(semester)
    term, year = match.groups()
    return int(year), TERM_ORDER[term]
