"""
Result data models.

Transient values returned by the engines. Nothing here is persisted.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EligibilityResult:
    """
    Verdict for a single target course.

    `eligible` is True exactly when `unmet` is empty.
    """
    course_code: str
    eligible: bool
    unmet: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class GradeSummary:
    """
    Aggregate view of a set of graded attempts.

    gpa is None when no attempt counts toward the denominator ("no GPA yet"),
    which is different from Decimal("0.00") earned by failing every course.
    """
    gpa: Optional[Decimal]
    quality_points: Decimal     # Sum of grade points x credits
    credits_attempted: int      # GPA denominator (includes F, excludes W)
    credits_earned: int         # Credits of passing grades only
    in_progress_credits: int    # Credits of ungraded enrollments
