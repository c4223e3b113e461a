"""
Grade Point Calculator.

This module converts letter grades into grade points and aggregates graded
attempts into a credit-weighted grade-point average.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Optional

from ..config import (
    GPA_PRECISION,
    GPA_QUANTUM,
    GRADE_SCALE,
    NON_COUNTING_GRADES,
    PASSING_GRADES,
)
from ..models import GradeSummary
from ..errors import InvalidGradeError
from ..validation import normalize_grade, semester_sort_key, validate_credits

logger = logging.getLogger(__name__)


class GradePointCalculator:
    """
    Computes GPAs from graded attempts.

    GPA RULES:
    ----------
    - In-progress records (grade None) are ignored.
    - W (withdrawn) is ignored entirely: no points, no attempted credits.
    - F is counted: its credits enter the denominator with zero points.
    - GPA = sum(points x credits) / sum(credits), rounded half-up to 0.01.
    - With nothing to count, the GPA is None ("no GPA yet"), never 0.00.

    WITHDRAWAL POLICY:
    ------------------
    Some institutions charge a W against attempted credits. Passing
    count_withdrawals=True makes W behave like F in the denominator.

    Entries are any objects exposing `grade` and `credits` (GradeEntry,
    Enrollment). Inputs are never mutated and no state is kept between
    calls, so one calculator can be shared freely.
    """

    def __init__(self, count_withdrawals: bool = False):
        self.count_withdrawals = count_withdrawals

    @staticmethod
    def grade_points(grade: str) -> Decimal:
        """Look up the grade-point value of a letter grade."""
        letter = normalize_grade(grade)
        if letter is None:
            raise InvalidGradeError(grade)
        return GRADE_SCALE[letter]

    def quality_points(self, grade: str, credits: int) -> Decimal:
        """Grade points multiplied by the credit weight."""
        return self.grade_points(grade) * validate_credits(credits)

    def summarize(self, entries: Iterable) -> GradeSummary:
        """
        Aggregate entries into a GradeSummary.

        Every entry is validated before it is counted, including in-progress
        and withdrawn ones; a bad grade or credit value anywhere fails the
        whole call.
        """
        quality_points = Decimal("0")
        attempted = 0
        earned = 0
        in_progress = 0

        with localcontext() as ctx:
            ctx.prec = GPA_PRECISION
            for entry in entries:
                grade = normalize_grade(entry.grade)
                credits = validate_credits(entry.credits)

                if grade is None:
                    in_progress += credits
                    continue
                if grade in NON_COUNTING_GRADES and not self.count_withdrawals:
                    continue

                quality_points += GRADE_SCALE[grade] * credits
                attempted += credits
                if grade in PASSING_GRADES:
                    earned += credits

            gpa = self._average(quality_points, attempted)
        logger.debug(
            "GPA %s from %s quality points over %d credits", gpa, quality_points, attempted
        )
        return GradeSummary(
            gpa=gpa,
            quality_points=quality_points,
            credits_attempted=attempted,
            credits_earned=earned,
            in_progress_credits=in_progress,
        )

    def compute_gpa(self, entries: Iterable) -> Optional[Decimal]:
        """
        Credit-weighted GPA of the entries, or None when undefined.

        Example:
            A/3, B+/3, C/4 -> (12 + 10.5 + 8) / 10 -> Decimal("3.05")
        """
        return self.summarize(entries).gpa

    def cumulative_gpa(self, enrollments: Iterable) -> Optional[Decimal]:
        """GPA over the whole history. Every attempt of a repeated course counts."""
        return self.compute_gpa(enrollments)

    def term_gpas(self, enrollments: Iterable) -> dict:
        """
        GPA for each semester, keyed by term code in chronological order.

        Returns:
            {"F2023": Decimal("3.25"), "W2024": None, ...}
        """
        by_term = {}
        for enrollment in enrollments:
            by_term.setdefault(enrollment.semester, []).append(enrollment)

        return {
            semester: self.compute_gpa(by_term[semester])
            for semester in sorted(by_term, key=semester_sort_key)
        }

    @staticmethod
    def _average(quality_points: Decimal, credits: int) -> Optional[Decimal]:
        if credits == 0:
            return None
        return (quality_points / credits).quantize(GPA_QUANTUM, rounding=ROUND_HALF_UP)


def compute_gpa(entries: Iterable) -> Optional[Decimal]:
    """Module-level shortcut using the default withdrawal policy."""
    return GradePointCalculator().compute_gpa(entries)
