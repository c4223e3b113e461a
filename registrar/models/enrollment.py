"""
Enrollment data models.

Contains the Enrollment dataclass and EnrollmentStatus enum that represent
a student's academic record, plus the minimal GradeEntry accepted by the
GPA calculator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import FAILING_GRADES
from ..validation import normalize_grade


class EnrollmentStatus(Enum):
    """
    Possible states for an enrollment on a student's record.

    COMPLETED: Student passed the course (A+ through D)
    IN_PROGRESS: Student is currently enrolled (no grade yet)
    FAILED: Student did not complete the course (F or W)
    """
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"


@dataclass(frozen=True)
class GradeEntry:
    """A single graded attempt as seen by the GPA calculator."""
    grade: Optional[str]
    credits: int


@dataclass(frozen=True)
class Enrollment:
    """
    Represents a single row of the student's enrollment history.

    Records are immutable once built. The TranscriptParser is the normal
    way to construct them from raw rows; it validates every field.

    Attributes:
        student_id: Student identifier (e.g., "040123456")
        course_code: Course code in AAA#### form (e.g., "CST8284")
        semester: Term code in [F|W|S]YYYY form (e.g., "F2024")
        grade: Letter grade, "W" for withdrawn, or None while in progress
        credits: Credit hours, 1 through 6
    """
    student_id: str
    course_code: str
    semester: str
    grade: Optional[str]
    credits: int

    @property
    def status(self) -> EnrollmentStatus:
        grade = normalize_grade(self.grade)
        if grade is None:
            return EnrollmentStatus.IN_PROGRESS
        if grade in FAILING_GRADES:
            return EnrollmentStatus.FAILED
        return EnrollmentStatus.COMPLETED
