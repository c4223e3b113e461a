"""
Transcript parsing.

This module turns raw enrollment rows, as materialized by the database layer,
into validated Enrollment records.
"""

import logging

from ..models import Enrollment, EnrollmentStatus
from ..validation import (
    normalize_grade,
    semester_sort_key,
    validate_course_code,
    validate_credits,
    validate_semester,
)

logger = logging.getLogger(__name__)

# Better outcomes rank higher when picking one record per course
_OUTCOME_RANK = {
    EnrollmentStatus.FAILED: 0,
    EnrollmentStatus.IN_PROGRESS: 1,
    EnrollmentStatus.COMPLETED: 2,
}


class TranscriptParser:
    """
    Parses a student's enrollment rows into Enrollment records.

    KEY RESPONSIBILITY: Enforce the record formats at the boundary so the
    engines never see a malformed course code, term code, grade or credit
    value. Any bad field fails the whole transcript.

    RETAKE HANDLING:
    Students sometimes retake courses. Every attempt is kept in
    `enrollments` (all attempts count toward GPA), while `by_course` keeps
    the "best" outcome per course:
    - If completed, keep completed (ignore later failed attempts)
    - If in-progress, keep in-progress over failed
    - This prevents a failed retake from hiding a passing grade

    Expected input:
        {
            "student": {"id": "040123456", "name": "..."},
            "enrollments": [
                {"course_code": "CST8284", "semester": "F2023",
                 "grade": "B", "credits": 4},
                ...
            ]
        }
    """

    def parse(self, transcript_data: dict) -> dict:
        """
        Parse transcript and return structured student state.

        Returns:
            {
                "student": {id, name, ...},
                "enrollments": [Enrollment, ...],  # Every attempt, chronological
                "completed": [Enrollment, ...],    # Passed attempts
                "in_progress": [Enrollment, ...],  # Currently enrolled
                "failed": [Enrollment, ...],       # Failed/withdrawn attempts
                "by_course": {code: Enrollment}    # Best outcome per course
            }
        """
        student_info = transcript_data.get("student", {})
        default_student_id = str(student_info.get("id", ""))
        rows = transcript_data.get("enrollments", [])

        enrollments = [self.parse_row(row, default_student_id) for row in rows]
        enrollments.sort(key=lambda e: semester_sort_key(e.semester))

        completed = []
        in_progress = []
        failed = []
        by_course = {}
        seen = set()

        for enrollment in enrollments:
            key = (enrollment.course_code, enrollment.semester)
            if key in seen:
                logger.warning(
                    "Duplicate enrollment for %s in %s", enrollment.course_code, enrollment.semester
                )
            seen.add(key)

            if enrollment.status == EnrollmentStatus.COMPLETED:
                completed.append(enrollment)
            elif enrollment.status == EnrollmentStatus.IN_PROGRESS:
                in_progress.append(enrollment)
            else:
                failed.append(enrollment)

            existing = by_course.get(enrollment.course_code)
            if existing is None or _OUTCOME_RANK[enrollment.status] > _OUTCOME_RANK[existing.status]:
                by_course[enrollment.course_code] = enrollment

        logger.debug(
            "Parsed %d enrollments (%d completed, %d in progress, %d failed)",
            len(enrollments), len(completed), len(in_progress), len(failed),
        )
        return {
            "student": student_info,
            "enrollments": enrollments,
            "completed": completed,
            "in_progress": in_progress,
            "failed": failed,
            "by_course": by_course,
        }

    def parse_row(self, row: dict, default_student_id: str = "") -> Enrollment:
        """
        Validate and convert a single enrollment row.

        A missing or null grade means the course is in progress. The
        row's own student_id wins over the transcript-level one.
        """
        return Enrollment(
            student_id=str(row.get("student_id", default_student_id)),
            course_code=validate_course_code(row.get("course_code")),
            semester=validate_semester(row.get("semester")),
            grade=normalize_grade(row.get("grade")),
            credits=validate_credits(row.get("credits")),
        )
