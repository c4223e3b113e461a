"""
Enrollment Advisor - Main Orchestrator.

This module contains the EnrollmentAdvisor class that connects the data
adapters to the GPA and prerequisite engines.
"""

import logging

from .data import CatalogLoader, TranscriptParser
from .engines import GradePointCalculator, PrerequisiteEvaluator
from .engines.prerequisites import validate_prerequisite_graph
from .models import EligibilityResult

logger = logging.getLogger(__name__)


class EnrollmentAdvisor:
    """
    Main interface for the registrar core.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Receives a transcript (rows already fetched by the caller)
    2. Parses it into validated Enrollment records
    3. Runs the GPA and prerequisite engines against the catalogue
    4. Returns plain result values; nothing is printed or stored

    The catalogue is validated as a DAG once, when the advisor is built, so
    a broken catalogue is reported before any student is looked at.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = EnrollmentAdvisor(CatalogLoader("catalog.json"))

        report = advisor.review(transcript_data, targets=["CST8285"])
        report["cumulative_gpa"]           # Decimal("3.05") or None
        report["eligibility"]["CST8285"]   # EligibilityResult

        advisor.can_register(transcript_data, "CST8285").eligible
    """

    def __init__(self, catalog: CatalogLoader, count_withdrawals: bool = False):
        self.catalog = catalog
        self.parser = TranscriptParser()
        self.gpa_engine = GradePointCalculator(count_withdrawals=count_withdrawals)
        self.prerequisite_engine = PrerequisiteEvaluator()

        validate_prerequisite_graph(self.catalog.prerequisite_map)

    def review(self, transcript_data: dict, targets=()) -> dict:
        """
        Build a complete academic review for one student.

        Args:
            transcript_data: Raw transcript ({"student": ..., "enrollments": [...]})
            targets: Course codes the student wants to register for

        Returns:
            {
                "student": {...},
                "cumulative_gpa": Decimal or None,
                "term_gpas": {semester: Decimal or None},
                "summary": GradeSummary,
                "eligibility": {code: EligibilityResult},
                "eligible_courses": [code, ...],
            }
        """
        # STEP 1: Parse and validate the transcript
        student_state = self.parser.parse(transcript_data)
        enrollments = student_state["enrollments"]

        # STEP 2: GPA figures
        summary = self.gpa_engine.summarize(enrollments)
        term_gpas = self.gpa_engine.term_gpas(enrollments)

        # STEP 3: Eligibility for each requested target
        prerequisite_map = self.catalog.prerequisite_map
        eligibility = {
            code: self._check(enrollments, code) for code in targets
        }

        # STEP 4: Everything open to the student right now
        eligible_courses = self.prerequisite_engine.eligible_courses(
            enrollments, prerequisite_map, candidates=self.catalog.list_course_codes()
        )

        logger.info(
            "Reviewed student %s: GPA %s, %d eligible courses",
            student_state["student"].get("id", "?"), summary.gpa, len(eligible_courses),
        )
        return {
            "student": student_state["student"],
            "cumulative_gpa": summary.gpa,
            "term_gpas": term_gpas,
            "summary": summary,
            "eligibility": eligibility,
            "eligible_courses": eligible_courses,
        }

    def can_register(self, transcript_data: dict, course_code: str) -> EligibilityResult:
        """Gate a single enrollment-write for a catalogue course."""
        student_state = self.parser.parse(transcript_data)
        return self._check(student_state["enrollments"], course_code)

    def _check(self, enrollments: list, course_code: str) -> EligibilityResult:
        # Raises CatalogError for courses the catalogue does not offer
        self.catalog.get_course(course_code)
        return self.prerequisite_engine.check_eligibility(
            enrollments, course_code, self.catalog.prerequisite_map
        )
