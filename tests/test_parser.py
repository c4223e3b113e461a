import json
import unittest
from pathlib import Path

from registrar.data import TranscriptParser
from registrar.errors import (
    InvalidCourseCodeError,
    InvalidCreditsError,
    InvalidGradeError,
    InvalidSemesterError,
)
from registrar.models import EnrollmentStatus

FIXTURES = Path(__file__).parent / "fixtures"


def load_transcript():
    with open(FIXTURES / "transcript.json", "r") as f:
        return json.load(f)


class TranscriptParserTests(unittest.TestCase):
    def setUp(self):
        self.parser = TranscriptParser()
        self.state = self.parser.parse(load_transcript())

    def test_student_info(self):
        self.assertEqual(self.state["student"]["name"], "Jordan Lee")
        self.assertTrue(all(e.student_id == "040123456" for e in self.state["enrollments"]))

    def test_enrollments_sorted_chronologically(self):
        semesters = [e.semester for e in self.state["enrollments"]]
        self.assertEqual(
            semesters, ["F2023", "F2023", "F2023", "W2024", "W2024", "S2024", "F2024"]
        )

    def test_categories(self):
        self.assertEqual(
            sorted(e.course_code for e in self.state["completed"]),
            ["CST8116", "CST8215", "CST8284", "MAT8001"],
        )
        self.assertEqual([e.course_code for e in self.state["in_progress"]], ["CST8276"])
        self.assertEqual(
            sorted((e.course_code, e.grade) for e in self.state["failed"]),
            [("CST8284", "F"), ("ENL1813", "W")],
        )

    def test_grade_normalised(self):
        self.assertEqual(self.state["by_course"]["CST8215"].grade, "B")

    def test_best_outcome_per_course(self):
        best = self.state["by_course"]["CST8284"]
        self.assertEqual(best.semester, "S2024")
        self.assertEqual(best.status, EnrollmentStatus.COMPLETED)
        self.assertEqual(self.state["by_course"]["ENL1813"].status, EnrollmentStatus.FAILED)

    def test_failed_retake_does_not_hide_pass(self):
        state = self.parser.parse({"enrollments": [
            {"course_code": "CST8284", "semester": "F2023", "grade": "C", "credits": 4},
            {"course_code": "CST8284", "semester": "W2024", "grade": "F", "credits": 4},
        ]})
        self.assertEqual(state["by_course"]["CST8284"].grade, "C")
        self.assertEqual(len(state["enrollments"]), 2)

    def test_missing_grade_is_in_progress(self):
        row = {"course_code": "CST8285", "semester": "W2025", "credits": 4}
        enrollment = self.parser.parse_row(row, "040123456")
        self.assertIsNone(enrollment.grade)
        self.assertEqual(enrollment.status, EnrollmentStatus.IN_PROGRESS)

    def test_row_student_id_wins(self):
        row = {"student_id": "040999999", "course_code": "CST8285",
               "semester": "W2025", "grade": "A", "credits": 4}
        self.assertEqual(self.parser.parse_row(row, "040123456").student_id, "040999999")

    def test_duplicate_row_logged(self):
        row = {"course_code": "CST8285", "semester": "W2025", "grade": "A", "credits": 4}
        with self.assertLogs("registrar.data.parser", level="WARNING"):
            state = self.parser.parse({"enrollments": [row, dict(row)]})
        self.assertEqual(len(state["enrollments"]), 2)

    def test_empty_transcript(self):
        state = self.parser.parse({})
        self.assertEqual(state["enrollments"], [])
        self.assertEqual(state["by_course"], {})


class TranscriptValidationTests(unittest.TestCase):
    def setUp(self):
        self.parser = TranscriptParser()
        self.row = {"course_code": "CST8284", "semester": "F2023", "grade": "A", "credits": 4}

    def _parse_with(self, **changes):
        row = dict(self.row, **changes)
        return self.parser.parse({"enrollments": [row]})

    def test_bad_course_code(self):
        for code in ("cst8284", "CST828", "CS8284", "CST82845", None):
            with self.assertRaises(InvalidCourseCodeError, msg=repr(code)):
                self._parse_with(course_code=code)

    def test_bad_semester(self):
        for semester in ("X2023", "F23", "Fall2023", "f2023", None):
            with self.assertRaises(InvalidSemesterError, msg=repr(semester)):
                self._parse_with(semester=semester)

    def test_bad_grade(self):
        for grade in ("E", "", "A++", 4):
            with self.assertRaises(InvalidGradeError, msg=repr(grade)):
                self._parse_with(grade=grade)

    def test_bad_credits(self):
        for credits in (0, 7, None, "4"):
            with self.assertRaises(InvalidCreditsError, msg=repr(credits)):
                self._parse_with(credits=credits)


if __name__ == "__main__":
    unittest.main()
