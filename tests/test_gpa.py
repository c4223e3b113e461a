import unittest
from decimal import ROUND_HALF_UP, Decimal, localcontext
from itertools import product

from registrar.config import MAX_GRADE_POINTS
from registrar.engines.gpa import GradePointCalculator, compute_gpa
from registrar.errors import InvalidCreditsError, InvalidGradeError
from registrar.models import Enrollment, GradeEntry


class GPATests(unittest.TestCase):
    def setUp(self):
        self.calc = GradePointCalculator()

    def test_weighted_average(self):
        entries = [GradeEntry("A", 3), GradeEntry("B+", 3), GradeEntry("C", 4)]
        self.assertEqual(self.calc.compute_gpa(entries), Decimal("3.05"))

    def test_passing_grades_match_formula(self):
        grades = ["A+", "A", "B+", "C+", "D"]
        scale = {"A+": Decimal("4.5"), "A": Decimal("4.0"), "B+": Decimal("3.5"),
                 "C+": Decimal("2.5"), "D": Decimal("1.0")}
        for g1, g2, credits in product(grades, grades, [1, 2, 5]):
            entries = [GradeEntry(g1, credits), GradeEntry(g2, 3)]
            expected = ((scale[g1] * credits + scale[g2] * 3) / (credits + 3)).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
            self.assertEqual(self.calc.compute_gpa(entries), expected, (g1, g2, credits))

    def test_rounds_half_up(self):
        # 4.5 + 4.0 + 0 over 4 credits = 2.125
        entries = [GradeEntry("A+", 1), GradeEntry("A", 1), GradeEntry("F", 2)]
        self.assertEqual(str(self.calc.compute_gpa(entries)), "2.13")

    def test_failing_counts_credits(self):
        gpa = self.calc.compute_gpa([GradeEntry("F", 3)])
        self.assertIsNotNone(gpa)
        self.assertEqual(str(gpa), "0.00")

    def test_failing_lowers_average(self):
        entries = [GradeEntry("A", 3), GradeEntry("F", 3)]
        self.assertEqual(self.calc.compute_gpa(entries), Decimal("2.00"))

    def test_withdrawn_and_in_progress_are_undefined(self):
        self.assertIsNone(self.calc.compute_gpa([GradeEntry("W", 3)]))
        self.assertIsNone(self.calc.compute_gpa([GradeEntry(None, 3)]))
        self.assertIsNone(self.calc.compute_gpa([GradeEntry("W", 3), GradeEntry(None, 4)]))
        self.assertIsNone(self.calc.compute_gpa([]))

    def test_withdrawn_excluded_from_denominator(self):
        entries = [GradeEntry("B", 3), GradeEntry("W", 4)]
        self.assertEqual(self.calc.compute_gpa(entries), Decimal("3.00"))

    def test_withdrawals_counted_when_configured(self):
        calc = GradePointCalculator(count_withdrawals=True)
        self.assertEqual(calc.compute_gpa([GradeEntry("B", 3), GradeEntry("W", 3)]), Decimal("1.50"))
        self.assertEqual(calc.compute_gpa([GradeEntry("W", 3)]), Decimal("0.00"))

    def test_grade_case_and_whitespace_ignored(self):
        self.assertEqual(self.calc.compute_gpa([GradeEntry(" b+ ", 3)]), Decimal("3.50"))

    def test_unknown_grade(self):
        with self.assertRaises(InvalidGradeError) as ctx:
            self.calc.compute_gpa([GradeEntry("A", 3), GradeEntry("E", 3)])
        self.assertEqual(ctx.exception.grade, "E")
        self.assertIn("'E'", str(ctx.exception))

    def test_non_string_grade(self):
        with self.assertRaises(InvalidGradeError):
            self.calc.compute_gpa([GradeEntry(4.0, 3)])

    def test_invalid_credits(self):
        for credits in (0, -3, 7, 2.5, "3", True):
            with self.assertRaises(InvalidCreditsError, msg=repr(credits)):
                self.calc.compute_gpa([GradeEntry("A", credits)])

    def test_invalid_credits_on_withdrawn_entry(self):
        with self.assertRaises(InvalidCreditsError):
            self.calc.compute_gpa([GradeEntry("A", 3), GradeEntry("W", 0)])

    def test_invalid_grade_is_also_value_error(self):
        with self.assertRaises(ValueError):
            self.calc.compute_gpa([GradeEntry("Z", 3)])

    def test_inputs_not_mutated(self):
        entries = [GradeEntry("A", 3), GradeEntry("W", 3)]
        snapshot = list(entries)
        self.calc.compute_gpa(entries)
        self.assertEqual(entries, snapshot)

    def test_module_shortcut(self):
        self.assertEqual(compute_gpa([GradeEntry("A+", 2)]), Decimal("4.50"))

    def test_gpa_stays_within_scale(self):
        self.assertEqual(self.calc.compute_gpa([GradeEntry("A+", 4)]), MAX_GRADE_POINTS)
        for grade in ("A+", "B", "D", "F"):
            gpa = self.calc.compute_gpa([GradeEntry(grade, 3), GradeEntry("C+", 2)])
            self.assertTrue(Decimal("0") <= gpa <= MAX_GRADE_POINTS, (grade, gpa))

    def test_caller_precision_does_not_truncate(self):
        # 30.5 / 10 needs three significant digits
        entries = [GradeEntry("A", 3), GradeEntry("B+", 3), GradeEntry("C", 4)]
        with localcontext() as ctx:
            ctx.prec = 2
            gpa = self.calc.compute_gpa(entries)
        self.assertEqual(str(gpa), "3.05")


class GradePointTests(unittest.TestCase):
    def setUp(self):
        self.calc = GradePointCalculator()

    def test_grade_points(self):
        self.assertEqual(self.calc.grade_points("A+"), Decimal("4.5"))
        self.assertEqual(self.calc.grade_points("D"), Decimal("1.0"))
        self.assertEqual(self.calc.grade_points("F"), Decimal("0"))

    def test_grade_points_rejects_in_progress(self):
        with self.assertRaises(InvalidGradeError):
            self.calc.grade_points(None)

    def test_quality_points(self):
        self.assertEqual(self.calc.quality_points("B+", 3), Decimal("10.5"))


class SummaryTests(unittest.TestCase):
    def setUp(self):
        self.calc = GradePointCalculator()
        self.history = [
            Enrollment("040123456", "CST8116", "F2023", "A", 3),
            Enrollment("040123456", "ENL1813", "F2023", "W", 3),
            Enrollment("040123456", "CST8284", "W2024", "F", 4),
            Enrollment("040123456", "CST8215", "W2024", "B", 3),
            Enrollment("040123456", "CST8284", "S2024", "B", 4),
            Enrollment("040123456", "CST8276", "F2024", None, 3),
        ]

    def test_summary(self):
        summary = self.calc.summarize(self.history)
        # 12 + 0 + 9 + 12 over 3 + 4 + 3 + 4
        self.assertEqual(summary.quality_points, Decimal("33.0"))
        self.assertEqual(summary.credits_attempted, 14)
        self.assertEqual(summary.credits_earned, 10)
        self.assertEqual(summary.in_progress_credits, 3)
        self.assertEqual(summary.gpa, Decimal("2.36"))

    def test_cumulative_counts_every_attempt(self):
        self.assertEqual(self.calc.cumulative_gpa(self.history), Decimal("2.36"))

    def test_term_gpas_chronological(self):
        terms = self.calc.term_gpas(reversed(self.history))
        self.assertEqual(list(terms), ["F2023", "W2024", "S2024", "F2024"])
        self.assertEqual(terms["F2023"], Decimal("4.00"))
        self.assertEqual(terms["W2024"], Decimal("1.29"))
        self.assertEqual(terms["S2024"], Decimal("3.00"))
        self.assertIsNone(terms["F2024"])


if __name__ == "__main__":
    unittest.main()
