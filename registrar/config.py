"""
Configuration constants for the registrar core.

This module contains all grading and catalogue policy values used throughout
the GPA and prerequisite engines. Centralizing these makes it easy to adjust
behavior when an institution's rules differ from the defaults.
"""

import re
from decimal import Decimal

# =============================================================================
# GRADE SCALE
# =============================================================================

# Letter grade -> grade points.
# F and W are worth nothing; W additionally drops out of the credit
# denominator (see NON_COUNTING_GRADES).
GRADE_SCALE = {
    "A+": Decimal("4.5"),
    "A": Decimal("4.0"),
    "B+": Decimal("3.5"),
    "B": Decimal("3.0"),
    "C+": Decimal("2.5"),
    "C": Decimal("2.0"),
    "D+": Decimal("1.5"),
    "D": Decimal("1.0"),
    "F": Decimal("0.0"),
    "W": Decimal("0.0"),
}

MAX_GRADE_POINTS = GRADE_SCALE["A+"]


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Withdrawal marker. Never satisfies a prerequisite.
WITHDRAWN = "W"

# Grades that mean the course was attempted but NOT completed.
# Mirrors the catalogue queries' grade NOT IN ('F', 'W') filter.
FAILING_GRADES = {"F", WITHDRAWN}

# Grades that count as "completed" for prerequisites and earned credits
PASSING_GRADES = set(GRADE_SCALE) - FAILING_GRADES

# Grades left out of BOTH the quality-point sum and the credit denominator.
# F is deliberately absent: failing a course still consumes attempted credits.
NON_COUNTING_GRADES = {WITHDRAWN}


# =============================================================================
# CREDITS
# =============================================================================

MIN_CREDITS = 1
MAX_CREDITS = 6


# =============================================================================
# IDENTIFIER FORMATS
# =============================================================================

# Course codes look like CST8284: three uppercase letters + four digits
COURSE_CODE_PATTERN = re.compile(r"^[A-Z]{3}\d{4}$")

# Term codes look like F2024: term letter + four-digit year
SEMESTER_PATTERN = re.compile(r"^([FWS])(\d{4})$")

# Order of terms within a calendar year.
# Winter starts in January, Summer in May, Fall in September.
TERM_ORDER = {"W": 0, "S": 1, "F": 2}


# =============================================================================
# ROUNDING
# =============================================================================

# GPAs are reported to two decimal places, rounded half-up
GPA_QUANTUM = Decimal("0.01")

# Working precision for the GPA division, independent of the caller's context
GPA_PRECISION = 28
