"""
Exception types raised by the registrar core.

Every error is a data fault in the caller's input. Nothing here is retried or
defaulted: the engines fail fast and leave the decision to the caller.
"""


class RegistrarError(Exception):
    """Base class for all registrar errors."""


class InvalidGradeError(RegistrarError, ValueError):
    """A grade value outside the recognized letter-grade scale."""

    def __init__(self, grade):
        self.grade = grade
        super().__init__(f"Unrecognized grade: {grade!r}")


class InvalidCreditsError(RegistrarError, ValueError):
    """A credit weight that is not an integer in the allowed range."""

    def __init__(self, credits, message: str = ""):
        self.credits = credits
        super().__init__(message or f"Invalid credit value: {credits!r}")


class InvalidCourseCodeError(RegistrarError, ValueError):
    """A course code that does not match the AAA#### format."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"Malformed course code: {code!r}")


class InvalidSemesterError(RegistrarError, ValueError):
    """A term code that does not match the [F|W|S]YYYY format."""

    def __init__(self, semester):
        self.semester = semester
        super().__init__(f"Malformed semester code: {semester!r}")


class CyclicPrerequisiteError(RegistrarError, ValueError):
    """
    The prerequisite graph is not a DAG.

    `cycle` is the path that closes on itself, first element repeated at the
    end (e.g. ["CST8284", "CST8285", "CST8284"]). A self-reference is a cycle
    of length one: ["CST8284", "CST8284"].
    """

    def __init__(self, cycle: list):
        self.cycle = list(cycle)
        super().__init__("Cyclic prerequisites: " + " -> ".join(self.cycle))


class CatalogError(RegistrarError, ValueError):
    """Course catalogue integrity fault (duplicate or unknown course)."""


class InvalidRecordError(RegistrarError, ValueError):
    """A completed-course record that carries no course code and grade."""

    def __init__(self, record):
        self.record = record
        super().__init__(f"Unreadable course record: {record!r}")
