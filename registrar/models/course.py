"""
Course catalogue data models.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Course:
    """
    A catalogue course.

    Attributes:
        code: Course code (e.g., "CST8285")
        credits: Credit hours the course is worth
        title: Human-readable course title
        prerequisites: Codes that must be passed before enrolling
    """
    code: str
    credits: int
    title: str = ""
    prerequisites: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class PrerequisiteRule:
    """
    One edge of the prerequisite graph: `course_code` requires
    `required_code` to be passed first.
    """
    course_code: str
    required_code: str
