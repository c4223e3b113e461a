"""
Course catalogue loading and caching.

This module builds Course records and the prerequisite map from a catalogue
export, either a JSON file or an already-loaded dict.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..errors import CatalogError, CyclicPrerequisiteError
from ..models import Course
from ..engines.prerequisites import rules_from_map
from ..validation import validate_course_code, validate_credits

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Loads and caches the course catalogue.

    WHY LAZY LOADING: Properties only read and validate the file when first
    accessed, and the result is cached for every later call.

    CATALOGUE FORMAT:
        {
            "courses": [
                {"code": "CST8284", "title": "Object Oriented Programming",
                 "credits": 4, "prerequisites": ["CST8116"]},
                ...
            ]
        }

    Prerequisites may name courses that are not in the catalogue (e.g.
    retired courses still on transcripts); those are leaf nodes of the graph.
    Multi-course cycles are detected by the PrerequisiteEvaluator; a course
    listing itself is rejected here, at load time.

    Usage:
        loader = CatalogLoader("catalog.json")
        loader.prerequisite_map["CST8285"]   # frozenset({"CST8284"})
    """

    def __init__(self, path=None, data: Optional[dict] = None):
        if path is None and data is None:
            raise ValueError("CatalogLoader needs a path or a catalogue dict")
        self.path = Path(path) if path is not None else None
        # Private cache variables - None means "not loaded yet"
        self._raw = data
        self._courses = None
        self._prerequisite_map = None

    @classmethod
    def from_dict(cls, data: dict) -> "CatalogLoader":
        return cls(data=data)

    @property
    def raw(self) -> dict:
        if self._raw is None:
            with open(self.path, "r", encoding="utf-8") as f:
                self._raw = json.load(f)
            logger.info("Loaded catalogue from %s", self.path)
        return self._raw

    @property
    def courses(self) -> dict:
        """All catalogue courses keyed by code."""
        if self._courses is None:
            self._courses = self._build_courses(self.raw.get("courses", []))
        return self._courses

    @property
    def prerequisite_map(self) -> dict:
        """{course_code: frozenset(required codes)} for every catalogue course."""
        if self._prerequisite_map is None:
            self._prerequisite_map = {
                code: course.prerequisites for code, course in self.courses.items()
            }
        return self._prerequisite_map

    @property
    def rules(self) -> list:
        """The prerequisite map as PrerequisiteRule pairs."""
        return rules_from_map(self.prerequisite_map)

    def get_course(self, code: str) -> Course:
        try:
            return self.courses[code]
        except KeyError as exc:
            raise CatalogError(f"Unknown course: {code}") from exc

    def list_course_codes(self) -> list:
        return sorted(self.courses)

    def _build_courses(self, rows: list) -> dict:
        courses = {}
        for row in rows:
            code = validate_course_code(row.get("code"))
            if code in courses:
                raise CatalogError(f"Duplicate catalogue entry: {code}")

            prerequisites = frozenset(
                validate_course_code(prereq) for prereq in row.get("prerequisites", [])
            )
            if code in prerequisites:
                raise CyclicPrerequisiteError([code, code])

            courses[code] = Course(
                code=code,
                credits=validate_credits(row.get("credits")),
                title=row.get("title", ""),
                prerequisites=prerequisites,
            )
        logger.debug("Catalogue holds %d courses", len(courses))
        return courses
