"""
Prerequisite Evaluation Engine.

This module decides whether a student may enroll in a course given their
history, and validates that the prerequisite graph itself is sound.
"""

import heapq
import logging
from collections.abc import Sequence
from typing import Iterable, Mapping, Optional

from ..config import PASSING_GRADES
from ..errors import CatalogError, CyclicPrerequisiteError, InvalidRecordError
from ..models import EligibilityResult, PrerequisiteRule
from ..validation import normalize_grade

logger = logging.getLogger(__name__)

_VISITING = 1
_DONE = 2
_EXHAUSTED = object()


def find_cycle(prerequisite_map: Mapping) -> Optional[list]:
    """
    Return one cycle in the prerequisite graph, or None if it is a DAG.

    Iterative depth-first search so deep prerequisite chains cannot hit the
    recursion limit. Nodes and edges are visited in sorted order, which makes
    the reported cycle deterministic for a given map.

    Returns:
        ["CST8284", "CST8285", "CST8284"] style path, first node repeated
    """
    state = {}

    for root in sorted(prerequisite_map):
        if root in state:
            continue

        state[root] = _VISITING
        path = [root]
        stack = [iter(sorted(prerequisite_map.get(root, ())))]

        while stack:
            child = next(stack[-1], _EXHAUSTED)
            if child is _EXHAUSTED:
                state[path.pop()] = _DONE
                stack.pop()
                continue

            child_state = state.get(child)
            if child_state == _VISITING:
                return path[path.index(child):] + [child]
            if child_state is None:
                state[child] = _VISITING
                path.append(child)
                stack.append(iter(sorted(prerequisite_map.get(child, ()))))

    return None


def check_map_shape(prerequisite_map: Mapping) -> None:
    """
    Raise CatalogError unless the map is {code: collection of codes}.

    A bare string value is rejected: iterating "CST8284" would yield its
    characters as prerequisite codes.
    """
    if not isinstance(prerequisite_map, Mapping):
        raise CatalogError(f"Prerequisite map must be a mapping, got {type(prerequisite_map).__name__}")

    for code, required in prerequisite_map.items():
        if not isinstance(code, str):
            raise CatalogError(f"Course code must be a string, got {code!r}")
        if isinstance(required, (str, bytes)) or not isinstance(required, Iterable):
            raise CatalogError(
                f"Prerequisites of {code} must be a collection of codes, got {required!r}"
            )
        for prereq in required:
            if not isinstance(prereq, str):
                raise CatalogError(f"Prerequisite of {code} must be a string, got {prereq!r}")


def validate_prerequisite_graph(prerequisite_map: Mapping) -> None:
    """Raise CatalogError for a malformed map, CyclicPrerequisiteError unless it is a DAG."""
    check_map_shape(prerequisite_map)
    cycle = find_cycle(prerequisite_map)
    if cycle is not None:
        logger.error("Prerequisite cycle detected: %s", " -> ".join(cycle))
        raise CyclicPrerequisiteError(cycle)


def map_from_rules(rules: Iterable[PrerequisiteRule]) -> dict:
    """Group PrerequisiteRule pairs into {course_code: frozenset(required_codes)}."""
    grouped = {}
    for rule in rules:
        grouped.setdefault(rule.course_code, set()).add(rule.required_code)
    return {code: frozenset(required) for code, required in grouped.items()}


def rules_from_map(prerequisite_map: Mapping) -> list:
    """Flatten a prerequisite map into sorted PrerequisiteRule pairs."""
    return [
        PrerequisiteRule(course_code=code, required_code=required)
        for code in sorted(prerequisite_map)
        for required in sorted(prerequisite_map[code])
    ]


def _unpack(record) -> tuple:
    # Mappings, (course_code, grade) pairs or objects such as Enrollment
    if isinstance(record, Mapping):
        if "course_code" in record and "grade" in record:
            return record["course_code"], record["grade"]
    elif isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
        if len(record) == 2:
            return record[0], record[1]
    elif hasattr(record, "course_code") and hasattr(record, "grade"):
        return record.course_code, record.grade
    raise InvalidRecordError(record)


class PrerequisiteEvaluator:
    """
    Evaluates enrollment eligibility against a prerequisite map.

    TAKEN vs PASSED:
    ----------------
    A prerequisite counts only when the student holds a record for it with
    a passing grade (anything except F, W or in progress). A student who
    attempted a course and failed has NOT met the requirement. If a course
    was retaken, one passing attempt is enough.

    GRAPH INTEGRITY:
    ----------------
    Every public operation validates the map as a DAG before looking at any
    student. A cycle is a catalogue fault, so it is raised rather than
    reasoned around.

    The prerequisite map is {course_code: iterable of required codes}. A
    course missing from the map has no prerequisites.
    """

    def passed_courses(self, completed_courses: Iterable) -> frozenset:
        """Codes of courses the student has passed at least once."""
        passed = set()
        for record in completed_courses:
            code, grade = _unpack(record)
            grade = normalize_grade(grade)
            if grade is not None and grade in PASSING_GRADES:
                passed.add(code)
        return frozenset(passed)

    def check_eligibility(self, completed_courses: Iterable, target_course: str,
                          prerequisite_map: Mapping) -> EligibilityResult:
        """
        Decide whether the student may enroll in target_course.

        Args:
            completed_courses: Enrollment objects or (course_code, grade) pairs
            target_course: Code of the course the student wants to take
            prerequisite_map: {course_code: iterable of required codes}

        Returns:
            EligibilityResult with eligible=True iff no prerequisite is unmet
        """
        validate_prerequisite_graph(prerequisite_map)
        passed = self.passed_courses(completed_courses)
        return self._evaluate(target_course, passed, prerequisite_map)

    def all_prerequisites(self, target_course: str, prerequisite_map: Mapping) -> frozenset:
        """
        Every course that must be passed, directly or transitively, before
        target_course. The target itself is never included.
        """
        validate_prerequisite_graph(prerequisite_map)

        seen = set()
        pending = list(prerequisite_map.get(target_course, ()))
        while pending:
            code = pending.pop()
            if code in seen:
                continue
            seen.add(code)
            pending.extend(prerequisite_map.get(code, ()))
        return frozenset(seen)

    def study_order(self, prerequisite_map: Mapping) -> list:
        """
        Topological order of every course in the map: each course appears
        after all of its prerequisites. Ties are broken alphabetically.
        """
        validate_prerequisite_graph(prerequisite_map)

        courses = set(prerequisite_map)
        for required in prerequisite_map.values():
            courses.update(required)

        dependents = {code: [] for code in courses}
        waiting_on = {code: 0 for code in courses}
        for code, required in prerequisite_map.items():
            for prereq in set(required):
                dependents[prereq].append(code)
                waiting_on[code] += 1

        ready = [code for code, count in waiting_on.items() if count == 0]
        heapq.heapify(ready)

        order = []
        while ready:
            code = heapq.heappop(ready)
            order.append(code)
            for dependent in dependents[code]:
                waiting_on[dependent] -= 1
                if waiting_on[dependent] == 0:
                    heapq.heappush(ready, dependent)
        return order

    def eligible_courses(self, completed_courses: Iterable, prerequisite_map: Mapping,
                         candidates: Optional[Iterable] = None) -> list:
        """
        Courses the student may register for right now.

        Courses already passed are left out. By default the candidates are
        the courses listed in the prerequisite map; pass `candidates` to
        include catalogue courses that have no prerequisites.
        """
        validate_prerequisite_graph(prerequisite_map)
        passed = self.passed_courses(completed_courses)

        pool = prerequisite_map if candidates is None else candidates
        eligible = []
        for code in sorted(set(pool)):
            if code in passed:
                continue
            if self._evaluate(code, passed, prerequisite_map).eligible:
                eligible.append(code)
        return eligible

    @staticmethod
    def _evaluate(target_course: str, passed: frozenset,
                  prerequisite_map: Mapping) -> EligibilityResult:
        required = frozenset(prerequisite_map.get(target_course, ()))
        unmet = required - passed
        logger.debug(
            "%s: %d required, %d unmet %s",
            target_course, len(required), len(unmet), sorted(unmet),
        )
        return EligibilityResult(
            course_code=target_course,
            eligible=not unmet,
            unmet=frozenset(unmet),
        )


def check_eligibility(completed_courses: Iterable, target_course: str,
                      prerequisite_map: Mapping) -> EligibilityResult:
    """Module-level shortcut for PrerequisiteEvaluator.check_eligibility."""
    return PrerequisiteEvaluator().check_eligibility(
        completed_courses, target_course, prerequisite_map
    )
