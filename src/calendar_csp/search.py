"""Backtracking search over propagated meeting domains.

Meetings are assigned in ascending index order and each meeting's dates are
tried in ascending order, so the first solution found is the
lexicographically smallest one.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from calendar_csp.meeting import Meeting

logger = logging.getLogger(__name__)


def _consistent_so_far(meeting: Meeting, assignment: Sequence[date]) -> bool:
    """Check the meeting's constraints whose meetings are all assigned."""
    assigned = len(assignment)
    for c in meeting.constraints:
        if all(v < assigned for v in c.variables) and not c.is_satisfied(assignment):
            return False
    return True


def backtrack(
    meetings: Sequence[Meeting],
    assignment: list[date] | None = None,
) -> list[date] | None:
    """Extend ``assignment`` to a full solution, or return None.

    ``assignment`` holds dates for meetings ``0..len(assignment)-1`` and is
    restored to its original length before returning None. Domains are not
    modified.
    """
    if assignment is None:
        assignment = []

    index = len(assignment)
    if index == len(meetings):
        return list(assignment)

    meeting = meetings[index]
    for candidate in meeting.domain:
        assignment.append(candidate)
        meeting.assignment = candidate
        try:
            if _consistent_so_far(meeting, assignment):
                result = backtrack(meetings, assignment)
                if result is not None:
                    return result
        finally:
            assignment.pop()
            meeting.assignment = None

    logger.debug("backtrack: M%d exhausted %d date(s)", index, len(meeting.domain))
    return None
