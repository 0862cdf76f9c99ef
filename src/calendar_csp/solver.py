"""Public entry point: solve a calendar CSP.

Composes the layers: validate -> build meetings -> node consistency ->
arc consistency -> backtracking search.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from calendar_csp.consistency import arc_consistency, node_consistency
from calendar_csp.constraints import Constraint
from calendar_csp.meeting import Meeting
from calendar_csp.options import DEFAULT_OPTIONS, SolverOptions
from calendar_csp.schema import validate_inputs
from calendar_csp.search import backtrack
from calendar_csp.types import InvalidInputError

logger = logging.getLogger(__name__)


def build_meetings(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[Constraint],
) -> list[Meeting]:
    """One meeting per index, each with the full range and its own constraints."""
    constraints = list(constraints)
    return [
        Meeting.from_range(i, range_start, range_end, constraints)
        for i in range(n_meetings)
    ]


def propagate(meetings: list[Meeting], options: SolverOptions = DEFAULT_OPTIONS) -> bool:
    """Run the enabled propagation passes. False means provably unsatisfiable.

    Without ``short_circuit`` the passes always run to completion and
    return True, leaving empty domains for search to discover.
    """
    if not node_consistency(meetings) and options.short_circuit:
        return False
    if options.arc_consistency:
        if not arc_consistency(meetings, short_circuit=options.short_circuit):
            return not options.short_circuit
    return True


def solve(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[Constraint],
    options: SolverOptions = DEFAULT_OPTIONS,
) -> list[date] | None:
    """Assign a date in [range_start, range_end] to each of n_meetings meetings.

    Args:
        n_meetings: Number of meetings, indexed 0..n_meetings-1.
        range_start: First permissible date (inclusive).
        range_end: Last permissible date (inclusive).
        constraints: Unary and binary constraints on meeting dates.
        options: Propagation settings. Never change the result.

    Returns:
        List where index i holds the date of meeting i, or None if no
        assignment satisfies every constraint. When several solutions exist
        the lexicographically smallest is returned.

    Raises:
        InvalidInputError: If any argument is malformed. Raised before any
            domain is built.
    """
    constraints = list(constraints)
    errors = validate_inputs(n_meetings, range_start, range_end, constraints)
    if errors:
        raise InvalidInputError(errors)

    meetings = build_meetings(n_meetings, range_start, range_end, constraints)
    logger.debug(
        "solving %d meeting(s) over %s..%s with %d constraint(s)",
        n_meetings, range_start.isoformat(), range_end.isoformat(), len(constraints),
    )

    if not propagate(meetings, options):
        logger.info("no solution: propagation emptied a domain")
        return None

    logger.debug(
        "domain sizes after propagation: %s", [len(m.domain) for m in meetings]
    )
    solution = backtrack(meetings)
    if solution is None:
        logger.info("no solution: search exhausted")
    else:
        logger.info("solution found for %d meeting(s)", n_meetings)
    return solution
