"""calendar-csp: Constraint satisfaction for meeting dates."""

import logging

from calendar_csp.constraints import (
    BinaryConstraint,
    Constraint,
    Operator,
    UnaryConstraint,
    consistent,
    violated_constraints,
)
from calendar_csp.loaders import Problem, load_problem_json
from calendar_csp.meeting import Meeting
from calendar_csp.options import DEFAULT_OPTIONS, SolverOptions
from calendar_csp.solver import solve
from calendar_csp.types import Arc, InvalidInputError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Arc",
    "BinaryConstraint",
    "Constraint",
    "DEFAULT_OPTIONS",
    "InvalidInputError",
    "Meeting",
    "Operator",
    "Problem",
    "SolverOptions",
    "UnaryConstraint",
    "consistent",
    "load_problem_json",
    "solve",
    "violated_constraints",
]
