"""Data loading utilities for calendar CSP problem definitions."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from calendar_csp.constraints import (
    BinaryConstraint,
    Constraint,
    Operator,
    UnaryConstraint,
)
from calendar_csp.options import DEFAULT_OPTIONS, SolverOptions
from calendar_csp.schema import validate_problem_data
from calendar_csp.solver import solve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Problem:
    """A complete solver input: meetings, date range and constraints."""

    problem_id: str
    n_meetings: int
    range_start: date
    range_end: date
    constraints: tuple[Constraint, ...]

    def solve(self, options: SolverOptions = DEFAULT_OPTIONS) -> list[date] | None:
        return solve(
            self.n_meetings, self.range_start, self.range_end,
            self.constraints, options,
        )


def constraint_from_dict(entry: dict[str, Any]) -> Constraint:
    """Build a constraint from its JSON form.

    {"left": 0, "op": "<", "right": 1}            -> BinaryConstraint
    {"left": 0, "op": "==", "date": "2023-01-02"} -> UnaryConstraint
    """
    op = Operator.parse(entry["op"])
    if "right" in entry:
        return BinaryConstraint(entry["left"], op, entry["right"])
    return UnaryConstraint(entry["left"], op, date.fromisoformat(entry["date"]))


def constraint_to_dict(constraint: Constraint) -> dict[str, Any]:
    """Inverse of constraint_from_dict."""
    if isinstance(constraint, BinaryConstraint):
        return {
            "left": constraint.left,
            "op": constraint.op.value,
            "right": constraint.right,
        }
    return {
        "left": constraint.variable,
        "op": constraint.op.value,
        "date": constraint.fixed_date.isoformat(),
    }


def problem_from_dict(data: dict[str, Any], default_id: str = "problem") -> Problem:
    """Validate and convert a JSON problem document.

    Raises ValueError listing every validation error.
    """
    errors = validate_problem_data(data)
    if errors:
        problem_id = data.get("id", default_id) if isinstance(data, dict) else default_id
        raise ValueError(
            f"Validation errors in problem {problem_id!r}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return Problem(
        problem_id=data.get("id", default_id),
        n_meetings=data["meetings"],
        range_start=date.fromisoformat(data["range"]["start"]),
        range_end=date.fromisoformat(data["range"]["end"]),
        constraints=tuple(
            constraint_from_dict(c) for c in data.get("constraints", [])
        ),
    )


def load_problem_json(path: str | Path) -> Problem:
    """Load a Problem from a JSON file.

    The JSON file must have the format:
    {
        "id": "...",
        "meetings": 2,
        "range": {"start": "2023-01-01", "end": "2023-01-05"},
        "constraints": [{"left": 0, "op": "<", "right": 1}, ...]
    }

    The id defaults to the file stem. Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    problem = problem_from_dict(data, default_id=path.stem)
    logger.debug(
        "loaded %s: %d meeting(s), %d constraint(s)",
        path.name, problem.n_meetings, len(problem.constraints),
    )
    return problem
