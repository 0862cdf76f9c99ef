"""Shared test fixtures and data loading for calendar-csp.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Scenario entries share the problem-file shape:
    {"meetings": n, "range": {"start": ..., "end": ...}, "constraints": [...]}
"""

from __future__ import annotations

import itertools
import json
from datetime import date
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
PROBLEMS_DIR = FIXTURES_DIR / "problems"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def problem_path(name: str) -> Path:
    return PROBLEMS_DIR / f"{name}.json"


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def d(iso: str) -> date:
    """Date from an ISO string.

    >>> d("2023-01-02")
    datetime.date(2023, 1, 2)
    """
    return date.fromisoformat(iso)


def dates(isos: list[str] | None) -> list[date] | None:
    """List of dates from ISO strings; None passes through."""
    if isos is None:
        return None
    return [d(s) for s in isos]


def make_constraints(entries: list[dict]):
    """Build constraint objects from their JSON form."""
    from calendar_csp.loaders import constraint_from_dict

    return [constraint_from_dict(e) for e in entries]


def solve_args(spec: dict):
    """(n_meetings, range_start, range_end, constraints) for a scenario."""
    return (
        spec["meetings"],
        d(spec["range"]["start"]),
        d(spec["range"]["end"]),
        make_constraints(spec["constraints"]),
    )


# ---------------------------------------------------------------------------
# Meeting factory
# ---------------------------------------------------------------------------
def make_meetings(spec: dict):
    """Fresh, unpropagated meetings for a scenario."""
    from calendar_csp.solver import build_meetings

    return build_meetings(*solve_args(spec))


# ---------------------------------------------------------------------------
# Brute force reference
# ---------------------------------------------------------------------------
def brute_force_solutions(n: int, start: date, end: date, constraints):
    """Every satisfying assignment, in lexicographic order.

    Only for tiny problems: enumerates the full cartesian product.
    """
    from calendar_csp.calendar import date_range
    from calendar_csp.constraints import violated_constraints

    days = list(date_range(start, end))
    for combo in itertools.product(days, repeat=n):
        if not violated_constraints(combo, constraints):
            yield list(combo)


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def jan() -> tuple[date, date]:
    """First week of January 2023: (start, end), inclusive."""
    return d("2023-01-01"), d("2023-01-07")


@pytest.fixture
def problem_dir() -> Path:
    return PROBLEMS_DIR
