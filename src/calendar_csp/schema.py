"""Input validation for solver arguments and JSON problem documents."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable

from calendar_csp.constraints import BinaryConstraint, Operator, UnaryConstraint


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_plain_date(value: Any) -> bool:
    """date but not datetime (which does not compare with date)."""
    return isinstance(value, date) and not isinstance(value, datetime)


def validate_inputs(
    n_meetings: Any,
    range_start: Any,
    range_end: Any,
    constraints: Iterable[Any],
) -> list[str]:
    """Validate solve() arguments. Returns list of error messages (empty = valid).

    Checks:
    - n_meetings is a non-negative integer
    - range bounds are dates and range_start <= range_end
    - every constraint is a UnaryConstraint or BinaryConstraint
    - every referenced meeting index lies in [0, n_meetings)
    """
    errors: list[str] = []

    n_ok = _is_index(n_meetings) and n_meetings >= 0
    if not n_ok:
        errors.append(f"n_meetings must be a non-negative integer, got {n_meetings!r}")

    dates_ok = True
    for name, value in (("range_start", range_start), ("range_end", range_end)):
        if not _is_plain_date(value):
            errors.append(f"{name} must be a date, got {value!r}")
            dates_ok = False
    if dates_ok and range_end < range_start:
        errors.append(
            f"range_end {range_end.isoformat()} is before "
            f"range_start {range_start.isoformat()}"
        )

    for i, c in enumerate(constraints):
        if isinstance(c, UnaryConstraint):
            indices = [("variable", c.variable)]
            if not _is_plain_date(c.fixed_date):
                errors.append(
                    f"Constraint {i}: fixed_date must be a date, got {c.fixed_date!r}"
                )
        elif isinstance(c, BinaryConstraint):
            indices = [("left", c.left), ("right", c.right)]
        else:
            errors.append(
                f"Constraint {i}: expected UnaryConstraint or BinaryConstraint, "
                f"got {type(c).__name__}"
            )
            continue

        for field_name, idx in indices:
            if not _is_index(idx):
                errors.append(
                    f"Constraint {i}: {field_name} must be an integer, got {idx!r}"
                )
            elif n_ok and not 0 <= idx < n_meetings:
                errors.append(
                    f"Constraint {i}: {field_name} index {idx} out of range "
                    f"[0, {n_meetings})"
                )

    return errors


def validate_problem_data(data: Any) -> list[str]:
    """Validate a raw JSON problem document. Returns list of error messages.

    Checks:
    - "meetings" is a non-negative integer
    - "range" has ISO "start" and "end" dates
    - each constraint has an integer "left", a known "op", and exactly
      one of an integer "right" or an ISO "date"
    """
    if not isinstance(data, dict):
        return [f"Problem must be an object, got {type(data).__name__}"]

    errors: list[str] = []

    meetings = data.get("meetings")
    if not _is_index(meetings) or meetings < 0:
        errors.append(f"'meetings' must be a non-negative integer, got {meetings!r}")

    rng = data.get("range")
    if not isinstance(rng, dict):
        errors.append("'range' must be an object with 'start' and 'end'")
    else:
        for key in ("start", "end"):
            try:
                date.fromisoformat(rng[key])
            except KeyError:
                errors.append(f"'range' is missing '{key}'")
            except (ValueError, TypeError):
                errors.append(f"'range.{key}': invalid date {rng[key]!r}")

    constraints = data.get("constraints", [])
    if not isinstance(constraints, list):
        errors.append("'constraints' must be a list")
        return errors

    for i, entry in enumerate(constraints):
        if not isinstance(entry, dict):
            errors.append(f"Constraint {i}: expected an object, got {entry!r}")
            continue

        if not _is_index(entry.get("left")):
            errors.append(f"Constraint {i}: 'left' must be an integer")

        try:
            Operator.parse(entry.get("op", ""))
        except ValueError as e:
            errors.append(f"Constraint {i}: {e}")

        has_right = "right" in entry
        has_date = "date" in entry
        if has_right == has_date:
            errors.append(f"Constraint {i}: needs exactly one of 'right' or 'date'")
        elif has_right and not _is_index(entry["right"]):
            errors.append(f"Constraint {i}: 'right' must be an integer")
        elif has_date:
            try:
                date.fromisoformat(entry["date"])
            except (ValueError, TypeError):
                errors.append(f"Constraint {i}: invalid date {entry['date']!r}")

    return errors
