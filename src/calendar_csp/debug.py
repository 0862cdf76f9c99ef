"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Sequence

from calendar_csp.calendar import date_range

if TYPE_CHECKING:
    from calendar_csp.meeting import Meeting


def _header(start: date, end: date) -> str:
    # Day-of-month, last digit only, one char per day
    return "".join(str(d.day % 10) for d in date_range(start, end))


def show_domains(
    meetings: Sequence[Meeting],
    start: date,
    end: date,
) -> str:
    """Print ASCII view of each meeting's domain over [start, end].

    Legend: '#' = date still in domain, '.' = pruned, '*' = assigned.
    Returns the string and also prints to stdout.
    """
    lines: list[str] = [f"{'':>6s}  {_header(start, end)}"]

    for m in meetings:
        viable = set(m.domain)
        row = []
        for d in date_range(start, end):
            if m.assignment == d:
                row.append("*")
            elif d in viable:
                row.append("#")
            else:
                row.append(".")
        lines.append(f"{'M' + str(m.index):>6s}  {''.join(row)}  ({len(m.domain)})")

    result = "\n".join(lines)
    print(result)
    return result


def show_solution(
    solution: Sequence[date] | None,
    start: date,
    end: date,
) -> str:
    """Print ASCII view of a solve() result over [start, end].

    One row per meeting with '*' on its date. Returns the string and
    also prints to stdout.
    """
    if solution is None:
        result = "(no solution)"
        print(result)
        return result

    lines: list[str] = [f"{'':>6s}  {_header(start, end)}"]
    for i, chosen in enumerate(solution):
        row = "".join("*" if d == chosen else "." for d in date_range(start, end))
        lines.append(f"{'M' + str(i):>6s}  {row}  {chosen.isoformat()}")

    result = "\n".join(lines)
    print(result)
    return result
