#!/usr/bin/env python
"""Visual verification report for calendar-csp.

Run:  python scripts/verify.py

Produces a formatted report showing:
  1. Operator table (consistent() truth values and inverses)
  2. Propagation (domains after node and arc consistency, ASCII view)
  3. Solve scenarios (expected vs actual, ASCII view of each solution)
  4. Problem files from data/fixtures/problems/
"""

from __future__ import annotations

import json
import sys
from datetime import date, datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"
PROBLEMS = FIXTURES / "problems"

sys.path.insert(0, str(ROOT / "src"))

from calendar_csp.consistency import arc_consistency, node_consistency
from calendar_csp.constraints import Operator, consistent
from calendar_csp.debug import show_domains, show_solution
from calendar_csp.loaders import constraint_from_dict, load_problem_json
from calendar_csp.solver import build_meetings, solve


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _fmt_solution(solution: list[date] | None) -> str:
    if solution is None:
        return "none"
    return ", ".join(day.strftime("%d %b") for day in solution) or "[]"


def _args(spec: dict):
    return (
        spec["meetings"],
        date.fromisoformat(spec["range"]["start"]),
        date.fromisoformat(spec["range"]["end"]),
        [constraint_from_dict(c) for c in spec["constraints"]],
    )


# ---------------------------------------------------------------------------
# Section 1: Operators
# ---------------------------------------------------------------------------
def section_operators():
    banner("OPERATORS")
    data = _load(SCENARIOS / "operators.json")

    heading("consistent(left, right, op)")
    rows = []
    for c in data["consistent"]:
        got = consistent(
            date.fromisoformat(c["left"]),
            date.fromisoformat(c["right"]),
            Operator(c["op"]),
        )
        status = "PASS" if got is c["expected"] else "FAIL"
        rows.append([c["left"], c["op"], c["right"], str(got), status])
    table(["Left", "Op", "Right", "Result", "Status"], rows)

    heading("Reverse-arc operators")
    table(["Op", "Inverse"], [[op.value, op.inverse.value] for op in Operator])


# ---------------------------------------------------------------------------
# Section 2: Propagation
# ---------------------------------------------------------------------------
def section_propagation():
    banner("PROPAGATION")
    data = _load(SCENARIOS / "consistency.json")

    for spec in data["arc"]:
        n, start, end, constraints = _args(spec)
        heading(f"{spec['id']}: " + "; ".join(str(c) for c in constraints))
        meetings = build_meetings(n, start, end, constraints)
        node_consistency(meetings)
        ok = arc_consistency(meetings)
        print(f"    consistent: {ok}")
        show_domains(meetings, start, end)


# ---------------------------------------------------------------------------
# Section 3: Solve scenarios
# ---------------------------------------------------------------------------
def section_solve():
    banner("SOLVE SCENARIOS")
    data = _load(SCENARIOS / "solve.json")

    rows = []
    for spec in data["cases"]:
        got = solve(*_args(spec))
        expected = spec["expected"]
        if expected is not None:
            expected = [date.fromisoformat(s) for s in expected]
        status = "PASS" if got == expected else "FAIL"
        rows.append([spec["id"], _fmt_solution(expected), _fmt_solution(got), status])
    table(["Scenario", "Expected", "Got", "Status"], rows)

    for spec in data["cases"]:
        n, start, end, constraints = _args(spec)
        if n == 0:
            continue
        heading(spec["id"])
        show_solution(solve(n, start, end, constraints), start, end)


# ---------------------------------------------------------------------------
# Section 4: Problem files
# ---------------------------------------------------------------------------
def section_problems():
    banner("PROBLEM FILES")
    for path in sorted(PROBLEMS.glob("*.json")):
        problem = load_problem_json(path)
        heading(f"{problem.problem_id} ({path.name})")
        for c in problem.constraints:
            print(f"    {c}")
        print()
        show_solution(problem.solve(), problem.range_start, problem.range_end)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    banner("CALENDAR-CSP   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_operators()
    section_propagation()
    section_solve()
    section_problems()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
