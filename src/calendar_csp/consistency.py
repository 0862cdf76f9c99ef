"""Propagation passes: node consistency and arc consistency (AC-3).

Both passes only ever remove dates from meeting domains. A removed date can
not take part in any assignment that satisfies every constraint, so neither
pass changes whether (or which) solution exists.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Sequence

from calendar_csp.constraints import Constraint, Operator, consistent
from calendar_csp.meeting import Meeting
from calendar_csp.types import Arc

logger = logging.getLogger(__name__)


def node_consistency(meetings: Sequence[Meeting]) -> bool:
    """Filter each domain against the meeting's unary constraints.

    A binary constraint naming the same meeting on both sides is checked
    here too, as ``d OP d``. Returns False if any domain ended up empty.
    """
    ok = True
    for meeting in meetings:
        doomed = set()
        for c in meeting.unary_constraints:
            doomed.update(
                d for d in meeting.domain if not consistent(d, c.fixed_date, c.op)
            )
        for c in meeting.binary_constraints:
            if c.is_reflexive:
                doomed.update(d for d in meeting.domain if not consistent(d, d, c.op))

        removed = meeting.remove(doomed)
        if removed:
            logger.debug(
                "node consistency: M%d lost %d date(s), %d left",
                meeting.index, removed, len(meeting.domain),
            )
        if not meeting.domain:
            ok = False
    return ok


def build_arcs(meetings: Sequence[Meeting]) -> dict[Arc, list[Operator]]:
    """Directed arcs of the constraint graph with the operators each checks.

    ``left OP right`` yields ``Arc(left, right)`` checking ``OP`` and
    ``Arc(right, left)`` checking ``OP.inverse``. Arcs appear in the order
    their first constraint is met, scanning meetings by index.
    """
    seen: dict[Constraint, None] = {}
    for meeting in meetings:
        for c in meeting.binary_constraints:
            seen.setdefault(c, None)

    arcs: dict[Arc, list[Operator]] = {}
    for c in seen:
        if c.is_reflexive:
            continue
        forward = Arc(c.left, c.right)
        arcs.setdefault(forward, []).append(c.op)
        arcs.setdefault(forward.reversed(), []).append(c.op.inverse)
    return arcs


def revise(dependent: Meeting, support: Meeting, ops: Sequence[Operator]) -> int:
    """Remove dependent dates with no compatible date in support's domain.

    A support date is compatible when ``vx OP vy`` holds for every operator.
    Returns the number of dates removed.
    """
    unsupported = [
        vx
        for vx in dependent.domain
        if not any(
            all(consistent(vx, vy, op) for op in ops) for vy in support.domain
        )
    ]
    return dependent.remove(unsupported)


def arc_consistency(meetings: Sequence[Meeting], short_circuit: bool = True) -> bool:
    """Run AC-3 over the binary constraints until no domain changes.

    Returns False if some domain became empty. With ``short_circuit`` the
    pass stops at the first emptied domain; otherwise it runs to the fixpoint.
    """
    arcs = build_arcs(meetings)
    neighbours: dict[int, list[int]] = {}
    for arc in arcs:
        neighbours.setdefault(arc.support, []).append(arc.dependent)

    queue: deque[Arc] = deque(arcs)
    queued: set[Arc] = set(arcs)
    revisions = 0
    ok = all(m.domain for m in meetings)

    while queue:
        arc = queue.popleft()
        queued.discard(arc)
        x = meetings[arc.dependent]
        removed = revise(x, meetings[arc.support], arcs[arc])
        revisions += 1
        if not removed:
            continue

        logger.debug(
            "arc consistency: M%d -> M%d removed %d date(s), %d left",
            arc.dependent, arc.support, removed, len(x.domain),
        )
        if not x.domain:
            ok = False
            if short_circuit:
                logger.debug("arc consistency: M%d domain emptied, stopping", x.index)
                return False

        # x shrank: support previously found in x may be gone
        for z in neighbours.get(x.index, ()):
            if z == arc.support:
                continue
            incoming = Arc(z, x.index)
            if incoming not in queued:
                queue.append(incoming)
                queued.add(incoming)

    logger.debug("arc consistency: fixpoint after %d revision(s)", revisions)
    return ok
