"""Meeting: one schedulable variable of the calendar CSP."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from calendar_csp.calendar import date_range
from calendar_csp.constraints import BinaryConstraint, Constraint, UnaryConstraint


@dataclass
class Meeting:
    """Candidate dates, transient assignment and bound constraints.

    Invariants:
        - domain is ascending and only ever shrinks
        - assignment, when set, was drawn from the current domain
        - every constraint references ``index``
    """

    index: int
    domain: list[date]
    constraints: tuple[Constraint, ...] = ()
    assignment: date | None = None
    _binary: tuple[BinaryConstraint, ...] = field(
        default=(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._binary = tuple(
            c for c in self.constraints if isinstance(c, BinaryConstraint)
        )

    @classmethod
    def from_range(
        cls,
        index: int,
        range_start: date,
        range_end: date,
        constraints: Iterable[Constraint] = (),
    ) -> Meeting:
        """Build a meeting over [range_start, range_end] with its own constraints.

        Only constraints that reference ``index`` are kept.
        """
        bound = tuple(c for c in constraints if index in c.variables)
        return cls(index, list(date_range(range_start, range_end)), bound)

    @property
    def unary_constraints(self) -> tuple[UnaryConstraint, ...]:
        return tuple(c for c in self.constraints if isinstance(c, UnaryConstraint))

    @property
    def binary_constraints(self) -> tuple[BinaryConstraint, ...]:
        return self._binary

    def neighbours(self) -> set[int]:
        """Indices of other meetings sharing a binary constraint with this one."""
        result: set[int] = set()
        for c in self._binary:
            other = c.right if c.left == self.index else c.left
            if other != self.index:
                result.add(other)
        return result

    def remove(self, dates: Iterable[date]) -> int:
        """Drop dates from the domain, keeping its order. Returns count removed."""
        doomed = set(dates)
        if not doomed:
            return 0
        before = len(self.domain)
        self.domain = [d for d in self.domain if d not in doomed]
        return before - len(self.domain)
