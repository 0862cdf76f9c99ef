"""Constraint model: operators, unary/binary date constraints, consistency."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Sequence, Union


class Operator(str, Enum):
    """Comparison between two dates, read as ``left OP right``."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @classmethod
    def parse(cls, symbol: str | Operator) -> Operator:
        """Return the operator for a symbol, accepting common aliases.

        Raises ValueError for an unknown symbol.
        """
        if isinstance(symbol, Operator):
            return symbol
        key = str(symbol).strip()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown operator {symbol!r} "
                f"(expected one of {', '.join(op.value for op in cls)})"
            ) from None

    @property
    def inverse(self) -> Operator:
        """Operator with the operands swapped: ``a OP b`` == ``b OP.inverse a``."""
        return _INVERSE[self]


_ALIASES = {"=": "==", "≠": "!=", "<>": "!=", "≤": "<=", "≥": ">="}

_INVERSE = {
    Operator.EQ: Operator.EQ,
    Operator.NE: Operator.NE,
    Operator.LT: Operator.GT,
    Operator.LE: Operator.GE,
    Operator.GT: Operator.LT,
    Operator.GE: Operator.LE,
}


def consistent(left: date, right: date, op: Operator) -> bool:
    """True iff ``left OP right`` holds."""
    if op is Operator.EQ:
        return left == right
    if op is Operator.NE:
        return left != right
    if op is Operator.LT:
        return left < right
    if op is Operator.LE:
        return left <= right
    if op is Operator.GT:
        return left > right
    if op is Operator.GE:
        return left >= right
    raise ValueError(f"Unknown operator: {op!r}")


@dataclass(frozen=True)
class UnaryConstraint:
    """``meeting[variable] OP fixed_date``."""

    variable: int
    op: Operator
    fixed_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", Operator.parse(self.op))

    @property
    def variables(self) -> tuple[int, ...]:
        return (self.variable,)

    def is_satisfied(self, assignment: Sequence[date]) -> bool:
        return consistent(assignment[self.variable], self.fixed_date, self.op)

    def __str__(self) -> str:
        return f"M{self.variable} {self.op.value} {self.fixed_date.isoformat()}"


@dataclass(frozen=True)
class BinaryConstraint:
    """``meeting[left] OP meeting[right]``."""

    left: int
    op: Operator
    right: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", Operator.parse(self.op))

    @property
    def variables(self) -> tuple[int, ...]:
        return (self.left, self.right)

    @property
    def is_reflexive(self) -> bool:
        """Both sides name the same meeting."""
        return self.left == self.right

    def is_satisfied(self, assignment: Sequence[date]) -> bool:
        return consistent(assignment[self.left], assignment[self.right], self.op)

    def __str__(self) -> str:
        return f"M{self.left} {self.op.value} M{self.right}"


Constraint = Union[UnaryConstraint, BinaryConstraint]


def violated_constraints(
    assignment: Sequence[date],
    constraints: Iterable[Constraint],
) -> list[Constraint]:
    """Return every constraint the assignment breaks (empty = valid).

    The assignment must cover every meeting the constraints reference.
    """
    return [c for c in constraints if not c.is_satisfied(assignment)]
