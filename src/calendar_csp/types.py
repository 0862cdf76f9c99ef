"""Shared types: Arc and InvalidInputError."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Arc:
    """Directed arc of the constraint graph.

    Every date left in ``dependent``'s domain must have at least one
    compatible date in ``support``'s domain.
    """

    dependent: int
    support: int

    def reversed(self) -> Arc:
        return Arc(self.support, self.dependent)


class InvalidInputError(ValueError):
    """Raised when solver inputs are malformed. Nothing is solved."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            "Invalid solver input:\n" + "\n".join(f"  - {e}" for e in self.errors)
        )
