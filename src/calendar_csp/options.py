"""Solver configuration: SolverOptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverOptions:
    """Tunes how much propagation runs before search. Immutable.

    No combination changes the result of ``solve``; they only change how
    much work is done to reach it.
    """

    arc_consistency: bool = True
    short_circuit: bool = True


DEFAULT_OPTIONS = SolverOptions()
