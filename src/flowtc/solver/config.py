"""Solver tuning knobs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Limits and checks applied by ``FlowSolver``.

    - max_assertions: assertions one ``assert_flow`` call may process
    - max_nodes: size the constraint store may grow to while propagating
    - check_arity: reject pairs whose elements report different arities
      before calling ``meet``
    """

    max_assertions: int | None = None
    max_nodes: int | None = None
    check_arity: bool = False

    def __post_init__(self) -> None:
        for name in ("max_assertions", "max_nodes"):
            bound = getattr(self, name)
            if bound is not None and bound < 0:
                raise ValueError(f"{name} must be non-negative")
