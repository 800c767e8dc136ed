"""Solver facade: constraint store, propagation, and errors."""

from flowtc.solver.config import SolverConfig
from flowtc.solver.errors import ConvergenceError, PropagationLimitError
from flowtc.solver.solver import FlowSolver
from flowtc.solver.store import (
    ConstraintNode,
    ConstraintStore,
    Placeholder,
    UseNode,
    ValueNode,
)

__all__ = [
    "ConstraintNode",
    "ConstraintStore",
    "ConvergenceError",
    "FlowSolver",
    "Placeholder",
    "PropagationLimitError",
    "SolverConfig",
    "UseNode",
    "ValueNode",
]
