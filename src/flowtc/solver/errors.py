"""Errors raised while propagating flows."""

from __future__ import annotations

from dataclasses import dataclass

from flowtc.kernel.ids import Use, Value


@dataclass
class ConvergenceError(Exception):
    """A value proven to flow into a use is incompatible with it."""

    value: Value
    use: Use
    message: str

    def __str__(self) -> str:
        return f"Unable to converge {self.value} -> {self.use}: {self.message}"


@dataclass
class PropagationLimitError(Exception):
    """Propagation exceeded a configured ceiling."""

    limit: str
    bound: int

    def __str__(self) -> str:
        return f"Propagation exceeded {self.limit}={self.bound}"
