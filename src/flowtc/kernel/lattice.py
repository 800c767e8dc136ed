"""Contract a caller-supplied type lattice must satisfy."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from flowtc.kernel.ids import Use, Value


@dataclass
class LatticeError(Exception):
    """Raised by ``Lattice.meet`` when two elements cannot be reconciled."""

    message: str

    def __str__(self) -> str:
        return self.message


class Lattice(Protocol):
    """
    Type system plugged into the flow solver.

    Value and use elements are opaque to the solver. Structural elements
    typically carry ``Value``/``Use`` handles for their components, which
    ``meet`` hands back as further flows to check.
    """

    def unconstrained_type(self) -> Any:
        """Least constrained element, reported for placeholders."""
        ...

    def meet(self, value: Any, use: Any) -> Iterable[tuple[Value, Use]]:
        """
        Check that ``value`` may flow into ``use``.

        Returns the flows the decomposition implies; raises ``LatticeError``
        when the two are incompatible.
        """
        ...

    def arity(self, element: Any) -> int | None:
        """Structural shape of ``element``, when it has one."""
        ...
