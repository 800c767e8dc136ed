"""Small tag lattice used to drive the solver in tests."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from flowtc.kernel.ids import Use, Value
from flowtc.kernel.lattice import LatticeError


@dataclass(frozen=True)
class Prim:
    name: str


@dataclass(frozen=True)
class ListOf:
    """List value carrying the value handle of its elements."""

    elem: Value


@dataclass(frozen=True)
class ListUse:
    elem: Use


@dataclass(frozen=True)
class Func:
    """Function value: parameters are uses, the result is a value."""

    params: tuple[Use, ...]
    result: Value


@dataclass(frozen=True)
class Call:
    """Call site: arguments flow in as values, the result flows out to a use."""

    args: tuple[Value, ...]
    result: Use


@dataclass
class TagLattice:
    calls: list[tuple[Any, Any]] = field(default_factory=list)

    def unconstrained_type(self) -> Any:
        return Prim("Any")

    def meet(self, value: Any, use: Any) -> Iterable[tuple[Value, Use]]:
        self.calls.append((value, use))
        match value, use:
            case Prim(a), Prim(b):
                if a != b and b != "Any":
                    raise LatticeError(f"{a} is not {b}")
                return []
            case ListOf(elem), ListUse(use_elem):
                return [(elem, use_elem)]
            case Func(params, result), Call(args, out):
                if len(params) != len(args):
                    raise LatticeError("argument count mismatch")
                return [*zip(args, params), (result, out)]
            case _:
                raise LatticeError(f"{value} is not {use}")

    def arity(self, element: Any) -> int | None:
        match element:
            case Func(params, _):
                return len(params)
            case Call(args, _):
                return len(args)
            case _:
                return None
