"""Worklist propagation of flow assertions to a fixed point."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from flowtc.kernel.graph import Edge
from flowtc.kernel.ids import Use, Value
from flowtc.kernel.lattice import Lattice, LatticeError
from flowtc.solver.config import SolverConfig
from flowtc.solver.errors import ConvergenceError, PropagationLimitError
from flowtc.solver.store import ConstraintStore, UseNode, ValueNode

logger = logging.getLogger(__name__)

Assertion = tuple[Value, Use]


@dataclass
class FlowSolver:
    """
    One inference session.

    Each assertion is inserted into the store's reachability graph; every
    newly implied value-to-use pair is checked with ``lattice.meet`` exactly
    once, and the flows it implies are fed back until nothing new appears.
    """

    lattice: Lattice
    config: SolverConfig = field(default_factory=SolverConfig)
    store: ConstraintStore = field(default_factory=ConstraintStore)
    checked_pairs: list[Assertion] = field(default_factory=list)

    # ---- node creation ----
    def new_value(self, payload: Any) -> Value:
        return self.store.new_value(payload)

    def new_use(self, payload: Any) -> Use:
        return self.store.new_use(payload)

    def new_placeholder(self) -> tuple[Value, Use]:
        return self.store.new_placeholder()

    # ---- propagation ----
    def assert_flow(self, value: Value, use: Use) -> None:
        self.assert_flows([(value, use)])

    def assert_flows(self, flows: Iterable[Assertion]) -> None:
        """
        Assert every flow in ``flows`` and propagate their consequences.

        A failure leaves whatever the graph learned before it in place; take a
        ``snapshot`` first when the session must survive a rejected flow.
        """

        pending: deque[Assertion] = deque(flows)
        processed = 0
        while pending:
            lhs, rhs = pending.popleft()
            processed += 1
            limit = self.config.max_assertions
            if limit is not None and processed > limit:
                logger.warning("assertion limit %d exceeded", limit)
                raise PropagationLimitError("max_assertions", limit)
            new_edges = self.store.graph.add_edge(lhs.id, rhs.id)
            pending.extend(self._check_edges(new_edges))
            self._check_size()

    def _check_edges(self, edges: list[Edge]) -> list[Assertion]:
        implied: list[Assertion] = []
        for src, dst in edges:
            value_node = self.store.node(src)
            use_node = self.store.node(dst)
            if not isinstance(value_node, ValueNode):
                continue
            if not isinstance(use_node, UseNode):
                continue
            implied.extend(
                self._meet(Value(src), value_node.payload, Use(dst), use_node.payload)
            )
        return implied

    def _meet(
        self, value: Value, value_payload: Any, use: Use, use_payload: Any
    ) -> list[Assertion]:
        self.checked_pairs.append((value, use))
        if self.config.check_arity:
            lhs_arity = self.lattice.arity(value_payload)
            rhs_arity = self.lattice.arity(use_payload)
            if lhs_arity is not None and rhs_arity is not None:
                if lhs_arity != rhs_arity:
                    logger.warning(
                        "arity mismatch %s -> %s: %d vs %d",
                        value,
                        use,
                        lhs_arity,
                        rhs_arity,
                    )
                    raise ConvergenceError(
                        value, use, f"arity {lhs_arity} does not match {rhs_arity}"
                    )
        try:
            implied = list(self.lattice.meet(value_payload, use_payload))
        except LatticeError as exc:
            logger.warning("cannot converge %s -> %s: %s", value, use, exc)
            raise ConvergenceError(value, use, str(exc)) from exc
        logger.debug("met %s -> %s, %d implied flows", value, use, len(implied))
        return implied

    def _check_size(self) -> None:
        limit = self.config.max_nodes
        if limit is not None and len(self.store) > limit:
            logger.warning("node limit %d exceeded", limit)
            raise PropagationLimitError("max_nodes", limit)

    # ---- queries ----
    def reachable(self, value: Value, use: Use) -> bool:
        return self.store.graph.reachable(value.id, use.id)

    def element(self, handle: Value | Use) -> Any:
        return self.store.element(handle.id, self.lattice.unconstrained_type())

    def snapshot(self) -> FlowSolver:
        return FlowSolver(
            self.lattice, self.config, self.store.copy(), list(self.checked_pairs)
        )
