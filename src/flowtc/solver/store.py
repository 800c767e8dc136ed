"""Per-node constraint payloads, allocated alongside graph nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flowtc.kernel.graph import ReachabilityGraph
from flowtc.kernel.ids import NodeId, Use, Value


@dataclass(frozen=True)
class Placeholder:
    """Type variable: a value and a use of itself sharing one node."""


@dataclass(frozen=True)
class ValueNode:
    payload: Any


@dataclass(frozen=True)
class UseNode:
    payload: Any


ConstraintNode = Placeholder | ValueNode | UseNode


@dataclass
class ConstraintStore:
    """
    Parallel table of constraint nodes indexed by graph node id.

    Every creation operation allocates exactly one node in ``graph`` and one
    entry here, so the two tables always have the same length.
    """

    graph: ReachabilityGraph = field(default_factory=ReachabilityGraph)
    nodes: list[ConstraintNode] = field(default_factory=list)

    def new_value(self, payload: Any) -> Value:
        return Value(self._alloc(ValueNode(payload)))

    def new_use(self, payload: Any) -> Use:
        return Use(self._alloc(UseNode(payload)))

    def new_placeholder(self) -> tuple[Value, Use]:
        node = self._alloc(Placeholder())
        return Value(node), Use(node)

    def node(self, node: NodeId) -> ConstraintNode:
        if not 0 <= node < len(self.nodes):
            raise IndexError(f"Unknown node {node}")
        return self.nodes[node]

    def element(self, node: NodeId, default: Any = None) -> Any:
        match self.node(node):
            case ValueNode(payload) | UseNode(payload):
                return payload
            case _:
                return default

    def copy(self) -> ConstraintStore:
        return ConstraintStore(self.graph.copy(), list(self.nodes))

    def __len__(self) -> int:
        return len(self.nodes)

    def _alloc(self, entry: ConstraintNode) -> NodeId:
        node = self.graph.add_node()
        assert node == len(self.nodes)
        self.nodes.append(entry)
        return node
