"""Directed graph that keeps its own transitive closure up to date."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from flowtc.common.ordered_set import OrderedSet
from flowtc.kernel.ids import NodeId

logger = logging.getLogger(__name__)

Edge = tuple[NodeId, NodeId]


@dataclass
class ReachabilityGraph:
    """
    Graph over dense integer node ids whose edge set is its transitive closure.

    Notes:
        - ``downstream[n]`` holds every node reachable from ``n`` by a path of
          length >= 1; ``upstream[n]`` is the mirror image.
        - Cycles are allowed, including self edges.
        - Nodes and edges are never removed.
    """

    _upstream: list[OrderedSet[NodeId]] = field(default_factory=list)
    _downstream: list[OrderedSet[NodeId]] = field(default_factory=list)

    def add_node(self) -> NodeId:
        node = NodeId(len(self._downstream))
        self._upstream.append(OrderedSet())
        self._downstream.append(OrderedSet())
        return node

    def add_edge(
        self, lhs: NodeId, rhs: NodeId, new_edges: list[Edge] | None = None
    ) -> list[Edge]:
        """
        Insert ``lhs -> rhs`` and every edge it implies.

        Returns the newly implied edges in discovery order, appended to
        ``new_edges`` when one is supplied. Nothing is added when the closure
        already contains ``lhs -> rhs``.
        """

        self._check(lhs)
        self._check(rhs)
        if new_edges is None:
            new_edges = []
        start = len(new_edges)
        work: list[Edge] = [(lhs, rhs)]
        while work:
            src, dst = work.pop()
            if not self._downstream[src].insert(dst):
                continue
            self._upstream[dst].insert(src)
            new_edges.append((src, dst))
            for before in self._upstream[src]:
                work.append((before, dst))
            for after in self._downstream[dst]:
                work.append((src, after))
        logger.debug(
            "edge %d -> %d implied %d new edges", lhs, rhs, len(new_edges) - start
        )
        return new_edges

    def reachable(self, lhs: NodeId, rhs: NodeId) -> bool:
        self._check(rhs)
        return rhs in self.downstream(lhs)

    def downstream(self, node: NodeId) -> OrderedSet[NodeId]:
        self._check(node)
        return self._downstream[node]

    def upstream(self, node: NodeId) -> OrderedSet[NodeId]:
        self._check(node)
        return self._upstream[node]

    def edges(self) -> Iterator[Edge]:
        for src, targets in enumerate(self._downstream):
            for dst in targets:
                yield NodeId(src), dst

    def copy(self) -> ReachabilityGraph:
        return ReachabilityGraph(
            [s.copy() for s in self._upstream],
            [s.copy() for s in self._downstream],
        )

    def __len__(self) -> int:
        return len(self._downstream)

    def _check(self, node: NodeId) -> None:
        if not 0 <= node < len(self._downstream):
            raise IndexError(f"Unknown node {node}")
