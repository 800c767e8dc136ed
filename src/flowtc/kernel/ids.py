"""Node identifiers and the typed handles that wrap them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

NodeId = NewType("NodeId", int)


@dataclass(frozen=True)
class Value:
    """Handle to a node used in the producer role of a flow."""

    id: NodeId

    def __repr__(self) -> str:
        return f"Value({self.id})"


@dataclass(frozen=True)
class Use:
    """Handle to a node used in the consumer role of a flow."""

    id: NodeId

    def __repr__(self) -> str:
        return f"Use({self.id})"
