"""Record types stored in the graph arenas."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from .ids import EdgeIndex, NodeIndex

N = TypeVar("N")
E = TypeVar("E")


@dataclass
class Node(Generic[N]):
    """A node payload plus the identifiers of the edges it owns.

    ``edges`` is the only record of which node an edge starts from. It may
    still list identifiers of edges that were deleted later on.
    """

    data: N
    edges: List[EdgeIndex] = field(default_factory=list)


@dataclass
class Edge(Generic[E]):
    """An outgoing edge; the source is implied by the owning node."""

    dest: NodeIndex
    data: E
