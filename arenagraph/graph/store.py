"""Arena backed storage for a directed multigraph.

Nodes and edges live in two flat lists.  Callers hold :class:`NodeIndex` and
:class:`EdgeIndex` handles instead of references to the records, and deleting
a record only empties its slot so that every other handle keeps pointing at
the same record.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from arenagraph.config import GraphSettings, load_settings
from arenagraph.obs.events import EventBus

from .ids import EdgeIndex, NodeIndex
from .model import Edge, Node

N = TypeVar("N")
E = TypeVar("E")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def _require(index: object, kind: Type[object]) -> None:
    if type(index) is not kind:
        raise TypeError(f"expected {kind.__name__}, got {type(index).__name__}")


def _slot(arena: List[Optional[R]], position: int) -> Optional[R]:
    if position >= len(arena):
        return None
    return arena[position]


@dataclass
class Graph(Generic[N, E]):
    """Directed multigraph with stable integer handles.

    Failures are reported as ``None``/no-ops rather than exceptions: an
    identifier that was never issued behaves exactly like one whose record has
    been deleted.  Only passing the wrong handle type raises (``TypeError``).

    Records returned by the lookup methods are the stored records themselves;
    mutating ``record.data`` mutates the graph.  Do not keep them across a
    delete, keep the handle instead.
    """

    events: Optional[EventBus] = None
    settings: GraphSettings = field(default_factory=load_settings)
    _nodes: List[Optional[Node[N]]] = field(default_factory=list, init=False, repr=False)
    _edges: List[Optional[Edge[E]]] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.events is None and self.settings.record_events:
            self.events = EventBus()

    def add_node(self, data: N) -> NodeIndex:
        """Append a node holding ``data`` and return its handle."""

        ind = NodeIndex(len(self._nodes))
        self._nodes.append(Node(data))
        self._record("add_node", "Added node %s", ind.value)
        return ind

    def add_edge(self, source: NodeIndex, dest: NodeIndex, data: E) -> Optional[EdgeIndex]:
        """Add an edge from ``source`` to ``dest``.

        Returns ``None`` without touching the graph when either endpoint is
        not a live node.  Parallel edges and self-loops are allowed.
        """

        _require(dest, NodeIndex)
        source_node = self.get_node_from_index(source)
        if source_node is None or not self.has_node(dest):
            if self.settings.log_mutations:
                logger.debug("Rejected edge %s -> %s: endpoint is not live", source, dest)
            return None

        ind = EdgeIndex(len(self._edges))
        self._edges.append(Edge(dest, data))
        source_node.edges.append(ind)
        self._record(
            "add_edge",
            "Added edge %s (%s -> %s)",
            ind.value,
            source.value,
            dest.value,
            extras={"source": source.value, "dest": dest.value},
        )
        return ind

    def get_node_from_index(self, ind: NodeIndex) -> Optional[Node[N]]:
        """Return the live node at ``ind`` or ``None``."""

        _require(ind, NodeIndex)
        return _slot(self._nodes, ind.value)

    def get_edge_from_index(self, ind: EdgeIndex) -> Optional[Edge[E]]:
        """Return the live edge at ``ind`` or ``None``."""

        _require(ind, EdgeIndex)
        return _slot(self._edges, ind.value)

    get_node_from_index_mut = get_node_from_index
    get_edge_from_index_mut = get_edge_from_index

    def has_node(self, ind: NodeIndex) -> bool:
        return self.get_node_from_index(ind) is not None

    def has_edge(self, ind: EdgeIndex) -> bool:
        return self.get_edge_from_index(ind) is not None

    def get_edge_index_between_nodes(self, source: NodeIndex, dest: NodeIndex) -> Optional[EdgeIndex]:
        """Return the first live edge from ``source`` to ``dest``.

        The adjacency list of ``source`` is scanned in insertion order;
        entries whose edge has been deleted are skipped.
        """

        _require(dest, NodeIndex)
        source_node = self.get_node_from_index(source)
        if source_node is None or not self.has_node(dest):
            return None
        for edge_ind in source_node.edges:
            edge = self.get_edge_from_index(edge_ind)
            if edge is not None and edge.dest == dest:
                return edge_ind
        return None

    def get_edge_between_nodes(self, source: NodeIndex, dest: NodeIndex) -> Optional[Edge[E]]:
        ind = self.get_edge_index_between_nodes(source, dest)
        if ind is None:
            return None
        return self.get_edge_from_index(ind)

    get_edge_between_nodes_mut = get_edge_between_nodes

    def delete_node(self, ind: NodeIndex) -> None:
        """Delete a node together with every edge entering or leaving it.

        Deleting a node that is not live does nothing.
        """

        node = self.get_node_from_index(ind)
        if node is None:
            return

        inbound = [
            EdgeIndex(position)
            for position, edge in enumerate(self._edges)
            if edge is not None and edge.dest == ind
        ]
        for edge_ind in inbound:
            self.delete_edge(edge_ind)
        for edge_ind in node.edges:
            self.delete_edge(edge_ind)

        self._nodes[ind.value] = None
        self._record("delete_node", "Deleted node %s", ind.value)

    def delete_edge(self, ind: EdgeIndex) -> None:
        """Tombstone the edge at ``ind``.

        Unknown and already deleted edges are ignored.  The identifier is left
        in its owner's adjacency list; readers skip it.
        """

        if not self.has_edge(ind):
            return
        self._edges[ind.value] = None
        self._record("delete_edge", "Deleted edge %s", ind.value)

    def delete_edge_between_nodes(self, source: NodeIndex, dest: NodeIndex) -> None:
        ind = self.get_edge_index_between_nodes(source, dest)
        if ind is not None:
            self.delete_edge(ind)

    def size(self) -> Tuple[int, int]:
        """Return ``(live nodes, live edges)``."""

        live_nodes = sum(1 for node in self._nodes if node is not None)
        live_edges = sum(1 for edge in self._edges if edge is not None)
        return live_nodes, live_edges

    def node_indices(self) -> Iterator[NodeIndex]:
        """Iterate over the handles of live nodes in creation order."""

        for position, node in enumerate(self._nodes):
            if node is not None:
                yield NodeIndex(position)

    def edge_indices(self) -> Iterator[EdgeIndex]:
        """Iterate over the handles of live edges in creation order."""

        for position, edge in enumerate(self._edges):
            if edge is not None:
                yield EdgeIndex(position)

    def _record(self, action: str, fmt: str, target: int, *args: int, extras: Optional[dict] = None) -> None:
        """Log a mutation and publish it to the event bus, if any.

        ``target`` is the identifier the event is about; it is also the first
        argument of ``fmt``.
        """

        if self.settings.log_mutations:
            logger.debug(fmt, target, *args)
        if self.events is not None:
            self.events.emit(
                level="debug",
                msg=fmt % ((target,) + args),
                action=action,
                target_ids=[target],
                extras=extras,
            )
