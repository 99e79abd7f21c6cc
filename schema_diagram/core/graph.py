"""
Graph model - nodes keyed by identity plus an ordered edge list.

Nodes keep insertion order so every pass over them is reproducible.
Lookups by identity are O(1) via the index dictionary.
"""

from typing import Iterable, Iterator, Optional

from .errors import DuplicateNodeError
from .models import Edge, Node


class Graph:
    """
    Storage for one diagram's nodes and edges.

    No validation beyond identity uniqueness: edges may reference
    identities that are not (yet) in the graph.
    """

    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()):
        self._node_index: dict[str, Node] = {}  # node_id -> Node
        self._edges: list[Edge] = []
        for node in nodes:
            self.add_node(node)
        for edge in edges:
            self.add_edge(edge)

    def add_node(self, node: Node) -> Node:
        """Insert a node. Raises DuplicateNodeError if the identity exists."""
        if node.id in self._node_index:
            raise DuplicateNodeError(node.id)
        self._node_index[node.id] = node
        return node

    def add_edge(self, edge: Edge) -> Edge:
        self._edges.append(edge)
        return edge

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._node_index.get(node_id)

    @property
    def nodes(self) -> list[Node]:
        return list(self._node_index.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def node_map(self) -> dict[str, Node]:
        """Copy of the identity index, in insertion order."""
        return dict(self._node_index)

    def is_dangling(self, edge: Edge) -> bool:
        return edge.source not in self._node_index or edge.target not in self._node_index

    def __len__(self) -> int:
        return len(self._node_index)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._node_index

    def __iter__(self) -> Iterator[Node]:
        return iter(self._node_index.values())
