import logging
from typing import Any, Dict, Hashable, List, Optional

from ..exceptions import DuplicateVertexError, InvalidArgumentError, VertexNotFoundError
from .edge import Edge
from .vertex import Vertex, identity_key

LOGGER = logging.getLogger(__name__)


class Graph:
    """
    Vertex container with an adjacency list of outgoing edges.

    Undirected graphs store every edge twice: the edge as given under its
    source, and an independent reversed copy under its target. Payloads are
    never copied.
    """

    def __init__(self, directed: bool = False):
        self._directed = bool(directed)
        self._vertices: Dict[Hashable, Vertex] = {}
        self._adjacency: Dict[Hashable, List[Edge]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, vertex: Vertex) -> None:
        if not isinstance(vertex, Vertex):
            raise InvalidArgumentError("Graph accepts only Vertex instances.")
        if vertex.key in self._vertices:
            raise DuplicateVertexError(vertex.vertex_id)

        self._vertices[vertex.key] = vertex
        self._adjacency[vertex.key] = []
        LOGGER.debug("Added vertex %r", vertex.vertex_id)

    def has_vertex(self, vertex_id: Any) -> bool:
        return self._lookup_key(vertex_id) in self._vertices

    def get_vertex(self, vertex_id: Any) -> Optional[Vertex]:
        return self._vertices.get(self._lookup_key(vertex_id))

    def list_vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, edge: Edge) -> None:
        if not isinstance(edge, Edge):
            raise InvalidArgumentError("Graph accepts only Edge instances.")

        for endpoint in (edge.source, edge.target):
            if endpoint.key not in self._vertices:
                LOGGER.debug("Rejected edge %r: vertex %r is missing", edge, endpoint.vertex_id)
                raise VertexNotFoundError(
                    endpoint.vertex_id,
                    "Both source and target vertices must exist in the graph.",
                )

        self._adjacency[edge.source.key].append(edge)
        LOGGER.debug("Added edge %r", edge)

        if not self._directed:
            reverse = edge.reversed()
            self._adjacency[edge.target.key].append(reverse)
            LOGGER.debug("Added reverse edge %r", reverse)

    def get_neighbors(self, vertex_id: Any) -> List[Edge]:
        """Return the outgoing edges of a vertex, in insertion order."""
        key = self._lookup_key(vertex_id)
        if key not in self._vertices:
            LOGGER.debug("Neighbor lookup for unknown vertex %r", vertex_id)
            raise VertexNotFoundError(vertex_id)
        return list(self._adjacency[key])

    def list_edges(self) -> List[Edge]:
        return [edge for edges in self._adjacency.values() for edge in edges]

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: Any) -> bool:
        return self.has_vertex(vertex_id)

    @staticmethod
    def _lookup_key(vertex_id: Any) -> Hashable:
        # None is never a registered id; unkeyable ids are simply absent
        if vertex_id is None:
            return None
        try:
            return identity_key(vertex_id)
        except InvalidArgumentError:
            return None
