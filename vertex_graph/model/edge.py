from typing import Any, Optional

from ..exceptions import InvalidArgumentError
from .vertex import Vertex


class Edge:
    """
    Link between two vertices.

    Source, target and type are fixed at construction; only ``data`` can be
    replaced afterwards.
    """

    def __init__(self, source: Vertex, target: Vertex,
                 edge_type: Optional[str] = None,
                 data: Any = None):
        if not isinstance(source, Vertex):
            raise InvalidArgumentError("Source must be a valid Vertex instance.")
        if not isinstance(target, Vertex):
            raise InvalidArgumentError("Target must be a valid Vertex instance.")
        if edge_type is not None and not isinstance(edge_type, str):
            raise InvalidArgumentError("Edge type, if provided, must be a string.")

        self._source = source
        self._target = target
        self._edge_type = edge_type
        self.data = data

    @property
    def source(self) -> Vertex:
        return self._source

    @property
    def target(self) -> Vertex:
        return self._target

    @property
    def edge_type(self) -> Optional[str]:
        return self._edge_type

    def reversed(self) -> "Edge":
        """Return a new edge running target -> source with the same type and data."""
        return Edge(self._target, self._source, self._edge_type, self.data)

    def __repr__(self) -> str:
        return (
            f"Edge(source={self._source.vertex_id!r}, "
            f"target={self._target.vertex_id!r}, "
            f"edge_type={self._edge_type!r})"
        )
