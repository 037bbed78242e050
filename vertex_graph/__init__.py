"""Public API exports for the vertex_graph package."""

from .exceptions import (
    DuplicateVertexError,
    GraphError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from .model import Edge, Graph, Vertex

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidArgumentError",
    "DuplicateVertexError",
    "VertexNotFoundError",
]
