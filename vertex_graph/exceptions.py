"""Errors raised by the graph model."""

from typing import Any


class GraphError(Exception):
    """Base class for every error raised by vertex_graph."""


class InvalidArgumentError(GraphError, ValueError):
    """A constructor or method received an argument it cannot accept."""


class DuplicateVertexError(GraphError, ValueError):
    def __init__(self, vertex_id: Any):
        self.vertex_id = vertex_id
        super().__init__(f"Vertex '{vertex_id}' already exists.")


class VertexNotFoundError(GraphError, ValueError):
    def __init__(self, vertex_id: Any, message: str = None):
        self.vertex_id = vertex_id
        super().__init__(message or f"Vertex '{vertex_id}' not found.")
