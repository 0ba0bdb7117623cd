from __future__ import annotations

from typing import Optional


class GraphError(Exception):
    """
    Base class for every failure raised by a Graph operation.

    A raised error means the call was rejected before any state changed.
    """

    message = "Graph operation failed"

    def __init__(self, message: Optional[str] = None, **ids: object) -> None:
        self.ids = ids
        for name, value in ids.items():
            setattr(self, name, value)
        super().__init__(message or self._describe())

    def _describe(self) -> str:
        if not self.ids:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.ids.items())
        return f"{self.message} ({details})"


# ---------------------------------------------------------------------
# Vertices
# ---------------------------------------------------------------------


class VertexNotExist(GraphError):
    message = "Trying to access a vertex non-existent"


class VertexDuplication(GraphError):
    message = "Trying to create the same vertex two times"


class InvalidVertexId(GraphError, ValueError):
    message = "Vertex id must be a non-negative integer"


# ---------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------


class EdgeNotExist(GraphError):
    message = "Trying to access a edge non-existent"


class EdgeDuplication(GraphError):
    message = "Trying to create the same edge two times"


class InvalidWeight(GraphError, ValueError):
    message = "Edge weight must be a signed 32-bit integer"


# ---------------------------------------------------------------------
# Consistency
# ---------------------------------------------------------------------


class InvariantViolation(GraphError):
    message = "Graph adjacency is inconsistent"
