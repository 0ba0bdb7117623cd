"""
Graph subsystem for adjgraph.

Defines the adjacency-list container and its supporting pieces:
- vertex and edge CRUD over tombstoned slots
- the error taxonomy raised by every operation
- bulk loading, consistency checks and networkx export
"""

from adjgraph.graph.graph_schema import Edge, EdgePolicy
from adjgraph.graph.graph_errors import (
    GraphError,
    VertexNotExist,
    VertexDuplication,
    InvalidVertexId,
    EdgeNotExist,
    EdgeDuplication,
    InvalidWeight,
    InvariantViolation,
)
from adjgraph.graph.graph_store import Graph
from adjgraph.graph.graph_builder import GraphBuilder
from adjgraph.graph.graph_invariants import check_invariants, find_violations
from adjgraph.graph.graph_adapters import to_networkx

__all__ = [
    "Edge",
    "EdgePolicy",
    "GraphError",
    "VertexNotExist",
    "VertexDuplication",
    "InvalidVertexId",
    "EdgeNotExist",
    "EdgeDuplication",
    "InvalidWeight",
    "InvariantViolation",
    "Graph",
    "GraphBuilder",
    "check_invariants",
    "find_violations",
    "to_networkx",
]
