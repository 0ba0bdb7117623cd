"""
adjgraph
========

A small in-memory weighted graph over an adjacency list, in directed
or undirected mode, with vertex and edge CRUD.

Core idea:
- Vertex ids index a growable slot sequence; removed vertices leave
  tombstones so ids stay stable.

Public API:
- Graph
- GraphBuilder
- GraphConfig / load_config
- to_networkx
"""

from adjgraph.graph.graph_store import Graph
from adjgraph.graph.graph_builder import GraphBuilder
from adjgraph.graph.graph_adapters import to_networkx
from adjgraph.graph.graph_errors import (
    GraphError,
    VertexNotExist,
    VertexDuplication,
    EdgeNotExist,
    EdgeDuplication,
    InvalidVertexId,
    InvalidWeight,
    InvariantViolation,
)
from adjgraph.config.settings import GraphConfig
from adjgraph.config.loader import load_config

__all__ = [
    "Graph",
    "GraphBuilder",
    "to_networkx",
    "GraphError",
    "VertexNotExist",
    "VertexDuplication",
    "EdgeNotExist",
    "EdgeDuplication",
    "InvalidVertexId",
    "InvalidWeight",
    "InvariantViolation",
    "GraphConfig",
    "load_config",
]

__version__ = "0.1.0"
