from __future__ import annotations

import pytest

from adjgraph.graph.graph_store import Graph


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("ADJGRAPH_DIRECTED", "ADJGRAPH_EDGE_POLICY", "ADJGRAPH_CHECK_INVARIANTS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def directed() -> Graph:
    graph = Graph(True, check_invariants=True)
    for vertex in (0, 1, 4):
        graph.insert_vertex(vertex)
    return graph


@pytest.fixture()
def undirected() -> Graph:
    graph = Graph(False, check_invariants=True)
    for vertex in (0, 1, 4):
        graph.insert_vertex(vertex)
    return graph
