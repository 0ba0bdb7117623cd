from __future__ import annotations

from typing import Iterable, Tuple

from adjgraph.graph.graph_store import Graph


class GraphBuilder:
    """
    Loads vertices and edges into a Graph from plain iterables.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def add_vertices(self, vertices: Iterable[int]) -> "GraphBuilder":
        for vertex in vertices:
            self.graph.insert_vertex(vertex)
        return self

    def add_edges(self, edges: Iterable[Tuple[int, int, int]]) -> "GraphBuilder":
        for origin, destination, weight in edges:
            self.graph.insert_edge(origin, destination, weight)
        return self

    def build(self) -> Graph:
        return self.graph
