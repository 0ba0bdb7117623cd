from __future__ import annotations

from typing import Union

import networkx as nx

from adjgraph.graph.graph_store import Graph


def to_networkx(graph: Graph) -> Union[nx.Graph, nx.DiGraph]:
    """
    Copy a Graph into networkx, keeping every vertex and the edge weights.

    Tombstoned ids are not carried over.
    """

    out: Union[nx.Graph, nx.DiGraph] = nx.DiGraph() if graph.directed else nx.Graph()
    out.add_nodes_from(graph.vertices())

    for origin in graph.vertices():
        for edge in graph.neighbors(origin):
            out.add_edge(origin, edge.destination, weight=edge.weight)

    return out
