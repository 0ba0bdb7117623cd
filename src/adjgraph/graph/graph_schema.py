from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional


EdgePolicy = Literal["strict", "upsert"]

EDGE_POLICIES = ("strict", "upsert")


@dataclass(frozen=True)
class Edge:
    """
    One adjacency entry: the neighbor reached and the weight carried.
    """

    destination: int
    weight: int

    def with_weight(self, weight: int) -> "Edge":
        return Edge(destination=self.destination, weight=weight)

    def render(self) -> str:
        return f"({self.destination}, {self.weight})"


# A slot in the adjacency sequence: None marks an absent vertex.
AdjacencySlot = Optional[List[Edge]]
