from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Iterator, List, Optional

from adjgraph.graph.graph_errors import (
    EdgeDuplication,
    EdgeNotExist,
    InvalidVertexId,
    InvalidWeight,
    InvariantViolation,
    VertexDuplication,
    VertexNotExist,
)
from adjgraph.graph.graph_schema import (
    AdjacencySlot,
    Edge,
    EdgePolicy,
    EDGE_POLICIES,
)
from adjgraph.graph.graph_invariants import check_invariants
from adjgraph.utils.helpers import is_int32, is_vertex_id

if TYPE_CHECKING:
    from adjgraph.config.settings import GraphConfig


class Graph:
    """
    Weighted adjacency-list graph indexed by non-negative integer ids.

    Vertex slots live in a growable sequence. Removing a vertex leaves a
    None tombstone so ids stay stable; the sequence never shrinks.

    In undirected mode every edge is stored in both endpoints' lists with
    the same weight. A self-loop is a single entry that mirrors itself.
    """

    def __init__(
        self,
        directed: bool = False,
        *,
        edge_policy: EdgePolicy = "strict",
        check_invariants: bool = False,
    ) -> None:
        if edge_policy not in EDGE_POLICIES:
            raise ValueError(
                f"Unknown edge policy {edge_policy!r}, expected one of {EDGE_POLICIES}"
            )
        self._adjacency: List[AdjacencySlot] = []
        self._directed = bool(directed)
        self._edge_policy: EdgePolicy = edge_policy
        self._check_invariants = check_invariants

    @classmethod
    def from_config(cls, config: "GraphConfig") -> "Graph":
        return cls(
            config.directed,
            edge_policy=config.edge_policy,
            check_invariants=config.check_invariants,
        )

    # -------------------- Properties --------------------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_policy(self) -> EdgePolicy:
        return self._edge_policy

    @property
    def capacity(self) -> int:
        return len(self._adjacency)

    # -------------------- Vertices --------------------

    def vertex_exists(self, vertex: object) -> bool:
        if not is_vertex_id(vertex):
            return False
        vertex = int(vertex)
        if vertex >= len(self._adjacency):
            return False
        return self._adjacency[vertex] is not None

    def insert_vertex(self, vertex: int) -> None:
        """
        Add an empty vertex, growing the slot sequence when needed.

        Raises:
            InvalidVertexId: vertex is negative or not an integer.
            VertexDuplication: vertex already exists.
        """
        if not is_vertex_id(vertex):
            raise InvalidVertexId(vertex=vertex)
        vertex = int(vertex)
        if self.vertex_exists(vertex):
            raise VertexDuplication(vertex=vertex)

        if vertex >= len(self._adjacency):
            self._adjacency.extend([None] * (vertex + 1 - len(self._adjacency)))
        self._adjacency[vertex] = []

        logging.getLogger("adjgraph.graph").debug("insert_vertex vertex=%d", vertex)
        self._after_mutation()

    def remove_vertex(self, vertex: int) -> None:
        """
        Tombstone a vertex and prune every edge pointing at it.

        Raises:
            VertexNotExist: vertex is absent.
        """
        if not self.vertex_exists(vertex):
            raise VertexNotExist(vertex=vertex)
        vertex = int(vertex)

        self._adjacency[vertex] = None
        for edges in self._adjacency:
            if edges is not None:
                edges[:] = [e for e in edges if e.destination != vertex]

        logging.getLogger("adjgraph.graph").debug("remove_vertex vertex=%d", vertex)
        self._after_mutation()

    def vertices(self) -> List[int]:
        return [v for v, edges in enumerate(self._adjacency) if edges is not None]

    def vertex_count(self) -> int:
        return sum(1 for edges in self._adjacency if edges is not None)

    def neighbors(self, vertex: int) -> List[Edge]:
        if not self.vertex_exists(vertex):
            raise VertexNotExist(vertex=vertex)
        return list(self._slot(vertex))

    # -------------------- Edges --------------------

    def edge_exists(self, origin: int, destination: int) -> bool:
        """
        True when the edge is stored.

        Missing endpoints yield False. Undirected graphs require both
        mirrored entries to be present.
        """
        if not (self.vertex_exists(origin) and self.vertex_exists(destination)):
            return False

        forward = self._find(origin, destination) is not None
        if self._directed:
            return forward

        backward = self._find(destination, origin) is not None
        if forward != backward and self._check_invariants:
            logging.getLogger("adjgraph.graph").warning(
                "asymmetric edge origin=%s destination=%s", origin, destination
            )
            raise InvariantViolation(origin=origin, destination=destination)
        return forward and backward

    def insert_edge(self, origin: int, destination: int, weight: int) -> None:
        """
        Add a new edge.

        Under the upsert policy an existing edge is overwritten instead.

        Raises:
            VertexNotExist: either endpoint is absent.
            InvalidWeight: weight is outside the signed 32-bit range.
            EdgeDuplication: the edge exists (strict policy only).
        """
        self._require_endpoints(origin, destination)
        self._require_weight(weight)

        if self.edge_exists(origin, destination):
            if self._edge_policy == "upsert":
                self._set_weight(origin, destination, int(weight))
                return
            raise EdgeDuplication(origin=origin, destination=destination)

        self._add(origin, destination, int(weight))

    def update_edge(self, origin: int, destination: int, weight: int) -> None:
        """
        Overwrite the weight of an existing edge.

        Under the upsert policy a missing edge is inserted instead.

        Raises:
            VertexNotExist: either endpoint is absent.
            InvalidWeight: weight is outside the signed 32-bit range.
            EdgeNotExist: the edge is missing (strict policy only).
        """
        self._require_endpoints(origin, destination)
        self._require_weight(weight)

        if not self.edge_exists(origin, destination):
            if self._edge_policy == "upsert":
                self._add(origin, destination, int(weight))
                return
            raise EdgeNotExist(origin=origin, destination=destination)

        self._set_weight(origin, destination, int(weight))

    def remove_edge(self, origin: int, destination: int) -> None:
        """
        Delete an edge, and its mirror when undirected.

        Removal swaps the entry with the last one, so neighbor order is
        not preserved.

        Raises:
            VertexNotExist: either endpoint is absent.
            EdgeNotExist: the edge is missing.
        """
        self._require_endpoints(origin, destination)
        if not self.edge_exists(origin, destination):
            raise EdgeNotExist(origin=origin, destination=destination)

        self._swap_remove(origin, destination)
        if not self._directed and origin != destination:
            self._swap_remove(destination, origin)

        logging.getLogger("adjgraph.graph").debug(
            "remove_edge origin=%s destination=%s", origin, destination
        )
        self._after_mutation()

    def edge_weight(self, origin: int, destination: int) -> int:
        self._require_endpoints(origin, destination)
        if not self.edge_exists(origin, destination):
            raise EdgeNotExist(origin=origin, destination=destination)
        return self._slot(origin)[self._find(origin, destination)].weight

    def edge_count(self) -> int:
        if self._directed:
            return sum(len(edges) for edges in self._adjacency if edges is not None)

        count = 0
        for vertex, edges in enumerate(self._adjacency):
            if edges is None:
                continue
            count += sum(1 for e in edges if e.destination >= vertex)
        return count

    # -------------------- Rendering --------------------

    def render(self) -> str:
        lines = []
        for vertex, edges in enumerate(self._adjacency):
            if edges is None:
                continue
            rendered = ", ".join(e.render() for e in edges)
            lines.append(f"{vertex} -> [{rendered}]\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"Graph({kind}, policy={self._edge_policy}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )

    def __contains__(self, vertex: object) -> bool:
        return self.vertex_exists(vertex)

    def __len__(self) -> int:
        return self.vertex_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices())

    # -------------------- Cloning --------------------

    def clone(self) -> "Graph":
        g = Graph(
            self._directed,
            edge_policy=self._edge_policy,
            check_invariants=self._check_invariants,
        )
        g._adjacency = copy.deepcopy(self._adjacency)
        return g

    def slots(self) -> List[AdjacencySlot]:
        """
        Read-only snapshot of the raw slot sequence, tombstones included.
        """
        return [None if edges is None else list(edges) for edges in self._adjacency]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _slot(self, vertex: int) -> List[Edge]:
        edges = self._adjacency[int(vertex)]
        assert edges is not None
        return edges

    def _find(self, origin: int, destination: int) -> Optional[int]:
        for index, edge in enumerate(self._slot(origin)):
            if edge.destination == destination:
                return index
        return None

    def _require_endpoints(self, origin: int, destination: int) -> None:
        for vertex in (origin, destination):
            if not self.vertex_exists(vertex):
                raise VertexNotExist(vertex=vertex)

    def _require_weight(self, weight: int) -> None:
        if not is_int32(weight):
            raise InvalidWeight(weight=weight)

    def _add(self, origin: int, destination: int, weight: int) -> None:
        origin, destination = int(origin), int(destination)
        self._slot(origin).append(Edge(destination=destination, weight=weight))
        if not self._directed and origin != destination:
            self._slot(destination).append(Edge(destination=origin, weight=weight))

        logging.getLogger("adjgraph.graph").debug(
            "insert_edge origin=%d destination=%d weight=%d", origin, destination, weight
        )
        self._after_mutation()

    def _set_weight(self, origin: int, destination: int, weight: int) -> None:
        origin, destination = int(origin), int(destination)
        self._overwrite(origin, destination, weight)
        if not self._directed and origin != destination:
            self._overwrite(destination, origin, weight)

        logging.getLogger("adjgraph.graph").debug(
            "update_edge origin=%d destination=%d weight=%d", origin, destination, weight
        )
        self._after_mutation()

    def _overwrite(self, origin: int, destination: int, weight: int) -> None:
        edges = self._slot(origin)
        index = self._find(origin, destination)
        assert index is not None
        edges[index] = edges[index].with_weight(weight)

    def _swap_remove(self, origin: int, destination: int) -> None:
        edges = self._slot(origin)
        index = self._find(origin, destination)
        assert index is not None
        edges[index] = edges[-1]
        edges.pop()

    def _after_mutation(self) -> None:
        if not self._check_invariants:
            return
        check_invariants(self)
