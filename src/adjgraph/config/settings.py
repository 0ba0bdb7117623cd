from __future__ import annotations

from dataclasses import dataclass

from adjgraph.graph.graph_schema import EdgePolicy, EDGE_POLICIES

# ---------------------------------------------------------------------
# Graph construction policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how a Graph behaves for its whole lifetime.

    directed and edge_policy are fixed once the graph is built;
    check_invariants turns on the consistency sweep after every mutation.
    """

    directed: bool = False
    edge_policy: EdgePolicy = "strict"
    check_invariants: bool = False

    def __post_init__(self) -> None:
        if self.edge_policy not in EDGE_POLICIES:
            raise ValueError(
                f"Unknown edge policy {self.edge_policy!r}, "
                f"expected one of {EDGE_POLICIES}"
            )
