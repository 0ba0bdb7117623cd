from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Tuple

from adjgraph.graph.graph_errors import InvariantViolation
from adjgraph.utils.helpers import is_int32

if TYPE_CHECKING:
    from adjgraph.graph.graph_store import Graph


def find_violations(graph: "Graph") -> List[str]:
    """
    Sweep the adjacency slots and describe every inconsistency found.

    Checks, per stored entry:
    - the destination vertex exists
    - no ordered pair is stored twice
    - the weight fits in a signed 32-bit integer
    - undirected graphs hold a mirrored entry with the same weight
    """

    slots = graph.slots()
    problems: List[str] = []
    weights: Dict[Tuple[int, int], int] = {}

    for origin, edges in enumerate(slots):
        if edges is None:
            continue
        for edge in edges:
            pair = (origin, edge.destination)

            if not graph.vertex_exists(edge.destination):
                problems.append(f"{origin} -> {edge.destination}: destination is absent")
            if pair in weights:
                problems.append(f"{origin} -> {edge.destination}: duplicated entry")
            if not is_int32(edge.weight):
                problems.append(
                    f"{origin} -> {edge.destination}: weight {edge.weight} out of range"
                )

            weights[pair] = edge.weight

    if graph.directed:
        return problems

    for (origin, destination), weight in weights.items():
        mirrored = weights.get((destination, origin))
        if mirrored is None:
            problems.append(f"{origin} -> {destination}: mirror entry missing")
        elif mirrored != weight:
            problems.append(
                f"{origin} -> {destination}: weight {weight} != mirror weight {mirrored}"
            )

    return problems


def check_invariants(graph: "Graph") -> None:
    """
    Raise InvariantViolation on the first inconsistency.
    """
    problems = find_violations(graph)
    if problems:
        logging.getLogger("adjgraph.graph").warning(
            "invariant violations=%d first=%s", len(problems), problems[0]
        )
        raise InvariantViolation(problems[0])
