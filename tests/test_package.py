import adjgraph
from adjgraph.graph import graph_errors


def test_every_raised_error_is_exported_at_top_level():
    for name in (
        "GraphError",
        "VertexNotExist",
        "VertexDuplication",
        "EdgeNotExist",
        "EdgeDuplication",
        "InvalidVertexId",
        "InvalidWeight",
        "InvariantViolation",
    ):
        assert getattr(adjgraph, name) is getattr(graph_errors, name)
        assert name in adjgraph.__all__
