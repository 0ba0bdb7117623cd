DEFAULTS = {
    # Whether edges are one-way
    "DIRECTED": False,
    # Edge mutation contract: "strict" or "upsert"
    "EDGE_POLICY": "strict",
    # Run the consistency sweep after every mutation
    "CHECK_INVARIANTS": False,
}
