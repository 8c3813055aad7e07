DEFAULTS = {
    # Slack allowed around [0.0, 1.0] for outgoing probability sums
    "PROBABILITY_TOLERANCE": 0.0,
    # Bind each subproblem to a live optimizer instance on creation
    "DIRECT_MODE": False,
}
