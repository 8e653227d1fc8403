"""Constraint AST, order graphs, polarity propagation and encoding-graph parts for a SAT-based solver."""

__version__ = "0.1.0"

__all__ = [
    "asthash",
    "encoding",
    "functions",
    "iterators",
    "nodes",
    "ops",
    "order",
    "ordergraph",
    "polarity",
    "predicates",
    "sets",
    "table",
]