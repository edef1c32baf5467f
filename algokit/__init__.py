"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "bst",
    "graphs",
    "greedy",
    "hashing",
    "notation",
    "problems",
    "regression",
    "stacks",
    "trees",
]