"""Classic teaching algorithms and data structures: number puzzles, text helpers, trees, linked lists, polynomials, scheduling and small games."""

__version__ = "0.1.0"