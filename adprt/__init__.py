"""Runtime support for algebraic dynamic programming: sequences, terminal
parsers, filters, shapes, grammar rules and Pareto front merging."""

__version__ = "0.1.0"