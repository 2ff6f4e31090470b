"""
Diagram path planning.

Finds the shortest route through a directed, geometrically-embedded
diagram graph with A*, and walks the same graph breadth-first for
reachability checks.
"""

__version__ = "0.1.0"
