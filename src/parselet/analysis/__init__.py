"""Grammar analysis.

Exports:
    walk: Iterate over every parser reachable from a root
    find_unbound: Unbound Forward placeholders in a grammar
    validate_grammar: Raise if a grammar still has unbound placeholders
    detect_cycles: Recursive cycles of a grammar by node name
"""

from .graph import build_dependency_graph, detect_cycles, find_unbound, validate_grammar, walk

__all__ = [
    "build_dependency_graph",
    "detect_cycles",
    "find_unbound",
    "validate_grammar",
    "walk",
]
