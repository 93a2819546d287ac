"""Graph algorithms for grammar analysis.

A grammar is a directed graph of Parser nodes; recursive rules close a cycle
through a Forward placeholder. This module walks that graph without
recursion, reports placeholders that were never bound, and lists the
recursive cycles.

Nodes are identified by object identity: two structurally identical parsers
are distinct nodes.

Limitation:
    Parsers produced inside :func:`~parselet.syntax.parser.combinators.bind`
    are built per invocation and are not part of the static graph.

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from enum import Enum, auto
from typing import Any

from parselet.diagnostics import ErrorTemplate, UnboundParserError
from parselet.syntax.parser.core import Parser
from parselet.syntax.parser.recursion import Forward

__all__ = [
    "build_dependency_graph",
    "detect_cycles",
    "find_unbound",
    "validate_grammar",
    "walk",
]


class _NodeState(Enum):
    """DFS node visitation state for iterative cycle detection."""

    ENTER = auto()  # First visit to node
    EXIT = auto()  # Returning from node (all neighbors processed)


def walk(root: Parser[Any]) -> Iterator[Parser[Any]]:
    """Yield every parser reachable from ``root`` exactly once.

    Iterative depth-first, pre-order, children left to right.
    """
    seen: set[int] = set()
    stack: list[Parser[Any]] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed(node.children))


def find_unbound(root: Parser[Any]) -> list[Forward[Any]]:
    """Return the unbound Forward placeholders reachable from ``root``."""
    return [node for node in walk(root) if isinstance(node, Forward) and not node.is_bound]


def validate_grammar(root: Parser[Any]) -> None:
    """Check that a grammar is fully constructed.

    Call once after building a grammar and before sharing it between
    threads.

    Raises:
        UnboundParserError: For the first unbound placeholder found
    """
    unbound = find_unbound(root)
    if unbound:
        raise UnboundParserError(ErrorTemplate.parser_unbound(unbound[0].name))


def build_dependency_graph(
    root: Parser[Any],
) -> tuple[dict[int, set[int]], dict[int, Parser[Any]]]:
    """Build the node-to-children mapping of a grammar.

    Returns:
        Tuple of (dependencies, nodes) where dependencies maps each node id
        to the ids of its children and nodes maps ids back to parsers.
    """
    dependencies: dict[int, set[int]] = {}
    nodes: dict[int, Parser[Any]] = {}
    for node in walk(root):
        nodes[id(node)] = node
        dependencies[id(node)] = {id(child) for child in node.children}
    return dependencies, nodes


def _detect_id_cycles(dependencies: Mapping[int, set[int]]) -> list[list[int]]:
    """Detect all cycles in a dependency graph using iterative DFS.

    Implements iterative DFS with explicit stack to avoid RecursionError
    on deep grammars. Uses Tarjan-style cycle detection with explicit stack
    tracking.

    Complexity:
        Time: O(V + E) where V = nodes, E = edges
        Space: O(V) for visited/recursion tracking
    """
    visited: set[int] = set()
    cycles: list[list[int]] = []
    seen_cycle_keys: set[frozenset[int]] = set()

    for start_node in dependencies:
        if start_node in visited:
            continue

        path: list[int] = []
        rec_stack: set[int] = set()

        # Stack holds (node, state, neighbors)
        stack: list[tuple[int, _NodeState, list[int]]] = [
            (start_node, _NodeState.ENTER, list(dependencies.get(start_node, set())))
        ]

        while stack:
            node, state, neighbors = stack.pop()

            if state == _NodeState.ENTER:
                if node in visited:
                    continue

                visited.add(node)
                rec_stack.add(node)
                path.append(node)

                # Exit marker is processed after all neighbors
                stack.append((node, _NodeState.EXIT, []))

                for neighbor in neighbors:
                    if neighbor not in visited:
                        stack.append(
                            (
                                neighbor,
                                _NodeState.ENTER,
                                list(dependencies.get(neighbor, set())),
                            )
                        )
                    elif neighbor in rec_stack:
                        cycle_start = path.index(neighbor)
                        cycle = [*path[cycle_start:], neighbor]

                        # Deduplicate cycles by their node set
                        cycle_key = frozenset(cycle)
                        if cycle_key not in seen_cycle_keys:  # pragma: no branch
                            seen_cycle_keys.add(cycle_key)
                            cycles.append(cycle)

            else:  # EXIT state
                if path and path[-1] == node:  # pragma: no branch
                    path.pop()
                rec_stack.discard(node)

    return cycles


def detect_cycles(root: Parser[Any]) -> list[list[str]]:
    """List the recursive cycles of a grammar by node name.

    Every cycle in a well-formed grammar passes through a Forward
    placeholder. Each cycle is reported as a path of node names that starts
    and ends with the same node.

    Example:
        >>> expr = recursive(lambda e: choice(parenthesized(e), digit()), "expr")
        >>> any("expr" in cycle for cycle in detect_cycles(expr))
        True
    """
    dependencies, nodes = build_dependency_graph(root)
    return [[nodes[node_id].name for node_id in cycle] for cycle in _detect_id_cycles(dependencies)]
