"""Shared constants for parselet.

This module provides centralized configuration defaults used across the
syntax and analysis packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for self-referential grammars
- Input limits: Size constraints on parsed sources

Every constant is a default only. Objects that use one accept a keyword-only
constructor argument that overrides it per instance.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_RECURSION_DEPTH",
    "RESERVED_FRAMES",
    "FRAMES_PER_LEVEL",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# A Forward placeholder counts how many times it has been re-entered on the
# current thread. Each re-entry corresponds to one level of nesting in the
# input, e.g. one pair of parentheses in "((42))".
#
# One nesting level costs roughly a dozen interpreter frames (choice, pair,
# map and the placeholder itself each add frames). Forward clamps its limit
# to (sys.getrecursionlimit() - RESERVED_FRAMES) // FRAMES_PER_LEVEL, which
# is 79 for the default interpreter limit of 1000. Grammars that spend more
# frames per level still raise DepthLimitExceededError: the placeholder
# converts an interpreter RecursionError into one.
#
# ============================================================================

# Maximum re-entrancy of a single Forward placeholder per thread.
MAX_RECURSION_DEPTH: int = 64

# Interpreter frames kept free for the caller when clamping depth limits.
RESERVED_FRAMES: int = 50

# Estimated interpreter frames consumed per Forward nesting level.
FRAMES_PER_LEVEL: int = 12

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# ParseRunner rejects larger inputs before building a cursor.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
