"""Shared constants for localfmt.

Centralized limits used across the syntax, message, tree and loading
packages. Placing them here avoids circular imports between those layers.

Constants are grouped by domain:
- Depth limits: recursion protection for nested message trees
- Input limits: bounds on template length, arity and source size
- Numeric bounds: range of numeric constants in static messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_TEMPLATE_LENGTH",
    "MAX_ARITY",
    "MAX_INDEX_DIGITS",
    "MAX_SOURCE_SIZE",
    # Numeric bounds
    "UNSIGNED_MAX",
    "SIGNED_MIN",
    "SIGNED_MAX",
    # Key paths
    "KEY_PATH_SEPARATOR",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of message groups inside one language tree.
# Used by: tree builder, schema construction, consistency checker.
# Real message catalogs nest 2-4 levels; 100 is malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum characters in a single template string.
MAX_TEMPLATE_LENGTH: int = 10_000

# Maximum declared or inferred argument count for one message.
# Bounds the presence array allocated by the argument validator.
MAX_ARITY: int = 1_000

# Maximum significant digits in a placeholder index such as {12}.
# Keeps int() far below the interpreter's integer string conversion limit.
MAX_INDEX_DIGITS: int = 18

# Maximum size of one source file in bytes (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# NUMERIC BOUNDS
# ============================================================================

# Numeric constants are 128-bit: unsigned 0..2**128-1, signed -2**127..2**127-1.
UNSIGNED_MAX: int = 2**128 - 1
SIGNED_MIN: int = -(2**127)
SIGNED_MAX: int = 2**127 - 1

# ============================================================================
# KEY PATHS
# ============================================================================

# Separator used when rendering a nested key path ("words.ownership").
KEY_PATH_SEPARATOR: str = "."
