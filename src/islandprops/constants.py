"""Shared constants for islandprops.

This module provides centralized configuration constants used across the
core, diagnostics and serialization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Number limits: Boundaries between plain numbers and BigInt transport
- Depth limits: Optional recursion protection for encoding
- Wire format: JSON rendering options for the transport codec
- Diagnostics: Placeholders used in error text

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Number limits
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Depth limits
    "DEPTH_RESERVE_FRAMES",
    "ENCODE_FRAMES_PER_LEVEL",
    # Wire format
    "WIRE_SEPARATORS",
    # Diagnostics
    "UNKNOWN_METADATA_FIELD",
    "CLIENT_DIRECTIVE_PREFIX",
]

# ============================================================================
# NUMBER LIMITS
# ============================================================================

# Largest integer an IEEE-754 double represents exactly (2**53 - 1).
# Integers inside this range travel as plain JSON numbers; anything outside
# is sent as a BigInt decimal string so a JavaScript peer never rounds it.
MAX_SAFE_INTEGER: int = 2**53 - 1
MIN_SAFE_INTEGER: int = -(2**53 - 1)

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Stack frames kept free when clamping a caller-supplied max_depth against
# sys.getrecursionlimit().
DEPTH_RESERVE_FRAMES: int = 50

# Interpreter frames one container level costs while encoding. Map entries
# are the deepest path: _encode -> _encode_map -> _encode_items -> _encode_pair.
ENCODE_FRAMES_PER_LEVEL: int = 4

# ============================================================================
# WIRE FORMAT
# ============================================================================

# Compact JSON, identical to what JSON.stringify() produces by default.
WIRE_SEPARATORS: tuple[str, str] = (",", ":")

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Rendered in place of a missing display name or hydration directive.
UNKNOWN_METADATA_FIELD: str = "undefined"

# Prefix some pipelines put in front of the directive name ("client:load").
CLIENT_DIRECTIVE_PREFIX: str = "client:"
