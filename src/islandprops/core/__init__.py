"""Core utilities shared across the diagnostics and serialization layers.

This package provides the foundational values and guards that both the
encoder and the decoder depend on:

    core <- serialization

Exports:
    UNDEFINED: Sentinel for absent props, distinct from None
    OrderedSet: Insertion-ordered set produced when decoding Set nodes
    ComponentMetadata: Island identity used in error text
    DepthGuard: Context manager for optional recursion depth limiting

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp
from .value_types import (
    UNDEFINED,
    ComponentMetadata,
    EncodedNode,
    EncodedObject,
    OrderedSet,
    UndefinedType,
)

__all__ = [
    "UNDEFINED",
    "ComponentMetadata",
    "DepthGuard",
    "EncodedNode",
    "EncodedObject",
    "OrderedSet",
    "UndefinedType",
    "depth_clamp",
]
