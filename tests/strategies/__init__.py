"""Hypothesis strategies for islandprops property-based testing.

Strategies are organized by domain:

- props: Leaf values for every wire tag, nested props trees, shared-reference
  graphs, and raw encoded nodes (valid and malformed)

Usage:
    from tests.strategies import prop_values, props_mappings
    from tests.strategies.props import leaf_values, raw_nodes

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - leaf_values, shared_reference_props, raw_nodes
"""

from .props import (
    aware_datetimes,
    buffers,
    hashable_values,
    leaf_values,
    map_values,
    prop_values,
    props_mappings,
    raw_nodes,
    set_values,
    shared_reference_props,
    url_values,
)

__all__ = [
    "aware_datetimes",
    "buffers",
    "hashable_values",
    "leaf_values",
    "map_values",
    "prop_values",
    "props_mappings",
    "raw_nodes",
    "set_values",
    "shared_reference_props",
    "url_values",
]
