"""Tests for cycle detection during encoding.

Only a container that is its own ancestor fails. Shared references and
structurally equal containers encode independently.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from islandprops import (
    ComponentMetadata,
    CyclicReferenceError,
    PropsEncoder,
    deserialize,
    encode,
    serialize_props,
)
from islandprops.diagnostics import DiagnosticCode

from tests.strategies import shared_reference_props

COUNTER = ComponentMetadata("Counter", "load")

# ============================================================================
# GENUINE CYCLES
# ============================================================================


class TestCyclesAreRejected:
    """Self-reference through any container kind raises."""

    def test_object_referencing_itself(self) -> None:
        """o = {}; o["self"] = o"""
        o: dict[str, object] = {}
        o["self"] = o

        with pytest.raises(CyclicReferenceError):
            encode(o)

    def test_list_containing_itself(self) -> None:
        """A list appended to itself."""
        items: list[object] = [1]
        items.append(items)

        with pytest.raises(CyclicReferenceError):
            encode(items)

    def test_indirect_cycle(self) -> None:
        """a -> b -> a through different container kinds."""
        a: dict[str, object] = {}
        b: list[object] = [a]
        a["b"] = b

        with pytest.raises(CyclicReferenceError):
            encode({"root": a})

    def test_map_containing_itself(self) -> None:
        """A Map (non-string keys) holding itself as a value."""
        m: dict[object, object] = {1: "one"}
        m[2] = m

        with pytest.raises(CyclicReferenceError):
            encode(m)

    def test_props_referencing_themselves(self) -> None:
        """The top-level props mapping is tracked too."""
        props: dict[str, object] = {}
        props["again"] = props

        with pytest.raises(CyclicReferenceError):
            serialize_props(props, COUNTER)


# ============================================================================
# ERROR CONTENT
# ============================================================================


class TestCyclicReferenceMessage:
    """The error names the island without inspecting the value."""

    def _raise(self) -> CyclicReferenceError:
        o: dict[str, object] = {}
        o["self"] = o
        with pytest.raises(CyclicReferenceError) as exc_info:
            serialize_props({"data": o}, COUNTER)
        return exc_info.value

    def test_message_names_component_and_directive(self) -> None:
        """Message contains <DisplayName client:directive>."""
        error = self._raise()

        assert (
            "Cyclic reference detected while serializing props for <Counter client:load>!"
            in str(error)
        )
        assert "Please remove the cyclic reference." in str(error)

    def test_attributes(self) -> None:
        """display_name and hydrate are exposed on the exception."""
        error = self._raise()

        assert error.display_name == "Counter"
        assert error.hydrate == "load"

    def test_diagnostic_points_at_repeated_container(self) -> None:
        """The diagnostic path ends at the edge that closes the cycle."""
        error = self._raise()

        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.CYCLIC_REFERENCE
        assert error.diagnostic.prop_path == ("data", "self")
        assert "props.data.self" in str(error)

    def test_metadata_mapping_with_js_style_keys(self) -> None:
        """displayName/hydrate mappings work as metadata."""
        items: list[object] = []
        items.append(items)

        with pytest.raises(CyclicReferenceError, match="<Island client:visible>"):
            encode(items, metadata={"displayName": "Island", "hydrate": "visible"})

    def test_missing_metadata_renders_undefined(self) -> None:
        """Without metadata the label still renders."""
        items: list[object] = []
        items.append(items)

        with pytest.raises(CyclicReferenceError, match="<undefined client:undefined>"):
            encode(items)


# ============================================================================
# NOT CYCLES
# ============================================================================


class TestSharedReferences:
    """Repeated, non-cyclic references encode every time."""

    def test_shared_object_in_siblings(self) -> None:
        """shared = {v: 1}; {a: shared, b: shared} succeeds."""
        shared = {"v": 1}

        node = encode({"a": shared, "b": shared})

        assert node == [0, {"a": [0, {"v": [0, 1]}], "b": [0, {"v": [0, 1]}]}]

    def test_shared_object_decodes_to_distinct_objects(self) -> None:
        """Decoded siblings are equal but independently allocated."""
        shared = {"v": 1}

        props = deserialize(serialize_props({"a": shared, "b": shared}, COUNTER))

        assert props["a"] == props["b"] == {"v": 1}
        assert props["a"] is not props["b"]

    def test_equal_but_distinct_containers(self) -> None:
        """Structural equality is never mistaken for identity."""
        node = encode({"a": [1, 2], "b": [1, 2], "c": [[1, 2], [1, 2]]})

        assert node[1]["a"] == node[1]["b"]

    def test_same_list_repeated_in_a_list(self) -> None:
        """[x, x] is not a cycle."""
        x = [1]

        assert encode([x, x]) == [1, [[1, [[0, 1]]], [1, [[0, 1]]]]]

    @given(shared_reference_props())
    def test_shared_references_always_encode(
        self, generated: tuple[dict[str, object], dict[str, object]]
    ) -> None:
        """Property: props with shared (acyclic) references always encode."""
        props, shared = generated

        text = serialize_props(props, COUNTER)

        assert deserialize(text) == props
        assert serialize_props({"only": shared}, COUNTER)
        # Encoding twice gives the same text; no state leaks between calls.
        assert serialize_props(props, COUNTER) == text


# ============================================================================
# ANCESTOR SET HYGIENE
# ============================================================================


class TestAncestorSet:
    """The ancestor set is per call and restored on every exit path."""

    def test_caller_set_is_restored(self) -> None:
        """An explicit ancestor set is left as it was given."""
        ancestors: set[int] = set()

        encode({"a": [1, {"b": 2}]}, ancestors)

        assert ancestors == set()

    def test_caller_set_is_restored_after_failure(self) -> None:
        """The set is cleaned up even when a descendant raises."""
        ancestors: set[int] = set()
        o: dict[str, object] = {}
        o["self"] = o

        with pytest.raises(CyclicReferenceError):
            encode({"a": [o]}, ancestors)

        assert ancestors == set()

    def test_preseeded_ancestor_is_detected(self) -> None:
        """Ids already in the set count as ancestors."""
        inner = [1]

        with pytest.raises(CyclicReferenceError):
            encode({"x": inner}, {id(inner)})

    def test_failure_does_not_poison_next_call(self) -> None:
        """An encoder that raised encodes the next input normally."""
        encoder = PropsEncoder(COUNTER)
        shared = {"v": 1}
        o: dict[str, object] = {"shared": shared}
        o["self"] = o

        with pytest.raises(CyclicReferenceError):
            encoder.encode(o)

        assert encoder.encode({"a": shared, "b": shared})[0] == 0

    def test_sibling_after_failed_child_is_not_flagged(self) -> None:
        """Popping on failure keeps sibling subtrees clean.

        The first call raises inside a nested list; a later call that places
        the same list under a different parent must succeed.
        """
        items: list[object] = [1]
        cyclic: list[object] = [items]
        cyclic.append(cyclic)
        encoder = PropsEncoder(COUNTER)

        with pytest.raises(CyclicReferenceError):
            encoder.encode(cyclic)

        assert encoder.encode({"left": items, "right": items}) == [
            0,
            {"left": [1, [[0, 1]]], "right": [1, [[0, 1]]]},
        ]
