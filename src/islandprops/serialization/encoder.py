"""Encode a props value graph into tagged nodes.

Converts native Python values into the [tag, payload] tree described by
PropType. Useful for:
- Embedding island props in server-rendered markup
- Handing typed values to a client that revives them with the same tags

Cycle detection tracks the identity of every container on the active path.
The set lives in a per-call context, so independent encode calls never see
each other's state.

Python 3.13+.
"""

from __future__ import annotations

import array
import logging
import math
import re
from collections.abc import Callable, Iterable, Mapping
from collections.abc import Set as AbstractSet
from contextlib import nullcontext
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from urllib.parse import ParseResult, SplitResult

from islandprops.constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from islandprops.core import ComponentMetadata, DepthGuard, EncodedNode, EncodedObject
from islandprops.core.value_types import UndefinedType
from islandprops.diagnostics import CyclicReferenceError
from islandprops.diagnostics.templates import ErrorTemplate
from islandprops.enums import PropType

__all__ = ["PropsEncoder", "encode", "format_timestamp"]

logger = logging.getLogger(__name__)

# Unsigned array typecodes; the tag is picked by itemsize since "I" and "L"
# vary in width between platforms.
_UNSIGNED_TYPECODES: frozenset[str] = frozenset("BHILQ")

_BUFFER_TAGS: dict[int, PropType] = {
    1: PropType.BYTE_BUFFER_8,
    2: PropType.BYTE_BUFFER_16,
    4: PropType.BYTE_BUFFER_32,
}


@dataclass(slots=True)
class _EncodeContext:
    """State for one top-level encode call.

    Attributes:
        ancestors: id() of every container on the active recursion path
        path: Keys/indices leading to the value being encoded
        guard: Depth limiter, None when nesting is unbounded
    """

    ancestors: set[int]
    path: list[str] = field(default_factory=list)
    guard: DepthGuard | None = None


def format_timestamp(value: datetime) -> str:
    """Render a datetime as ISO-8601 UTC text ending in Z.

    Naive datetimes are taken to be UTC. Millisecond precision is used unless
    the value carries sub-millisecond detail, which is then kept.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc = value.astimezone(UTC).replace(tzinfo=None)
    timespec = "milliseconds" if utc.microsecond % 1000 == 0 else "microseconds"
    return f"{utc.isoformat(timespec=timespec)}Z"


def _buffer_tag(value: array.array[Any]) -> PropType | None:
    """Byte-buffer tag for an unsigned array, None for any other array."""
    if value.typecode not in _UNSIGNED_TYPECODES:
        return None
    return _BUFFER_TAGS.get(value.itemsize)


class PropsEncoder:
    """Converts props into the tagged-node tree.

    Thread-safe encoder: instances only hold configuration. All traversal
    state is local to each encode() call.

    Usage:
        >>> encoder = PropsEncoder(ComponentMetadata("Counter", "load"))
        >>> encoder.encode({"count": 1}) == [0, {"count": [0, 1]}]
        True
        >>> encoder.encode({1, 2}) == [5, [[0, 1], [0, 2]]]
        True
    """

    __slots__ = ("_max_depth", "_metadata")

    def __init__(
        self,
        metadata: ComponentMetadata | Mapping[str, Any] | None = None,
        *,
        max_depth: int | None = None,
    ) -> None:
        """Initialize encoder.

        Args:
            metadata: Island identity used in error text
            max_depth: Maximum container nesting (default: None, unbounded)
        """
        self._metadata = ComponentMetadata.coerce(metadata)
        self._max_depth = max_depth

    @property
    def metadata(self) -> ComponentMetadata:
        """Island identity used in error text."""
        return self._metadata

    @property
    def max_depth(self) -> int | None:
        """Maximum container nesting, None when unbounded."""
        return self._max_depth

    def encode(self, value: object, ancestors: set[int] | None = None) -> EncodedNode:
        """Encode any supported value into a tagged node.

        Args:
            value: Value to encode
            ancestors: Container ids already on the path (default: empty).
                The set is restored to its original contents on return.

        Returns:
            [tag, payload], or [0] for UNDEFINED

        Raises:
            CyclicReferenceError: If a container is its own ancestor
            DepthLimitExceededError: If max_depth is set and exceeded
        """
        return self._encode(value, self._new_context(ancestors))

    def encode_object(
        self, props: Mapping[Any, Any], ancestors: set[int] | None = None
    ) -> EncodedObject:
        """Encode a props mapping as a bare Encoded Object.

        This is the top-level shape embedded in markup: keys are coerced to
        str and there is no surrounding [0, ...] node.

        Raises:
            TypeError: If props is not a mapping, or two keys share a str form
            CyclicReferenceError: If a container is its own ancestor
        """
        if not isinstance(props, Mapping):
            msg = f"props must be a mapping, got {type(props).__name__}"
            raise TypeError(msg)
        seen: dict[str, object] = {}
        for key in props:
            name = str(key)
            if name in seen:
                msg = f"props keys {seen[name]!r} and {key!r} both serialize as {name!r}"
                raise TypeError(msg)
            seen[name] = key
        return self._encode_plain_object(props, self._new_context(ancestors))

    def _new_context(self, ancestors: set[int] | None) -> _EncodeContext:
        path: list[str] = []
        guard = None
        if self._max_depth is not None:
            guard = DepthGuard(self._max_depth, path=path, component=self._metadata.label)
        return _EncodeContext(
            ancestors=set() if ancestors is None else ancestors, path=path, guard=guard
        )

    def _encode(self, value: object, ctx: _EncodeContext) -> EncodedNode:
        """Classify value by runtime kind and emit its node.

        Case order matters: bool before int, URL results before tuple.
        """
        match value:
            case UndefinedType():
                return [PropType.VALUE]
            case None | bool() | str():
                return [PropType.VALUE, value]
            case int():
                if MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
                    return [PropType.VALUE, value]
                return [PropType.BIGINT, str(value)]
            case float():
                if math.isfinite(value):
                    return [PropType.VALUE, value]
                logger.warning(
                    "%s",
                    ErrorTemplate.non_finite_number(value, self._metadata.label, tuple(ctx.path)),
                )
                return [PropType.VALUE, None]
            case datetime():
                return [PropType.DATE, format_timestamp(value)]
            case re.Pattern() if isinstance(value.pattern, str):
                return [PropType.REGEXP, value.pattern]
            case SplitResult() | ParseResult():
                return [PropType.URL, value.geturl()]
            case bytes() | bytearray():
                return [PropType.BYTE_BUFFER_8, list(value)]
            case array.array():
                tag = _buffer_tag(value)
                if tag is not None:
                    return [tag, value.tolist()]
                return [PropType.ARRAY, self._encode_items(value, enumerate(value), ctx)]
            case Mapping():
                if all(isinstance(key, str) for key in value):
                    return [PropType.VALUE, self._encode_plain_object(value, ctx)]
                return [PropType.MAP, self._encode_map(value, ctx)]
            case AbstractSet():
                return [PropType.SET, self._encode_items(value, enumerate(value), ctx)]
            case list() | tuple():
                return [PropType.ARRAY, self._encode_items(value, enumerate(value), ctx)]
            case _:
                logger.warning(
                    "%s",
                    ErrorTemplate.unsupported_value(
                        type(value).__name__, self._metadata.label, tuple(ctx.path)
                    ),
                )
                return [PropType.VALUE]

    def _encode_plain_object(self, value: Mapping[Any, Any], ctx: _EncodeContext) -> EncodedObject:
        keys = [str(key) for key in value]
        nodes = self._encode_items(value, zip(keys, value.values(), strict=True), ctx)
        return dict(zip(keys, nodes, strict=True))

    def _encode_map(self, value: Mapping[Any, Any], ctx: _EncodeContext) -> list[EncodedNode]:
        """Encode a non-plain mapping as a list of [key, value] Array nodes.

        The mapping itself is the container checked for cycles. The pairs are
        fresh tuples owned by this call and cannot be part of a cycle.
        """
        pairs = [(f"[{key!r}]", (key, item)) for key, item in value.items()]
        return self._encode_items(value, pairs, ctx, encode_child=self._encode_pair)

    def _encode_pair(self, pair: tuple[object, object], ctx: _EncodeContext) -> EncodedNode:
        key, item = pair
        return [PropType.ARRAY, [self._encode(key, ctx), self._encode(item, ctx)]]

    def _encode_items(
        self,
        container: object,
        items: Iterable[tuple[object, object]],
        ctx: _EncodeContext,
        *,
        encode_child: Callable[[Any, _EncodeContext], EncodedNode] | None = None,
    ) -> list[EncodedNode]:
        """Encode the children of one container.

        Pushes the container id onto the ancestor set before descending and
        always pops it afterwards, even when a child raises, so siblings under
        another parent are never flagged.

        Args:
            container: The container whose identity is tracked
            items: (path segment, child) pairs in wire order
            ctx: Per-call encode context
            encode_child: Per-child encoder (default: _encode)

        Returns:
            Encoded children in order
        """
        identity = id(container)
        if identity in ctx.ancestors:
            meta = self._metadata
            raise CyclicReferenceError(
                ErrorTemplate.cyclic_reference(meta.display_name, meta.hydrate, tuple(ctx.path)),
                display_name=meta.display_name,
                hydrate=meta.hydrate,
            )
        encode_one = encode_child or self._encode
        ctx.ancestors.add(identity)
        try:
            with ctx.guard if ctx.guard is not None else nullcontext():
                encoded: list[EncodedNode] = []
                for segment, child in items:
                    ctx.path.append(segment if isinstance(segment, str) else f"[{segment}]")
                    try:
                        encoded.append(encode_one(child, ctx))
                    finally:
                        ctx.path.pop()
                return encoded
        finally:
            ctx.ancestors.discard(identity)


def encode(
    value: object,
    ancestors: set[int] | None = None,
    metadata: ComponentMetadata | Mapping[str, Any] | None = None,
    *,
    max_depth: int | None = None,
) -> EncodedNode:
    """Encode a value into a tagged node.

    Convenience function for PropsEncoder.encode().

    Args:
        value: Value to encode
        ancestors: Container ids already on the path (default: empty)
        metadata: Island identity used in error text
        max_depth: Maximum container nesting (default: None, unbounded)

    Returns:
        [tag, payload], or [0] for UNDEFINED

    Raises:
        CyclicReferenceError: If a container is its own ancestor
        DepthLimitExceededError: If max_depth is set and exceeded

    Example:
        >>> from datetime import UTC, datetime
        >>> encode(datetime(1970, 1, 1, tzinfo=UTC)) == [3, "1970-01-01T00:00:00.000Z"]
        True
    """
    return PropsEncoder(metadata, max_depth=max_depth).encode(value, ancestors)
