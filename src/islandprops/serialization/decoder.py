"""Revive tagged nodes back into native values.

Walks the tree top-down: a node's tag is read before its payload, because
the same list-of-lists shape becomes a dict, a set or a plain list depending
on the tag of the node that owns it. A json.loads object_hook sees children
before parents and cannot make that choice.

Lenient by default: an unknown tag or malformed node decodes to UNDEFINED.
With strict=True the same cases raise PropsDecodeError, which surfaces
producer/consumer version skew instead of silently dropping data.

Python 3.13+.
"""

from __future__ import annotations

import array
import logging
import re
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlsplit

from islandprops.core import UNDEFINED, OrderedSet
from islandprops.diagnostics import Diagnostic, PropsDecodeError
from islandprops.diagnostics.templates import ErrorTemplate
from islandprops.enums import PropType

__all__ = ["PropsDecoder", "decode", "decode_object", "parse_timestamp"]

logger = logging.getLogger(__name__)

# 4-byte unsigned typecode for ByteBuffer32 on this platform.
_UINT32_TYPECODE: str = "I" if array.array("I").itemsize == 4 else "L"

# Marks a [tag] node, distinct from a [tag, null] node.
_MISSING: Any = object()

# Raised by the revivers on a payload of the wrong shape or range.
_PAYLOAD_ERRORS = (TypeError, ValueError, OverflowError, re.error)


def parse_timestamp(text: str) -> datetime:
    """Parse ISO-8601 text into an aware UTC datetime.

    Offsets are honored and normalized to UTC; text without an offset is
    taken to be UTC.

    Raises:
        TypeError: If text is not a string
        ValueError: If text is not ISO-8601
    """
    if not isinstance(text, str):
        msg = f"timestamp must be a string, got {type(text).__name__}"
        raise TypeError(msg)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _require_str(payload: object) -> str:
    if not isinstance(payload, str):
        msg = f"expected string payload, got {type(payload).__name__}"
        raise TypeError(msg)
    return payload


def _require_list(payload: object) -> list[Any]:
    if not isinstance(payload, (list, tuple)):
        msg = f"expected list payload, got {type(payload).__name__}"
        raise TypeError(msg)
    return list(payload)


def _hashable(value: Any) -> Any:
    """Freeze a decoded Map key or Set element.

    Keys and elements were hashable before encoding, so their containers come
    back in frozen form: Array -> tuple, Set -> frozenset, ByteBuffer8 -> bytes.
    Anything still unhashable (a plain object) fails when the dict or set is
    built and the node is rejected as malformed.
    """
    match value:
        case list():
            return tuple(_hashable(item) for item in value)
        case OrderedSet():
            return frozenset(value)
        case bytearray():
            return bytes(value)
        case _:
            return value


class PropsDecoder:
    """Reconstructs native values from the tagged-node tree.

    Stateless across calls; safe to share between threads.

    Usage:
        >>> PropsDecoder().decode([6, "1267650600228229401496703205376"])
        1267650600228229401496703205376
        >>> PropsDecoder().decode([99, "future"])
        UNDEFINED
    """

    __slots__ = ("_strict",)

    def __init__(self, *, strict: bool = False) -> None:
        """Initialize decoder.

        Args:
            strict: Raise PropsDecodeError on unknown tags and malformed
                nodes instead of decoding them to UNDEFINED (default: False)
        """
        self._strict = strict

    @property
    def strict(self) -> bool:
        """Whether unknown tags and malformed nodes raise."""
        return self._strict

    def decode(self, node: object) -> Any:
        """Decode one [tag] or [tag, payload] node.

        Args:
            node: Encoded node as produced by json.loads

        Returns:
            Native value, or UNDEFINED for [0] and (in lenient mode) for
            anything that cannot be decoded

        Raises:
            PropsDecodeError: In strict mode, on an unknown tag or malformed node
        """
        match node:
            case [bool(), *_]:
                return self._reject(ErrorTemplate.malformed_node(None, "boolean tag"), node)
            case [int() as tag]:
                payload = _MISSING
            case [int() as tag, payload]:
                pass
            case _:
                return self._reject(
                    ErrorTemplate.malformed_node(None, "node must be [tag] or [tag, payload]"),
                    node,
                )

        try:
            prop_type = PropType(tag)
        except ValueError:
            return self._reject(ErrorTemplate.unknown_prop_type(tag), node)

        if payload is _MISSING and prop_type is not PropType.VALUE:
            return self._reject(
                ErrorTemplate.malformed_node(tag, f"{prop_type.name} node has no payload"), node
            )

        try:
            return self._revive(prop_type, payload)
        except _PAYLOAD_ERRORS as exc:
            return self._reject(ErrorTemplate.malformed_node(tag, str(exc)), node)

    def decode_object(self, raw: object) -> Any:
        """Decode an Encoded Object: each value is a node.

        Anything other than a JSON object is returned unchanged, matching
        how props text from a trusted producer is always an object.
        """
        if not isinstance(raw, dict):
            return raw
        return {key: self.decode(node) for key, node in raw.items()}

    def _revive(self, prop_type: PropType, payload: Any) -> Any:
        """Apply the reconstruction rule for one tag."""
        match prop_type:
            case PropType.VALUE:
                if payload is _MISSING:
                    return UNDEFINED
                if isinstance(payload, dict):
                    return self.decode_object(payload)
                if isinstance(payload, (list, tuple)):
                    msg = "VALUE payload must be a scalar or an object"
                    raise TypeError(msg)
                return payload
            case PropType.ARRAY:
                return self._decode_array(payload)
            case PropType.REGEXP:
                return re.compile(_require_str(payload))
            case PropType.DATE:
                return parse_timestamp(payload)
            case PropType.MAP:
                return {_hashable(key): item for key, item in self._decode_array(payload)}
            case PropType.SET:
                return OrderedSet(_hashable(item) for item in self._decode_array(payload))
            case PropType.BIGINT:
                return int(_require_str(payload))
            case PropType.URL:
                return urlsplit(_require_str(payload))
            case PropType.BYTE_BUFFER_8:
                return bytearray(_require_list(payload))
            case PropType.BYTE_BUFFER_16:
                return array.array("H", _require_list(payload))
            case PropType.BYTE_BUFFER_32:
                return array.array(_UINT32_TYPECODE, _require_list(payload))

    def _decode_array(self, payload: object) -> list[Any]:
        return [self.decode(item) for item in _require_list(payload)]

    def _reject(self, diagnostic: Diagnostic, node: object) -> Any:
        """Raise in strict mode, otherwise degrade to UNDEFINED."""
        if self._strict:
            raise PropsDecodeError(diagnostic, node=node)
        logger.debug("Decoding to UNDEFINED: %s", diagnostic)
        return UNDEFINED


def decode(node: object, *, strict: bool = False) -> Any:
    """Decode a tagged node.

    Convenience function for PropsDecoder.decode().

    Args:
        node: Encoded node as produced by json.loads
        strict: Raise on unknown tags and malformed nodes (default: False)

    Returns:
        Native value

    Raises:
        PropsDecodeError: In strict mode, on an unknown tag or malformed node

    Example:
        >>> decode([3, "1970-01-01T00:00:00.000Z"]).timestamp()
        0.0
    """
    return PropsDecoder(strict=strict).decode(node)


def decode_object(raw: object, *, strict: bool = False) -> Any:
    """Decode an Encoded Object (the top-level props shape).

    Convenience function for PropsDecoder.decode_object().
    """
    return PropsDecoder(strict=strict).decode_object(raw)
