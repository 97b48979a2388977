"""Text transport for island props.

Wraps the encoder and decoder with JSON rendering so props can be embedded
in markup as an inert attribute value and read back on the client:

    serialize_props(props, metadata) -> text -> deserialize(text) -> props

Escaping the text for the surrounding markup is the renderer's job.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from islandprops.constants import WIRE_SEPARATORS
from islandprops.core import ComponentMetadata

from .decoder import PropsDecoder
from .encoder import PropsEncoder

__all__ = ["deserialize", "serialize_props"]

logger = logging.getLogger(__name__)


def serialize_props(
    props: Mapping[Any, Any],
    metadata: ComponentMetadata | Mapping[str, Any] | None = None,
    *,
    max_depth: int | None = None,
) -> str:
    """Serialize island props to embeddable JSON text.

    The props mapping becomes a bare Encoded Object: each key maps to the
    tagged node of its value. Rendering is compact and keeps non-ASCII text
    as-is, exactly like JSON.stringify().

    Args:
        props: Props mapping handed to the component
        metadata: Island identity used in error text
        max_depth: Maximum container nesting (default: None, unbounded)

    Returns:
        JSON text

    Raises:
        TypeError: If props is not a mapping
        CyclicReferenceError: If a container is its own ancestor
        DepthLimitExceededError: If max_depth is set and exceeded

    Example:
        >>> serialize_props({"count": 2**64}, {"displayName": "Counter", "hydrate": "load"})
        '{"count":[6,"18446744073709551616"]}'
    """
    encoder = PropsEncoder(metadata, max_depth=max_depth)
    encoded = encoder.encode_object(props)
    text = json.dumps(encoded, separators=WIRE_SEPARATORS, ensure_ascii=False, allow_nan=False)
    logger.debug(
        "Serialized %d props for %s (%d chars)", len(encoded), encoder.metadata.label, len(text)
    )
    return text


def deserialize(text: str | bytes | bytearray, *, strict: bool = False) -> Any:
    """Revive props from text produced by serialize_props().

    Args:
        text: Embedded JSON text
        strict: Raise on unknown tags and malformed nodes (default: False)

    Returns:
        Props dict with native values

    Raises:
        json.JSONDecodeError: If text is not valid JSON
        PropsDecodeError: In strict mode, on an unknown tag or malformed node

    Example:
        >>> deserialize('{"when":[3,"1970-01-01T00:00:00.000Z"],"gone":[0]}')["gone"]
        UNDEFINED
    """
    raw = json.loads(text)
    props = PropsDecoder(strict=strict).decode_object(raw)
    logger.debug("Deserialized props (%d chars)", len(text))
    return props
