"""islandprops - type-preserving props transport for client-hydrated islands.

Serializes the props of an interactive component into JSON text that can be
embedded in server-rendered markup, and revives them on the other side with
their original types. Dates, regular expressions, maps, sets, big integers,
URLs and unsigned byte buffers survive the trip; undefined stays distinct
from null; self-referencing props are rejected with an error naming the
island.

Public API:
    serialize_props - Encode a props mapping to JSON text
    deserialize - Revive props from JSON text
    encode / decode - Single value <-> tagged node
    PropsEncoder / PropsDecoder - Configurable encoder and decoder
    PropType - Wire tag registry
    ComponentMetadata - Island identity used in error text
    UNDEFINED - Sentinel for absent values, distinct from None
    OrderedSet - Insertion-ordered set that decoded Set props arrive as

Exceptions:
    PropsError - Base exception class
    CyclicReferenceError - Props contain a container that is its own ancestor
    DepthLimitExceededError - Optional max_depth exceeded
    PropsDecodeError - Strict decoding met an unknown tag or malformed node

Submodules:
    islandprops.serialization - Encoder, decoder and transport
    islandprops.diagnostics - Error codes, templates and formatting
    islandprops.core - UNDEFINED, ComponentMetadata, DepthGuard
"""

from .core import UNDEFINED, ComponentMetadata, OrderedSet, UndefinedType
from .diagnostics import (
    CyclicReferenceError,
    DepthLimitExceededError,
    PropsDecodeError,
    PropsError,
)
from .enums import HydrationDirective, PropType
from .serialization import (
    PropsDecoder,
    PropsEncoder,
    decode,
    decode_object,
    deserialize,
    encode,
    serialize_props,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("islandprops")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "UNDEFINED",
    "ComponentMetadata",
    "CyclicReferenceError",
    "DepthLimitExceededError",
    "HydrationDirective",
    "OrderedSet",
    "PropType",
    "PropsDecodeError",
    "PropsDecoder",
    "PropsEncoder",
    "PropsError",
    "UndefinedType",
    "__version__",
    "decode",
    "decode_object",
    "deserialize",
    "encode",
    "serialize_props",
]
