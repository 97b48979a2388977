"""Props serialization: encoder, decoder and text transport.

Exports:
    PropsEncoder / encode: Native value -> tagged node
    PropsDecoder / decode / decode_object: Tagged node -> native value
    serialize_props / deserialize: Props mapping <-> embeddable JSON text

Python 3.13+.
"""

from .decoder import PropsDecoder, decode, decode_object, parse_timestamp
from .encoder import PropsEncoder, encode, format_timestamp
from .transport import deserialize, serialize_props

__all__ = [
    "PropsDecoder",
    "PropsEncoder",
    "decode",
    "decode_object",
    "deserialize",
    "encode",
    "format_timestamp",
    "parse_timestamp",
    "serialize_props",
]
