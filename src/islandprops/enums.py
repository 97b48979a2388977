"""Enumerations for islandprops type-safe constants.

PropType uses IntEnum because its members ARE the wire integers: the value
written into every encoded node and read back by any decoder, Python or not.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class PropType(IntEnum):
    """Type tag of an encoded prop node.

    Closed set. The integer ids are a wire contract shared by every producer
    and consumer deployed together; never renumber or reuse a member.
    """

    VALUE = 0
    """JSON scalar, plain object, or undefined (no payload): [0, "x"], [0]"""

    ARRAY = 1
    """Ordered sequence of encoded nodes: [1, [[0, 1], [0, 2]]]"""

    REGEXP = 2
    """Regular expression source text: [2, "ab+c"]"""

    DATE = 3
    """ISO-8601 UTC timestamp: [3, "1970-01-01T00:00:00.000Z"]"""

    MAP = 4
    """Sequence of encoded [key, value] pairs: [4, [[1, [[0, 1], [0, "a"]]]]]"""

    SET = 5
    """Sequence of encoded elements: [5, [[0, 1], [0, 2]]]"""

    BIGINT = 6
    """Decimal digit string: [6, "1267650600228229401496703205376"]"""

    URL = 7
    """URL string form: [7, "https://example.com/"]"""

    BYTE_BUFFER_8 = 8
    """Unsigned 8-bit integers: [8, [1, 2, 255]]"""

    BYTE_BUFFER_16 = 9
    """Unsigned 16-bit integers: [9, [1, 65535]]"""

    BYTE_BUFFER_32 = 10
    """Unsigned 32-bit integers: [10, [1, 4294967295]]"""


class HydrationDirective(StrEnum):
    """Client hydration mode labels used by rendering pipelines.

    StrEnum provides automatic string conversion:
    str(HydrationDirective.LOAD) == "load". Metadata accepts any string; these
    members cover the directives rendering engines emit out of the box.
    """

    LOAD = "load"
    """Hydrate immediately on page load"""

    IDLE = "idle"
    """Hydrate once the main thread is idle"""

    VISIBLE = "visible"
    """Hydrate when the island scrolls into view"""

    MEDIA = "media"
    """Hydrate when a media query matches"""

    ONLY = "only"
    """Skip server rendering, render on the client only"""


__all__ = [
    "HydrationDirective",
    "PropType",
]
