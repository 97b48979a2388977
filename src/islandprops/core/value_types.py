"""Core value types for props serialization.

Defines the fundamental types shared by the encoder, decoder and transport:
    - UNDEFINED: Sentinel for "absent", distinct from None (JSON null)
    - ComponentMetadata: Island identity used to enrich error text
    - EncodedNode: Shape of one tagged node on the wire

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableSet
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeAlias, TypeVar, final

from islandprops.constants import CLIENT_DIRECTIVE_PREFIX, UNKNOWN_METADATA_FIELD
from islandprops.diagnostics.templates import ErrorTemplate
from islandprops.enums import HydrationDirective

__all__ = [
    "UNDEFINED",
    "ComponentMetadata",
    "EncodedNode",
    "EncodedObject",
    "OrderedSet",
    "UndefinedType",
]

# [tag] or [tag, payload]. Lists on the wire; tuples accepted when decoding.
EncodedNode: TypeAlias = "list[Any] | tuple[Any, ...]"
EncodedObject: TypeAlias = "dict[str, EncodedNode]"

T = TypeVar("T")


@final
class UndefinedType:
    """Type of the UNDEFINED singleton.

    Python has one "nothing" value, None, and it already means JSON null.
    Props that are declared but absent need a second one so they survive the
    round trip without turning into null.
    """

    __slots__ = ()
    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = UndefinedType()


class OrderedSet(MutableSet[T], Generic[T]):
    """Mutable set that iterates in insertion order.

    Decoded Set nodes keep the element order written on the wire, which a
    built-in set does not. Compares equal to any set with the same members.
    """

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = dict.fromkeys(iterable)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: T) -> None:
        self._items[value] = None

    def discard(self, value: T) -> None:
        self._items.pop(value, None)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"


def _normalize_hydrate(value: object) -> str:
    """Map "client:load", "LOAD" or "load" onto HydrationDirective.LOAD.

    Labels outside the built-in directives are kept as given, minus any
    "client:" prefix.
    """
    text = str(value).strip()
    if text.lower().startswith(CLIENT_DIRECTIVE_PREFIX):
        text = text[len(CLIENT_DIRECTIVE_PREFIX) :]
    try:
        return HydrationDirective(text.lower())
    except ValueError:
        return text


@dataclass(frozen=True, slots=True)
class ComponentMetadata:
    """Identity of the island whose props are being serialized.

    Used exclusively to enrich error text; never written to the wire.

    Attributes:
        display_name: Component name as shown to developers
        hydrate: Hydration directive label (load, idle, visible, ...)
    """

    display_name: str = UNKNOWN_METADATA_FIELD
    hydrate: str = UNKNOWN_METADATA_FIELD

    @classmethod
    def coerce(cls, metadata: ComponentMetadata | Mapping[str, Any] | None) -> ComponentMetadata:
        """Build metadata from whatever the rendering pipeline hands over.

        Accepts a ComponentMetadata, a mapping using either ``displayName`` or
        ``display_name`` plus ``hydrate``, or None. Missing fields render as
        "undefined". Built-in directives are normalized to HydrationDirective
        members, so "client:Visible" and "visible" label the same island.
        """
        match metadata:
            case ComponentMetadata():
                return metadata
            case None:
                return cls()
            case Mapping():
                name = metadata.get("displayName", metadata.get("display_name"))
                hydrate = metadata.get("hydrate")
                return cls(
                    display_name=UNKNOWN_METADATA_FIELD if name is None else str(name),
                    hydrate=(
                        UNKNOWN_METADATA_FIELD if hydrate is None else _normalize_hydrate(hydrate)
                    ),
                )
            case _:
                msg = (
                    "metadata must be ComponentMetadata or a mapping, "
                    f"got {type(metadata).__name__}"
                )
                raise TypeError(msg)

    @property
    def label(self) -> str:
        """Island label for diagnostics, e.g. <Counter client:load>."""
        return ErrorTemplate.island_label(self.display_name, self.hydrate)
