"""Serializator: the top-level packet container."""

import logging
from collections.abc import Iterator
from typing import Any

from typedwire import codec
from typedwire.anyvalue import AnyValue

logger = logging.getLogger("typedwire.serializator")


class Serializator:
    """Ordered collection of AnyValue items, serialized as one packet.

    The packet is an 8-byte little-endian item count followed by each item's
    tagged encoding in insertion order, i.e. a List body without a tag.
    """

    def __init__(self) -> None:
        self._storage: list[AnyValue] = []

    @classmethod
    def from_bytes(cls, data: bytes) -> "Serializator":
        """Build a container holding the items decoded from data."""
        serializator = cls()
        for item in cls.deserialize(data):
            serializator.push(item)
        return serializator

    def push(self, value: Any) -> None:
        """Append a value or an AnyValue.

        Raises:
            TypeError: If value is not a typedwire value.
        """
        if not isinstance(value, AnyValue):
            value = AnyValue(value)
        self._storage.append(value)

    def serialize(self) -> bytes:
        """Encode all items as a packet."""
        return codec.encode_packet(self._storage)

    @staticmethod
    def deserialize(data: bytes) -> list[AnyValue]:
        """Decode a packet into its items.

        Bytes after the last declared item are ignored.

        Raises:
            TruncatedInputError: If data ends in the middle of an item.
            UnknownTagError: If an item carries an unknown tag.
        """
        values, end = codec.decode_packet(data)
        if end != len(data):
            logger.warning(
                "Ignoring %d trailing bytes after packet of %d items",
                len(data) - end,
                len(values),
            )
        return [AnyValue(value) for value in values]

    @property
    def storage(self) -> tuple[AnyValue, ...]:
        return tuple(self._storage)

    def clear(self) -> None:
        """Remove all items."""
        self._storage.clear()

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[AnyValue]:
        return iter(self._storage)

    def __getitem__(self, index: int) -> AnyValue:
        return self._storage[index]

    def __eq__(self, other: object) -> bool:
        """Equality comparison."""
        if not isinstance(other, Serializator):
            return False
        return self._storage == other._storage

    def __repr__(self) -> str:
        """String representation."""
        return f"Serializator({self._storage!r})"
