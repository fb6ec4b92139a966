"""Wire tags identifying the four value kinds."""

from enum import IntEnum


class Tag(IntEnum):
    """Discriminant written as an 8-byte little-endian integer before every value.

    The numeric values are part of the wire format and must never change.
    """

    UINT = 0
    FLOAT = 1
    BYTES = 2
    LIST = 3
