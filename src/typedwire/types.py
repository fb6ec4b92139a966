"""The four value kinds that make up the typedwire value universe.

The universe is closed:
  - UInt: unsigned 64-bit integer
  - Float: IEEE-754 double
  - Bytes: raw byte string (text is stored as UTF-8)
  - List: ordered sequence of values, recursively any kind

Values are immutable. Equality is structural and recursive; two values are
equal only if their tags match, so UInt(1) != Float(1.0).
"""

import struct
from collections.abc import Iterable, Iterator
from typing import Any

from typedwire.errors import UnknownTagError
from typedwire.tags import Tag

UINT_MAX = 2**64 - 1

_double = struct.Struct("<d")


class Value:
    """Common behaviour of the four value kinds.

    Subclasses set ``tag`` and store their payload in ``value``.
    """

    tag: Tag

    def __init__(self) -> None:
        raise TypeError("Value is abstract; use UInt, Float, Bytes or List")

    @property
    def value(self) -> Any:
        """The wrapped Python payload."""
        return self._value

    def _key(self) -> Any:
        """Payload form used for equality and hashing."""
        return self._value

    def __eq__(self, other: object) -> bool:
        """Equality comparison."""
        if not isinstance(other, Value):
            return False
        return self.tag == other.tag and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.tag, self._key()))

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}({self._value!r})"


class UInt(Value):
    """An unsigned 64-bit integer."""

    tag = Tag.UINT

    def __init__(self, value: int = 0) -> None:
        """Initialize with an integer value.

        Args:
            value: Integer in the range [0, 2**64).

        Raises:
            TypeError: If value is not an int (bool is rejected).
            ValueError: If value is outside the unsigned 64-bit range.
        """
        # Check bool before int since bool is a subclass of int in Python
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"UInt requires an int, got {type(value).__name__}")
        if not 0 <= value <= UINT_MAX:
            raise ValueError(f"UInt value out of range [0, 2**64): {value}")
        self._value = value

    def __int__(self) -> int:
        return self._value


class Float(Value):
    """An IEEE-754 double.

    Equality compares the exact bit pattern: no epsilon, NaN equals a NaN
    with the same payload, and 0.0 differs from -0.0.
    """

    tag = Tag.FLOAT

    def __init__(self, value: float = 0.0) -> None:
        """Initialize with a float value.

        Args:
            value: A float, or an int that is converted to float.

        Raises:
            TypeError: If value is not a real number (bool is rejected).
            ValueError: If an int is too large to be represented as a double.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Float requires a float, got {type(value).__name__}")
        try:
            self._value = float(value)
        except OverflowError:
            raise ValueError("Float value out of double range") from None

    def _key(self) -> bytes:
        return _double.pack(self._value)

    def __float__(self) -> float:
        return self._value


class Bytes(Value):
    """A sequence of raw bytes. Strings are stored UTF-8 encoded."""

    tag = Tag.BYTES

    def __init__(self, value: bytes | bytearray | memoryview | str = b"") -> None:
        """Initialize with a byte sequence or string.

        Args:
            value: bytes-like object, or str which is encoded as UTF-8.

        Raises:
            TypeError: If value is neither bytes-like nor str.
        """
        if isinstance(value, str):
            value = value.encode("utf-8")
        elif isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
        elif not isinstance(value, bytes):
            raise TypeError(f"Bytes requires bytes or str, got {type(value).__name__}")
        self._value = value

    def text(self, encoding: str = "utf-8") -> str:
        """Decode the payload as text."""
        return self._value.decode(encoding)

    def __len__(self) -> int:
        return len(self._value)

    def __bytes__(self) -> bytes:
        return self._value


class List(Value):
    """An ordered sequence of values of any kind, including nested lists."""

    tag = Tag.LIST

    def __init__(self, *values: "Value") -> None:
        """Initialize with zero or more values.

        Args:
            *values: Value instances. AnyValue wrappers are unwrapped.

        Raises:
            TypeError: If an element is not a value.
        """
        self._value = tuple(_coerce_element(v) for v in values)

    @classmethod
    def of(cls, values: Iterable["Value"]) -> "List":
        """Build a List from an iterable of values."""
        return cls(*values)

    def appended(self, value: "Value") -> "List":
        """Return a new List with value added at the end."""
        return List(*self._value, value)

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self._value)

    def __getitem__(self, index: int) -> "Value":
        return self._value[index]

    def __repr__(self) -> str:
        """String representation."""
        return f"List({list(self._value)!r})"


def _coerce_element(value: Any) -> Value:
    """Validate a List element, unwrapping AnyValue."""
    if isinstance(value, Value):
        return value
    # AnyValue exposes the held value; imported lazily to avoid a cycle
    from typedwire.anyvalue import AnyValue

    if isinstance(value, AnyValue):
        return value.value
    raise TypeError(f"List elements must be values, got {type(value).__name__}")


VALUE_TYPES: dict[Tag, type[Value]] = {
    Tag.UINT: UInt,
    Tag.FLOAT: Float,
    Tag.BYTES: Bytes,
    Tag.LIST: List,
}


def value_type_for(tag: int, offset: int | None = None) -> type[Value]:
    """Return the value class for a wire tag.

    Raises:
        UnknownTagError: If tag is not one of the four kinds.
    """
    try:
        return VALUE_TYPES[Tag(tag)]
    except ValueError:
        raise UnknownTagError(tag, offset) from None
