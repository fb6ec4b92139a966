"""AnyValue: a tagged wrapper holding exactly one value of any kind."""

from typing import Any

from typedwire import codec
from typedwire.errors import TypeMismatchError
from typedwire.tags import Tag
from typedwire.types import VALUE_TYPES, Value, value_type_for


class AnyValue:
    """Type-erased carrier of one Value plus its Tag.

    Used wherever the kind of a value is only known at runtime, e.g. items
    decoded from a packet or the storage of a Serializator. Values are
    immutable, so holding a shared value is the same as holding a copy.
    """

    def __init__(self, value: Any) -> None:
        """Initialize with a value.

        Args:
            value: A Value instance, or another AnyValue whose value is taken.

        Raises:
            TypeError: If value is not a typedwire value.
        """
        if isinstance(value, AnyValue):
            value = value.value
        if not isinstance(value, Value):
            raise TypeError(
                f"AnyValue can only hold a value, got {type(value).__name__}"
            )
        self._value = value
        self._tag = value.tag

    @classmethod
    def from_tag(cls, tag: int) -> "AnyValue":
        """Create an AnyValue holding the zero value of the given kind.

        Raises:
            UnknownTagError: If tag is not a known kind.
        """
        return cls(value_type_for(tag)())

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> tuple["AnyValue", int]:
        """Decode one tagged value from data.

        Returns:
            The wrapper and the offset just past the decoded value.
        """
        value, end = codec.decode(data, offset)
        return cls(value), end

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def value(self) -> Value:
        return self._value

    def get(self, kind: type[Value] | int) -> Value:
        """Return the held value, checking that it has the expected kind.

        Args:
            kind: A value class (UInt, Float, Bytes, List), a Tag, or a raw
                integer tag.

        Raises:
            TypeMismatchError: If the held value is of a different kind.
            UnknownTagError: If kind is an integer outside the known tags.
            TypeError: If kind is neither a tag nor one of the value classes.
        """
        if isinstance(kind, int) and not isinstance(kind, bool):
            expected = value_type_for(kind).tag
        elif isinstance(kind, type) and kind in VALUE_TYPES.values():
            expected = kind.tag
        else:
            raise TypeError(f"Expected a tag or a value class, got {kind!r}")
        if expected != self._tag:
            raise TypeMismatchError(expected, self._tag)
        return self._value

    def serialize(self) -> bytes:
        """Encode the held value with its tag."""
        return codec.encode(self._value)

    def __eq__(self, other: object) -> bool:
        """Equality comparison."""
        if isinstance(other, AnyValue):
            return self._tag == other._tag and self._value == other._value
        if isinstance(other, Value):
            return self._tag == other.tag and self._value == other
        return False

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        """String representation."""
        return f"AnyValue({self._value!r})"
