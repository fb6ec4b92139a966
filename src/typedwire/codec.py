"""Binary codec for the typedwire value universe.

Every value is written as an 8-byte little-endian tag followed by its
payload:

  - UInt:  8-byte little-endian unsigned integer
  - Float: 8-byte little-endian IEEE-754 double
  - Bytes: 8-byte length, then exactly that many raw bytes (no terminator)
  - List:  8-byte element count, then each element's full tagged encoding

The List count is a number of elements, not a byte length, so decoding a
list means recursively decoding that many tagged values. A packet uses the
same framing as a List body: an item count followed by tagged items.
"""

import struct
from collections.abc import Iterable
from io import SEEK_END, BytesIO
from typing import Any

from typedwire.errors import TruncatedInputError
from typedwire.types import Bytes, Float, List, UInt, Value, value_type_for

_u64 = struct.Struct("<Q")
_f64 = struct.Struct("<d")


def encode(value: Any) -> bytes:
    """Encode a single value, tag included.

    Args:
        value: A Value (UInt, Float, Bytes, List) or an AnyValue.

    Returns:
        The tagged wire encoding.

    Raises:
        TypeError: If value is not a typedwire value.
    """
    stream = BytesIO()
    _encode_value(_unwrap(value), stream)
    return stream.getvalue()


def decode(data: bytes, offset: int = 0) -> tuple[Value, int]:
    """Decode one tagged value starting at offset.

    Args:
        data: Buffer holding the encoded value.
        offset: Position of the value's tag within data.

    Returns:
        The decoded value and the offset just past its encoding.

    Raises:
        TruncatedInputError: If the buffer ends before the value is complete.
        UnknownTagError: If a tag outside the known kinds is read.
        ValueError: If offset lies outside the buffer.
    """
    stream = _open(data, offset)
    value = _decode_value(stream)
    return value, stream.tell()


def encode_packet(values: Iterable[Any]) -> bytes:
    """Encode a packet: item count followed by each tagged item in order."""
    items = [_unwrap(v) for v in values]
    stream = BytesIO()
    _write_u64(stream, len(items))
    for item in items:
        _encode_value(item, stream)
    return stream.getvalue()


def decode_packet(data: bytes, offset: int = 0) -> tuple[list[Value], int]:
    """Decode a packet into its values.

    Returns:
        The decoded values in order and the offset just past the last item.

    Raises:
        TruncatedInputError: If the buffer is truncated mid-item.
        UnknownTagError: If an item carries an unknown tag.
    """
    stream = _open(data, offset)
    count = _read_u64(stream, "packet item count")
    values = _decode_items(stream, count)
    return values, stream.tell()


def _open(data: bytes, offset: int) -> BytesIO:
    if not 0 <= offset <= len(data):
        raise ValueError(f"Offset {offset} outside buffer of length {len(data)}")
    stream = BytesIO(data)
    stream.seek(offset)
    return stream


def _unwrap(value: Any) -> Value:
    if isinstance(value, Value):
        return value
    from typedwire.anyvalue import AnyValue

    if isinstance(value, AnyValue):
        return value.value
    raise TypeError(f"Unsupported type for serialization: {type(value)}")


def _write_u64(stream: BytesIO, number: int) -> None:
    stream.write(_u64.pack(number))


def _read_exact(stream: BytesIO, size: int, what: str) -> bytes:
    """Read exactly size bytes or raise TruncatedInputError."""
    offset = stream.tell()
    available = stream.seek(0, SEEK_END) - offset
    stream.seek(offset)
    # Declared lengths may exceed what a single read() accepts
    if size > available:
        raise TruncatedInputError(what, size, available, offset)
    return stream.read(size)


def _read_u64(stream: BytesIO, what: str) -> int:
    return _u64.unpack(_read_exact(stream, 8, what))[0]


def _encode_value(value: Value, stream: BytesIO) -> None:
    """Internal recursive serialization."""
    _write_u64(stream, value.tag)

    if isinstance(value, UInt):
        _write_u64(stream, value.value)
        return

    if isinstance(value, Float):
        stream.write(_f64.pack(value.value))
        return

    if isinstance(value, Bytes):
        _write_u64(stream, len(value.value))
        stream.write(value.value)
        return

    if isinstance(value, List):
        # Element count, then each element with its own tag
        _write_u64(stream, len(value))
        for item in value:
            _encode_value(item, stream)
        return

    raise TypeError(f"Unsupported type for serialization: {type(value)}")


def _decode_value(stream: BytesIO) -> Value:
    """Internal recursive deserialization."""
    tag_offset = stream.tell()
    value_type = value_type_for(_read_u64(stream, "type tag"), tag_offset)

    if value_type is UInt:
        return UInt(_read_u64(stream, "uint payload"))

    if value_type is Float:
        return Float(_f64.unpack(_read_exact(stream, 8, "float payload"))[0])

    if value_type is Bytes:
        length = _read_u64(stream, "bytes length")
        return Bytes(_read_exact(stream, length, "bytes payload"))

    # List
    count = _read_u64(stream, "list count")
    return List(*_decode_items(stream, count))


def _decode_items(stream: BytesIO, count: int) -> list[Value]:
    """Decode exactly count consecutive tagged values."""
    items = []
    for _ in range(count):
        items.append(_decode_value(stream))
    return items
