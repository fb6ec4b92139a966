"""typedwire: a compact tagged binary encoding for nested values."""

from importlib.metadata import PackageNotFoundError, version

from typedwire.anyvalue import AnyValue
from typedwire.codec import decode, decode_packet, encode, encode_packet
from typedwire.errors import (
    DecodeError,
    TruncatedInputError,
    TypedWireError,
    TypeMismatchError,
    UnknownTagError,
)
from typedwire.serializator import Serializator
from typedwire.tags import Tag
from typedwire.types import Bytes, Float, List, UInt, Value

try:
    __version__ = version("typedwire")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "AnyValue",
    "Bytes",
    "DecodeError",
    "Float",
    "List",
    "Serializator",
    "Tag",
    "TruncatedInputError",
    "TypeMismatchError",
    "TypedWireError",
    "UInt",
    "UnknownTagError",
    "Value",
    "decode",
    "decode_packet",
    "encode",
    "encode_packet",
    "__version__",
]
