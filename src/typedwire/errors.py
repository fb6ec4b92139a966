"""Exception hierarchy for typedwire."""


class TypedWireError(Exception):
    """Base class for all typedwire errors."""


class DecodeError(TypedWireError, ValueError):
    """Raised when a buffer cannot be decoded."""


class TruncatedInputError(DecodeError):
    """The buffer ended before a complete value could be read.

    Attributes:
        needed: Number of bytes the decoder tried to read.
        available: Number of bytes that were actually left.
        offset: Buffer offset at which the read started.
    """

    def __init__(self, what: str, needed: int, available: int, offset: int) -> None:
        self.what = what
        self.needed = needed
        self.available = available
        self.offset = offset
        super().__init__(
            f"Truncated input: {what} needs {needed} bytes at offset {offset}, "
            f"only {available} available"
        )


class UnknownTagError(DecodeError):
    """A tag outside the known value kinds was read."""

    def __init__(self, tag: int, offset: int | None = None) -> None:
        self.tag = tag
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"Unknown type tag {tag}{where}")


class TypeMismatchError(TypedWireError, TypeError):
    """A typed accessor asked for a kind the wrapper does not hold."""

    def __init__(self, expected, actual) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type mismatch: expected {expected.name}, value holds {actual.name}"
        )
