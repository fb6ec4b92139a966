"""Reading and writing packet files."""

from pathlib import Path

from typedwire.serializator import Serializator


def read_packet_bytes(path: Path | str) -> bytes:
    """Read a whole packet file into memory."""
    with open(path, "rb") as f:
        return f.read()


def write_packet_bytes(path: Path | str, data: bytes) -> None:
    """Write packet bytes to path atomically (temp file, then rename)."""
    path = Path(path)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    with open(temp_path, "wb") as f:
        f.write(data)
    temp_path.replace(path)


def load(path: Path | str) -> Serializator:
    """Load a packet file into a Serializator."""
    return Serializator.from_bytes(read_packet_bytes(path))


def dump(serializator: Serializator, path: Path | str) -> None:
    """Serialize a Serializator to a packet file."""
    write_packet_bytes(path, serializator.serialize())


def check_roundtrip(path: Path | str) -> bool:
    """Check that re-encoding a packet file reproduces its exact bytes.

    Every decoded item is pushed into a fresh Serializator which is then
    serialized and compared with the original buffer.

    Raises:
        DecodeError: If the file does not hold a valid packet.
    """
    original = read_packet_bytes(path)
    serializator = Serializator()
    for item in Serializator.deserialize(original):
        serializator.push(item)
    return serializator.serialize() == original
