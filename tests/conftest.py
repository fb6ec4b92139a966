"""Pytest configuration and fixtures."""

import pytest

from typedwire.serializator import Serializator
from typedwire.types import Bytes, List, UInt

# Packet holding List[Bytes("qwerty"), UInt(100500)], byte for byte.
REFERENCE_PACKET = bytes(
    [
        0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x03, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x02, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x02, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x06, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x71, 0x77, 0x65, 0x72, 0x74, 0x79, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x94, 0x88,
        0x01, 0x00, 0x00, 0x00, 0x00, 0x00,
    ]
)


@pytest.fixture
def reference_bytes():
    """Raw bytes of the reference packet."""
    return REFERENCE_PACKET


@pytest.fixture
def reference_packet():
    """Serializator equivalent to the reference packet."""
    packet = Serializator()
    packet.push(List(Bytes("qwerty"), UInt(100500)))
    return packet


@pytest.fixture
def packet_file(tmp_path, reference_bytes):
    """Write the reference packet to a file, like the raw.bin input."""
    path = tmp_path / "raw.bin"
    path.write_bytes(reference_bytes)
    return path

