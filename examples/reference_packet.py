"""Example: build the reference packet, write it to disk and verify it round-trips.

The packet holds a single List[Bytes("qwerty"), UInt(100500)]. The script
writes it to a raw.bin file, decodes it back, pushes every item into a fresh
Serializator and prints whether re-encoding reproduces the file byte for byte.
"""

import argparse
from pathlib import Path

from typedwire import Bytes, List, Serializator, UInt
from typedwire.files import check_roundtrip, dump, load


def main():
    parser = argparse.ArgumentParser(
        description="Write the reference packet and check that it round-trips"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("raw.bin"),
        help="Where to write the packet (default: raw.bin)",
    )
    parser.add_argument(
        "--text",
        type=str,
        default="qwerty",
        help="Bytes payload of the first list element (default: qwerty)",
    )
    parser.add_argument(
        "--number",
        type=int,
        default=100500,
        help="UInt payload of the second list element (default: 100500)",
    )
    args = parser.parse_args()

    packet = Serializator()
    packet.push(List(Bytes(args.text), UInt(args.number)))
    dump(packet, args.output)

    data = args.output.read_bytes()
    print(f"Wrote {len(data)} bytes to {args.output}")
    for offset in range(0, len(data), 8):
        print("  " + " ".join(f"{b:02x}" for b in data[offset : offset + 8]))

    for index, item in enumerate(load(args.output)):
        print(f"Item {index}: {item.value!r}")

    print(f"Round-trip exact: {check_roundtrip(args.output)}")


if __name__ == "__main__":
    main()
