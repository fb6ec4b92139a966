"""Command line interface for inspecting packet files."""

import argparse
import logging
import sys

from typedwire.errors import DecodeError
from typedwire.files import check_roundtrip, read_packet_bytes
from typedwire.serializator import Serializator

logger = logging.getLogger("typedwire.cli")


def _roundtrip(args: argparse.Namespace) -> int:
    ok = check_roundtrip(args.path)
    print(ok)
    return 0 if ok else 1


def _show(args: argparse.Namespace) -> int:
    items = Serializator.deserialize(read_packet_bytes(args.path))
    for index, item in enumerate(items):
        print(f"{index}: {item.value!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typedwire",
        description="Decode and re-encode typedwire packet files",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    roundtrip = subparsers.add_parser(
        "roundtrip",
        help="Print True if re-encoding the packet reproduces the file exactly",
    )
    roundtrip.add_argument("path", help="Packet file to check")
    roundtrip.set_defaults(handler=_roundtrip)

    show = subparsers.add_parser("show", help="Print the decoded items")
    show.add_argument("path", help="Packet file to decode")
    show.set_defaults(handler=_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        return args.handler(args)
    except OSError as exc:
        logger.debug("Failed to read %s", args.path, exc_info=True)
        print(f"typedwire: cannot read {args.path}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except DecodeError as exc:
        print(f"typedwire: {args.path}: {exc}", file=sys.stderr)
        return 2
