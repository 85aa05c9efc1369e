#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
CRC-32 checksum tool.

Usage:
    python crc32_tool.py text "hello world"
    python crc32_tool.py text "hello world" --signed
    python crc32_tool.py hex 313233343536373839
    python crc32_tool.py file firmware.bin
    python crc32_tool.py verify firmware.bin 0xcbf43926
    python crc32_tool.py --polynomial 0x82F63B78 file firmware.bin
"""

import argparse
import sys
from pathlib import Path

from crc32kit import DEFAULT_POLYNOMIAL, DEFAULT_SEED, Crc32, compute, string_crc32

DEFAULT_CHUNK_SIZE = 65536


def parse_u32(value: str) -> int:
    """Parse a 32-bit unsigned hex value, with or without 0x prefix."""
    try:
        result = int(value, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid 32-bit value: {value!r}")
    if not 0 <= result <= 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"value out of 32-bit range: {value!r}")
    return result


def positive_int(value: str) -> int:
    """Parse a strictly positive integer."""
    try:
        result = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if result <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return result


def checksum_file(path: Path, polynomial: int, seed: int,
                  chunk_size: int = DEFAULT_CHUNK_SIZE) -> Crc32:
    """
    Stream a file through a CRC-32 session.

    Args:
        path: File to read
        polynomial: Generator polynomial
        seed: Initial register value
        chunk_size: Bytes read per update

    Returns:
        The session after all data has been folded in (not yet finalized)

    Raises:
        OSError: If the file cannot be read
    """
    crc = Crc32(polynomial, seed)
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            crc.update(chunk)
    return crc


def cmd_text(args) -> int:
    """Checksum a string's UTF-8 encoding."""
    if args.signed:
        if args.polynomial != DEFAULT_POLYNOMIAL or args.seed != DEFAULT_SEED:
            print("Error: --signed only supports the default polynomial and seed")
            return 1
        print(string_crc32(args.string))
    else:
        data = args.string.encode("utf-8")
        print(f"0x{compute(args.polynomial, args.seed, data):08x}")
    return 0


def cmd_hex(args) -> int:
    """Checksum bytes given as a hex string."""
    data = bytes.fromhex(args.data)
    print(f"0x{compute(args.polynomial, args.seed, data):08x}")
    return 0


def cmd_file(args) -> int:
    """Checksum a file."""
    crc = checksum_file(args.path, args.polynomial, args.seed, args.chunk_size)
    print(f"{crc.hexdigest()}  {args.path}")
    return 0


def cmd_verify(args) -> int:
    """Compare a file's checksum with an expected value."""
    crc = checksum_file(args.path, args.polynomial, args.seed, args.chunk_size)
    actual = int.from_bytes(crc.finalize(), "big")

    if actual == args.expected:
        print(f"{args.path}: OK (0x{actual:08x})")
        return 0

    print(f"{args.path}: FAILED (expected 0x{args.expected:08x}, got 0x{actual:08x})")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CRC-32 checksum tool with configurable polynomial and seed"
    )
    parser.add_argument(
        "--polynomial", "-P",
        type=parse_u32,
        default=DEFAULT_POLYNOMIAL,
        help="Reflected generator polynomial (default 0xEDB88320)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=parse_u32,
        default=DEFAULT_SEED,
        help="Initial register value (default 0xFFFFFFFF)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # text command
    text_parser = subparsers.add_parser("text", help="Checksum a UTF-8 string")
    text_parser.add_argument("string", help="Text to checksum")
    text_parser.add_argument("--signed", action="store_true",
                             help="Print as a signed 32-bit integer")
    text_parser.set_defaults(func=cmd_text)

    # hex command
    hex_parser = subparsers.add_parser("hex", help="Checksum hex-encoded bytes")
    hex_parser.add_argument("data", help="Bytes as hex (e.g. 313233)")
    hex_parser.set_defaults(func=cmd_hex)

    # file command
    file_parser = subparsers.add_parser("file", help="Checksum a file")
    file_parser.add_argument("path", type=Path, help="File to checksum")
    file_parser.add_argument("--chunk-size", "-c", type=positive_int,
                             default=DEFAULT_CHUNK_SIZE,
                             help="Read size in bytes")
    file_parser.set_defaults(func=cmd_file)

    # verify command
    verify_parser = subparsers.add_parser("verify", help="Verify a file's checksum")
    verify_parser.add_argument("path", type=Path, help="File to verify")
    verify_parser.add_argument("expected", type=parse_u32,
                               help="Expected checksum (e.g. 0xcbf43926)")
    verify_parser.add_argument("--chunk-size", "-c", type=positive_int,
                               default=DEFAULT_CHUNK_SIZE,
                               help="Read size in bytes")
    verify_parser.set_defaults(func=cmd_verify)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        status = args.func(args)
    except OSError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
