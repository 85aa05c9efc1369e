# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
crc32kit - configurable, streaming CRC-32.

Example usage:
    from crc32kit import Crc32, compute, string_crc32

    # One-shot, unsigned result
    checksum = compute(b"123456789")          # 0xCBF43926

    # Custom seed or polynomial
    checksum = compute(0x00000000, data)
    checksum = compute(0x82F63B78, 0xFFFFFFFF, data)

    # Streaming, 4-byte big-endian digest
    crc = Crc32()
    for chunk in chunks:
        crc.update(chunk)
    digest = crc.finalize()

    # Signed hash of a string's UTF-8 bytes
    key = string_crc32("héllo")
"""

from .crc32 import (
    DEFAULT_POLYNOMIAL,
    DEFAULT_SEED,
    DIGEST_SIZE,
    HASH_SIZE,
    Crc32,
    StreamingHash,
    build_table,
    compute,
    string_crc32,
    to_signed32,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "DEFAULT_POLYNOMIAL",
    "DEFAULT_SEED",
    "DIGEST_SIZE",
    "HASH_SIZE",
    # Table builder
    "build_table",
    # Streaming engine
    "Crc32",
    "StreamingHash",
    # One-shot facade
    "compute",
    "string_crc32",
    "to_signed32",
]
