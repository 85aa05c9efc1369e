# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Configurable CRC-32 implementation.

Table-driven, reflected (LSB-first) CRC-32 with a selectable polynomial
and seed. Two output shapes are provided:

    compute(data)         -> complemented register as an unsigned int
    Crc32().finalize()    -> complemented register as 4 big-endian bytes

Example usage:
    from crc32kit import Crc32, compute

    assert compute(b"123456789") == 0xCBF43926

    crc = Crc32()
    crc.update(b"12345")
    crc.update(b"6789")
    assert crc.finalize() == b"\\xcb\\xf4\\x39\\x26"
"""

import struct
import threading
from typing import Optional, Protocol, Tuple

# Reflected form of the IEEE 802.3 polynomial 0x04C11DB7
DEFAULT_POLYNOMIAL = 0xEDB88320
DEFAULT_SEED = 0xFFFFFFFF

HASH_SIZE = 32
DIGEST_SIZE = 4

_MASK = 0xFFFFFFFF
_DIGEST_STRUCT = struct.Struct(">I")

_default_table: Optional[Tuple[int, ...]] = None
_default_table_lock = threading.Lock()


def _make_table(polynomial: int) -> Tuple[int, ...]:
    table = []
    for i in range(256):
        entry = i
        for _ in range(8):
            if entry & 1:
                entry = (entry >> 1) ^ polynomial
            else:
                entry >>= 1
        table.append(entry)
    return tuple(table)


def build_table(polynomial: int = DEFAULT_POLYNOMIAL) -> Tuple[int, ...]:
    """
    Build the 256-entry lookup table for a reflected polynomial.

    The table for DEFAULT_POLYNOMIAL is built once and shared; any other
    polynomial gets a fresh table on every call.

    Args:
        polynomial: Reflected 32-bit generator polynomial

    Returns:
        Tuple of 256 32-bit unsigned integers
    """
    global _default_table
    polynomial &= _MASK

    if polynomial != DEFAULT_POLYNOMIAL:
        return _make_table(polynomial)

    if _default_table is None:
        with _default_table_lock:
            if _default_table is None:
                _default_table = _make_table(polynomial)
    return _default_table


def _fold(table: Tuple[int, ...], crc: int, data) -> int:
    for byte in data:
        crc = (crc >> 8) ^ table[(byte ^ crc) & 0xFF]
    return crc


def _check_bounds(data, offset: int, length: Optional[int]) -> int:
    """Validate an (offset, length) window over data and return its end."""
    size = len(data)
    if length is None:
        length = size - offset
    if offset < 0 or length < 0 or offset + length > size:
        raise ValueError(
            f"CRC-32 update: range offset={offset} length={length} "
            f"outside buffer of {size} bytes"
        )
    return offset + length


def to_signed32(value: int) -> int:
    """Reinterpret the low 32 bits of value as a signed integer."""
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


class StreamingHash(Protocol):
    """Incremental hash lifecycle: reset, update any number of times, finalize."""

    def reset(self) -> None:
        ...

    def update(self, data, offset: int = 0, length: Optional[int] = None) -> None:
        ...

    def finalize(self) -> bytes:
        ...


class Crc32:
    """
    Streaming CRC-32 session.

    The lookup table is chosen once at construction, so every update of a
    session goes through the same polynomial. finalize() leaves the
    register untouched; call reset() to start a new session.
    """

    hash_size = HASH_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, polynomial: int = DEFAULT_POLYNOMIAL, seed: int = DEFAULT_SEED):
        """
        Create a session.

        Args:
            polynomial: Reflected generator polynomial (default 0xEDB88320)
            seed: Initial register value (default 0xFFFFFFFF)
        """
        self._polynomial = polynomial & _MASK
        self._seed = seed & _MASK
        self._table = build_table(self._polynomial)
        self._register = self._seed
        self.hash_value: Optional[bytes] = None

    def __repr__(self) -> str:
        return (
            f"Crc32(polynomial=0x{self._polynomial:08X}, "
            f"seed=0x{self._seed:08X}, register=0x{self._register:08X})"
        )

    @property
    def polynomial(self) -> int:
        """Return the generator polynomial."""
        return self._polynomial

    @property
    def seed(self) -> int:
        """Return the initial register value."""
        return self._seed

    @property
    def register(self) -> int:
        """Return the current (uncomplemented) register."""
        return self._register

    def reset(self) -> None:
        """Restart the session from the seed."""
        self._register = self._seed
        self.hash_value = None

    def update(self, data, offset: int = 0, length: Optional[int] = None) -> None:
        """
        Fold a window of data into the register.

        Args:
            data: Bytes-like object
            offset: Index of the first byte to process
            length: Number of bytes to process (default: to the end)

        Raises:
            ValueError: If the window does not lie inside data
        """
        view = memoryview(data).cast("B")
        end = _check_bounds(view, offset, length)
        self._register = _fold(self._table, self._register, view[offset:end])

    def finalize(self) -> bytes:
        """
        Return the digest: the complemented register, big-endian.

        Returns:
            4 bytes, most significant byte first
        """
        self.hash_value = _DIGEST_STRUCT.pack(~self._register & _MASK)
        return self.hash_value

    def hexdigest(self) -> str:
        """Return finalize() as a lowercase hex string."""
        return self.finalize().hex()

    def compute_hash(self, data, offset: int = 0, length: Optional[int] = None) -> bytes:
        """
        Run a whole session over data and return its digest.

        The engine is reset before and after, so it is ready for reuse.
        hash_value keeps the returned digest.
        """
        self.reset()
        self.update(data, offset, length)
        digest = self.finalize()
        self._register = self._seed
        return digest


def compute(*args, seed: Optional[int] = None, polynomial: Optional[int] = None) -> int:
    """
    Compute CRC-32 of a whole buffer in one call.

    Accepted forms:
        compute(buffer)
        compute(seed, buffer)
        compute(polynomial, seed, buffer)

    seed and polynomial may also be passed as keywords.

    Returns:
        Complemented register as a 32-bit unsigned integer

    Raises:
        TypeError: If called with an unsupported number of arguments
    """
    if len(args) == 1:
        buffer, = args
    elif len(args) == 2 and seed is None:
        seed, buffer = args
    elif len(args) == 3 and seed is None and polynomial is None:
        polynomial, seed, buffer = args
    else:
        raise TypeError(
            "compute() expects (buffer), (seed, buffer) or (polynomial, seed, buffer)"
        )

    if polynomial is None:
        polynomial = DEFAULT_POLYNOMIAL
    if seed is None:
        seed = DEFAULT_SEED

    table = build_table(polynomial)
    view = memoryview(buffer).cast("B")
    return ~_fold(table, seed & _MASK, view) & _MASK


def string_crc32(text: str) -> int:
    """
    CRC-32 of a string's UTF-8 encoding, as a signed 32-bit integer.

    Raises:
        UnicodeEncodeError: If text cannot be encoded (e.g. lone surrogates)
    """
    return to_signed32(compute(text.encode("utf-8")))
