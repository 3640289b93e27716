from __future__ import annotations

from typing import Union

INITIAL = 17
FACTOR = 37
OUTPUT_MASK = 0x7FFFFFFF

_UINT64_MASK = (1 << 64) - 1

BytesLike = Union[str, bytes, bytearray, memoryview]


def to_bytes(value: BytesLike) -> bytes:
    """UTF-8 encode text; a str holding lone surrogates raises UnicodeEncodeError."""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def hash_code(data: BytesLike) -> int:
    """Legacy 31-bit checksum used to seed the shuffle.

    h = 17; for each byte: h = h * 37 + byte (wrapping at 64 bits)
    The low 31 bits of the accumulator are returned.
    """
    h = INITIAL
    for byte in to_bytes(data):
        h = (h * FACTOR) & _UINT64_MASK
        h = (h + byte) & _UINT64_MASK
    return h & OUTPUT_MASK
