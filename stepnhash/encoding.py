from __future__ import annotations

from typing import Iterator, Sequence

ENCODE_CHARS = "fUi7oEd)IyZcPQlzHDnARm5thFwJKqjgrX2b8VWaOCY9pM!e3TsvkBxNu614LS0G"
GROUP_BITS = 6


class BitWindow:
    """Reads fixed-width bit groups from a byte sequence.

    Bit offset ``k`` is bit ``k % 8`` (counted from the least significant
    bit) of byte ``k // 8``. A window that runs past the last byte reads the
    missing bits as zero.
    """

    def __init__(self, data: Sequence[int]):
        self.data = data

    @property
    def bit_length(self) -> int:
        return len(self.data) * 8

    def read(self, offset: int, width: int = GROUP_BITS) -> int:
        if offset < 0:
            raise ValueError("offset must be >= 0")
        if not (1 <= width <= 8):
            raise ValueError("width must be between 1 and 8")

        index, shift = divmod(offset, 8)
        if index >= len(self.data):
            return 0

        word = self.data[index]
        if index + 1 < len(self.data):
            word |= self.data[index + 1] << 8
        return (word >> shift) & ((1 << width) - 1)

    def windows(self, width: int = GROUP_BITS) -> Iterator[int]:
        for offset in range(0, self.bit_length, width):
            yield self.read(offset, width)


def encode(data: Sequence[int]) -> str:
    """Pack ``data`` into ``ceil(8 * len(data) / 6)`` alphabet characters.

    No padding is added; the last group may be short.
    """
    return "".join(ENCODE_CHARS[v] for v in BitWindow(data).windows())
