from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, TypeVar

T = TypeVar("T")

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK = (1 << 48) - 1

_INT31_MAX = 0x7FFFFFFF
_UINT32_MAX = 0xFFFFFFFF
_UINT64_LIMIT = 1 << 64


@dataclass
class JavaRandom:
    """A 48-bit LCG matching the generator the token service was built against.

    Linear Congruential Generator (LCG):
      state = (state * 0x5DEECE66D + 0xB) mod 2**48
      next(bits) = (state >> (48 - bits)) & 0x7FFFFFFF

    Two quirks are kept on purpose because the remote side depends on them:

    - the seed is XORed with the multiplier but the result is not masked to
      48 bits, so the first state can be wider than the rest;
    - ``next_bound`` draws once and reduces with ``%`` for bounds that are
      not powers of two (no rejection loop).

    An instance must not be shared between threads; every draw depends on
    the one before it.
    """

    _state: int

    @classmethod
    def with_seed(cls, seed: int) -> "JavaRandom":
        if not (0 <= seed < _UINT64_LIMIT):
            raise ValueError("seed must fit in an unsigned 64-bit integer")
        return cls(initial_scramble(seed))

    @property
    def state(self) -> int:
        return self._state

    def next(self, bits: int) -> int:
        if not (1 <= bits <= 32):
            raise ValueError("bits must be between 1 and 32")
        self._state = (self._state * MULTIPLIER + ADDEND) & MASK
        return (self._state >> (48 - bits)) & _INT31_MAX

    def next_bound(self, bound: int) -> int:
        """Draw a value in ``[0, bound)`` using a single 31-bit draw."""
        if not (0 < bound <= _UINT32_MAX):
            raise ValueError("bound must be between 1 and 2**32 - 1")

        r = self.next(31)
        if bound & (bound - 1) == 0:
            return ((r * bound) >> 31) & _UINT32_MAX
        return r % bound

    def shuffle(self, arr: MutableSequence[T]) -> None:
        fisher_yates_shuffle(arr, self)


def initial_scramble(seed: int) -> int:
    # mask applies to the multiplier only
    return seed ^ (MULTIPLIER & MASK)


def fisher_yates_shuffle(arr: MutableSequence[T], rng: JavaRandom) -> None:
    """Shuffle ``arr`` in place, walking from the last index down to 1."""
    for i in range(len(arr) - 1, 0, -1):
        j = rng.next_bound(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
