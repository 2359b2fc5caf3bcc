"""A fixed-size bit set stored in 32-bit words."""

from __future__ import annotations

from typing import Iterable, Iterator, List


class BitVector:
    """Fixed-size set of bits packed into 32-bit words."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.words: List[int] = [0] * ((size + 31) >> 5)

    def _check(self, n: int) -> None:
        if not 0 <= n < self.size:
            raise IndexError(f"bit {n} out of range for size {self.size}")

    def set_bit(self, n: int) -> None:
        self._check(n)
        self.words[n >> 5] |= 1 << (n & 31)

    def clear_bit(self, n: int) -> None:
        self._check(n)
        self.words[n >> 5] &= ~(1 << (n & 31)) & 0xFFFFFFFF

    def test_bit(self, n: int) -> bool:
        self._check(n)
        return bool(self.words[n >> 5] & (1 << (n & 31)))

    def __iter__(self) -> Iterator[int]:
        return iter(unpack_bit_vector(self.words))

    def __len__(self) -> int:
        return self.size


def unpack_bit_vector(words: Iterable[int]) -> List[int]:
    """Return the indices of all set bits, in ascending order."""
    return [
        (word_index << 5) + bit
        for word_index, word in enumerate(words)
        if word
        for bit in range(32)
        if word & (1 << bit)
    ]