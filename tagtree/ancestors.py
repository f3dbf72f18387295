"""Fixed-width ancestor bit set.

An AncestorSet records which tag ids are a node itself or one of its
ancestors. Matching a tag against a category is then a single bit test,
independent of how deep the hierarchy is. The price is memory: each set
is as wide as the registry capacity, so over-provisioned registries pay
for bits they never use.
"""

from __future__ import annotations

from collections.abc import Iterator


class AncestorSet:
    """Bit set of width ``capacity`` backed by a Python int.

    Bits can be set but never cleared, since tags are never unregistered
    or re-parented.
    """

    __slots__ = ("_capacity", "_bits")

    def __init__(self, capacity: int, bits: int = 0) -> None:
        """Initialize an empty set.

        Args:
            capacity: Number of addressable bits
            bits: Initial bit pattern (used by clone)
        """
        self._capacity = capacity
        self._bits = bits

    @property
    def capacity(self) -> int:
        """Number of addressable bits."""
        return self._capacity

    def _check(self, index: int) -> None:
        if not 0 <= index < self._capacity:
            raise IndexError(
                f"Bit {index} out of range for ancestor set of width {self._capacity}"
            )

    def set(self, index: int) -> None:
        """Set the bit at index.

        Raises:
            IndexError: If index is outside 0..capacity-1
        """
        self._check(index)
        self._bits |= 1 << index

    def test(self, index: int) -> bool:
        """Return True if the bit at index is set.

        Raises:
            IndexError: If index is outside 0..capacity-1
        """
        self._check(index)
        return (self._bits >> index) & 1 == 1

    def clone(self) -> AncestorSet:
        """Return an independent copy of this set."""
        return AncestorSet(self._capacity, self._bits)

    def __iter__(self) -> Iterator[int]:
        """Yield set bit indices in ascending order."""
        bits = self._bits
        index = 0
        while bits:
            if bits & 1:
                yield index
            bits >>= 1
            index += 1

    def __len__(self) -> int:
        return self._bits.bit_count()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AncestorSet):
            return NotImplemented
        return self._capacity == other._capacity and self._bits == other._bits

    def __repr__(self) -> str:
        return f"AncestorSet(capacity={self._capacity}, bits={list(self)})"
