"""Tests for AncestorSet."""

import pytest

from tagtree import AncestorSet


class TestAncestorSet:
    """Tests for AncestorSet class."""

    def test_new_set_is_empty(self) -> None:
        """A fresh set has no bits."""
        bits = AncestorSet(8)

        assert len(bits) == 0
        assert list(bits) == []
        assert not any(bits.test(i) for i in range(8))

    def test_set_and_test(self) -> None:
        """Set bits are reported by test, others are not."""
        bits = AncestorSet(8)
        bits.set(0)
        bits.set(5)

        assert bits.test(0) is True
        assert bits.test(5) is True
        assert bits.test(1) is False
        assert list(bits) == [0, 5]
        assert len(bits) == 2

    def test_highest_bit(self) -> None:
        """The last addressable bit is usable."""
        bits = AncestorSet(1024)
        bits.set(1023)

        assert bits.test(1023) is True
        assert list(bits) == [1023]

    @pytest.mark.parametrize("index", [-1, 8, 100])
    def test_out_of_range_index_raises(self, index: int) -> None:
        """Indices outside the width are rejected, not silently accepted."""
        bits = AncestorSet(8)

        with pytest.raises(IndexError):
            bits.set(index)
        with pytest.raises(IndexError):
            bits.test(index)

    def test_clone_is_independent(self) -> None:
        """Changing a clone leaves the original untouched."""
        parent = AncestorSet(8)
        parent.set(1)
        child = parent.clone()
        child.set(3)

        assert list(parent) == [1]
        assert list(child) == [1, 3]
        assert child.capacity == parent.capacity

    def test_equality(self) -> None:
        """Sets compare by width and bits."""
        a = AncestorSet(8)
        b = AncestorSet(8)
        a.set(2)
        b.set(2)

        assert a == b
        assert a != AncestorSet(16, 0b100)
        assert a.clone() == a
