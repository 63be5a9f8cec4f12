"""
Tests for the cursor skeleton.

Validates:
  - IndexCursor movement, O(1) arithmetic and write-through
  - BaseCursor equality on position only, boundary assertions
  - Linear random-access arithmetic and distance
  - ValueProxy attribute forwarding
"""

import pytest
from lazyrange.adaptors import FilterCursor, MapCursor
from lazyrange.core.base_cursor import IndexCursor, ValueProxy, clone_position


def _bounds(data):
    return IndexCursor(data, 0), IndexCursor(data, len(data))


class TestIndexCursor:
    def test_walk_and_deref(self):
        data = [10, 20, 30]
        cursor = IndexCursor(data)
        assert cursor.deref() == 10
        assert cursor.increment().deref() == 20
        assert cursor.decrement().deref() == 10

    def test_arithmetic(self):
        data = list("abcdef")
        begin, end = _bounds(data)
        assert (begin + 3).deref() == "d"
        assert end - begin == 6
        assert (end - 1).deref() == "f"

    def test_equality_needs_same_source(self):
        a, b = [1, 2], [1, 2]
        assert IndexCursor(a, 1) == IndexCursor(a, 1)
        assert IndexCursor(a, 1) != IndexCursor(b, 1)

    def test_assign_writes_through(self):
        data = [1, 2, 3]
        IndexCursor(data, 1).assign(99)
        assert data == [1, 99, 3]

    def test_deref_out_of_range(self):
        with pytest.raises(AssertionError):
            IndexCursor([1, 2], 2).deref()

    def test_clone_is_independent(self):
        cursor = IndexCursor([1, 2, 3])
        clone = clone_position(cursor)
        clone.increment()
        assert cursor.index == 0
        assert clone.index == 1


class TestBaseCursor:
    def setup_method(self):
        self.data = [1, 2, 3, 4, 5, 6, 7]
        self.begin, self.end = _bounds(self.data)

    def _filter(self, position=None):
        position = self.begin if position is None else position
        return FilterCursor(position, self.begin, self.end, lambda x: x % 3 == 0)

    def test_construction_normalizes_position(self):
        assert self._filter().deref() == 3

    def test_equality_ignores_callable(self):
        mapped = MapCursor(self.begin, self.begin, self.end, lambda x: -x)
        other = MapCursor(self.begin, self.begin, self.end, lambda x: x * 100)
        assert mapped == other

    def test_increment_at_end_is_contract_violation(self):
        cursor = self._filter(self.end)
        with pytest.raises(AssertionError):
            cursor.increment()

    def test_decrement_at_begin_is_contract_violation(self):
        mapped = MapCursor(self.begin, self.begin, self.end, abs)
        with pytest.raises(AssertionError):
            mapped.decrement()

    def test_deref_at_end_is_contract_violation(self):
        with pytest.raises(AssertionError):
            self._filter(self.end).deref()

    def test_offset_and_distance(self):
        first = self._filter()
        last = first + 1
        assert last.deref() == 6
        assert first.deref() == 3
        assert last - first == 1
        assert self._filter(self.end) - first == 2
        assert (last - 1) == first
        assert (1 + first) == last

    def test_in_place_arithmetic(self):
        cursor = self._filter()
        cursor += 1
        assert cursor.deref() == 6
        cursor -= 1
        assert cursor.deref() == 3

    def test_clone_steps_independently(self):
        cursor = self._filter()
        clone = cursor.clone()
        clone.increment()
        assert cursor.deref() == 3
        assert clone.deref() == 6

    def test_sentinels_are_not_shared_with_caller(self):
        cursor = self._filter()
        self.begin.increment()
        assert cursor.sentinels[0].index == 0

    def test_arrow_proxies_attributes(self):
        data = [3 + 4j]
        begin, end = _bounds(data)
        cursor = MapCursor(begin, begin, end, lambda z: z * 2)
        proxy = cursor.arrow()
        assert isinstance(proxy, ValueProxy)
        assert proxy.real == 6.0
        assert proxy.get() == 6 + 8j
