"""
View
====

A non-owning (begin, end) pair of cursors.

Views never copy or keep alive the sequence they look at: the caller must
keep the source alive for as long as the view (or any cursor taken from
it) is used. Building a view captures the source's bounds at that instant;
resizing the source afterwards invalidates the view.

Sizes and indexing follow the cursor cost model: O(1) over a plain
sequence, linear over any adaptor (see :mod:`lazyrange.core.base_cursor`).
"""

from collections.abc import Mapping
from typing import Any, Iterator

from lazyrange.core.base_cursor import IndexCursor, clone_position


class View:
    """
    Begin/end cursor pair exposing size, indexing and traversal.

    Usage:
        >>> data = [3, 1, 4, 1, 5]
        >>> view = View.of(data)
        >>> len(view), view[2], view.front(), view.back()
        (5, 4, 3, 5)
        >>> list(reversed(view))
        [5, 1, 4, 1, 3]
    """

    def __init__(self, begin: Any, end: Any):
        self._begin = begin
        self._end = end

    @classmethod
    def of(cls, source: Any) -> 'View':
        return as_view(source)

    def begin(self) -> Any:
        return clone_position(self._begin)

    def end(self) -> Any:
        return clone_position(self._end)

    def empty(self) -> bool:
        return self._begin == self._end

    def __bool__(self) -> bool:
        return not self.empty()

    def size(self) -> int:
        return self._end - self._begin

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> Any:
        if isinstance(index, slice):
            raise TypeError("views do not support slicing; pipe through take_n instead")
        assert 0 <= index < self.size(), f"view index {index} out of range"
        return (self._begin + index).deref()

    def front(self) -> Any:
        assert not self.empty(), "front() of an empty view"
        return self._begin.deref()

    def back(self) -> Any:
        assert not self.empty(), "back() of an empty view"
        return (self._begin + (self.size() - 1)).deref()

    def __iter__(self) -> Iterator[Any]:
        cursor = self.begin()
        end = self._end
        while cursor != end:
            yield cursor.deref()
            cursor.increment()

    def __reversed__(self) -> Iterator[Any]:
        cursor = self.end()
        begin = self._begin
        while cursor != begin:
            cursor.decrement()
            yield cursor.deref()

    def __repr__(self):
        return f"View({self._begin!r}, {self._end!r})"


def is_iterable(source: Any) -> bool:
    """True if ``source`` can back a view: a View or an indexable, sized sequence."""
    if isinstance(source, View):
        return True
    if isinstance(source, Mapping):
        return False
    return hasattr(source, '__getitem__') and hasattr(source, '__len__')


def as_view(source: Any) -> View:
    """Wrap ``source`` in a view over its current bounds."""
    if isinstance(source, View):
        return source
    if not is_iterable(source):
        raise TypeError(
            f"{type(source).__name__} is not an indexable sequence and cannot back a view"
        )
    return View(IndexCursor(source, 0), IndexCursor(source, len(source)))
