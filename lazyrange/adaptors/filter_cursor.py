"""
Filter Cursor
=============

Walks only the elements satisfying a predicate.

The cursor's invariant is that its position, when dereferenceable,
satisfies the predicate. After each single step the position is pushed
forward (or backward) until it lands on a match or on a sentinel.

Going backward assumes a match exists before the current position: the
caller's begin sentinel must be reachable and satisfying, otherwise
decrementing past the first match is a usage error caught by ``assert``.
"""

from lazyrange.core.base_cursor import BaseCursor, Direction


class FilterCursor(BaseCursor):
    """
    Cursor skipping elements for which ``predicate`` is false.

    Usage:
        >>> data = [1, 2, 3, 4, 5, 6]
        >>> view = data | filter_(lambda x: x % 2 == 0)
        >>> list(view), list(reversed(view))
        ([2, 4, 6], [6, 4, 2])
    """

    def _resynchronize(self, direction: Direction) -> None:
        predicate = self._function
        if direction is Direction.FORWARD:
            while self._it != self._sentinel_end and not predicate(self._it.deref()):
                self._it.increment()
        else:
            while self._it != self._sentinel_begin and not predicate(self._it.deref()):
                self._it.decrement()
            assert predicate(self._it.deref()), "decremented a filter cursor before its first match"
