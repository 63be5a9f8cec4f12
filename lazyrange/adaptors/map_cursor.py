"""
Map Cursor
==========

Applies a function on dereference. Positions are never skipped, so a
mapped view has exactly the length of its source.
"""

from typing import Any

from lazyrange.core.base_cursor import BaseCursor


class MapCursor(BaseCursor):
    """
    Cursor yielding ``function(element)`` by value.

    The produced value is a temporary: ``arrow()`` wraps it in a
    :class:`ValueProxy` and writing through the cursor is rejected.

    Usage:
        >>> list([1, 2, 3] | map_(lambda x: x * 10))
        [10, 20, 30]
    """

    def deref(self) -> Any:
        assert self._it != self._sentinel_end, "dereferenced a cursor at its end sentinel"
        return self._function(self._it.deref())

    def assign(self, value: Any) -> None:
        raise TypeError("mapped values are computed on access and cannot be assigned")
