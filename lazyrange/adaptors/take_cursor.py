"""
Take Cursor
===========

Ends a traversal after a fixed number of elements.

The cursor counts down as it moves forward. When the count is exhausted
the position jumps straight to the end sentinel, independently of where
the source really ends. Moving backward gives the count back.

Precondition: the source has at least ``count`` elements. The countdown is
unconditional; asking for more elements than exist runs the underlying
position into its own boundary assertion instead of being clamped.
"""

from typing import Any, Optional

from lazyrange.core.base_cursor import BaseCursor, Direction, clone_position


class TakeCursor(BaseCursor):
    """
    Cursor over the first ``count`` elements of a sequence.

    ``limit`` is the total number of elements the view was built for. It
    only matters when stepping back from the end sentinel, where the cursor
    must return to the position it was forced away from.

    Usage:
        >>> list([1, 2, 3, 4] | take_n(2))
        [1, 2]
    """

    def __init__(
        self,
        position: Any,
        sentinel_begin: Any,
        sentinel_end: Any,
        count: int,
        limit: Optional[int] = None,
    ):
        self._remaining = count
        self._limit = count if limit is None else limit
        self._parked = None
        super().__init__(position, sentinel_begin, sentinel_end)

    @property
    def remaining(self) -> int:
        return self._remaining

    def _resynchronize(self, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            if self._remaining == 0:
                if self._it != self._sentinel_end:
                    self._parked = self._it
                    self._it = clone_position(self._sentinel_end)
            else:
                self._remaining -= 1
        else:
            self._remaining += 1

    def _limit_position(self) -> Any:
        position = clone_position(self._sentinel_begin)
        for _ in range(self._limit):
            position.increment()
        return position

    def decrement(self) -> 'TakeCursor':
        if self._it != self._sentinel_end:
            return super().decrement()
        # Leaving the end sentinel: resume from where the countdown stopped.
        # The count is already zero there, so it is left untouched.
        self._it = self._parked if self._parked is not None else self._limit_position()
        self._parked = None
        assert self._it != self._sentinel_begin, "decremented a cursor past its begin sentinel"
        self._step(Direction.BACKWARD)
        return self

    def clone(self) -> 'TakeCursor':
        new = super().clone()
        new._parked = clone_position(self._parked)
        return new

    __copy__ = clone
