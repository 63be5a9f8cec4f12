"""
Zip Cursor
==========

Walks several sequences in lockstep.

The position is a tuple of component positions; every step moves all of
them together. Components are assumed to have the same length (checked
once by :func:`lazyrange.ranges.zip_`); with mismatched lengths the end is
never reached and behaviour is undefined.

Dereferencing yields a :class:`ZipReference` whose items are read from the
components on access, so writes through it land in the source sequences.
"""

from collections.abc import Sequence
from typing import Any, Iterable, Tuple

from lazyrange.core.base_cursor import BaseCursor, Direction, clone_position


class ZipReference(Sequence):
    """
    Tuple of live references into the zipped sequences.

    Compares equal to a tuple holding the same items and unpacks like one.

        >>> names, ages = ["ann", "bob"], [31, 42]
        >>> row = zip_(names, ages)[1]
        >>> row == ("bob", 42)
        True
        >>> row[1] = 43
        >>> ages
        [31, 43]
    """

    __slots__ = ('_positions',)

    def __init__(self, positions: Tuple[Any, ...]):
        self._positions = positions

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.as_tuple()[index]
        return self._positions[index].deref()

    def __setitem__(self, index: int, value: Any) -> None:
        self._positions[index].assign(value)

    def __len__(self) -> int:
        return len(self._positions)

    def as_tuple(self) -> tuple:
        return tuple(position.deref() for position in self._positions)

    def __eq__(self, other):
        if isinstance(other, ZipReference):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"ZipReference{self.as_tuple()!r}"


class ZipCursor(BaseCursor):
    """Cursor over a tuple of component positions moved together."""

    def _step(self, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            for position in self._it:
                position.increment()
        else:
            for position in self._it:
                position.decrement()

    def deref(self) -> ZipReference:
        assert self._it != self._sentinel_end, "dereferenced a cursor at its end sentinel"
        return ZipReference(clone_position(self._it))

    def assign(self, values: Iterable[Any]) -> None:
        assert self._it != self._sentinel_end, "assigned through a cursor at its end sentinel"
        values = tuple(values)
        assert len(values) == len(self._it), "zip assignment needs one value per component"
        for position, value in zip(self._it, values):
            position.assign(value)
