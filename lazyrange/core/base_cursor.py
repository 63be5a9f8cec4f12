"""
Cursor Skeleton
===============

Every adaptor (filter, map, take, zip, numeric values) is a *cursor*: a
bidirectional position that knows the bounds of the sequence it walks.

A cursor is the triple (position, sentinel_begin, sentinel_end) plus a
callable slot. The sentinels are the original bounds of the traversed
sequence. They are set once, never mutated, and bound every skip loop an
adaptor runs.

Refinement
----------
``BaseCursor`` owns movement, equality and dereference. A subclass refines
it through three optional seams:

  - ``_resynchronize(direction)``: called after every single step and once
    at construction, to move the position onto the next valid element
    (e.g. the next element satisfying a filter predicate).
  - ``_step(direction)``: how the underlying position moves (defaults to
    ``position.increment()`` / ``position.decrement()``).
  - ``deref()`` / ``assign()``: what reading or writing produces.

Complexity
----------
Cursors support ``cursor + n``, ``cursor - n`` and ``b - a`` so that views
can index and measure themselves. For every ``BaseCursor`` these are
realized as n single steps, i.e. O(n), and for filters each single step may
itself scan. Only the raw :class:`IndexCursor` is O(1). Do not assume
constant-time offsets on adaptor views.
"""

import numbers
from enum import Enum, auto
from typing import Any, Optional, Sequence

from lazyrange.core.nullable_function import make_function


class Direction(Enum):
    FORWARD = auto()
    BACKWARD = auto()


class ValueProxy:
    """
    Holds a dereferenced value so attribute access works through a cursor.

    Adaptors such as map produce temporaries, so there is no element to
    point at; the proxy keeps the value alive instead.

        >>> ValueProxy(3 + 4j).imag
        4.0
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any):
        self._value = value

    def get(self) -> Any:
        return self._value

    def __getattr__(self, name: str) -> Any:
        if name == '_value':
            raise AttributeError(name)
        return getattr(self._value, name)

    def __repr__(self):
        return f"ValueProxy({self._value!r})"


def clone_position(position: Any) -> Any:
    """Copy a position so the copy can be stepped independently."""
    if isinstance(position, tuple):
        return tuple(clone_position(p) for p in position)
    clone = getattr(position, 'clone', None)
    if clone is None:
        return position
    return clone()


class IndexCursor:
    """
    Raw position into an indexable sequence.

    This is the underlying position adaptors are stacked on. It has no
    sentinels of its own and true O(1) random access.
    """

    __slots__ = ('_source', '_index')

    def __init__(self, source: Sequence, index: int = 0):
        self._source = source
        self._index = index

    @property
    def source(self) -> Sequence:
        return self._source

    @property
    def index(self) -> int:
        return self._index

    def increment(self) -> 'IndexCursor':
        self._index += 1
        return self

    def decrement(self) -> 'IndexCursor':
        self._index -= 1
        return self

    def deref(self) -> Any:
        assert 0 <= self._index < len(self._source), (
            f"index {self._index} out of range [0, {len(self._source)})"
        )
        return self._source[self._index]

    def assign(self, value: Any) -> None:
        assert 0 <= self._index < len(self._source), (
            f"index {self._index} out of range [0, {len(self._source)})"
        )
        self._source[self._index] = value

    def arrow(self) -> ValueProxy:
        return ValueProxy(self.deref())

    def clone(self) -> 'IndexCursor':
        return IndexCursor(self._source, self._index)

    __copy__ = clone

    def __eq__(self, other):
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return self._source is other._source and self._index == other._index

    def __iadd__(self, n: int) -> 'IndexCursor':
        self._index += n
        return self

    def __isub__(self, n: int) -> 'IndexCursor':
        self._index -= n
        return self

    def __add__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        return IndexCursor(self._source, self._index + int(n))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, IndexCursor):
            return self._index - other._index
        if isinstance(other, numbers.Integral):
            return IndexCursor(self._source, self._index - int(other))
        return NotImplemented

    def __repr__(self):
        return f"IndexCursor({type(self._source).__name__}, {self._index})"


class BaseCursor:
    """
    Generic bidirectional cursor refined by each adaptor.

    Equality compares the current position only; sentinels and the
    callable are ignored. Stepping past a sentinel is a contract
    violation (``AssertionError``).

    Usage (through a subclass):
        >>> data = [1, 2, 3, 4]
        >>> cursor = FilterCursor(IndexCursor(data, 0), IndexCursor(data, 0),
        ...                       IndexCursor(data, 4), lambda x: x % 2 == 0)
        >>> cursor.deref()
        2
        >>> cursor.increment().deref()
        4
    """

    _resynchronize = None

    def __init__(
        self,
        position: Any,
        sentinel_begin: Any,
        sentinel_end: Any,
        function: Optional[Any] = None,
    ):
        self._it = clone_position(position)
        self._sentinel_begin = clone_position(sentinel_begin)
        self._sentinel_end = clone_position(sentinel_end)
        self._function = make_function(function)
        if self._resynchronize is not None:
            self._resynchronize(Direction.FORWARD)

    @property
    def position(self) -> Any:
        return self._it

    @property
    def sentinels(self) -> tuple:
        return self._sentinel_begin, self._sentinel_end

    # ---- Movement ----

    def _step(self, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            self._it.increment()
        else:
            self._it.decrement()

    def increment(self) -> 'BaseCursor':
        assert self._it != self._sentinel_end, "incremented a cursor past its end sentinel"
        self._step(Direction.FORWARD)
        if self._resynchronize is not None:
            self._resynchronize(Direction.FORWARD)
        return self

    def decrement(self) -> 'BaseCursor':
        assert self._it != self._sentinel_begin, "decremented a cursor past its begin sentinel"
        self._step(Direction.BACKWARD)
        if self._resynchronize is not None:
            self._resynchronize(Direction.BACKWARD)
        return self

    # ---- Access ----

    def deref(self) -> Any:
        assert self._it != self._sentinel_end, "dereferenced a cursor at its end sentinel"
        return self._it.deref()

    def assign(self, value: Any) -> None:
        assert self._it != self._sentinel_end, "assigned through a cursor at its end sentinel"
        self._it.assign(value)

    def arrow(self) -> ValueProxy:
        return ValueProxy(self.deref())

    # ---- Value semantics ----

    def clone(self) -> 'BaseCursor':
        new = object.__new__(type(self))
        new.__dict__.update(self.__dict__)
        new._it = clone_position(self._it)
        new._function = self._function.copy()
        return new

    __copy__ = clone

    def __eq__(self, other):
        if not isinstance(other, BaseCursor):
            return NotImplemented
        return self._it == other._it

    # ---- Random access (linear) ----

    def __iadd__(self, n: int) -> 'BaseCursor':
        if n > 0:
            for _ in range(n):
                self.increment()
        else:
            for _ in range(-n):
                self.decrement()
        return self

    def __isub__(self, n: int) -> 'BaseCursor':
        return self.__iadd__(-n)

    def __add__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        return self.clone().__iadd__(int(n))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, BaseCursor):
            return self.distance_from(other)
        if isinstance(other, numbers.Integral):
            return self.clone().__isub__(int(other))
        return NotImplemented

    def distance_from(self, other: 'BaseCursor') -> int:
        """Number of forward steps from ``other`` to ``self``."""
        cursor = other.clone()
        distance = 0
        while cursor != self:
            cursor.increment()
            distance += 1
        return distance

    def __repr__(self):
        return f"{type(self).__name__}({self._it!r})"
