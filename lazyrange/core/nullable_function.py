"""
Nullable Function
=================

Storage for the predicate or transform carried by an adaptor cursor.

A cursor must be constructible before it knows its callable (end cursors,
default-constructed cursors), so the callable slot can be empty. Calling an
empty holder is a contract violation checked with ``assert``.

Copies never share a holder: copying a ``NullableFunction`` gives a new
holder containing ``copy.copy`` of the held callable. Plain functions and
lambdas are immutable, so for them the copy is the same object; callable
instances get their own shallow copy.

Member references
-----------------
A string held in the slot is a member reference, the analogue of a
pointer-to-member: ``NullableFunction("upper")("abc") == "ABC"``. Such calls
are routed through :func:`lazyrange.utils.helpers.invoke`.

Unchecked storage
-----------------
With ``allow_undefined_behaviour`` switched on (see :mod:`lazyrange.config`),
:func:`make_function` drops the instance of a stateless callable class and
keeps only its type. Invocation then passes ``None`` as ``self``. This is
only sound if ``__call__`` never touches ``self``; nothing checks that.
"""

import copy
import inspect
import logging
from typing import Any, Optional, Union

from lazyrange.config import get_config
from lazyrange.utils.helpers import invoke

logger = logging.getLogger(__name__)

_EMPTY = object()


class NullableFunction:
    """
    Holds zero or one callable.

    Usage:
        >>> holder = NullableFunction(lambda x: x * 2)
        >>> holder(21)
        42
        >>> bool(NullableFunction())
        False
    """

    __slots__ = ('_function',)

    def __init__(self, function: Any = _EMPTY):
        self._function = function

    def __bool__(self) -> bool:
        return self._function is not _EMPTY

    def __call__(self, *args: Any) -> Any:
        assert self._function is not _EMPTY, "invoked an empty NullableFunction"
        function = self._function
        if isinstance(function, str):
            return invoke(function, *args)
        return function(*args)

    def copy(self) -> 'NullableFunction':
        if self._function is _EMPTY:
            return NullableFunction()
        return NullableFunction(copy.copy(self._function))

    __copy__ = copy

    def assign(self, other: 'NullableFunction') -> 'NullableFunction':
        """Drop the held callable, then hold a copy of ``other``'s."""
        self.reset()
        if other:
            self._function = copy.copy(other._function)
        return self

    def reset(self) -> None:
        self._function = _EMPTY

    @property
    def function(self) -> Any:
        assert self._function is not _EMPTY, "empty NullableFunction has no callable"
        return self._function

    def __repr__(self):
        if self._function is _EMPTY:
            return "NullableFunction(<empty>)"
        return f"NullableFunction({self._function!r})"


class StatelessFunction:
    """
    Storage-free holder for an instance of a stateless callable class.

    Only the class is kept. Calls go through ``cls.__call__(None, ...)``:
    the receiver is never materialized. Never empty.
    """

    __slots__ = ('_type',)

    def __init__(self, function_type: type):
        self._type = function_type

    def __bool__(self) -> bool:
        return True

    def __call__(self, *args: Any) -> Any:
        return self._type.__call__(None, *args)

    def copy(self) -> 'StatelessFunction':
        return StatelessFunction(self._type)

    __copy__ = copy

    def __repr__(self):
        return f"StatelessFunction({self._type.__qualname__})"


FunctionHolder = Union[NullableFunction, StatelessFunction]


def is_stateless(function: Any) -> bool:
    """
    True for instances of user classes whose ``__call__`` is plain Python
    and which carry no instance attributes.
    """
    if inspect.isroutine(function) or inspect.isclass(function):
        return False
    call = getattr(type(function), '__call__', None)
    if not inspect.isfunction(call):
        return False
    if getattr(function, '__dict__', None):
        return False
    for klass in type(function).__mro__:
        for slot in getattr(klass, '__slots__', ()):
            if hasattr(function, slot):
                return False
    return True


def make_function(function: Optional[Any]) -> FunctionHolder:
    """
    Wrap ``function`` in the holder a cursor stores.

    ``None`` gives an empty holder; existing holders are copied.
    """
    if isinstance(function, (NullableFunction, StatelessFunction)):
        return function.copy()
    if function is None:
        return NullableFunction()
    if not (callable(function) or isinstance(function, str)):
        raise TypeError(f"Expected callable or member name, got {type(function).__name__}")
    if get_config().allow_undefined_behaviour and is_stateless(function):
        logger.debug(f"Eliding storage for stateless callable {type(function).__qualname__}")
        return StatelessFunction(type(function))
    return NullableFunction(function)
