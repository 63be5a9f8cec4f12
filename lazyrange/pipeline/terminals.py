"""
Terminal Operations
===================

The only operations that force a full traversal. Each one copies the
elements of a view into a newly owned container, preserving order.

Zip rows are live references into their sources; terminals store them as
plain tuples so the container owns its values.

Usage:
    >>> [1, 2, 3] | map_(lambda x: -x) | to_list
    [-1, -2, -3]
    >>> to_deque(value_range(0, 3))
    deque([0, 1, 2])
"""

import logging
from collections import deque
from typing import Any, Callable, Iterable

import numpy as np

from lazyrange.adaptors.zip_cursor import ZipReference
from lazyrange.view import as_view

logger = logging.getLogger(__name__)


def _owned(item: Any) -> Any:
    if isinstance(item, ZipReference):
        return item.as_tuple()
    return item


def _to_array(items: Iterable[Any], dtype: Any = None) -> np.ndarray:
    return np.array(list(items), dtype=dtype)


class Terminal:
    """A materializing sink usable as ``view | sink`` or ``sink(view)``."""

    __array_ufunc__ = None

    def __init__(self, name: str, factory: Callable[..., Any]):
        self.name = name
        self._factory = factory

    def __call__(self, source: Any, **kwargs: Any) -> Any:
        view = as_view(source)
        logger.debug(f"Materializing {view!r} with {self.name}")
        return self._factory((_owned(item) for item in view), **kwargs)

    def __ror__(self, source: Any) -> Any:
        return self(source)

    def __repr__(self):
        return f"Terminal({self.name})"


to_list = Terminal("to_list", list)
to_tuple = Terminal("to_tuple", tuple)
to_deque = Terminal("to_deque", deque)
to_array = Terminal("to_array", _to_array)
