"""
Value Cursor
============

Generates numbers without any backing container.

The position is the number itself and the sentinels are the lowest and
highest values representable in the cursor's numpy dtype, which serve as
"no real bound" markers. Values are yielded as plain Python numbers.
"""

import numbers
from typing import Any, Optional, Tuple

import numpy as np

from lazyrange.core.base_cursor import BaseCursor, Direction

DEFAULT_DTYPE = np.dtype(np.int64)


def _dtype_of(value: Any) -> np.dtype:
    # Plain Python numbers map to fixed dtypes whatever the numpy version.
    if isinstance(value, (bool, np.bool_)):
        return np.dtype(bool)
    if isinstance(value, numbers.Integral) and not isinstance(value, np.integer):
        return DEFAULT_DTYPE
    if isinstance(value, float):
        return np.dtype(np.float64)
    return np.result_type(value)


def resolve_dtype(*values: Any, dtype: Optional[Any] = None) -> np.dtype:
    """Pick the dtype for a value range, inferring it from ``values``."""
    if dtype is not None:
        resolved = np.dtype(dtype)
    elif values:
        resolved = np.result_type(*[_dtype_of(value) for value in values])
    else:
        resolved = DEFAULT_DTYPE
    if resolved.kind not in 'iuf':
        raise TypeError(f"value ranges need an integer or float dtype, got {resolved}")
    return resolved


def numeric_limits(dtype: np.dtype) -> Tuple[Any, Any]:
    """Lowest and highest representable values of ``dtype``."""
    if dtype.kind == 'f':
        info = np.finfo(dtype)
        return float(info.min), float(info.max)
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def coerce(value: Any, dtype: np.dtype) -> Any:
    """Round-trip ``value`` through ``dtype``; out-of-range values raise."""
    lowest, highest = numeric_limits(dtype)
    if not lowest <= value <= highest:
        raise OverflowError(f"{value} does not fit in {dtype}")
    return dtype.type(value).item()


class ValueCursor(BaseCursor):
    """
    Cursor over an arithmetic progression.

    Usage:
        >>> cursor = ValueCursor(3, step=2)
        >>> cursor.deref(), cursor.increment().deref()
        (3, 5)
    """

    def __init__(self, value: Optional[Any] = None, step: Any = 1, dtype: Optional[Any] = None):
        if value is None:
            self._dtype = resolve_dtype(step, dtype=dtype)
        else:
            self._dtype = resolve_dtype(value, step, dtype=dtype)
        lowest, highest = numeric_limits(self._dtype)
        if value is None:
            value = lowest
        self._step_size = coerce(step, self._dtype)
        super().__init__(coerce(value, self._dtype), lowest, highest)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def step(self) -> Any:
        return self._step_size

    def _step(self, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            self._it += self._step_size
        else:
            self._it -= self._step_size

    def deref(self) -> Any:
        assert self._it != self._sentinel_end, "dereferenced a cursor at its end sentinel"
        return self._it

    def assign(self, value: Any) -> None:
        raise TypeError("generated values cannot be assigned")
