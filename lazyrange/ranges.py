"""
Range Builders
==============

Free functions producing views that are not a plain wrap of one sequence:

    - value_range / stepped_value_range: numbers with no backing container
    - zip_: several equally long sequences walked together
    - enumerate_: (index, element) pairs, i.e. zip_ of a value range and a source

Bounds given to value ranges are compared for equality, never ordered: a
stepped range must land exactly on its end value. Unbounded forms run up to
the dtype's highest value and are meant to be cut with ``take_n``.
"""

import logging
from typing import Any, Optional

from lazyrange.adaptors.value_cursor import ValueCursor, numeric_limits, resolve_dtype
from lazyrange.adaptors.zip_cursor import ZipCursor
from lazyrange.view import View, as_view

logger = logging.getLogger(__name__)


def value_range(*bounds: Any, dtype: Optional[Any] = None) -> View:
    """
    Consecutive numbers.

        value_range()            lowest .. highest of ``dtype``
        value_range(start)       start .. highest
        value_range(start, end)  start .. end (end excluded)

    >>> list(value_range(0, 5))
    [0, 1, 2, 3, 4]
    """
    if len(bounds) > 2:
        raise TypeError(f"value_range expected at most 2 arguments, got {len(bounds)}")
    resolved = resolve_dtype(*bounds, dtype=dtype)
    lowest, highest = numeric_limits(resolved)
    start = bounds[0] if bounds else lowest
    end = bounds[1] if len(bounds) == 2 else highest
    assert start <= end, f"value_range start {start} is past its end {end}"
    return View(ValueCursor(start, dtype=resolved), ValueCursor(end, dtype=resolved))


def stepped_value_range(*args: Any, dtype: Optional[Any] = None) -> View:
    """
    Numbers separated by a fixed step.

        stepped_value_range(step)              lowest, lowest + step, ...
        stepped_value_range(start, step)       start, start + step, ...
        stepped_value_range(start, end, step)  start .. end (end excluded)

    For integer dtypes a bounded range must reach ``end`` exactly. Float
    ranges are not checked: unless some step lands exactly on ``end`` the
    range runs on toward the dtype's highest value, so ``len()`` and
    terminals never finish. Cut such ranges with ``take_n``.

    >>> list(stepped_value_range(0, 10, 2))
    [0, 2, 4, 6, 8]
    """
    if not 1 <= len(args) <= 3:
        raise TypeError(f"stepped_value_range expected 1 to 3 arguments, got {len(args)}")
    resolved = resolve_dtype(*args, dtype=dtype)
    lowest, highest = numeric_limits(resolved)
    step = args[-1]
    assert step != 0, "stepped_value_range step must be non-zero"
    start = args[0] if len(args) >= 2 else lowest
    end = args[1] if len(args) == 3 else highest
    if len(args) == 3:
        assert (end - start) * step >= 0, f"step {step} never reaches {end} from {start}"
        if resolved.kind in 'iu':
            assert (end - start) % step == 0, f"step {step} does not land on {end} from {start}"
    return View(
        ValueCursor(start, step=step, dtype=resolved),
        ValueCursor(end, step=step, dtype=resolved),
    )


def _same_size(views) -> bool:
    first = views[0].size()
    return all(view.size() == first for view in views[1:])


def zip_(*sources: Any) -> View:
    """
    Walk ``sources`` in lockstep, yielding one row per position.

    All sources must have the same length (checked with ``assert``).

    >>> list(zip_([1, 2, 3], "abc"))
    [ZipReference(1, 'a'), ZipReference(2, 'b'), ZipReference(3, 'c')]
    """
    if not sources:
        raise TypeError("zip_ expected at least one source")
    views = [as_view(source) for source in sources]
    assert _same_size(views), (
        f"zip_ needs sources of equal length, got {[view.size() for view in views]}"
    )
    begins = tuple(view.begin() for view in views)
    ends = tuple(view.end() for view in views)
    logger.debug(f"Zipping {len(views)} sources")
    return View(ZipCursor(begins, begins, ends), ZipCursor(ends, begins, ends))


def enumerate_(source: Any, start: int = 0) -> View:
    """
    Pair every element with its index.

    Equivalent to ``zip_(value_range(start, start + len(source)), source)``.

    >>> [tuple(row) for row in enumerate_("ab")]
    [(0, 'a'), (1, 'b')]
    """
    view = as_view(source)
    return zip_(value_range(start, start + view.size()), view)
