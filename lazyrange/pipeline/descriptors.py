"""
Adaptor Descriptors & Pipelines
===============================

Deferred adaptors that are not yet bound to any data.

A descriptor carries only the user payload (a predicate, a function or a
count). Piping a source into it builds the concrete cursors around the
source's bounds and returns a new :class:`~lazyrange.view.View`. Piping a
descriptor into another descriptor builds a :class:`Pipeline` instead,
without touching any data, so a chain can be declared once and applied to
many sources:

    >>> evens_squared = filter_(lambda x: x % 2 == 0) | map_(lambda x: x * x)
    >>> list([1, 2, 3, 4] | evens_squared)
    [4, 16]
    >>> list(range(7) | evens_squared | take_n(2))
    [0, 4]

Operator rules:
    source   | descriptor  -> View
    source   | pipeline    -> View (descriptors applied in order)
    desc     | desc        -> Pipeline
    pipeline | desc        -> Pipeline (appended)
    desc     | pipeline    -> Pipeline (prepended)
    pipeline | pipeline    -> Pipeline (concatenated)

``source`` may be a View or any indexable sequence, numpy arrays included.
"""

import functools
import logging
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Tuple

from lazyrange.adaptors.filter_cursor import FilterCursor
from lazyrange.adaptors.map_cursor import MapCursor
from lazyrange.adaptors.take_cursor import TakeCursor
from lazyrange.view import View, as_view

logger = logging.getLogger(__name__)


class AdaptorDescriptor:
    """Base class of deferred adaptors."""

    # Make ``ndarray | descriptor`` defer to __ror__ instead of broadcasting.
    __array_ufunc__ = None

    def apply(self, source: Any) -> View:
        raise NotImplementedError

    def __ror__(self, source: Any) -> View:
        return self.apply(source)

    def __or__(self, other):
        if isinstance(other, AdaptorDescriptor):
            return Pipeline((self, other))
        if isinstance(other, Pipeline):
            return Pipeline((self,) + other.steps)
        return NotImplemented


@dataclass(frozen=True)
class FilterDescriptor(AdaptorDescriptor):
    predicate: Any

    def apply(self, source: Any) -> View:
        view = as_view(source)
        logger.debug(f"Applying filter to {view!r}")
        begin, end = view.begin(), view.end()
        return View(
            FilterCursor(begin, begin, end, self.predicate),
            FilterCursor(end, begin, end, self.predicate),
        )


@dataclass(frozen=True)
class MapDescriptor(AdaptorDescriptor):
    function: Any

    def apply(self, source: Any) -> View:
        view = as_view(source)
        logger.debug(f"Applying map to {view!r}")
        begin, end = view.begin(), view.end()
        return View(
            MapCursor(begin, begin, end, self.function),
            MapCursor(end, begin, end, self.function),
        )


@dataclass(frozen=True)
class TakeDescriptor(AdaptorDescriptor):
    count: int

    def apply(self, source: Any) -> View:
        view = as_view(source)
        logger.debug(f"Applying take_n({self.count}) to {view!r}")
        begin, end = view.begin(), view.end()
        return View(
            TakeCursor(begin, begin, end, self.count),
            TakeCursor(end, begin, end, 0, limit=self.count),
        )


class Pipeline:
    """
    Ordered, immutable sequence of descriptors.

    Usage:
        >>> pipeline = Pipeline([filter_(bool), map_(str)])
        >>> list([0, 1, 2] | pipeline)
        ['1', '2']
    """

    __array_ufunc__ = None

    def __init__(self, steps: Iterable[AdaptorDescriptor] = ()):
        steps = tuple(steps)
        for step in steps:
            if not isinstance(step, AdaptorDescriptor):
                raise TypeError(f"Pipeline steps must be adaptor descriptors, got {type(step).__name__}")
        self._steps: Tuple[AdaptorDescriptor, ...] = steps

    @property
    def steps(self) -> Tuple[AdaptorDescriptor, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[AdaptorDescriptor]:
        return iter(self._steps)

    def apply(self, source: Any) -> View:
        """Apply every step in order (left fold) and return the final view."""
        view = as_view(source)
        logger.debug(f"Applying pipeline of {len(self._steps)} steps: {self!r}")
        return functools.reduce(lambda acc, step: step.apply(acc), self._steps, view)

    def __ror__(self, source: Any) -> View:
        return self.apply(source)

    def __or__(self, other):
        if isinstance(other, AdaptorDescriptor):
            return Pipeline(self._steps + (other,))
        if isinstance(other, Pipeline):
            return Pipeline(self._steps + other._steps)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Pipeline):
            return NotImplemented
        return self._steps == other._steps

    __hash__ = None

    def __repr__(self):
        if not self._steps:
            return "Pipeline()"
        return "Pipeline(" + " | ".join(repr(step) for step in self._steps) + ")"


def _check_callable(payload: Any, kind: str) -> None:
    if not (callable(payload) or isinstance(payload, str)):
        raise TypeError(f"{kind} expects a callable or member name, got {type(payload).__name__}")


def filter_(predicate: Callable[[Any], bool]) -> FilterDescriptor:
    """Deferred filter keeping elements for which ``predicate`` is true."""
    _check_callable(predicate, "filter_")
    return FilterDescriptor(predicate)


def map_(function: Callable[[Any], Any]) -> MapDescriptor:
    """Deferred map applying ``function`` to every element."""
    _check_callable(function, "map_")
    return MapDescriptor(function)


def take_n(count: int) -> TakeDescriptor:
    """
    Deferred take of the first ``count`` elements.

    The source must hold at least ``count`` elements; this is not clamped.
    """
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"take_n count must be non-negative, got {count}")
    return TakeDescriptor(count)


take = take_n


def is_pipeline(obj: Any) -> bool:
    return isinstance(obj, Pipeline)
