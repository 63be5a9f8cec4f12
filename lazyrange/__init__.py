"""
lazyrange: Lazy, Composable Sequence Views
==========================================

Filter, map, take and zip any indexable sequence without building
intermediate containers, and declare transformation pipelines once to
apply them to many sources later.

Core Components:
    - core: nullable callable storage and the generic cursor skeleton
    - adaptors: filter, map, take, zip and numeric value cursors
    - view: non-owning begin/end pairs
    - pipeline: deferred descriptors, pipelines and terminal sinks
    - ranges: value ranges, zip_ and enumerate_

Usage:
    >>> from lazyrange import filter_, map_, take_n, to_list
    >>> [1, 2, 3, 4, 5, 6] | filter_(lambda x: x % 2 == 0) | map_(lambda x: x * x) | take_n(2) | to_list
    [4, 16]

    >>> squares_of_evens = filter_(lambda x: x % 2 == 0) | map_(lambda x: x * x)
    >>> (range(10) | squares_of_evens | to_list)
    [0, 4, 16, 36, 64]
"""

__version__ = "1.0.0"

from lazyrange.config import RangeConfig, configure, get_config, load_config, reset_config
from lazyrange.core.nullable_function import NullableFunction, StatelessFunction, make_function
from lazyrange.core.base_cursor import BaseCursor, Direction, IndexCursor, ValueProxy
from lazyrange.adaptors import FilterCursor, MapCursor, TakeCursor, ValueCursor, ZipCursor, ZipReference
from lazyrange.view import View, as_view, is_iterable
from lazyrange.pipeline import (
    AdaptorDescriptor,
    FilterDescriptor,
    MapDescriptor,
    Pipeline,
    TakeDescriptor,
    Terminal,
    filter_,
    is_pipeline,
    map_,
    take,
    take_n,
    to_array,
    to_deque,
    to_list,
    to_tuple,
)
from lazyrange.ranges import enumerate_, stepped_value_range, value_range, zip_
from lazyrange.utils.helpers import invoke
