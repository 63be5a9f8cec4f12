"""Deferred composition: descriptors, pipelines and terminal sinks."""

from lazyrange.pipeline.descriptors import (
    AdaptorDescriptor,
    FilterDescriptor,
    MapDescriptor,
    Pipeline,
    TakeDescriptor,
    filter_,
    is_pipeline,
    map_,
    take,
    take_n,
)
from lazyrange.pipeline.terminals import Terminal, to_array, to_deque, to_list, to_tuple
