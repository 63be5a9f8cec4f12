"""
Core
====

The pieces every adaptor is built from:

    - nullable_function: optional storage for predicates and transforms
    - base_cursor: the generic cursor skeleton and the raw index cursor
"""

from lazyrange.core.nullable_function import (
    NullableFunction,
    StatelessFunction,
    make_function,
)
from lazyrange.core.base_cursor import (
    BaseCursor,
    Direction,
    IndexCursor,
    ValueProxy,
    clone_position,
)
