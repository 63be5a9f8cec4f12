"""
Adaptors
========

Concrete cursors refining :class:`lazyrange.core.BaseCursor`:

    - FilterCursor: skips elements failing a predicate
    - MapCursor: transforms elements on access
    - TakeCursor: stops after a fixed count
    - ValueCursor: generates numbers
    - ZipCursor: walks several sequences in lockstep
"""

from lazyrange.adaptors.filter_cursor import FilterCursor
from lazyrange.adaptors.map_cursor import MapCursor
from lazyrange.adaptors.take_cursor import TakeCursor
from lazyrange.adaptors.value_cursor import ValueCursor
from lazyrange.adaptors.zip_cursor import ZipCursor, ZipReference
