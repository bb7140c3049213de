"""
lazyseq - Lazy, pull-based sequences for Python

A small sequence-processing library: cursor-style sequences, lazy
adapters, terminal operations, and cancellable generators that run on
background threads behind a single-slot channel.
"""

import logging

from .adapters import FilterSequence, MapSequence, filter, map
from .bridge import drive, iterate
from .channel import Channel, ChannelSequence
from .config import (
    SequenceConfig,
    get_cancel_timeout,
    random_index,
    set_cancel_timeout,
    set_seed,
)
from .core import LazyIterator, lazy
from .errors import CursorStateError, EmptySequenceError, LazySeqError
from .generators import count, cycle, repeat
from .producers import ListSequence, sequence_from_list
from .protocols import Close, Consumer, Sequence
from .terminals import (
    choice,
    collect,
    contain,
    group_by,
    index,
    max,
    min,
    reduce,
    shuffle,
    slice,
    sum,
    to_map,
)
from .utils import is_zero, keys, values, zero

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Sequence",
    "Consumer",
    "Close",
    "ListSequence",
    "sequence_from_list",
    "MapSequence",
    "FilterSequence",
    "map",
    "filter",
    "Channel",
    "ChannelSequence",
    "count",
    "cycle",
    "repeat",
    "collect",
    "reduce",
    "max",
    "min",
    "sum",
    "to_map",
    "group_by",
    "index",
    "contain",
    "slice",
    "shuffle",
    "choice",
    "drive",
    "iterate",
    "LazyIterator",
    "lazy",
    "zero",
    "is_zero",
    "keys",
    "values",
    "SequenceConfig",
    "set_seed",
    "set_cancel_timeout",
    "get_cancel_timeout",
    "random_index",
    "LazySeqError",
    "EmptySequenceError",
    "CursorStateError",
]
