"""Exceptions raised by lazyseq."""


class LazySeqError(Exception):
    """Base class for all lazyseq errors."""


class EmptySequenceError(LazySeqError, ValueError):
    """An operation that needs at least one element got an empty sequence."""


class CursorStateError(LazySeqError, RuntimeError):
    """``current()`` was read without a preceding successful ``advance()``."""
