"""
Configuration for generator threads and the random source.

This module manages the global settings used by the channel-backed
generators (thread naming, how long cancellation waits for a producer to
exit) and the random source consumed by ``shuffle`` and ``choice``.
"""

import logging
import os
import random
import threading
import warnings

logger = logging.getLogger(__name__)


class SequenceConfig:
    """
    Global configuration for lazyseq.

    Values are read from the environment once, when the singleton is
    created, and can be changed at runtime through the setters.
    """

    _instance: "SequenceConfig | None" = None
    _lock = threading.Lock()

    def __init__(self):
        self._cancel_timeout = 1.0
        self._thread_name_prefix = "lazyseq"
        self._random = random.Random()
        self._random_lock = threading.Lock()
        self._load_env()

    def _load_env(self) -> None:
        env_timeout = os.environ.get("LAZYSEQ_CANCEL_TIMEOUT")
        if env_timeout:
            try:
                self.cancel_timeout = float(env_timeout)
            except ValueError:
                warnings.warn(
                    f"Ignoring invalid LAZYSEQ_CANCEL_TIMEOUT={env_timeout!r}",
                    RuntimeWarning,
                    stacklevel=2,
                )

        env_seed = os.environ.get("LAZYSEQ_SEED")
        if env_seed:
            try:
                self.seed(int(env_seed))
            except ValueError:
                warnings.warn(
                    f"Ignoring invalid LAZYSEQ_SEED={env_seed!r}",
                    RuntimeWarning,
                    stacklevel=2,
                )

    @classmethod
    def global_config(cls) -> "SequenceConfig":
        """Get the global configuration instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = SequenceConfig()
        return cls._instance

    @property
    def cancel_timeout(self) -> float:
        """
        Seconds a cancel call waits for the producer thread to exit.

        Zero means cancellation only signals the producer and returns
        immediately.
        """
        return self._cancel_timeout

    @cancel_timeout.setter
    def cancel_timeout(self, value: float) -> None:
        """Set the cancellation timeout."""
        if value < 0:
            raise ValueError("Cancel timeout must be non-negative")
        self._cancel_timeout = value

    @property
    def thread_name_prefix(self) -> str:
        """Prefix for the names of generator producer threads."""
        return self._thread_name_prefix

    @thread_name_prefix.setter
    def thread_name_prefix(self, value: str) -> None:
        if not value:
            raise ValueError("Thread name prefix must not be empty")
        self._thread_name_prefix = value

    def seed(self, value: int | None) -> None:
        """
        Reseed the random source.

        Args:
            value: Seed, or None to seed from the operating system
        """
        with self._random_lock:
            self._random.seed(value)
        logger.debug("Random source reseeded with %r", value)

    def random_index(self, n: int) -> int:
        """
        Return a uniformly distributed index in ``[0, n)``.

        Raises:
            ValueError: If n < 1
        """
        if n < 1:
            raise ValueError(f"Cannot pick an index from a range of size {n}")
        with self._random_lock:
            return self._random.randrange(n)


# Global configuration instance
_global_config = SequenceConfig.global_config()


def set_seed(value: int | None) -> None:
    """
    Seed the random source used by ``shuffle`` and ``choice``.

    Example:
        >>> from lazyseq import set_seed
        >>> set_seed(42)
    """
    _global_config.seed(value)


def set_cancel_timeout(seconds: float) -> None:
    """Set how long cancelling a generator waits for its thread to exit."""
    _global_config.cancel_timeout = seconds


def get_cancel_timeout() -> float:
    """Get the current cancellation timeout in seconds."""
    return _global_config.cancel_timeout


def random_index(n: int) -> int:
    """Return a uniformly distributed index in ``[0, n)``."""
    return _global_config.random_index(n)
