"""Core utility functions: console, platform detection, run-once caching."""

import functools
import logging
import sys
import threading

from rich.console import Console

from build_identity.config import PLATFORM_MACOS, PLATFORM_WINDOWS

console = Console()

logger = logging.getLogger(__name__)


def is_macos() -> bool:
    return sys.platform == PLATFORM_MACOS


def is_windows() -> bool:
    return sys.platform == PLATFORM_WINDOWS


def executable_path() -> str:
    """Return the path of the running executable, or '' if it can't be determined.

    For frozen or embedded builds this is the binary itself; for a plain
    interpreter it is the python executable.
    """
    exe = sys.executable or ""
    if not exe:
        logger.debug("Executable path is not available")
    return exe


class once:
    """Decorator that runs a zero-argument function exactly once per process.

    Concurrent first callers wait for the single in-flight call and then all
    see its result. Afterwards the cached value is returned without locking.
    If the call raises, the exception reaches the first caller only and every
    later call returns None; the function is never retried.
    """

    def __init__(self, fn):
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._lock = threading.Lock()
        self._done = False
        self._value = None

    def __call__(self):
        if self._done:
            return self._value
        with self._lock:
            if not self._done:
                try:
                    self._value = self._fn()
                finally:
                    self._done = True
        return self._value

    @property
    def done(self) -> bool:
        """True once the wrapped function has run (successfully or not)."""
        return self._done
