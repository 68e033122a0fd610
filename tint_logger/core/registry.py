"""
Process-wide dispatcher registration

The dispatcher is installed exactly once. Installation is checked and
performed under a single lock, so of several threads racing to install,
exactly one succeeds and the others get AlreadyInitializedError.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Optional

from tint_logger.core.errors import AlreadyInitializedError

if TYPE_CHECKING:
    from tint_logger.core.dispatcher import Dispatcher


class Registry:
    """
    Single-assignment holder of the process-wide dispatcher.

    Reads do not lock: once set, the reference never changes until reset(),
    which exists for tests only.
    """

    _dispatcher: Optional["Dispatcher"] = None
    _lock = threading.Lock()
    _on_reset = []

    @classmethod
    def install(cls, dispatcher: "Dispatcher") -> None:
        """
        Install the process-wide dispatcher.

        Args:
            dispatcher: Dispatcher receiving every record

        Raises:
            AlreadyInitializedError: If a dispatcher is already installed;
                                     the installed one is left untouched
        """
        with cls._lock:
            if cls._dispatcher is not None:
                raise AlreadyInitializedError()
            cls._dispatcher = dispatcher

    @classmethod
    def current(cls) -> Optional["Dispatcher"]:
        """Installed dispatcher, or None."""
        return cls._dispatcher

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._dispatcher is not None

    @classmethod
    def on_reset(cls, callback) -> None:
        """Register a callback run by reset(), used to undo facade hooks."""
        with cls._lock:
            cls._on_reset.append(callback)

    @classmethod
    def reset(cls) -> None:
        """Uninstall the dispatcher. Intended for tests."""
        with cls._lock:
            callbacks, cls._on_reset = cls._on_reset, []
            cls._dispatcher = None
        for callback in callbacks:
            callback()
