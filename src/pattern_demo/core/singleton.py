"""Lazy, exactly-once initialisation of process-wide values.

:class:`LazySingleton` is a small holder that constructs its value on
the first :meth:`~LazySingleton.get` call using double-checked locking:

1. Read the slot without a lock.  If it is filled, return it.
2. Otherwise take the lock and read the slot again, because another
   thread may have filled it between step 1 and acquiring the lock.
3. Construct only if the slot is still empty.

Once filled, ``get()`` never touches the lock again.

Thread safety
-------------
The slot is written exactly once, under the lock, and only after the
factory has returned.  A reader that sees a non-empty slot therefore
always sees a fully constructed value.

Code that prefers explicit wiring can create its own ``LazySingleton``
at bootstrap and pass it to whoever needs it.  :func:`get_instance` is
the ambient accessor for callers that don't.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from pattern_demo.core.models import SharedInstance

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class LazySingleton(Generic[T]):
    """Holds a single value of type *T*, built on first access.

    Parameters
    ----------
    factory:
        Zero-argument callable producing the value.  Called at most
        once per initialisation (see :meth:`reset`).
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory: Callable[[], T] = factory
        self._lock = threading.Lock()
        self._value: object = _UNSET

    @property
    def is_initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        """Return the held value, constructing it on the first call."""
        value = self._value
        if value is _UNSET:
            with self._lock:
                value = self._value
                if value is _UNSET:
                    value = self._factory()
                    self._value = value
                    logger.debug(
                        "Initialised %s singleton",
                        type(value).__name__,
                    )
        return value  # type: ignore[return-value]

    def reset(self) -> None:
        """Drop the held value so the next :meth:`get` rebuilds it.

        Intended for tests only; callers holding the old value keep it.
        """
        with self._lock:
            self._value = _UNSET


_shared: LazySingleton[SharedInstance] = LazySingleton(SharedInstance)


def get_instance() -> SharedInstance:
    """Return the process-wide :class:`SharedInstance`.

    Every call returns the same object.  Safe to call from multiple
    threads; the instance is created on first use.
    """
    return _shared.get()
