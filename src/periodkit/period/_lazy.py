from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """
    Compute-once value.

    The factory runs on first access only, under a lock, and the result is
    published once it is fully built; later reads skip the lock entirely.
    """

    __slots__ = ("_factory", "_value", "_lock")

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory: Callable[[], T] | None = factory
        self._value = _UNSET
        self._lock = threading.Lock()

    @property
    def value(self) -> T:
        value = self._value
        if value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._factory()
                    self._factory = None
                value = self._value
        return value

    @property
    def is_computed(self) -> bool:
        return self._value is not _UNSET
