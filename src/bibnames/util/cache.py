import threading
import weakref
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

_KT = TypeVar("_KT", bound=Hashable)
_VT = TypeVar("_VT")


class WeakValueCache(Generic[_KT, _VT]):
    """
    Maps keys to values without keeping the values alive.

    An entry disappears once nothing outside the cache references its value anymore.
    """

    def __init__(self) -> None:
        self._data: weakref.WeakValueDictionary[_KT, _VT] = weakref.WeakValueDictionary()
        self._lock = threading.Lock()

    def get(self, key: _KT) -> _VT | None:
        with self._lock:
            return self._data.get(key)

    def get_or_create(self, key: _KT, factory: Callable[[_KT], _VT]) -> tuple[_VT, bool]:
        """
        Returns the cached value for `key`, creating it with `factory` if there is none.

        The second element tells whether the value was created by this call. The factory runs outside the lock, so
        two racing callers may both build a value; only the first one to insert wins and both get that instance.
        """
        with self._lock:
            value = self._data.get(key)
        if value is not None:
            return value, False

        created = factory(key)
        with self._lock:
            value = self._data.setdefault(key, created)

        return value, value is created

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
