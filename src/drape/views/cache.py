"""Process-lifetime memo caches for template resolution.

Two caches back the resolver:

- **NameCache** — raw view identifier -> resolved template name (or ``None``)
- **PatternCache** — pattern source -> compiled ``re.Pattern``

Both are plain ``MemoCache`` instances owned by one resolver and passed
in explicitly, never module-level singletons. Entries are only ever
added: the template mapping is frozen at startup, so a cached answer
can't go stale and there is no eviction or ``clear()``.

Free-threading safety:
    - Storage is created lazily, on the first write, under a Lock
    - Writes take the Lock; reads go straight to the dict
    - Two threads missing on the same key may both compute and both
      write. The values are equal, so whichever lands is correct.
"""

import re
import threading
from collections.abc import Callable


class MemoCache[K, V]:
    """Grow-only, thread-safe memo.

    Usage::

        names: MemoCache[str, str] = MemoCache("names")
        names.put("hotels/show", "common/standard")
        names.get("hotels/show")  # "common/standard"
    """

    __slots__ = ("_data", "_lock", "name")

    def __init__(self, name: str = "memo") -> None:
        self.name = name
        self._data: dict[K, V] | None = None
        self._lock = threading.Lock()

    def get(self, key: K) -> V | None:
        """Return the cached value for *key*, or ``None`` on a miss."""
        data = self._data
        if data is None:
            return None
        return data.get(key)

    def put(self, key: K, value: V) -> None:
        """Store *value* under *key*. Overwrites an equal earlier value."""
        with self._lock:
            if self._data is None:
                self._data = {}
            self._data[key] = value

    def get_or_create(self, key: K, factory: Callable[[K], V]) -> V:
        """Return the cached value, computing and storing it on a miss.

        *factory* runs outside the lock. Exceptions from it propagate and
        nothing is stored.
        """
        data = self._data
        if data is not None and key in data:
            return data[key]
        value = factory(key)
        self.put(key, value)
        return value

    @property
    def created(self) -> bool:
        """True once the first entry has been written."""
        return self._data is not None

    def __contains__(self, key: object) -> bool:
        data = self._data
        return data is not None and key in data

    def __len__(self) -> int:
        data = self._data
        return 0 if data is None else len(data)

    def __repr__(self) -> str:
        return f"MemoCache({self.name!r}, entries={len(self)})"


def new_name_cache() -> MemoCache[str, str | None]:
    """Create an empty identifier -> template name cache."""
    return MemoCache("template-names")


def new_pattern_cache() -> MemoCache[str, re.Pattern[str]]:
    """Create an empty pattern source -> compiled pattern cache."""
    return MemoCache("patterns")
