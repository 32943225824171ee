"""
OrderedHash: an insertion-ordered key/value container with positional access.
It is the result type of every map/reduce run.
"""

from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional


class OrderedHash:
    """Key/value store that remembers the order keys were first added"""

    def __init__(self):
        self._keys: List[Hashable] = []
        self._vals: Dict[Hashable, Any] = {}

    def push(self, k: Hashable, v: Any):
        """
        Add a key/value pair to the end, or overwrite the value of an
        existing key without moving it.
        """
        if k not in self._vals:
            self._keys.append(k)
        self._vals[k] = v

    def insert(self, i: int, k: Hashable, v: Any):
        """
        Insert a key/value pair at position i. Does nothing if the key is
        already present; the existing value is kept.
        """
        if k in self._vals:
            return
        i = max(0, min(i, len(self._keys)))
        self._keys.insert(i, k)
        self._vals[k] = v

    def get(self, k: Hashable) -> Any:
        """Return the value for key k, or None"""
        return self._vals.get(k)

    def at(self, i: int) -> Any:
        """Return the value at position i, or None if out of range"""
        if 0 <= i < len(self._keys):
            return self._vals[self._keys[i]]
        return None

    def length(self) -> int:
        return len(self._keys)

    def keys(self) -> List[Hashable]:
        """Return a copy of the ordered key list"""
        return list(self._keys)

    def key(self, i: int) -> Optional[Hashable]:
        if 0 <= i < len(self._keys):
            return self._keys[i]
        return None

    def values(self) -> List[Any]:
        return [self._vals[k] for k in self._keys]

    def map(self, func: Callable[[Hashable, Any], Any]) -> List[Any]:
        """Return [func(key, value), ...] in key order"""
        return [func(k, self._vals[k]) for k in self._keys]

    def items(self):
        return [(k, self._vals[k]) for k in self._keys]

    def unsorted_dict(self) -> Dict[Hashable, Any]:
        """Return the underlying key/value dict (no ordering guarantee)"""
        return self._vals

    def to_dict(self) -> dict:
        """Return an ordered plain dict copy"""
        return dict(self.items())

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._keys))

    def __contains__(self, k) -> bool:
        return k in self._vals

    def __repr__(self):
        return f"OrderedHash({self.items()!r})"
