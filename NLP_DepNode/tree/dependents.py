# NLP_DepNode/tree/dependents.py
from bisect import bisect_left
from typing import Iterator, List, Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node

class DependentRegistry:
    """
    Ids of one head's dependents, kept in ascending order.

    Only the owning DependencyTree mutates a registry; after every
    insert/remove it calls reindex() so each dependent's cached
    sibling_index matches its position here.
    """

    def __init__(self):
        self._ids: List[int] = []

    def insert(self, idx: int) -> int:
        """Insert an id at its sorted position and return that position."""
        pos = bisect_left(self._ids, idx)
        self._ids.insert(pos, idx)
        return pos

    def remove(self, idx: int) -> bool:
        pos = bisect_left(self._ids, idx)
        if pos < len(self._ids) and self._ids[pos] == idx:
            del self._ids[pos]
            return True
        return False

    def get(self, index: int) -> int:
        """Id at `index`; negative indexes are out of range, not counted from the end."""
        if index < 0 or index >= len(self._ids):
            raise IndexError(f"Dependent index {index} out of range for {len(self._ids)} dependents")
        return self._ids[index]

    def index_of(self, idx: int) -> int:
        """Position of `idx` among the dependents, or -1 if it is not one."""
        for i, dep in enumerate(self._ids):
            if dep == idx:
                return i
        return -1

    def insert_index(self, idx: int) -> int:
        """Position at which `idx` would be inserted (number of smaller ids)."""
        return bisect_left(self._ids, idx)

    def clear(self) -> List[int]:
        removed = self._ids
        self._ids = []
        return removed

    def reindex(self, nodes: Mapping[int, 'Node']):
        for i, idx in enumerate(self._ids):
            nodes[idx].sibling_index = i

    def ids(self) -> List[int]:
        return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __contains__(self, idx: int) -> bool:
        pos = bisect_left(self._ids, idx)
        return pos < len(self._ids) and self._ids[pos] == idx

    def __repr__(self) -> str:
        return f"DependentRegistry({self._ids})"
