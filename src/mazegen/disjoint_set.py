from __future__ import annotations

from typing import Dict, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Union-find over hashable elements (positions, in practice).

    Elements are mapped to dense indices; ``_parent`` holds the forest. Lookups
    compress paths, and a merge hangs the root with the lower index under the
    one with the higher index.
    """

    def __init__(self) -> None:
        self._index: Dict[T, int] = {}
        self._parent: List[int] = []
        self._sets_n = 0

    def add(self, element: T) -> bool:
        """Add ``element`` as a singleton set; False if it is already tracked."""
        if element in self._index:
            return False
        self._index[element] = len(self._parent)
        self._parent.append(len(self._parent))
        self._sets_n += 1
        return True

    def merge(self, a: T, b: T) -> bool:
        """Union the sets of ``a`` and ``b``.

        Returns False when either element is unknown or both already share a set.
        """
        root_a = self._find_element(a)
        root_b = self._find_element(b)
        if root_a is None or root_b is None or root_a == root_b:
            return False
        low, high = sorted((root_a, root_b))
        self._parent[low] = high
        self._sets_n -= 1
        return True

    def is_same(self, a: T, b: T) -> bool:
        root_a = self._find_element(a)
        return root_a is not None and root_a == self._find_element(b)

    def root(self, element: T) -> Optional[int]:
        """Index of the representative of ``element``'s set; stable until the next merge."""
        return self._find_element(element)

    def sets_n(self) -> int:
        return self._sets_n

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def _find_element(self, element: T) -> Optional[int]:
        ind = self._index.get(element)
        return None if ind is None else self._find(ind)

    def _find(self, ind: int) -> int:
        root = ind
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[ind] != root:
            self._parent[ind], ind = root, self._parent[ind]
        return root
