from typing import Dict, Hashable, Iterable, Optional


class DisjointSet():
    """
    Union-find over hashable items, with path halving and union by rank.
    """

    def __init__(self, items: Optional[Iterable[Hashable]] = None):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self.count = 0

        if items:
            for item in items:
                self.add(item)

    def __contains__(self, item: Hashable) -> bool:
        return item in self.parent

    def __len__(self) -> int:
        """Return the number of disjoint sets."""
        return self.count

    def add(self, item: Hashable) -> bool:
        if item in self.parent:
            return False
        self.parent[item] = item
        self.rank[item] = 0
        self.count += 1
        return True

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set containing item."""
        if item not in self.parent:
            raise KeyError(item)
        while self.parent[item] != item:
            self.parent[item] = self.parent[self.parent[item]]
            item = self.parent[item]
        return item

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b. Returns False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

        self.count -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)
