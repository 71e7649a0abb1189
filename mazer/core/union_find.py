from typing import Dict, Hashable, Iterable


class UnionFind:
    """
    Disjoint sets over hashable keys (cell coordinates for Kruskal's).
    Every key starts as its own root.
    """
    def __init__(self, keys: Iterable[Hashable]):
        self.parent: Dict[Hashable, Hashable] = {k: k for k in keys}
        self.set_count = len(self.parent)

    def find(self, key: Hashable) -> Hashable:
        # Iterative: long parent chains on big grids would hit the recursion limit
        root = key
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while self.parent[key] != root:
            self.parent[key], key = root, self.parent[key]

        return root

    def union(self, a: Hashable, b: Hashable):
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        self.parent[ra] = rb
        self.set_count -= 1

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, key: Hashable) -> bool:
        return key in self.parent
