class WeightedQuickUnionUF:
    """
    A class for the Weighted Quick-Union-Find data structure.

    Union is by size, without path compression: the smaller tree is always
    hung under the root of the larger one, so no tree is ever taller than
    log2(n) and find() stays logarithmic.
    """

    def __init__(self, n: int):
        """
        Initializes an empty union-find data structure with 'n' sites
        indexed 0 through n-1. Each site is initially in its own component.

        :param n: The number of sites.
        """
        if n < 0:
            raise ValueError(f"number of sites must be >= 0, got {n}")

        # self.parent[i] = parent of site i
        # Initially, each site is its own parent (root)
        self.parent = list(range(n))

        # self.size[i] = number of sites in the tree rooted at i
        self.size = [1] * n

        # The number of distinct components (or disjoint sets)
        self.count = n

    def __len__(self):
        return len(self.parent)

    def get_count(self) -> int:
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p: int) -> int:
        """
        Returns the root (canonical element) of the set containing site 'p'.
        """
        self._validate(p)

        while p != self.parent[p]:
            p = self.parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        """
        Returns true if the two sites 'p' and 'q' are in the same component.
        """
        return self.find(p) == self.find(q)

    def component_size(self, p: int) -> int:
        """
        Returns the number of sites in the component containing 'p'.
        """
        return self.size[self.find(p)]

    def union(self, p: int, q: int):
        """
        Merges the set containing site 'p' with the set containing site 'q'.
        """
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        # smaller tree goes under the larger root, ties keep rootP
        if self.size[rootP] < self.size[rootQ]:
            self.parent[rootP] = rootQ
            self.size[rootQ] += self.size[rootP]
        else:
            self.parent[rootQ] = rootP
            self.size[rootP] += self.size[rootQ]

        self.count -= 1
