import numpy as np

from weighted_quick_union import WeightedQuickUnionUF


class SquarePercolation:
    """
    Site percolation on an n-by-n square grid, rows and columns 1-indexed.

    Two union-find structures are kept. wqfGrid holds the sites plus a
    virtual top and a virtual bottom and only answers percolates().
    wqfFull holds the sites plus the virtual top only and answers isFull():
    once the grid percolates, every bottom-row site is joined through the
    virtual bottom, so asking wqfGrid about fullness would report isolated
    bottom-row sites as full (backwash).
    """

    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 1:
            raise ValueError(f"grid size n must be a positive integer, got {n!r}")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=bool)

        self.wqfGrid = WeightedQuickUnionUF(self.gridSquare + 2)  # virtual top and bottom
        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1)  # virtual top only

        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

    # open the site[i,j] if it's not open yet
    def open_site(self, row: int, col: int):
        self.validState(row, col)

        if (self.isOpen(row, col)):
            return

        flatIndex = self.flattenGrid(row, col)
        self.grid[row - 1][col - 1] = True
        self.openSite += 1

        ## top row
        if (row == 1):
            self.wqfGrid.union(self.virtualTop, flatIndex)
            self.wqfFull.union(self.virtualTop, flatIndex)

        ## bottom row, never in wqfFull
        if (row == self.gridSize):
            self.wqfGrid.union(self.virtualBottom, flatIndex)

        for (r, c) in ((row, col - 1), (row, col + 1), (row - 1, col), (row + 1, col)):
            if self.isOnGrid(r, c) and self.grid[r - 1][c - 1]:
                neighbour = self.flattenGrid(r, c)
                self.wqfGrid.union(flatIndex, neighbour)
                self.wqfFull.union(flatIndex, neighbour)

    # is site[i,j] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site[i,j] connected to the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return self.wqfFull.connected(self.flattenGrid(row, col), self.virtualTop)

    def percolates(self) -> bool:
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def site_index(self, row: int, col: int) -> int:
        self.validState(row, col)
        return self.flattenGrid(row, col)

    def open_mask(self) -> np.ndarray:
        return self.grid.copy()

    def full_mask(self) -> np.ndarray:
        """
        Boolean n-by-n array, True where the site is full.
        """
        topRoot = self.wqfFull.find(self.virtualTop)
        mask = np.zeros_like(self.grid)
        for r, c in np.argwhere(self.grid):
            mask[r, c] = self.wqfFull.find(self.gridSize * r + c) == topRoot
        return mask

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise ValueError(
                f"site ({row}, {col}) is outside the grid, row and col must be in [1, {self.gridSize}]"
            )

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize

    def __repr__(self):
        return (f"SquarePercolation(n={self.gridSize}, open={self.openSite}, "
                f"percolates={self.percolates()})")
