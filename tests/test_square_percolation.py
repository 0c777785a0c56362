"""
Tests for the square grid percolation model.
"""

import numpy as np
import pytest

from square_percolation import SquarePercolation


class TestConstruction:

    @pytest.mark.parametrize("n", [1, 2, 5, 20])
    def test_fresh_grid(self, n):
        perc = SquarePercolation(n)
        assert perc.numberOfOpenSites() == 0
        assert not perc.percolates()
        assert not perc.isOpen(n, n)
        assert not perc.isFull(1, 1)

    @pytest.mark.parametrize("n", [0, -3, 2.5, "4", True])
    def test_invalid_size(self, n):
        with pytest.raises(ValueError):
            SquarePercolation(n)

    def test_numpy_integer_size(self):
        assert SquarePercolation(np.int64(3)).gridSize == 3

    def test_union_find_sizes(self):
        perc = SquarePercolation(4)
        assert len(perc.wqfGrid) == 18
        assert len(perc.wqfFull) == 17


class TestRangeChecks:

    @pytest.mark.parametrize("row, col", [(0, 1), (1, 0), (4, 1), (1, 4), (-1, 2), (2, -1)])
    def test_out_of_range(self, row, col):
        perc = SquarePercolation(3)
        with pytest.raises(ValueError):
            perc.open_site(row, col)
        with pytest.raises(ValueError):
            perc.isOpen(row, col)
        with pytest.raises(ValueError):
            perc.isFull(row, col)
        assert perc.numberOfOpenSites() == 0

    def test_site_index(self):
        perc = SquarePercolation(3)
        assert perc.site_index(1, 1) == 0
        assert perc.site_index(2, 3) == 5
        assert perc.site_index(3, 3) == 8
        with pytest.raises(ValueError):
            perc.site_index(4, 1)


class TestOpen:

    def test_open_marks_site(self):
        perc = SquarePercolation(3)
        perc.open_site(2, 2)
        assert perc.isOpen(2, 2)
        assert not perc.isOpen(2, 3)
        assert perc.numberOfOpenSites() == 1

    def test_open_is_idempotent(self):
        perc = SquarePercolation(3)
        perc.open_site(1, 2)
        counts = perc.wqfGrid.get_count(), perc.wqfFull.get_count()
        perc.open_site(1, 2)
        assert perc.numberOfOpenSites() == 1
        assert (perc.wqfGrid.get_count(), perc.wqfFull.get_count()) == counts

    def test_open_count_is_monotone(self):
        perc = SquarePercolation(4)
        sites = [(1, 1), (2, 2), (1, 1), (4, 4), (2, 2), (3, 1), (4, 4)]
        seen = []
        for row, col in sites:
            perc.open_site(row, col)
            seen.append(perc.numberOfOpenSites())
        assert seen == sorted(seen)
        assert seen[-1] == 4

    def test_diagonal_sites_are_not_neighbours(self):
        perc = SquarePercolation(2)
        perc.open_site(1, 1)
        perc.open_site(2, 2)
        assert not perc.percolates()
        assert not perc.isFull(2, 2)

    def test_top_row_site_is_full(self):
        perc = SquarePercolation(3)
        perc.open_site(1, 3)
        assert perc.isFull(1, 3)
        assert not perc.percolates()

    def test_blocked_site_is_never_full(self):
        perc = SquarePercolation(2)
        perc.open_site(1, 1)
        assert not perc.isFull(1, 2)


class TestPercolates:

    def test_single_site_grid(self):
        perc = SquarePercolation(1)
        assert not perc.percolates()
        perc.open_site(1, 1)
        assert perc.percolates()
        assert perc.isFull(1, 1)
        assert perc.numberOfOpenSites() == 1

    def test_two_by_two_column(self):
        perc = SquarePercolation(2)
        perc.open_site(1, 1)
        assert not perc.percolates()
        perc.open_site(2, 1)
        assert perc.percolates()
        assert perc.numberOfOpenSites() == 2
        assert perc.isFull(2, 1)

    def test_winding_path(self):
        perc = SquarePercolation(3)
        for row, col in [(1, 3), (2, 3), (2, 2), (2, 1)]:
            perc.open_site(row, col)
        assert not perc.percolates()
        perc.open_site(3, 1)
        assert perc.percolates()
        assert perc.isFull(3, 1)

    def test_percolation_is_irreversible(self):
        perc = SquarePercolation(3)
        for row in range(1, 4):
            perc.open_site(row, 2)
        assert perc.percolates()
        for row in range(1, 4):
            for col in range(1, 4):
                perc.open_site(row, col)
                assert perc.percolates()

    def test_fully_open_grid_percolates(self):
        n = 6
        perc = SquarePercolation(n)
        for row in range(1, n + 1):
            for col in range(1, n + 1):
                perc.open_site(row, col)
        assert perc.percolates()
        assert perc.numberOfOpenSites() == n * n
        assert perc.full_mask().all()


class TestBackwash:

    def build(self):
        # open column 1 top to bottom, plus an isolated bottom-right site
        perc = SquarePercolation(3)
        for row in range(1, 4):
            perc.open_site(row, 1)
        perc.open_site(3, 3)
        return perc

    def test_isolated_bottom_site_is_not_full(self):
        perc = self.build()
        assert perc.percolates()
        assert perc.isOpen(3, 3)
        assert not perc.isFull(3, 3)
        assert perc.isFull(3, 1)

    def test_bottom_structure_would_report_backwash(self):
        perc = self.build()
        site = perc.site_index(3, 3)
        assert perc.wqfGrid.connected(site, perc.virtualTop)
        assert not perc.wqfFull.connected(site, perc.virtualTop)

    def test_site_becomes_full_once_really_connected(self):
        perc = self.build()
        perc.open_site(3, 2)
        assert perc.isFull(3, 3)

    def test_wide_grid_backwash(self):
        n = 10
        perc = SquarePercolation(n)
        for row in range(1, n + 1):
            perc.open_site(row, 1)
        # bottom row open except a gap at column 2, cutting columns 3..n off
        for col in range(3, n + 1):
            perc.open_site(n, col)
        assert perc.percolates()
        for col in range(3, n + 1):
            assert not perc.isFull(n, col)


class TestMasks:

    def test_open_and_full_masks(self):
        perc = SquarePercolation(3)
        perc.open_site(1, 1)
        perc.open_site(2, 1)
        perc.open_site(3, 3)
        expected_open = np.array([
            [True, False, False],
            [True, False, False],
            [False, False, True],
        ])
        expected_full = np.array([
            [True, False, False],
            [True, False, False],
            [False, False, False],
        ])
        np.testing.assert_array_equal(perc.open_mask(), expected_open)
        np.testing.assert_array_equal(perc.full_mask(), expected_full)

    def test_open_mask_is_a_copy(self):
        perc = SquarePercolation(2)
        mask = perc.open_mask()
        mask[0, 0] = True
        assert not perc.isOpen(1, 1)
