import math
import random
import argparse

import numpy as np

from square_percolation import SquarePercolation

# z-value for a 95% confidence level
CONFIDENCE_95 = 1.96


class UniformRandom:
    """
    Source of unbiased integers in [0, k), backed by random.Random.
    """

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def uniform(self, k: int) -> int:
        if k < 1:
            raise ValueError(f"upper bound k must be >= 1, got {k}")
        return self.rng.randrange(k)


def open_until_percolation(n: int, random_source) -> SquarePercolation:
    """
    Opens blocked sites of a fresh n-by-n grid uniformly at random, without
    replacement, until the grid percolates.

    :param n: The grid size.
    :param random_source: Object with a uniform(k) method returning an integer in [0, k).
    :return: The grid at the moment it first percolates.
    """
    simulator = SquarePercolation(n)

    # every site starts blocked; blockedSites[:numBlocked] is the live pool
    blockedSites = [(row, col) for row in range(1, n + 1) for col in range(1, n + 1)]
    numBlocked = len(blockedSites)

    while (not simulator.percolates()):
        siteIdx = random_source.uniform(numBlocked)
        row, col = blockedSites[siteIdx]
        simulator.open_site(row, col)

        numBlocked -= 1
        blockedSites[siteIdx], blockedSites[numBlocked] = blockedSites[numBlocked], blockedSites[siteIdx]

    return simulator


def run_trial(n: int, random_source) -> float:
    """
    Returns the fraction of open sites at the moment a fresh n-by-n grid percolates.
    """
    simulator = open_until_percolation(n, random_source)
    return simulator.numberOfOpenSites() / simulator.gridSquare


class PercolationStats:
    """
    Monte Carlo estimate of the percolation threshold p* of an n-by-n grid.

    All trials run in the constructor. The results are read back with
    mean(), stddev(), confidenceLow() and confidenceHigh().
    """

    def __init__(self, n: int, trials: int, random_source=None, seed=None):
        if (not _is_positive_int(n) or not _is_positive_int(trials)):
            raise ValueError(
                f"grid size n and trials count must be positive integers, got n={n!r}, trials={trials!r}"
            )

        self.gridSize = int(n)
        self.trialCount = int(trials)
        if random_source is None:
            random_source = UniformRandom(seed)

        trialResults = np.empty(self.trialCount, dtype=float)
        for t in range(self.trialCount):
            trialResults[t] = run_trial(self.gridSize, random_source)
        trialResults.flags.writeable = False
        self._thresholds = trialResults

        self._mean = float(np.mean(trialResults))
        if self.trialCount > 1:
            self._stddev = float(np.std(trialResults, ddof=1))
        else:
            # a single sample has no spread; the interval collapses onto the mean
            self._stddev = 0.0

        halfWidth = CONFIDENCE_95 * self._stddev / math.sqrt(self.trialCount)
        self._confidenceLow = self._mean - halfWidth
        self._confidenceHigh = self._mean + halfWidth

    @property
    def thresholds(self) -> np.ndarray:
        return self._thresholds

    # sample mean of the percolation thresholds
    def mean(self) -> float:
        return self._mean

    # sample standard deviation of the percolation thresholds
    def stddev(self) -> float:
        return self._stddev

    # low endpoint of the 95% confidence interval
    def confidenceLow(self) -> float:
        return self._confidenceLow

    # high endpoint of the 95% confidence interval
    def confidenceHigh(self) -> float:
        return self._confidenceHigh

    def confidence_interval(self):
        return self._confidenceLow, self._confidenceHigh

    def report(self):
        print("="*60)
        print(f"STATS REPORT (n = {self.gridSize}, trials = {self.trialCount})")
        print("="*60)

        print(f"mean                    = {self.mean():.6f}")
        print(f"standard deviation      = {self.stddev():.6f}")
        lo, hi = self.confidence_interval()
        print(f"95% confidence interval = [{lo:.6f}, {hi:.6f}]")
        print("="*60)


def _is_positive_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value >= 1


def _prompt_int(prompt: str) -> int:
    return int(input(prompt).strip())


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Estimate the percolation threshold of an n-by-n grid by Monte Carlo simulation."
    )

    parser.add_argument(
        '--n',
        type=int,
        default=None,
        help="Size of the square grid (n x n). Read from stdin when omitted."
    )

    parser.add_argument(
        '--t',
        type=int,
        default=None,
        help="The number of Monte Carlo trials to perform. Read from stdin when omitted."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random source, for reproducible runs."
    )

    args = parser.parse_args(argv)

    try:
        n = args.n if args.n is not None else _prompt_int("Please input grid size as a single integer: ")
        trials = args.t if args.t is not None else _prompt_int("Please input number of trials: ")
        stats = PercolationStats(n, trials, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    stats.report()
    return stats


if __name__ == "__main__":
    main()
