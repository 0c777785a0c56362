import argparse
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from square_percolation import SquarePercolation
from percolation_stats import UniformRandom, open_until_percolation

# blocked, open, full
SITE_COLOURS = ListedColormap(['black', 'white', '#6495ed'])


def draw_grid(percolation: SquarePercolation, ax=None, title=None):
    """
    Draws blocked sites in black, open sites in white and full sites in blue.
    Row 1 is drawn at the top.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    states = percolation.open_mask().astype(int) + percolation.full_mask().astype(int)
    ax.imshow(states, cmap=SITE_COLOURS, vmin=0, vmax=2, origin="upper", interpolation="nearest")
    ax.set_axis_off()

    if title is None:
        n = percolation.gridSize
        title = (f"{n}x{n} grid, {percolation.numberOfOpenSites()} open sites, "
                 f"{'percolates' if percolation.percolates() else 'does not percolate'}")
    ax.set_title(title)
    return fig


def simulate_until_percolation(n: int, seed=None) -> SquarePercolation:
    """Opens random blocked sites until the grid percolates and returns the grid."""
    return open_until_percolation(n, UniformRandom(seed))


def save_frame(fig, outdir, name):
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{name}.png"
    fig.savefig(p, dpi=140, bbox_inches="tight")
    plt.close(fig)
    return p


def main(argv=None):
    parser = argparse.ArgumentParser(description="Draw one n-by-n percolation run at the moment it percolates.")
    parser.add_argument('--n', type=int, default=50, help="Size of the square grid.")
    parser.add_argument('--seed', type=int, default=None, help="Seed for the random source.")
    parser.add_argument('--out', default=None, help="Directory to save the picture into.")
    parser.add_argument('--no-show', action='store_true', help="Do not open a plot window.")
    args = parser.parse_args(argv)

    try:
        percolation = simulate_until_percolation(args.n, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    print(f"percolated after opening {percolation.numberOfOpenSites()} sites "
          f"(p* = {percolation.numberOfOpenSites() / percolation.gridSquare:.4f})")
    print(f"full sites: {int(np.count_nonzero(percolation.full_mask()))}")

    fig = draw_grid(percolation)
    if args.out is not None:
        print(f"saved {save_frame(fig, args.out, f'percolation_{args.n}')}")
    elif not args.no_show:
        plt.show()
    return percolation


if __name__ == "__main__":
    main()
