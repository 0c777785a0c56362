import os
import argparse

import numpy as np
import matplotlib.pyplot as plt
from scipy.stats import linregress

from percolation_stats import PercolationStats, UniformRandom


def sweep(L_values, trials: int, seed=None, verbose: bool = True):
    """
    Runs a PercolationStats simulation for every grid size in L_values.

    A single random source is shared across sizes so one seed makes the whole
    sweep reproducible.

    :return: (L, means, stds, lows, highs) as numpy arrays.
    """
    L_values = np.asarray(L_values, dtype=int)
    if L_values.size == 0:
        raise ValueError("at least one grid size is required")

    random_source = UniformRandom(seed)
    means, stds, lows, highs = [], [], [], []

    for n_value in L_values:
        if verbose:
            print(f"simulate n = {n_value}")
        stats = PercolationStats(int(n_value), trials, random_source=random_source)
        if verbose:
            stats.report()

        means.append(stats.mean())
        stds.append(stats.stddev())
        lows.append(stats.confidenceLow())
        highs.append(stats.confidenceHigh())

    return L_values, np.array(means), np.array(stds), np.array(lows), np.array(highs)


def extrapolate(L_values, means, exponent=-3/4):
    """
    Fits mean p*(L) linearly against L^(exponent) and returns the intercept,
    i.e. the estimate of p* for an infinite grid.
    """
    L_values = np.asarray(L_values, dtype=float)
    means = np.asarray(means, dtype=float)
    if L_values.shape != means.shape:
        raise ValueError("L_values and means must have the same length")
    if np.unique(L_values).size < 2:
        raise ValueError("extrapolation needs at least two distinct grid sizes")

    X_scaling = L_values ** exponent
    slope, intercept, r_value, p_value, std_err = linregress(X_scaling, means)
    return {'pc_inf': float(intercept), 'slope': float(slope), 'R2': float(r_value**2)}


def _finish(fig, save_path, show):
    if save_path is not None:
        fig.savefig(save_path, dpi=140, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def plot_percolation_stats(L_values, means, stds, save_path=None, show=True):
    """
    Generates an error bar plot of the mean critical probability vs L.
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.errorbar(
        L_values,
        means,
        yerr=stds,
        fmt='o-',               # Circle markers, connected line
        color='blue',
        ecolor='blue',
        capsize=5,
        label=r'Mean $p^* \pm \sigma$'
    )

    ax.set_xlabel('Linear System Size ($L$)', fontsize=14)
    ax.set_ylabel('Mean Critical Probability ($\\bar{p}^*$)', fontsize=14)
    ax.set_title('Mean $p^*$ vs. System Size ($L$)', fontsize=16)

    ax.grid(True, linestyle='--', alpha=0.6)
    ax.legend(loc='best')

    return _finish(fig, save_path, show)


def plot_extrapolation(L_values, means, exponent=-3/4, save_path=None, show=True):
    """
    Plots mean critical probability vs L^(exponent), draws the fitted line
    and marks the estimate of p*(infinity) at X = 0.
    """
    L_values = np.asarray(L_values, dtype=float)
    means = np.asarray(means, dtype=float)
    result = extrapolate(L_values, means, exponent)

    X_scaling = L_values ** exponent
    X_plot_max = float(np.max(X_scaling) * 1.05)
    X_line = np.linspace(0.0, X_plot_max, 100)
    Y_line = result['slope'] * X_line + result['pc_inf']

    fig, ax = plt.subplots(figsize=(10, 6))

    # Fit line
    ax.plot(X_line, Y_line, color='blue', linestyle='--',
            label=f"Fit: $p^*(\\infty)$ = {result['pc_inf']:.5f}")
    # Data points
    ax.plot(X_scaling, means, 'o', color='blue', markersize=8,
            label="Data $\\bar{p}^*(L)$")
    # Intercept marker at X=0
    ax.plot(0, result['pc_inf'], 'x', color='blue', markersize=10)

    ax.set_xlabel(f'$L^{{{exponent:.2f}}}$', fontsize=14)
    ax.set_ylabel('Mean Critical Probability ($\\bar{p}^*$)', fontsize=14)
    ax.set_title('Finite-Size Scaling Extrapolation', fontsize=16)
    ax.set_xlim(-0.05 * X_plot_max, X_plot_max)

    ax.grid(True, linestyle='--', alpha=0.6)
    ax.legend(loc='best')

    print(f"\n--- Extrapolation Results (exponent {exponent:.2f}) ---")
    print(f"pc(infinity) = {result['pc_inf']:.6f}, R^2 = {result['R2']:.4f}")
    print("-------------------------------------------------------")

    return _finish(fig, save_path, show)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run Monte Carlo percolation simulations over a range of grid sizes and extrapolate p*."
    )

    parser.add_argument(
        '--Lmin',
        type=int,
        default=50,
        help="Minimum size of the square grid (N_min x N_min)."
    )

    parser.add_argument(
        '--Lmax',
        type=int,
        default=200,
        help="Maximum size of the square grid (N_max x N_max)."
    )

    parser.add_argument(
        '--Lstep',
        type=int,
        default=50,
        help="Step size for increasing the grid size N."
    )

    parser.add_argument(
        '--t',
        type=int,
        default=100,
        help="The number of Monte Carlo trials to perform per grid size."
    )

    parser.add_argument('--seed', type=int, default=None, help="Seed for the random source.")
    parser.add_argument('--exponent', type=float, default=-3/4, help="Finite-size scaling exponent.")
    parser.add_argument('--save-dir', default=None, help="Directory to save the plots into.")
    parser.add_argument('--no-show', action='store_true', help="Do not open plot windows.")

    args = parser.parse_args(argv)

    if args.Lmin < 1 or args.Lmax < args.Lmin or args.Lstep < 1:
        parser.error("need 1 <= Lmin <= Lmax and Lstep >= 1")
    if args.t < 1:
        parser.error("trials count must be a positive integer")

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (N): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    L_values, means, stds, lows, highs = sweep(
        np.arange(args.Lmin, args.Lmax + 1, args.Lstep), args.t, seed=args.seed
    )

    print("\n--- Simulation Complete ---")

    stats_path = extrapolation_path = None
    if args.save_dir is not None:
        os.makedirs(args.save_dir, exist_ok=True)
        stats_path = os.path.join(args.save_dir, "percolation_stats.png")
        extrapolation_path = os.path.join(args.save_dir, "extrapolation.png")

    print("="*60)
    print("plotting...")
    plot_percolation_stats(L_values, means, stds, save_path=stats_path, show=not args.no_show)

    if np.unique(L_values).size >= 2:
        plot_extrapolation(L_values, means, exponent=args.exponent,
                           save_path=extrapolation_path, show=not args.no_show)
    else:
        print("Only one grid size simulated, skipping extrapolation.")

    return L_values, means, stds


if __name__ == "__main__":
    main()
