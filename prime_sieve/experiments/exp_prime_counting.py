"""
Experiment: Prime Counting and the Prime Number Theorem

Compares pi(n) against n / ln(n) on a regular grid and locates the
k-th prime for a list of targets using the PNT-derived sieve bound.
Outputs tables and CSVs.
"""

import time

import pandas as pd
from pathlib import Path
from typing import Iterable

from ..counting import pi_table
from ..nth_prime import nth_prime, sieve_bound_for_nth


def run_prime_counting_experiment(bound: int, step: int,
                                  output_dir: Path) -> pd.DataFrame:
    """
    Tabulate pi(x) and n / ln(n) for x = 0, step, ..., bound.

    Parameters
    ----------
    bound : int
        Largest x considered.
    step : int
        Grid spacing.
    output_dir : Path
        Directory for output files.

    Returns
    -------
    pd.DataFrame
        The table written to prime_counting.csv.
    """
    print(f"Running prime counting experiment with bound={bound:,}, step={step:,}")

    t0 = time.time()
    df = pi_table(bound, step)
    print(f"  Sieved and counted in {time.time() - t0:.2f}s")

    last = df.iloc[-1]
    print(f"  pi({int(last['n']):,}) = {int(last['pi']):,}, "
          f"n/ln(n) = {last['estimate']:.1f}")

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'prime_counting.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return df


def run_nth_prime_experiment(targets: Iterable[int],
                             output_dir: Path) -> pd.DataFrame:
    """
    Find the k-th prime for every k in targets.

    Parameters
    ----------
    targets : iterable of int
        1-based prime indices.
    output_dir : Path
        Directory for output files.

    Returns
    -------
    pd.DataFrame
        Columns k, bound, prime, slack (bound / prime).
    """
    targets = list(targets)
    print(f"Running n-th prime experiment for {len(targets)} targets")

    rows = []
    for k in targets:
        bound = sieve_bound_for_nth(k)
        p = nth_prime(k)
        rows.append({
            'k': k,
            'bound': bound,
            'prime': p,
            'slack': bound / p
        })
        print(f"  p_{k:,} = {p:,} (sieved to {bound:,})")

    df = pd.DataFrame(rows, columns=['k', 'bound', 'prime', 'slack'])

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'nth_prime.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return df


if __name__ == '__main__':
    from ..config import load_config

    config = load_config('config/default.yaml')
    output_dir = Path('data/results')
    df = run_prime_counting_experiment(config['bound'], config['step'], output_dir)
    print("\nSummary:")
    print(df.to_string(index=False))
