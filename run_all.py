#!/usr/bin/env python3
"""
Full reproducibility script.

Running this file regenerates every table of prime counts.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
from pathlib import Path
import time

from prime_sieve.config import load_config
from prime_sieve.experiments.exp_prime_counting import (
    run_prime_counting_experiment,
    run_nth_prime_experiment
)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run all prime sieve experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--output-dir', type=str, default='data/results',
                        help='Directory for CSV outputs')
    args = parser.parse_args(argv)

    config = load_config(args.config)

    print("=" * 60)
    print("Sieve of Eratosthenes - Full Experiment Suite")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  bound = {config['bound']:,}")
    print(f"  step = {config['step']:,}")
    print(f"  nth_targets = {config['nth_targets']}")
    print()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Prime counting vs prime number theorem
    print("-" * 60)
    print("1. Prime Counting Function")
    print("-" * 60)
    start = time.time()
    df_counts = run_prime_counting_experiment(
        config['bound'],
        config['step'],
        output_dir
    )
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 2. n-th prime from a PNT bound
    print("-" * 60)
    print("2. n-th Prime")
    print("-" * 60)
    start = time.time()
    df_nth = run_nth_prime_experiment(config['nth_targets'], output_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)

    print("\npi(n) vs n/ln(n):")
    print(df_counts.to_string(index=False))

    print("\nn-th primes:")
    print(df_nth.to_string(index=False))

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
