"""
Prime-counting function and the prime number theorem.

Responsibility: pi(n) and its n / ln n approximation. Sieving is
delegated to the primes module.
"""

import math

import numpy as np
import pandas as pd

from .primes import InvalidArgument, primes_upto, validate_bound


def prime_pi(n: int) -> int:
    """
    Count the primes <= n.

    Parameters
    ----------
    n : int
        Upper bound (inclusive).

    Returns
    -------
    int
        pi(n); 0 for n < 2.
    """
    return int(len(primes_upto(n)))


def pi_at(primes: np.ndarray, xs) -> np.ndarray:
    """
    Evaluate pi(x) for every x in xs from a precomputed prime array.

    Parameters
    ----------
    primes : np.ndarray
        Ascending primes, covering at least max(xs).
    xs : array-like
        Points at which to count.

    Returns
    -------
    np.ndarray
        Number of primes <= x, one entry per x.
    """
    return np.searchsorted(primes, np.asarray(xs), side='right')


def pnt_estimate(n: int) -> float:
    """
    Prime number theorem estimate n / ln(n).

    Raises
    ------
    InvalidArgument
        For n < 2, where ln(n) <= 0.
    """
    n = validate_bound(n)
    if n < 2:
        raise InvalidArgument(f"pnt_estimate needs n >= 2, got {n}")
    return n / math.log(n)


def pi_table(bound: int, step: int) -> pd.DataFrame:
    """
    Tabulate pi(x) against n / ln(n) for x = 0, step, 2*step, ... <= bound.

    Only one sieve is run, up to bound.

    Parameters
    ----------
    bound : int
        Largest x considered.
    step : int
        Spacing between sample points (positive).

    Returns
    -------
    pd.DataFrame
        Columns n, pi, estimate, ratio. estimate and ratio are NaN
        where n < 2.
    """
    bound = validate_bound(bound)
    step = validate_bound(step)
    if step == 0:
        raise InvalidArgument("step must be positive")

    primes = primes_upto(bound)
    xs = np.arange(0, bound + 1, step, dtype=np.int64)
    counts = pi_at(primes, xs)

    estimates = np.full(len(xs), np.nan)
    valid = xs >= 2
    estimates[valid] = xs[valid] / np.log(xs[valid])

    ratios = counts / estimates

    return pd.DataFrame({
        'n': xs,
        'pi': counts,
        'estimate': estimates,
        'ratio': ratios
    })
