"""
Prime generation utilities.

Responsibility: the Sieve of Eratosthenes and bound validation only.
No counting, no caching, no I/O.
"""

import numpy as np
from math import isqrt
from typing import List


class InvalidArgument(ValueError):
    """Raised when a bound is not a usable non-negative integer."""


def validate_bound(n) -> int:
    """
    Check that n is a non-negative integer usable as a sieve bound.

    Parameters
    ----------
    n : int or np.integer
        Candidate bound.

    Returns
    -------
    int
        The bound as a plain Python int.

    Raises
    ------
    InvalidArgument
        If n is not integral, is a bool, is negative, or is too large
        to index an array of length n+1 on this platform.
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise InvalidArgument(f"bound must be an integer, got {n!r}")

    n = int(n)
    if n < 0:
        raise InvalidArgument(f"bound must be non-negative, got {n}")
    if n + 1 > np.iinfo(np.intp).max:
        raise InvalidArgument(f"bound {n} exceeds the addressable array size")
    return n


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses Sieve of Eratosthenes. Multiples of each prime p are cleared
    starting at p*p; smaller multiples already carry a smaller factor.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    N = validate_bound(N)
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    # Ascending order matters: flags[p] is final once every prime < p has swept.
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Ascending int64 array of primes.
    """
    flags = prime_flags_upto(N)
    return np.flatnonzero(flags).astype(np.int64)


def sieve(n: int) -> List[int]:
    """
    Return the primes p with 2 <= p <= n, ascending.

    A bound below 2 is valid and yields an empty list. Each call works
    on its own marker array, so repeated calls give identical results.

    Parameters
    ----------
    n : int
        Upper bound (inclusive).

    Returns
    -------
    list of int
        Strictly increasing primes.

    Raises
    ------
    InvalidArgument
        If n is negative or not an integer.
    """
    return primes_upto(n).tolist()
