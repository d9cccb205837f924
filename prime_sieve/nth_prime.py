"""
The k-th prime via a sieve whose bound comes from the prime number theorem.

Since pi(n) ~ n / ln(n), the k-th prime sits near k ln(k). Rosser and
Schoenfeld showed p_k < k (ln k + ln ln k) for k >= 6, which gives a
bound that always contains the answer without trial and error.
"""

import math

from .primes import InvalidArgument, primes_upto, validate_bound

# p_6 = 13 covers k = 1..5 where the Rosser bound does not apply.
SMALL_K_BOUND = 13


def _validate_index(k) -> int:
    k = validate_bound(k)
    if k < 1:
        raise InvalidArgument(f"prime index is 1-based, got {k}")
    return k


def sieve_bound_for_nth(k: int) -> int:
    """
    Upper bound guaranteed to be >= the k-th prime.

    Parameters
    ----------
    k : int
        1-based prime index.

    Returns
    -------
    int
        Sieve bound.
    """
    k = _validate_index(k)
    if k < 6:
        return SMALL_K_BOUND
    return math.ceil(k * (math.log(k) + math.log(math.log(k))))


def nth_prime(k: int) -> int:
    """
    Return the k-th prime (1-based): nth_prime(1) == 2.

    Parameters
    ----------
    k : int
        1-based prime index.

    Returns
    -------
    int
        The k-th prime.
    """
    primes = primes_upto(sieve_bound_for_nth(k))
    return int(primes[k - 1])
