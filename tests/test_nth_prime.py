"""
Tests for the k-th prime and its prime number theorem bound.
"""

import pytest

from prime_sieve.nth_prime import nth_prime, sieve_bound_for_nth
from prime_sieve.primes import InvalidArgument, sieve


class TestNthPrime:

    @pytest.mark.parametrize("k, expected", [
        (1, 2), (2, 3), (3, 5), (4, 7), (5, 11), (6, 13), (7, 17),
        (100, 541), (1000, 7919)
    ])
    def test_known_values(self, k, expected):
        assert nth_prime(k) == expected

    def test_10001st_prime(self):
        assert nth_prime(10001) == 104743

    def test_matches_sieve_indexing(self):
        primes = sieve(2000)
        for k in range(1, len(primes) + 1):
            assert nth_prime(k) == primes[k - 1], f"p_{k} mismatch"

    def test_returns_int(self):
        assert type(nth_prime(10)) is int

    @pytest.mark.parametrize("bad", [0, -1, 1.0, "3"])
    def test_invalid_index(self, bad):
        with pytest.raises(InvalidArgument):
            nth_prime(bad)


class TestSieveBound:

    def test_small_k_fixed_bound(self):
        for k in range(1, 6):
            assert sieve_bound_for_nth(k) == 13

    def test_bound_contains_kth_prime(self):
        """The bound always admits at least k primes."""
        for k in list(range(1, 200)) + [1000, 5000, 10001]:
            bound = sieve_bound_for_nth(k)
            assert len(sieve(bound)) >= k, f"bound {bound} too small for k={k}"

    def test_bound_for_10001(self):
        """Comfortably above 104743 without being wasteful."""
        bound = sieve_bound_for_nth(10001)
        assert 104743 <= bound < 120000


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
