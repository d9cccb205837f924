"""
Tests for the caller-owned SieveCache.
"""

import pytest

from prime_sieve.cache import SieveCache
from prime_sieve.primes import InvalidArgument, sieve


class TestSieveCache:

    def test_empty_cache(self):
        cache = SieveCache()
        assert cache.bound == -1
        assert cache.hits == 0
        assert cache.misses == 0

    def test_matches_sieve(self):
        cache = SieveCache()
        for n in [0, 1, 2, 50, 10, 1000, 999, 3]:
            assert cache.primes(n) == sieve(n), f"cache.primes({n}) mismatch"

    def test_smaller_query_is_a_hit(self):
        cache = SieveCache()
        cache.primes(1000)
        assert cache.misses == 1
        assert cache.bound == 1000

        cache.primes(100)
        cache.primes(1000)
        assert cache.hits == 2
        assert cache.misses == 1
        assert cache.bound == 1000

    def test_larger_query_resieves(self):
        cache = SieveCache()
        cache.primes(100)
        cache.primes(200)
        assert cache.misses == 2
        assert cache.bound == 200

    def test_prime_pi(self):
        cache = SieveCache()
        assert cache.prime_pi(1000) == 168
        assert cache.prime_pi(100) == 25
        assert cache.prime_pi(1) == 0

    def test_is_prime(self):
        cache = SieveCache()
        assert cache.is_prime(97)
        assert not cache.is_prime(91)
        assert not cache.is_prime(0)
        assert not cache.is_prime(1)
        assert cache.is_prime(2)

    def test_mutating_result_does_not_corrupt_cache(self):
        cache = SieveCache()
        result = cache.primes(30)
        result.clear()
        assert cache.primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_independent_caches(self):
        """No state is shared between cache instances."""
        a = SieveCache()
        b = SieveCache()
        a.primes(500)
        assert b.bound == -1

    def test_clear(self):
        cache = SieveCache()
        cache.primes(100)
        cache.clear()
        assert cache.bound == -1
        assert cache.misses == 0

    def test_invalid_bound(self):
        cache = SieveCache()
        with pytest.raises(InvalidArgument):
            cache.primes(-1)
        assert cache.bound == -1


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
