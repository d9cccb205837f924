"""
Caller-owned memoization of sieve results.

There is no module-level cache: whoever needs reuse across calls
constructs a SieveCache and passes it around. Because primes <= m are
exactly the primes <= n restricted to [0, m] for m <= n, one flag array
at the largest bound seen answers every smaller query.
"""

import numpy as np
from typing import List, Optional

from .primes import prime_flags_upto, validate_bound


class SieveCache:
    """Keeps the flag array for the largest bound sieved so far."""

    def __init__(self):
        self._flags: Optional[np.ndarray] = None
        self.hits = 0
        self.misses = 0

    @property
    def bound(self) -> int:
        """Largest bound sieved, or -1 when nothing is cached."""
        if self._flags is None:
            return -1
        return len(self._flags) - 1

    def _ensure(self, n: int) -> np.ndarray:
        n = validate_bound(n)
        if n > self.bound:
            self.misses += 1
            self._flags = prime_flags_upto(n)
        else:
            self.hits += 1
        return self._flags[:n + 1]

    def primes(self, n: int) -> List[int]:
        """Primes <= n, same contract as primes.sieve."""
        return np.flatnonzero(self._ensure(n)).tolist()

    def prime_pi(self, n: int) -> int:
        """Number of primes <= n."""
        return int(np.count_nonzero(self._ensure(n)))

    def is_prime(self, n: int) -> bool:
        """True iff n is prime."""
        return bool(self._ensure(n)[-1])

    def clear(self):
        """Drop the cached flags and reset the counters."""
        self._flags = None
        self.hits = 0
        self.misses = 0
