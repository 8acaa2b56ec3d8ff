#!/usr/bin/env python3
import math

import numpy as np

from sieve_errors import ResourceExceeded, check_limit


def _ones(size: int) -> np.ndarray:
    try:
        return np.ones(size, dtype=bool)
    except MemoryError as exc:
        raise ResourceExceeded(f"cannot allocate a sieve of {size:,} entries") from exc


def base_primes(n: int, max_limit: int | None = None) -> list[int]:
    """Classic sieve below 'n' (exclusive), vectorized strided clears."""
    n = check_limit(n, max_limit)
    if n < 2:
        return []
    is_prime = _ones(n)
    is_prime[:2] = False
    for p in range(2, math.isqrt(n - 1) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = False
    return np.flatnonzero(is_prime).tolist()


def primes_between(low: int, high: int, primes: list[int]) -> list[int]:
    """Primes in (low, high], sieved against the ascending list 'primes'."""
    size = high - low + 1
    if size <= 1:
        return []
    mask = _ones(size)

    for p in primes:
        if p * p > high:
            break
        # first multiple strictly above low
        start = ((low + p) // p) * p
        mask[start - low :: p] = False

    # offset 0 is low itself, reported by the previous window
    idx = np.flatnonzero(mask[1:])
    return (idx + (low + 1)).tolist()
