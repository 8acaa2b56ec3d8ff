#!/usr/bin/env python3
"""
Segmented Sieve of Eratosthenes.

The full sieve needs one flag per candidate, which gets out of hand for large
limits and has almost no locality of reference. Here [2, n] is cut into windows
of length isqrt(n):

  1. Sieve the first window [0, isqrt(n)] with the classic full sieve.
  2. For each following window (low, low + isqrt(n)], cross off multiples of
     the primes found so far; whatever survives is prime and is appended to
     the same list.

Time is the same as the full sieve, O(n log log n); only one window of flags
is alive at a time, so the working memory is O(sqrt(n)) plus the result.

Examples:
  python prime_segmented.py --limit 1000000000
  python prime_segmented.py --limit 100000 --backend numpy --show 20 -v
"""

import argparse
import logging
import math

import prime
from sieve_errors import InvalidArgument, ResourceExceeded, SieveError, check_limit

log = logging.getLogger(__name__)

# === CONFIG ===
BACKENDS = ("python", "numpy", "torch")
DEFAULT_BACKEND = "python"
SHOW_COUNT = 100            # primes printed from each end by the CLI


def mark_multiples(is_prime, low, high, p):
    """Cross off the multiples of 'p' lying in (low, high]."""
    # Start from the smallest multiple present in the range
    start = ((low + p) // p) * p
    for i in range(start, high + 1, p):
        is_prime[i - low] = False


def primes_between(low, high, primes):
    """Return the primes in (low, high], sieving with the ascending list 'primes'.

    'primes' must hold every prime <= isqrt(high). It is only read.
    """
    size = high - low + 1
    if size <= 1:
        return []
    try:
        # is_prime[k - low] stands for k
        is_prime = [True] * size

        for p in primes:
            if p * p > high:
                break
            mark_multiples(is_prime, low, high, p)

        # Offset 0 is low itself, which belongs to the previous window
        return [low + i for i in range(1, size) if is_prime[i]]
    except MemoryError as exc:
        raise ResourceExceeded(f"cannot allocate a window of {size:,} entries") from exc


def get_backend(name):
    """Return the (base_primes, primes_between) pair for a backend name."""
    if name == "python":
        return prime.base_primes, primes_between
    if name == "numpy":
        import prime_numpy
        return prime_numpy.base_primes, prime_numpy.primes_between
    if name == "torch":
        import prime_torch
        return prime_torch.base_primes, prime_torch.primes_between
    raise InvalidArgument(f"unknown backend {name!r}, expected one of {', '.join(BACKENDS)}")


def segmented_primes(n, backend=DEFAULT_BACKEND, max_limit=None):
    """Return all primes <= n, ascending."""
    n = check_limit(n, max_limit)
    base_sieve, window_sieve = get_backend(backend)
    if n < 2:
        return []

    # Every composite <= n has a prime factor <= isqrt(n), so the bootstrap
    # sieve has to include delta itself.
    delta = math.isqrt(n)
    primes = base_sieve(delta + 1)
    log.debug("bootstrap: %d primes <= %d (%s backend)", len(primes), delta, backend)

    # The same list is both the sieving basis and the result
    low = delta
    windows = 0
    while low <= n:
        high = min(low + delta, n)
        primes.extend(window_sieve(low, high, primes))
        low += delta
        windows += 1

    log.debug("sieved %d windows of %d, found %d primes <= %d", windows, delta, len(primes), n)
    return primes


def main():
    ap = argparse.ArgumentParser(description="Segmented Sieve of Eratosthenes.")
    ap.add_argument("--limit", type=int, required=True, help="Generate all primes <= LIMIT.")
    ap.add_argument("--backend", choices=BACKENDS, default=DEFAULT_BACKEND,
                    help=f"Array backend for the sieve (default: {DEFAULT_BACKEND}).")
    ap.add_argument("--max-limit", type=int, default=None,
                    help="Refuse limits above this value (default: no bound).")
    ap.add_argument("--show", type=int, default=SHOW_COUNT,
                    help=f"Primes to print from each end (default: {SHOW_COUNT}).")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug messages.")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s - %(message)s")

    try:
        primes = segmented_primes(args.limit, backend=args.backend, max_limit=args.max_limit)
    except SieveError as exc:
        ap.error(str(exc))

    show = max(args.show, 0)
    print(f"Mode: primes <= LIMIT | LIMIT: {args.limit:,} | Backend: {args.backend} | Count: {len(primes):,}")
    print(f"\nFirst {show} primes:")
    print(", ".join(map(str, primes[:show])))
    print(f"\nLast {show} primes:")
    print(", ".join(map(str, primes[-show:] if show else [])))


if __name__ == "__main__":
    main()
