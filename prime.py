#!/usr/bin/env python3

import argparse

from sieve_errors import ResourceExceeded, SieveError, check_limit


def base_primes(n, max_limit=None):
    """Use the Sieve of Eratosthenes to find all prime numbers below 'n'."""
    n = check_limit(n, max_limit)
    if n < 2:
        return []

    try:
        # Initialize a boolean array that indicates whether each number is prime
        is_prime = [True] * n
        is_prime[0] = is_prime[1] = False
        p = 2

        # Smaller multiples of p were already crossed off by a smaller factor
        while p * p < n:
            if is_prime[p]:
                for i in range(p * p, n, p):
                    is_prime[i] = False
            p += 1

        # Collect all prime numbers
        return [i for i in range(n) if is_prime[i]]
    except MemoryError as exc:
        raise ResourceExceeded(f"cannot allocate a sieve of {n:,} entries") from exc


def main():
    ap = argparse.ArgumentParser(description="Full Sieve of Eratosthenes.")
    ap.add_argument("--limit", type=int, default=1_000_000,
                    help="Generate all primes below LIMIT (default: 1,000,000).")
    args = ap.parse_args()

    print(f"Calculating all prime numbers below {args.limit}...")
    try:
        primes = base_primes(args.limit)
    except SieveError as exc:
        ap.error(str(exc))

    print(f"Found {len(primes)} prime numbers.")
    print(f"The first 100 primes are: {primes[:100]}")
    print(f"The last 100 primes are: {primes[-100:]}")


if __name__ == "__main__":
    main()
