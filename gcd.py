#!/usr/bin/env python3
"""Greatest common divisor by Euclid's algorithm.

gcd(a, b) does not change when the larger number is replaced by its remainder
modulo the smaller one. The two-number version extends to any count because
gcd(a, b, c) = gcd(gcd(a, b), c).
"""

from functools import reduce

from sieve_errors import InvalidArgument, as_int


def gcd(a, b):
    # gcd(a, b) = gcd(|a|, |b|)
    a = abs(as_int(a, "a"))
    b = abs(as_int(b, "b"))
    while b:
        a, b = b, a % b
    return a


def gcd_many(*numbers):
    if not numbers:
        raise InvalidArgument("gcd_many() needs at least one number")
    return reduce(gcd, numbers, 0)
