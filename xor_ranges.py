#!/usr/bin/env python3
"""XOR of values[i..j] for many (i, j) queries in O(1) each.

X[i] = values[0] ^ ... ^ values[i] is computed once. Since x ^ x = 0, the XOR of
values[i..j] is X[j] ^ X[i - 1].
"""

from itertools import accumulate
from operator import xor

from sieve_errors import InvalidArgument, as_int


def prefix_xor(values):
    """Return X with X[i] = values[0] ^ ... ^ values[i]."""
    return list(accumulate((as_int(v, "value") for v in values), xor))


def range_xor(values, queries):
    """Answer each inclusive (i, j) query with values[i] ^ ... ^ values[j]."""
    prefix = prefix_xor(values)
    answers = []
    for i, j in queries:
        i, j = as_int(i, "i"), as_int(j, "j")
        if not 0 <= i <= j < len(prefix):
            raise InvalidArgument(f"query ({i}, {j}) is outside 0..{len(prefix) - 1}")
        answers.append(prefix[j] ^ prefix[i - 1] if i > 0 else prefix[j])
    return answers
