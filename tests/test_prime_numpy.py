import numpy as np
import pytest

import prime
import prime_numpy
from sieve_errors import InvalidArgument, ResourceExceeded


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 11, 49, 50, 1000])
def test_base_primes_matches_python(n):
    assert prime_numpy.base_primes(n) == prime.base_primes(n)


def test_returns_plain_ints():
    primes = prime_numpy.base_primes(20)
    assert all(type(p) is int for p in primes)
    assert all(type(p) is int for p in prime_numpy.primes_between(20, 40, primes))


def test_accepts_numpy_integers():
    assert prime_numpy.base_primes(np.int64(10)) == [2, 3, 5, 7]


def test_primes_between():
    assert prime_numpy.primes_between(7, 14, [2, 3, 5, 7]) == [11, 13]
    assert prime_numpy.primes_between(14, 14, [2, 3]) == []
    assert prime_numpy.primes_between(90, 100, [2, 3, 5, 7]) == [97]


def test_rejects_negative():
    with pytest.raises(InvalidArgument):
        prime_numpy.base_primes(-1)


def _no_memory(*args, **kwargs):
    raise MemoryError


def test_allocation_failure_is_resource_exceeded(monkeypatch):
    monkeypatch.setattr(np, "ones", _no_memory)
    with pytest.raises(ResourceExceeded):
        prime_numpy.base_primes(100)
    with pytest.raises(ResourceExceeded):
        prime_numpy.primes_between(100, 110, [2, 3, 5, 7])
