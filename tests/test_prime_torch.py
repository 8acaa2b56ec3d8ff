import pytest

torch = pytest.importorskip("torch")

import prime
import prime_torch
from prime_segmented import segmented_primes
from sieve_errors import ResourceExceeded

cpu = torch.device("cpu")


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 11, 49, 50, 1000])
def test_base_primes_matches_python(n):
    assert prime_torch.base_primes(n, device=cpu) == prime.base_primes(n)


def test_primes_between():
    assert prime_torch.primes_between(7, 14, [2, 3, 5, 7], device=cpu) == [11, 13]
    assert prime_torch.primes_between(24, 28, [2, 3, 5], device=cpu) == []
    assert prime_torch.primes_between(90, 100, [2, 3, 5, 7], device=cpu) == [97]


def test_default_device():
    assert isinstance(prime_torch.default_device(), torch.device)


@pytest.mark.parametrize("n", [2, 30, 49, 50, 10_000])
def test_segmented(n):
    assert segmented_primes(n, backend="torch") == prime.base_primes(n + 1)


def test_mps_out_of_memory_is_resource_exceeded(monkeypatch):
    def no_memory(*args, **kwargs):
        raise RuntimeError("MPS backend out of memory (MPS allocated: 1 GB)")

    monkeypatch.setattr(torch, "ones", no_memory)
    with pytest.raises(ResourceExceeded):
        prime_torch.base_primes(100, device=cpu)
    with pytest.raises(ResourceExceeded):
        prime_torch.primes_between(100, 110, [2, 3, 5, 7], device=cpu)


def test_other_runtime_errors_propagate(monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("unsupported device")

    monkeypatch.setattr(torch, "ones", broken)
    with pytest.raises(RuntimeError, match="unsupported device"):
        prime_torch.base_primes(100, device=cpu)
