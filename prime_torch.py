#!/usr/bin/env python3
"""
Sieve backend on PyTorch tensors.

The same two sieves as prime.py / prime_segmented.py, with the flag arrays held
in a torch.bool tensor. On a machine with CUDA or Apple Silicon the masks live
on the accelerator; only the extracted primes come back to the CPU.

Examples:
  python prime_segmented.py --limit 1000000000 --backend torch
"""

import math

import torch

from sieve_errors import ResourceExceeded, check_limit


def default_device() -> torch.device:
    if torch.cuda.is_available():
        return torch.device("cuda")
    if torch.backends.mps.is_available():
        return torch.device("mps")
    return torch.device("cpu")


def _ones(size: int, device: torch.device) -> torch.Tensor:
    try:
        return torch.ones(size, dtype=torch.bool, device=device)
    except (MemoryError, torch.cuda.OutOfMemoryError) as exc:
        raise ResourceExceeded(f"cannot allocate a sieve of {size:,} entries on {device}") from exc
    except RuntimeError as exc:
        # MPS reports exhaustion as a plain RuntimeError
        if "out of memory" not in str(exc):
            raise
        raise ResourceExceeded(f"cannot allocate a sieve of {size:,} entries on {device}") from exc


def base_primes(n: int, max_limit: int | None = None, device: torch.device | None = None) -> list[int]:
    n = check_limit(n, max_limit)
    if n < 2:
        return []
    device = device or default_device()

    is_prime = _ones(n, device)
    is_prime[:2] = False
    for p in range(2, math.isqrt(n - 1) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = False
    return torch.nonzero(is_prime, as_tuple=False).squeeze(1).to("cpu").tolist()


def primes_between(low: int, high: int, primes: list[int], device: torch.device | None = None) -> list[int]:
    size = high - low + 1
    if size <= 1:
        return []
    device = device or default_device()

    mask = _ones(size, device)

    # Mark composites for base primes
    for p in primes:
        if p * p > high:
            break
        start = ((low + p) // p) * p
        mask[start - low :: p] = False

    # Extract primes in this window, skipping low itself
    idx = torch.nonzero(mask[1:], as_tuple=False).squeeze(1)
    if not idx.numel():
        return []
    return (idx + (low + 1)).to("cpu").tolist()
