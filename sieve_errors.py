#!/usr/bin/env python3
"""Errors raised by the sieves and the small number utilities."""

import operator


class SieveError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidArgument(SieveError, ValueError):
    """A bound or operand that is negative, non-integral or otherwise unusable."""


class ResourceExceeded(SieveError, MemoryError):
    """The requested work does not fit in the configured or available memory."""


def as_int(value, name="n"):
    """Return 'value' as a plain int, rejecting floats, strings and bools."""
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}") from None


def check_limit(n, max_limit=None):
    """Validate a sieve bound and return it as an int."""
    n = as_int(n)
    if n < 0:
        raise InvalidArgument(f"n must be non-negative, got {n}")
    if max_limit is not None and n > max_limit:
        raise ResourceExceeded(f"n={n:,} is above the allowed maximum of {max_limit:,}")
    return n
