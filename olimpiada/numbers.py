"""Number theory problems: primes, divisors and perfect squares."""

from __future__ import annotations

from math import isqrt


def _has_divisor(n: int) -> bool:
    return any(n % i == 0 for i in range(2, isqrt(n) + 1))


def is_prime(x: int) -> bool:
    """Whether ``x`` has no divisor between 2 and ``x - 1``; 1 is not prime."""
    if x == 1:
        return False
    if x < 4:
        return True
    return not _has_divisor(x)


def is_composite(n: int) -> bool:
    """Whether ``n`` has a divisor ``d`` with ``2 <= d`` and ``d * d <= n``."""
    if n < 4:
        return False
    return _has_divisor(n)


def divisors(x: int) -> list[int]:
    """All positive divisors of ``x`` in increasing order."""
    return [i for i in range(1, x + 1) if x % i == 0]


def perfect_squares(n: int) -> list[int]:
    """Perfect squares from 1 up to and including ``n``."""
    if n < 1:
        return []
    return [i * i for i in range(1, isqrt(n) + 1)]


def open_lockers(n: int) -> list[int]:
    """Lockers left open after each of ``n`` students toggles the multiples of its number."""
    if n < 0:
        raise ValueError("number of lockers must not be negative")
    return [i for i in range(1, n + 1) if (n // i) % 2 != 0]