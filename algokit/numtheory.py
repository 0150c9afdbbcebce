"""Small number-theory helpers: binomials, Catalan numbers, primes and bit tricks."""

from __future__ import annotations


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k); zero when ``k`` exceeds ``n``."""
    if n < 0 or k < 0:
        raise ValueError("binomial arguments must not be negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("catalan index must not be negative")
    return binomial(2 * n, n) // (n + 1)


def sieve(limit: int) -> list[int]:
    """Return every prime less than or equal to ``limit`` (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    p = 2
    while p * p <= limit:
        if is_prime[p]:
            is_prime[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
        p += 1
    return [number for number, flag in enumerate(is_prime) if flag]


def bitwise_equal(a: int, b: int) -> bool:
    """Report whether two integers are equal, tested with exclusive or alone."""
    return not (a ^ b)