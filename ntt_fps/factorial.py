"""Factorial and reciprocal tables over GF(998244353).

Uses the same prefix-product trick as Montgomery batch inversion: n
reciprocals cost one field inversion plus O(n) multiplications.

Algorithm:
1. Forward pass: fact[i] = fact[i-1] * i
2. Single inversion: inv_fact[n] = fact[n]^(-1)
3. Backward pass: inv_fact[i-1] = inv_fact[i] * i
"""

from typing import Tuple

from ntt_fps.field import FF, MOD, inverse


def factorial_tables(n: int) -> Tuple[FF, FF]:
    """Return (fact, inv_fact) with fact[i] = i! and inv_fact[i] = 1/i!, 0 <= i <= n.

    Raises:
        ValueError: If n is negative or n! vanishes mod MOD
    """
    if n < 0:
        raise ValueError(f"Table size must be non-negative, got {n}")
    if n >= MOD:
        raise ValueError(f"{n}! is zero in GF({MOD})")

    fact = [1] * (n + 1)
    for i in range(1, n + 1):
        fact[i] = fact[i - 1] * i % MOD

    inv_fact = [1] * (n + 1)
    inv_fact[n] = int(inverse(fact[n]))
    for i in range(n, 0, -1):
        inv_fact[i - 1] = inv_fact[i] * i % MOD

    return FF(fact), FF(inv_fact)


def inverse_table(n: int) -> FF:
    """Return inv with inv[i] = 1/(i+1) for 0 <= i < n.

    1/k = (k-1)! / k!, so the whole table comes from one factorial pass.
    """
    fact, inv_fact = factorial_tables(n)
    return inv_fact[1:] * fact[:-1]
