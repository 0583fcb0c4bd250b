"""Prime field GF(998244353).

Uses galois library for all field arithmetic. FF is the field type; its
scalars and arrays are always stored in canonical form [0, MOD).

The named operations below are the arithmetic contract used by the NTT and
power series layers. They accept FF scalars (or anything FF can hold) and
return FF scalars.
"""

from typing import Iterable, Union

import galois

# --- Field Construction ---

MOD = 998244353
"""NTT-friendly prime: 119 * 2^23 + 1."""

PRIMITIVE_ROOT = 3
"""Generator of the multiplicative group GF(MOD)*."""

FF = galois.GF(MOD)
"""Prime field GF(MOD)."""

FieldLike = Union[int, FF]


def modint(n: int) -> FF:
    """Build a field element from any integer, reducing it mod MOD."""
    return FF(int(n) % MOD)


def value(a: FF) -> int:
    """Canonical integer representative of a field element."""
    return int(a)


def as_field(values: Iterable[FieldLike]) -> FF:
    """Coerce a sequence of integers or field elements to an FF array.

    FF arrays are returned as is; anything else is reduced element-wise.
    """
    if isinstance(values, FF):
        return values
    reduced = [int(v) % MOD for v in values]
    if not reduced:
        return FF.Zeros(0)
    return FF(reduced)


# --- Arithmetic ---

def add(a: FieldLike, b: FieldLike) -> FF:
    return FF(a) + FF(b)


def sub(a: FieldLike, b: FieldLike) -> FF:
    return FF(a) - FF(b)


def mul(a: FieldLike, b: FieldLike) -> FF:
    return FF(a) * FF(b)


def neg(a: FieldLike) -> FF:
    return sub(0, a)


def power(a: FieldLike, n: int) -> FF:
    """Binary exponentiation, O(log n). n must be non-negative."""
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")
    return FF(a) ** n


def inverse(a: FieldLike) -> FF:
    """Multiplicative inverse via Fermat's little theorem: a^(MOD-2).

    Raises:
        ZeroDivisionError: If a is zero
    """
    a = FF(a)
    if a == 0:
        raise ZeroDivisionError("Cannot invert the zero element of GF(998244353)")
    return power(a, MOD - 2)


def div(a: FieldLike, b: FieldLike) -> FF:
    """a / b. Raises ZeroDivisionError if b is zero."""
    return mul(a, inverse(b))
