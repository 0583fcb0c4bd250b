"""Number Theoretic Transform over GF(998244353).

The forward transform runs coarse-to-fine Cooley-Tukey butterflies and leaves
its output in bit-reversed order; the inverse transform runs the mirrored
Gentleman-Sande schedule and consumes bit-reversed input. No explicit
permutation is ever applied, and neither direction scales by 1/n.

Twiddles are advanced between butterfly blocks with the trailing-ones trick:
moving from block s to block s+1 multiplies the running root by
RATE[trailing_ones(s)].
"""

from functools import lru_cache
from typing import Iterable

import numpy as np

from ntt_fps.field import FF, MOD, FieldLike, as_field, inverse

# --- Twiddle Tables ---

MAX_TRANSFORM_BITS = 23
"""Largest supported transform is 2^23 points."""

# RATE[i] = w_{i+2} * prod_{j<i} w_{j+2}^(-1), where w_k is the primitive
# 2^k-th root of unity 3^((MOD-1) >> k).
RATE = [
    911660635, 509520358, 369330050, 332049552, 983190778, 123842337,
    238493703, 975955924, 603855026, 856644456, 131300601, 842657263,
    730768835, 942482514, 806263778, 151565301, 510815449, 503497456,
    743006876, 741047443, 56250497, 867605899,
]

# IRATE[i] = RATE[i]^(-1)
IRATE = [
    86583718, 372528824, 373294451, 645684063, 112220581, 692852209,
    155456985, 797128860, 90816748, 860285882, 927414960, 354738543,
    109331171, 293255632, 535113200, 308540755, 121186627, 608385704,
    438932459, 359477183, 824071951, 103369235,
]


def check_capacity(n_bits: int) -> None:
    """Reject transform sizes the twiddle tables cannot serve."""
    if n_bits > MAX_TRANSFORM_BITS:
        raise ValueError(
            f"Transform size 2^{n_bits} exceeds maximum 2^{MAX_TRANSFORM_BITS}"
        )


# --- Transforms ---

def ntt(a: FF, n_bits: int) -> None:
    """Forward NTT of a length 2^n_bits buffer, in place."""
    assert len(a) == 1 << n_bits, "Buffer length must be 2^n_bits"
    check_capacity(n_bits)

    for level in range(n_bits):
        p = 1 << (n_bits - level - 1)
        blocks = a.reshape(1 << level, 2, p)
        rot = _rotations(1 << level, False)[:, np.newaxis]

        left = blocks[:, 0, :]
        right = blocks[:, 1, :] * rot
        blocks[:, 1, :] = left - right
        blocks[:, 0, :] = left + right


def intt(a: FF, n_bits: int) -> None:
    """Inverse NTT of a length 2^n_bits buffer, in place, without 1/n scaling."""
    assert len(a) == 1 << n_bits, "Buffer length must be 2^n_bits"
    check_capacity(n_bits)

    for level in range(n_bits, 0, -1):
        p = 1 << (n_bits - level)
        blocks = a.reshape(1 << (level - 1), 2, p)
        irot = _rotations(1 << (level - 1), True)[:, np.newaxis]

        left = blocks[:, 0, :]
        right = blocks[:, 1, :]
        diff = (left - right) * irot
        blocks[:, 0, :] = left + right
        blocks[:, 1, :] = diff


def convolution(a: Iterable[FieldLike], b: Iterable[FieldLike]) -> FF:
    """Product of two coefficient sequences.

    Returns an FF array of length len(a) + len(b) - 1, or an empty array if
    either operand is empty.

    Raises:
        ValueError: If the padded length exceeds 2^MAX_TRANSFORM_BITS
    """
    a = as_field(a)
    b = as_field(b)
    if len(a) == 0 or len(b) == 0:
        return FF.Zeros(0)

    s = len(a) + len(b) - 1
    n_bits = ceil_log2(s)
    check_capacity(n_bits)
    t = 1 << n_bits

    fa = FF.Zeros(t)
    fa[:len(a)] = a
    fb = FF.Zeros(t)
    fb[:len(b)] = b

    ntt(fa, n_bits)
    ntt(fb, n_bits)
    fa = fa * fb
    intt(fa, n_bits)

    return fa[:s] * inverse(t)


# --- Helpers ---

def ceil_log2(size: int) -> int:
    """Smallest k with 2^k >= size."""
    assert size > 0
    return (size - 1).bit_length()


def _trailing_ones(s: int) -> int:
    return (~s & (s + 1)).bit_length() - 1


@lru_cache(maxsize=None)
def _rotations(count: int, inverse_rates: bool) -> FF:
    """Running twiddle for each of `count` consecutive butterfly blocks.

    The rotation is only advanced between blocks, so a pass over 2^k blocks
    reads RATE up to index k-1 and 2^23-point transforms fit the tables.
    """
    rates = IRATE if inverse_rates else RATE
    rots = [1] * count
    for s in range(count - 1):
        rots[s + 1] = rots[s] * rates[_trailing_ones(s)] % MOD
    return FF(rots)
