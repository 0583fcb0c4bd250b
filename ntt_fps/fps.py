"""Formal power series over GF(998244353).

An FPS is a finite coefficient array standing for an infinite series whose
remaining coefficients are zero. Index i holds the coefficient of x^i.
Trailing zeros are insignificant and are trimmed after every operation, so
len(f) is always degree + 1 and the zero series has length 0.

Analytic operations (inverse, log, exp) are only defined modulo x^len for a
requested precision len. They run Newton iterations that double the achieved
precision each round, so their total cost is a constant multiple of one
convolution of size len.
"""

from typing import Iterable, Optional, Tuple, Union

import numpy as np

from ntt_fps import field
from ntt_fps.factorial import inverse_table
from ntt_fps.field import FF, FieldLike, as_field, modint
from ntt_fps.ntt import ceil_log2, check_capacity, convolution, intt, ntt


class FPS:
    """Formal power series with coefficients in FF."""

    # Let numpy scalars defer to FPS operators, e.g. FF(2) * f
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, coeffs: Iterable[FieldLike] = ()) -> None:
        self._coeffs = as_field(coeffs).copy()
        self._normalize()

    @classmethod
    def sparse(cls, terms: Iterable[Tuple[int, FieldLike]]) -> 'FPS':
        """Build from (index, value) pairs. Later pairs overwrite earlier ones."""
        f = cls()
        for index, value in terms:
            f.set(index, value)
        return f

    @classmethod
    def _wrap(cls, coeffs: FF) -> 'FPS':
        """Take ownership of an FF array without copying it."""
        f = cls.__new__(cls)
        f._coeffs = coeffs
        f._normalize()
        return f

    def _normalize(self) -> None:
        nonzero = np.flatnonzero(self._coeffs.view(np.ndarray))
        if nonzero.size == 0:
            self._coeffs = FF.Zeros(0)
        else:
            self._coeffs = self._coeffs[:nonzero[-1] + 1]

    # --- Access ---

    @property
    def coeffs(self) -> FF:
        """Copy of the significant coefficients."""
        return self._coeffs.copy()

    def __len__(self) -> int:
        return len(self._coeffs)

    def __iter__(self):
        return iter(self._coeffs.copy())

    def is_zero(self) -> bool:
        return len(self._coeffs) == 0

    def get(self, n: int) -> FF:
        """Coefficient of x^n; zero beyond the stored range."""
        _check_index(n)
        if n < len(self._coeffs):
            return self._coeffs[n]
        return FF(0)

    __getitem__ = get

    def set(self, n: int, value: FieldLike) -> None:
        """Assign the coefficient of x^n, growing the storage if needed."""
        _check_index(n)
        if n >= len(self._coeffs):
            grown = FF.Zeros(n + 1)
            grown[:len(self._coeffs)] = self._coeffs
            self._coeffs = grown
        self._coeffs[n] = modint(value)
        self._normalize()

    __setitem__ = set

    def truncate(self, n: int) -> None:
        """Discard the coefficients of x^k for k >= n, in place."""
        _check_index(n)
        self._coeffs = self._coeffs[:n]
        self._normalize()

    def truncated(self, n: int) -> 'FPS':
        """self mod x^n, as a new series."""
        _check_index(n)
        return FPS._wrap(self._coeffs[:n].copy())

    # --- Ring Operations ---

    def add(self, other: 'FPS') -> 'FPS':
        n = max(len(self), len(other))
        out = FF.Zeros(n)
        out[:len(self)] = self._coeffs
        out[:len(other)] = out[:len(other)] + other._coeffs
        return FPS._wrap(out)

    def sub(self, other: 'FPS') -> 'FPS':
        n = max(len(self), len(other))
        out = FF.Zeros(n)
        out[:len(self)] = self._coeffs
        out[:len(other)] = out[:len(other)] - other._coeffs
        return FPS._wrap(out)

    def mul(self, other: Union['FPS', FieldLike]) -> 'FPS':
        """Product with another series (NTT convolution) or with a scalar."""
        if isinstance(other, FPS):
            return FPS._wrap(convolution(self._coeffs, other._coeffs))
        if _is_scalar(other):
            return FPS._wrap(self._coeffs * modint(other))
        raise TypeError(f"Cannot multiply FPS by {type(other).__name__}")

    def neg(self) -> 'FPS':
        return FPS().sub(self)

    def __add__(self, other):
        if not isinstance(other, FPS):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, FPS):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, FPS) and not _is_scalar(other):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __neg__(self):
        return self.neg()

    def __iadd__(self, other):
        if not isinstance(other, FPS):
            return NotImplemented
        self._coeffs = self.add(other)._coeffs
        return self

    def __isub__(self, other):
        if not isinstance(other, FPS):
            return NotImplemented
        self._coeffs = self.sub(other)._coeffs
        return self

    def __imul__(self, other):
        if not isinstance(other, FPS) and not _is_scalar(other):
            return NotImplemented
        self._coeffs = self.mul(other)._coeffs
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, FPS):
            if isinstance(other, (list, tuple, np.ndarray)):
                other = FPS(other)
            else:
                return NotImplemented
        return np.array_equal(
            self._coeffs.view(np.ndarray), other._coeffs.view(np.ndarray)
        )

    # --- Shifts ---

    def shift_left(self, n: int) -> 'FPS':
        """self * x^n."""
        _check_index(n)
        if self.is_zero():
            return FPS()
        out = FF.Zeros(len(self) + n)
        out[n:] = self._coeffs
        return FPS._wrap(out)

    def shift_right(self, n: int) -> 'FPS':
        """self / x^n, dropping the n lowest coefficients.

        Raises:
            ValueError: If n exceeds the number of stored coefficients
        """
        _check_index(n)
        if n > len(self):
            raise ValueError(
                f"Cannot shift right by {n}: series has only {len(self)} coefficients"
            )
        return FPS._wrap(self._coeffs[n:].copy())

    def split(self, n: int) -> Tuple['FPS', 'FPS']:
        """Return (low, high) with self == low + high * x^n and len(low) <= n."""
        _check_index(n)
        low = FPS._wrap(self._coeffs[:n].copy())
        high = FPS._wrap(self._coeffs[n:].copy())
        return low, high

    # --- Analytic Operations ---

    def derivative(self) -> 'FPS':
        n = len(self)
        if n <= 1:
            return FPS()
        return FPS._wrap(self._coeffs[1:] * FF(np.arange(1, n)))

    def integral(self) -> 'FPS':
        """Antiderivative with zero constant term."""
        n = len(self)
        out = FF.Zeros(n + 1)
        out[1:] = self._coeffs * inverse_table(n)
        return FPS._wrap(out)

    def inverse(self, length: Optional[int] = None) -> 'FPS':
        """g with self * g == 1 mod x^length.

        Newton iteration g <- g * (2 - f * g), doubling the precision d each
        round. With g of degree < d and f cut to 2d terms the product
        g * (2 - f * g) has degree < 4d, so a 4d-point cyclic transform
        evaluates it without wraparound.

        Raises:
            ValueError: If the constant term is zero
        """
        length = len(self) if length is None else length
        _check_index(length)
        f0 = self.get(0)
        if f0 == 0:
            raise ValueError("FPS inverse requires a non-zero constant term")
        if length == 0:
            return FPS()

        g = FF([int(field.inverse(f0))])
        d = 1
        while d < length:
            n_bits = ceil_log2(4 * d)
            check_capacity(n_bits)
            t = 1 << n_bits

            k = min(2 * d, len(self))
            fa = FF.Zeros(t)
            fa[:k] = self._coeffs[:k]
            ga = FF.Zeros(t)
            ga[:d] = g

            ntt(fa, n_bits)
            ntt(ga, n_bits)
            fa = ga * (FF(2) - fa * ga)
            intt(fa, n_bits)

            d *= 2
            g = fa[:d] * field.inverse(t)

        return FPS._wrap(g[:length].copy())

    def log(self, length: Optional[int] = None) -> 'FPS':
        """log(self) mod x^length, computed as the integral of f' / f.

        Raises:
            ValueError: If the constant term is not 1
        """
        length = len(self) if length is None else length
        _check_index(length)
        if self.get(0) != 1:
            raise ValueError("FPS log requires constant term 1")
        if length == 0:
            return FPS()

        quotient = self.truncated(length).derivative() * self.inverse(length - 1)
        quotient.truncate(length - 1)
        return quotient.integral()

    def exp(self, length: Optional[int] = None) -> 'FPS':
        """exp(self) mod x^length.

        Newton iteration g <- g * (1 - log(g) + f), doubling the precision d
        each round from g = 1. Without an explicit length the result keeps at
        least one term, so the zero series maps to 1.

        Raises:
            ValueError: If the constant term is not 0
        """
        length = max(len(self), 1) if length is None else length
        _check_index(length)
        if self.get(0) != 0:
            raise ValueError("FPS exp requires constant term 0")
        if length == 0:
            return FPS()

        one = FPS([1])
        g = FPS([1])
        d = 1
        while d < length:
            d *= 2
            g = g * (one - g.log(d) + self.truncated(d))
            g.truncate(d)

        g.truncate(length)
        return g

    # --- Formatting ---

    def __str__(self) -> str:
        if self.is_zero():
            return "0x^0"
        return " + ".join(f"{int(c)}x^{i}" for i, c in enumerate(self._coeffs))

    def __repr__(self) -> str:
        return f"FPS({[int(c) for c in self._coeffs]})"


def _is_scalar(value) -> bool:
    if isinstance(value, FF):
        return value.ndim == 0
    return isinstance(value, (int, np.integer))


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"Index must be non-negative, got {n}")
