"""Unit tests for factorial and reciprocal tables."""

import math

import pytest

from ntt_fps.factorial import factorial_tables, inverse_table
from ntt_fps.field import FF, MOD


class TestFactorialTables:
    """Tests for factorial_tables."""

    def test_zero(self) -> None:
        fact, inv_fact = factorial_tables(0)
        assert [int(c) for c in fact] == [1]
        assert [int(c) for c in inv_fact] == [1]

    def test_small_values(self) -> None:
        fact, _ = factorial_tables(10)
        assert [int(c) for c in fact] == [math.factorial(i) % MOD for i in range(11)]

    def test_inverse_factorials(self) -> None:
        fact, inv_fact = factorial_tables(200)
        for f, g in zip(fact, inv_fact):
            assert f * g == FF(1)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            factorial_tables(-1)

    def test_beyond_modulus_raises(self) -> None:
        with pytest.raises(ValueError):
            factorial_tables(MOD)


class TestInverseTable:
    """Tests for inverse_table."""

    def test_empty(self) -> None:
        assert len(inverse_table(0)) == 0

    def test_single(self) -> None:
        assert [int(c) for c in inverse_table(1)] == [1]

    def test_many(self) -> None:
        inv = inverse_table(1000)
        assert len(inv) == 1000
        for i, r in enumerate(inv):
            assert r * FF(i + 1) == FF(1)

    def test_matches_scalar_inversion(self) -> None:
        inv = inverse_table(50)
        scalar = [FF(k) ** -1 for k in range(1, 51)]
        for b, s in zip(inv, scalar):
            assert b == s
