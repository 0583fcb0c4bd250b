"""Tests for GF(998244353) arithmetic."""

import pytest

from ntt_fps.field import (
    FF, MOD, PRIMITIVE_ROOT, add, as_field, div, inverse, modint, mul, neg,
    power, sub, value,
)


class TestConstruction:
    """Test element construction and canonical form."""

    def test_modint_reduces(self) -> None:
        assert value(modint(MOD)) == 0
        assert value(modint(MOD + 5)) == 5
        assert value(modint(3 * MOD + 7)) == 7

    def test_modint_negative(self) -> None:
        assert value(modint(-1)) == MOD - 1

    def test_as_field_reduces_each_element(self) -> None:
        arr = as_field([1, MOD + 2, -1])
        assert [int(c) for c in arr] == [1, 2, MOD - 1]

    def test_as_field_empty(self) -> None:
        assert len(as_field([])) == 0

    def test_as_field_passes_field_arrays_through(self) -> None:
        arr = FF([1, 2, 3])
        assert as_field(arr) is arr

    def test_str_is_decimal(self) -> None:
        assert str(modint(12345)) == "12345"


class TestArithmetic:
    """Test named field operations."""

    def test_add_wraps(self) -> None:
        assert add(MOD - 1, 1) == 0
        assert add(MOD - 1, MOD - 1) == MOD - 2

    def test_sub_wraps(self) -> None:
        assert sub(3, 5) == MOD - 2
        assert sub(5, 3) == 2

    def test_mul(self) -> None:
        assert mul(MOD - 1, MOD - 1) == 1
        assert mul(123456, 654321) == 123456 * 654321 % MOD

    @pytest.mark.parametrize("a", [0, 1, 2, 12345, MOD - 1])
    def test_neg_matches_sub_from_zero(self, a: int) -> None:
        assert neg(a) == sub(0, a)
        assert add(a, neg(a)) == 0

    @pytest.mark.parametrize("a", [1, 2, 3, 998244352, 123456789])
    def test_inverse(self, a: int) -> None:
        assert mul(a, inverse(a)) == 1

    def test_inverse_random(self) -> None:
        for a in FF.Random(50, low=1, seed=7):
            assert a * inverse(a) == 1

    def test_inverse_of_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            inverse(0)

    def test_div(self) -> None:
        assert div(6, 3) == 2
        assert mul(div(1, 7), 7) == 1

    def test_div_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            div(1, 0)

    def test_power(self) -> None:
        assert power(2, 10) == 1024
        assert power(5, 0) == 1

    def test_power_negative_exponent_raises(self) -> None:
        with pytest.raises(ValueError):
            power(2, -1)

    def test_fermat(self) -> None:
        """a^(p-1) == 1 for a != 0."""
        assert power(12345, MOD - 1) == 1

    def test_primitive_root_order(self) -> None:
        """3 generates GF(p)*: p - 1 = 2^23 * 7 * 17 and no maximal proper power is 1."""
        for q in (2, 7, 17):
            assert power(PRIMITIVE_ROOT, (MOD - 1) // q) != 1
        assert power(PRIMITIVE_ROOT, MOD - 1) == 1
