"""Tests for modular arithmetic helpers."""

import math

import pytest

from cipherlab.core.exceptions import NoInverseError, ValidationError
from cipherlab.services.arithmetic import euclid, extended_gcd, gcd, mod, mod_inverse


class TestGcd:
    """Test suite for gcd and Euclidean modulo."""

    def test_gcd_basic(self):
        assert gcd(12, 18) == 6
        assert gcd(15, 26) == 1
        assert gcd(7, 0) == 7

    def test_gcd_zero_zero(self):
        assert gcd(0, 0) == 0

    def test_gcd_negative_inputs(self):
        assert gcd(-12, 18) == 6
        assert gcd(12, -18) == 6
        assert gcd(-12, -18) == 6

    def test_mod_negative(self):
        assert mod(-1, 26) == 25
        assert mod(-27, 26) == 25
        assert mod(52, 26) == 0

    def test_mod_rejects_non_positive_modulus(self):
        with pytest.raises(ValidationError):
            mod(5, 0)
        with pytest.raises(ValidationError):
            mod(5, -26)


class TestExtendedGcd:
    """Test suite for the extended Euclidean algorithm."""

    def test_known_coefficients(self):
        assert extended_gcd(15, 26) == (1, 7, -4)

    def test_bezout_identity(self):
        """a*x + b*y == gcd for every pair, including negatives and zero."""
        for a in range(-30, 31):
            for b in range(-30, 31):
                g, x, y = extended_gcd(a, b)
                assert a * x + b * y == g
                assert g == math.gcd(a, b)

    def test_base_case(self):
        assert extended_gcd(9, 0) == (9, 1, 0)
        assert extended_gcd(0, 0) == (0, 1, 0)


class TestModInverse:
    """Test suite for modular inverses."""

    def test_known_inverse(self):
        assert mod_inverse(15, 26) == 7

    def test_all_units_mod_26(self):
        for a in range(1, 26):
            if math.gcd(a, 26) != 1:
                continue
            inverse = mod_inverse(a, 26)
            assert 0 <= inverse < 26
            assert (a * inverse) % 26 == 1

    def test_negative_value_normalized(self):
        inverse = mod_inverse(-3, 26)
        assert inverse == 17
        assert (-3 * inverse) % 26 == 1

    def test_no_inverse_carries_diagnostics(self):
        with pytest.raises(NoInverseError) as exc_info:
            mod_inverse(13, 26)

        assert exc_info.value.value == 13
        assert exc_info.value.gcd == 13
        assert exc_info.value.modulus == 26

    def test_zero_has_no_inverse(self):
        with pytest.raises(NoInverseError):
            mod_inverse(0, 26)


class TestEuclid:
    """Test suite for the combined Euclid operation."""

    def test_coprime(self):
        result = euclid(15, 26)

        assert result.gcd == 1
        assert result.inverse == 7
        assert (result.x, result.y) == (7, -4)

    def test_not_coprime(self):
        result = euclid(4, 26)

        assert result.gcd == 2
        assert result.inverse is None
        assert 4 * result.x + 26 * result.y == 2

    def test_non_positive_modulus_has_no_inverse(self):
        result = euclid(1, 0)

        assert result.gcd == 1
        assert result.inverse is None
