import pytest
from gmpy2 import mpz, gcd

from textbook_rsa.euclid import EuclidResult, ExtendedEuclid


@pytest.mark.parametrize("x, y", [
    (7, 120),
    (120, 7),
    (240, 46),
    (17, 3120),
    (12, 18),
    (1, 1),
    (0, 9),
    (9, 0),
])
def test_solve_bezout_identity(x, y):
    """Test that s*x + t*y = a = gcd(x, y)."""
    result = ExtendedEuclid.solve(mpz(x), mpz(y))
    assert result.get_a() == gcd(x, y)
    assert result.get_s() * x + result.get_t() * y == result.get_a()

def test_solve_known_values():
    """Test the coefficients for e=7, phi=120.

    7 * (-17) + 120 * 1 = 1, so the inverse of 7 mod 120 is -17 + 120 = 103.
    """
    result = ExtendedEuclid.solve(mpz(7), mpz(120))
    assert result == EuclidResult(mpz(1), mpz(-17), mpz(1))
    assert result.get_s() % 120 == 103

def test_solve_is_deterministic():
    """Test that identical inputs yield identical results."""
    assert ExtendedEuclid.solve(mpz(65537), mpz(3120)) == ExtendedEuclid.solve(mpz(65537), mpz(3120))

def test_solve_accepts_python_ints():
    """Test that native integers are converted to mpz."""
    result = ExtendedEuclid.solve(35, 15)
    assert isinstance(result.get_a(), mpz)
    assert result.get_a() == 5

def test_solve_negative_input_uses_floor_division():
    """Test that the identity holds with a negative operand."""
    result = ExtendedEuclid.solve(mpz(-7), mpz(120))
    assert result.get_s() * -7 + result.get_t() * 120 == result.get_a()
