import pytest
from gmpy2 import mpz

from textbook_rsa.exceptions import RetryBudgetExceededError
from textbook_rsa.primes import Primes
from textbook_rsa.random import Random


FIRST_50_PRIMES = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229,
]


@pytest.fixture
def state():
    """Fixture to create a reproducible random state."""
    return Random.get_random(1234)


def test_is_prime_accepts_first_50_primes():
    """Test that every one of the first 50 primes is accepted."""
    for p in FIRST_50_PRIMES:
        assert Primes.is_prime(mpz(p)), p

def test_is_prime_rejects_composites():
    """Test that every composite up to the 50th prime is rejected."""
    composites = [x for x in range(2, FIRST_50_PRIMES[-1] + 1) if x not in FIRST_50_PRIMES]
    for x in composites:
        assert not Primes.is_prime(mpz(x)), x

def test_is_prime_square_of_prime():
    """Test that the loop bound includes the square root itself."""
    assert not Primes.is_prime(mpz(49))
    assert not Primes.is_prime(mpz(169))

def test_get_n_bit_prime_has_exact_bit_length(state):
    """Test that generated primes are prime and exactly n_bit long."""
    for n_bit in (2, 3, 8, 16, 20):
        p = Primes.get_n_bit_prime(n_bit, state)
        assert isinstance(p, mpz)
        assert p.bit_length() == n_bit
        assert Primes.is_prime(p)

def test_get_n_bit_prime_two_bits(state):
    """Test that the only 2 bit candidates are 2 and 3, both prime."""
    assert Primes.get_n_bit_prime(2, state) in (2, 3)

def test_get_n_bit_prime_retry_budget(state, monkeypatch):
    """Test that a bounded search fails explicitly when no candidate is prime."""
    monkeypatch.setattr(Random, "get_n_bit_number", staticmethod(lambda state, n_bit: mpz(15)))
    with pytest.raises(RetryBudgetExceededError) as e:
        Primes.get_n_bit_prime(4, state, max_attempts=5)
    assert e.value.max_attempts == 5

def test_get_n_bit_prime_counts_attempts(state):
    """Test that the prime search draws until a candidate passes."""
    candidates = iter([mpz(8), mpz(9), mpz(15), mpz(11)])
    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(Random, "get_n_bit_number", staticmethod(lambda state, n_bit: next(candidates)))
        assert Primes.get_n_bit_prime(4, state, max_attempts=4) == 11
