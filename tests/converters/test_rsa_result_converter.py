import json

import pytest
from gmpy2 import mpz

from textbook_rsa.converters import RSAResultConverter
from textbook_rsa.rsa import KeyPair, RSAResult
from textbook_rsa.rsa.KeyPair import PrivateKey, PublicKey


@pytest.fixture
def key_pair():
    """Fixture with N=143, e=7, d=103."""
    return KeyPair(PublicKey(mpz(7), mpz(143)), PrivateKey(mpz(103), mpz(143)))

@pytest.fixture
def cipher():
    return [mpz(pow(72, 7, 143)), mpz(pow(105, 7, 143))]


def test_to_dict_with_keys(key_pair, cipher):
    """Test conversion of a full result including key material and length."""
    result = RSAResult("Hi", cipher, "Hi", key_pair, 8)
    data = RSAResultConverter.to_dict(result)

    assert data["message"] == "Hi"
    assert data["cipher"] == [pow(72, 7, 143), pow(105, 7, 143)]
    assert data["encrypted"] == chr(pow(72, 7, 143)) + chr(pow(105, 7, 143))
    assert data["decrypted"] == "Hi"
    assert data["equal"] is True
    assert data["private"] == {"d": 103, "N": 143}
    assert data["public"] == {"e": 7, "N": 143}
    assert data["length"] == "8 Bit"

def test_to_dict_without_keys(cipher):
    """Test that key material and length are left out when absent."""
    result = RSAResult("Hi", cipher, "Hx")
    data = RSAResultConverter.to_dict(result)

    assert data["equal"] is False
    assert "private" not in data
    assert "public" not in data
    assert "length" not in data

def test_to_dict_is_json_serializable(key_pair, cipher):
    """Test that the dictionary only holds plain values."""
    data = RSAResultConverter.to_dict(RSAResult("Hi", cipher, "Hi", key_pair, 8))
    assert json.loads(json.dumps(data)) == data
