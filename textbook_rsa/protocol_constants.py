# protocol_constants.py

DEFAULT_KEY_LENGTH = 16           # RSA modulus bit size
DEFAULT_MESSAGE = "Hello World!"  # Clear text to encrypt
MIN_KEY_LENGTH = 4                # Two distinct 2 bit primes, 2 and 3
