"""Textbook RSA in an Academic Sense.

Provides RSA key generation from random probable primes, the raw RSA primitives and PKCS #1 v1.5 padded
encryption and decryption. Keys are plain immutable value objects, imported simply by constructing them.

Typical usage example:

    key = generate_keys(2048)
    c = encrypt(key, b"Hi there!")
    r = decrypt(key, c)
    pub = KeyPair(key.n, key.e)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from textrsa.errors import DecryptionError
from textrsa.errors import IntegerTooLargeError
from textrsa.errors import InvertibilityError
from textrsa.errors import MessageTooLongError
from textrsa.errors import MissingPrivateKeyError
from textrsa.errors import RepresentativeOutOfRangeError
from textrsa.errors import RSAError
from textrsa.keygen import generate_keys
from textrsa.keygen import generate_prime
from textrsa.keygen import is_probably_prime
from textrsa.keys import KeyPair
from textrsa.rsa import decrypt
from textrsa.rsa import encrypt

__version__ = "0.1.0"
__all__ = [
    "KeyPair",
    "generate_keys",
    "generate_prime",
    "is_probably_prime",
    "encrypt",
    "decrypt",
    "RSAError",
    "MessageTooLongError",
    "DecryptionError",
    "RepresentativeOutOfRangeError",
    "IntegerTooLargeError",
    "InvertibilityError",
    "MissingPrivateKeyError",
]
