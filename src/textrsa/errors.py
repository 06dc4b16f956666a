"""Exceptions raised by the RSA primitives, the PKCS #1 v1.5 codec and key generation.

Each error derives from `RSAError` as well as the builtin exception matching its nature, so callers may catch either
the precise type, the package-wide base or the plain builtin.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAError(Exception):
    """Base class for all textrsa errors."""


class MessageTooLongError(RSAError, ValueError):
    """The plaintext does not fit the padded block of the key."""


class DecryptionError(RSAError, RuntimeError):
    """The decrypted block is not a well-formed PKCS #1 v1.5 block.

    Raised with the same message for every structural violation, so the failing check is not revealed.
    """


class RepresentativeOutOfRangeError(RSAError, ValueError):
    """The integer message or ciphertext representative is outside the accepted range."""


class IntegerTooLargeError(RSAError, ValueError):
    """An integer cannot be represented in the requested number of octets."""


class InvertibilityError(RSAError, ValueError):
    """The value has no multiplicative inverse for the given modulus."""


class MissingPrivateKeyError(RSAError, RuntimeError):
    """A private-key operation was requested on a public-only key."""
