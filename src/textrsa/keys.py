"""The RSA key pair value object.

Typical usage example:

    full = KeyPair(3233, 17, 2753)
    pub = full.public()
    pub.public_only  # True
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing


class KeyPair(typing.NamedTuple):
    """An immutable RSA key pair, or just its public half.

    Attributes:
        n: The modulus of the keypair.
        e: The public exponent.
        d: The private exponent, None if the pair is public-only.
    """
    n: int
    e: int
    d: int | None = None

    @property
    def public_only(self) -> bool:
        """Whether the private exponent is absent."""
        return self.d is None

    @property
    def bsize(self) -> int:
        """Octet length of the modulus, the `k` of PKCS #1."""
        return (self.n.bit_length() + 7) // 8

    def public(self) -> "KeyPair":
        """Strip the private exponent.

        Returns:
            A public-only KeyPair sharing modulus and public exponent.
        """
        return KeyPair(self.n, self.e)
