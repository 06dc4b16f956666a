"""Elementary number theory used by key generation.

Typical usage example:

    gcd(65537, phi)
    d = modinv(65537, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from textrsa.errors import InvertibilityError


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean remainder loop.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of `a` and `b`.
    """
    while b != 0:
        a, b = b, a % b
    return a


def modinv(a: int, n: int) -> int:
    """Implements the modular inverse by the Extended Euclidean Algorithm.

    Only the Bezout coefficient of `a` is tracked, such that a*t = r (mod n) at every step.

    Args:
        a: The value to invert.
        n: The modulus.

    Returns:
        The inverse of `a` modulo `n`, in range [0, n).

    Raises:
        InvertibilityError: If `a` and `n` are not coprime.
    """
    t, new_t = 0, 1
    r, new_r = n, a
    while new_r != 0:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r > 1:
        raise InvertibilityError(f"{a} is not invertible modulo {n}.")
    if t < 0:
        t += n
    return t
