"""Core Key Generation Utility, mainly focusing on the generation of random large primes.

This module is responsible for generating RSA key pairs from probable primes. Candidates are random odd integers of
the exact bit length, screened by an iterated Miller-Rabin test.

Typical usage example:

    p = generate_prime(1024)
    is_probably_prime(p)
    key = generate_keys(2048)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets
import typing
from typing import Literal, overload

from textrsa.keys import KeyPair
from textrsa.numtheory import gcd
from textrsa.numtheory import modinv
from textrsa.rsa import bytes_to_integer

PUBLIC_EXPONENT: int = 65537
DEFAULT_ROUNDS: int = 20

RandFunc = typing.Callable[[int], bytes]


def generate_odd(bit_length: int, randfunc: RandFunc = secrets.token_bytes) -> int:
    """Generates a random odd integer of exactly `bit_length` bits.

    Args:
        bit_length: The size of the integer in bits. Must be a multiple of 8 and at least 16.
        randfunc: Source of random octets.

    Returns:
        A random odd integer with its top bit set.

    Raises:
        ValueError: If `bit_length` is unsupported.
    """
    if bit_length < 16 or bit_length % 8 != 0:
        raise ValueError("Bit length must be a multiple of 8 and at least 16.")
    number = bytes_to_integer(randfunc(bit_length // 8))
    # Low bit for oddness, top bit to pin the length.
    return number | 1 | (1 << (bit_length - 1))


def _random_witness(n: int, randfunc: RandFunc) -> int:
    """Draws a uniform Miller-Rabin witness in [2, n - 2] by rejection sampling."""
    nbytes = (n.bit_length() + 7) // 8
    msk = (1 << n.bit_length()) - 1
    while True:
        a = bytes_to_integer(randfunc(nbytes)) & msk
        if 2 <= a <= n - 2:
            return a


def is_probably_prime(n: int, rounds: int = DEFAULT_ROUNDS, randfunc: RandFunc = secrets.token_bytes) -> bool:
    """Perform the Miller-Rabin primality test.

    A composite passes a single round with probability at most 1/4, so a prime verdict is wrong with probability at
    most 4**-rounds.

    Args:
        n: Integer to be tested.
        rounds: Number of Miller-Rabin iterations to perform.
        randfunc: Source of random octets for witness selection.

    Returns:
        True if `n` is probably prime, False if it is certainly composite.
    """
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        x = pow(_random_witness(n, randfunc), d, n)
        if x in (1, n - 1):
            continue
        for _ in range(1, s):
            x = pow(x, 2, n)
            if x == n - 1:
                break
            if x == 1:
                return False
        else:
            return False
    return True


def generate_prime(bit_length: int,
                   rounds: int = DEFAULT_ROUNDS,
                   randfunc: RandFunc = secrets.token_bytes,
                   max_tries: int | None = None) -> int:
    """Generate a probable prime number of the specified bit size.

    Args:
        bit_length: The size of the prime to generate in bits. Same constraints as `generate_odd`.
        rounds: Number of Miller-Rabin iterations per candidate.
        randfunc: Source of random octets.
        max_tries: Maximum number of candidates to test. Unbounded if None.

    Returns:
        A probable prime number.

    Raises:
        RuntimeError: If `max_tries` candidates were tested with no prime found.
    """
    tries = 0
    while max_tries is None or tries < max_tries:
        tries += 1
        candidate = generate_odd(bit_length, randfunc)
        if is_probably_prime(candidate, rounds, randfunc):
            return candidate
    raise RuntimeError(f"Tested {max_tries} candidates with no prime found. Check the random number generator.")


@overload
def generate_keys(key_size: int,
                  rounds: int = DEFAULT_ROUNDS,
                  randfunc: RandFunc = secrets.token_bytes,
                  expose_primes: Literal[False] = False) -> KeyPair:
    ...


@overload
def generate_keys(key_size: int,
                  rounds: int = DEFAULT_ROUNDS,
                  randfunc: RandFunc = secrets.token_bytes,
                  *,
                  expose_primes: Literal[True]) -> tuple[KeyPair, tuple[int, int]]:
    ...


def generate_keys(key_size: int,
                  rounds: int = DEFAULT_ROUNDS,
                  randfunc: RandFunc = secrets.token_bytes,
                  expose_primes: bool = False) -> KeyPair | tuple[KeyPair, tuple[int, int]]:
    """Generates an RSA key pair.

    Both primes are drawn at half the key size. Should the pair be unusable, with `e` not coprime to the totient or
    the primes equal, the whole pair is discarded and drawn again. The public exponent is always 65537. No minimum
    size is enforced, that is up to the caller.

    Args:
        key_size: The size of the modulus in bits. Should be a multiple of 16.
        rounds: Number of Miller-Rabin iterations per prime candidate.
        randfunc: Source of random octets.
        expose_primes: Whether to return the prime numbers as well or not. Defaults to False.

    Returns:
        The full KeyPair, or if exposed a tuple of the KeyPair and its (p, q) primes.
    """
    half = key_size // 2
    e = PUBLIC_EXPONENT
    while True:
        p = generate_prime(half, rounds, randfunc)
        q = generate_prime(half, rounds, randfunc)
        phi = (p - 1) * (q - 1)
        if p != q and gcd(e, phi) == 1:
            break
    key = KeyPair(p * q, e, modinv(e, phi))
    if not expose_primes:
        return key
    return key, (p, q)
