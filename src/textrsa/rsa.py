"""Provides core RSA functionalities: the raw primitives and PKCS #1 v1.5 encryption and decryption.

Facilitates "textbook" RSA as per RFC 8017. The primitives (RSAEP/RSADP) work on integer representatives while the
padded and raw encrypt/decrypt entry points work on octet strings, marshalled with the OS2IP/I2OSP helpers below.

Typical usage example:

    key = generate_keys(2048)
    c = encrypt(key, b"Hi there!")
    r = decrypt(key, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from secrets import token_bytes
import typing
import warnings

from textrsa import errors
from textrsa.keys import KeyPair

# Octets of fixed structure in a padded block: 0x00 0x02 ... 0x00, plus the minimum of 8 padding octets.
PKCS1_OVERHEAD = 11
PKCS1_MIN_PS = 8


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an integer in accordance to preset procedures (OS2IP).

    Args:
        msg: The bytes (AKA Octet String) to convert. An empty string converts to 0.

    Returns:
        The representative integer.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int | None = None) -> bytes:
    """Converts an integer to a byte string (I2OSP).

    Args:
        msg: The non-negative integer to unmarshal.
        fixedlen: The target length of the byte string. The result is left-padded with zero octets.
            If omitted, the shortest representation is used, which is empty for 0.

    Returns:
        The representative bytes. (AKA Octet String)

    Raises:
        IntegerTooLargeError: If `msg` does not fit in `fixedlen` octets.
    """
    if fixedlen is None:
        fixedlen = (msg.bit_length() + 7) // 8
    if msg >= 256**fixedlen:
        raise errors.IntegerTooLargeError("Integer too large.")
    return msg.to_bytes(fixedlen, byteorder="big", signed=False)


def rsaep(n: int, e: int, m: int) -> int:
    """RSA Encryption Primitive.

    Args:
        n: The modulus.
        e: The public exponent.
        m: The message representative, within (0, n - 1) exclusive.

    Returns:
        The ciphertext representative.

    Raises:
        RepresentativeOutOfRangeError: If `m` is out of range for the modulus.
    """
    if not 0 < m < n - 1:
        raise errors.RepresentativeOutOfRangeError("Message representative out of range.")
    return pow(m, e, n)


def rsadp(n: int, d: int, c: int) -> int:
    """RSA Decryption Primitive.

    Args:
        n: The modulus.
        d: The private exponent.
        c: The ciphertext representative, within (0, n - 1) exclusive.

    Returns:
        The message representative.

    Raises:
        RepresentativeOutOfRangeError: If `c` is out of range for the modulus.
    """
    if not 0 < c < n - 1:
        raise errors.RepresentativeOutOfRangeError("Ciphertext representative out of range.")
    return pow(c, d, n)


def nonzero_bytes(size: int, randfunc: typing.Callable[[int], bytes] = token_bytes) -> bytes:
    """Draws `size` random octets, none of which is zero.

    Zero octets are dropped from each draw and the shortfall is drawn again.

    Args:
        size: Number of octets required.
        randfunc: Source of random octets.

    Returns:
        Random nonzero octets.
    """
    out = b""
    while len(out) < size:
        out += randfunc(size - len(out)).replace(b"\x00", b"")
    return out[:size]


def encrypt_pkcs1(n: int, e: int, message: bytes, randfunc: typing.Callable[[int], bytes] = token_bytes) -> bytes:
    """Encrypts the message according to the RSAES-PKCS1-v1_5 algorithm.

    Args:
        n: The modulus.
        e: The public exponent.
        message: Message to be encrypted, at most `k - 11` octets.
        randfunc: Source of random octets for the padding string.

    Returns:
        The ciphertext, exactly `k` octets long.

    Raises:
        MessageTooLongError: If the message does not fit a padded block.
    """
    k = (n.bit_length() + 7) // 8
    if len(message) > k - PKCS1_OVERHEAD:
        raise errors.MessageTooLongError("Message too long.")
    ps = nonzero_bytes(k - len(message) - 3, randfunc)
    em = b"\x00\x02" + ps + b"\x00" + message
    c = rsaep(n, e, bytes_to_integer(em))
    return integer_to_bytes(c, k)


def decrypt_pkcs1(n: int, d: int, ciphertext: bytes) -> bytes:
    """Decrypts the message according to the RSAES-PKCS1-v1_5 algorithm.

    Every malformation of the recovered block raises the same error, the check that failed is not disclosed.

    Args:
        n: The modulus.
        d: The private exponent.
        ciphertext: Ciphertext to be decrypted, exactly `k` octets long.

    Returns:
        Decrypted message, possibly empty.

    Raises:
        DecryptionError: If the ciphertext or the recovered block is malformed.
    """
    k = (n.bit_length() + 7) // 8
    if len(ciphertext) != k or k < PKCS1_OVERHEAD:
        raise errors.DecryptionError("Decryption error.")
    m = rsadp(n, d, bytes_to_integer(ciphertext))
    em = integer_to_bytes(m, k)
    i = 2
    while i < k and em[i] != 0:
        i += 1
    if em[0] != 0x00 or em[1] != 0x02 or i >= k or i - 2 < PKCS1_MIN_PS:
        raise errors.DecryptionError("Decryption error.")
    return em[i + 1:]


def encrypt(key: KeyPair,
            message: bytes,
            use_padding: bool = True,
            randfunc: typing.Callable[[int], bytes] = token_bytes) -> bytes:
    """Use the public half of the key to encrypt the message.

    Args:
        key: The key pair, public-only keys are fine.
        message: The message to encrypt.
        use_padding: If true, use PKCS #1 v1.5 padding. Otherwise encrypt the raw message representative.
            Warning! Unpadded encryption is unsecure!
        randfunc: Source of random octets for the padding string.

    Returns:
        The ciphertext. Padded ciphertexts are `k` octets long, raw ones as short as possible.
    """
    if use_padding:
        return encrypt_pkcs1(key.n, key.e, message, randfunc)
    warnings.warn("Unpadded encryption is unsecure! Please use with care.", RuntimeWarning)
    c = rsaep(key.n, key.e, bytes_to_integer(message))
    return integer_to_bytes(c)


def decrypt(key: KeyPair, ciphertext: bytes, use_padding: bool = True) -> bytes:
    """Decrypts the ciphertext using the private key.

    Args:
        key: The full key pair.
        ciphertext: The ciphertext to decrypt.
        use_padding: Whether the ciphertext was produced with PKCS #1 v1.5 padding.

    Returns:
        The decrypted message. Raw decryption can not recover leading zero octets of the original message.

    Raises:
        MissingPrivateKeyError: If the key is public-only.
    """
    if key.d is None:
        raise errors.MissingPrivateKeyError("No private key available for decryption.")
    if use_padding:
        return decrypt_pkcs1(key.n, key.d, ciphertext)
    m = rsadp(key.n, key.d, bytes_to_integer(ciphertext))
    return integer_to_bytes(m)
