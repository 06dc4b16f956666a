# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import secrets

import pytest

from textrsa import numtheory
from textrsa.errors import InvertibilityError


@pytest.mark.parametrize("a,b,expected", [(0, 0, 0), (12, 0, 12), (0, 12, 12), (12, 18, 6), (17, 3120, 1),
                                          (65537, 131074 * 52, 65537), (2**64, 2**32 * 3, 2**32)])
def test_gcd(a, b, expected):
    assert numtheory.gcd(a, b) == expected


def test_gcd_matches_math():
    for _ in range(200):
        a, b = secrets.randbits(256), secrets.randbits(128)
        assert numtheory.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,n,expected", [(17, 3120, 2753), (3, 11, 4), (65537, 3120, 2753), (1, 7, 1), (10, 17, 12)])
def test_modinv_known(a, n, expected):
    assert numtheory.modinv(a, n) == expected


def test_modinv_matches_pow():
    n = (secrets.randbits(512) | 1) * (secrets.randbits(512) | 1)
    for _ in range(100):
        a = secrets.randbelow(n)
        if math.gcd(a, n) != 1:
            continue
        inv = numtheory.modinv(a, n)
        assert 0 <= inv < n
        assert inv == pow(a, -1, n)


@pytest.mark.parametrize("a,n", [(6, 9), (0, 7), (65537, 131074 * 52), (4, 2)])
def test_modinv_not_invertible(a, n):
    with pytest.raises(InvertibilityError):
        numtheory.modinv(a, n)
    with pytest.raises(ValueError):
        numtheory.modinv(a, n)
