# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from textrsa import formats


@pytest.mark.parametrize("value,fmt,expected", [
    ("SGkh", "base64", b"Hi!"),
    (" AAEC\n", "base64", b"\x00\x01\x02"),
    ("", "base64", b""),
    ("0001ff", "hex", b"\x00\x01\xff"),
    ("0x0001FF", "hex", b"\x00\x01\xff"),
    ("abc", "hex", b"\x0a\xbc"),
    ("Hi!", "text", b"Hi!"),
    ("żółw", "text", "żółw".encode("utf-8")),
    ("256", "number", b"\x01\x00"),
    ("0", "number", b""),
])
def test_parse_bytes(value, fmt, expected):
    assert formats.parse_bytes(value, fmt) == expected


def test_parse_bytes_number_length():
    assert formats.parse_bytes("256", "number", 4) == b"\x00\x00\x01\x00"


@pytest.mark.parametrize("value,fmt", [("SGk!", "base64"), ("zz", "hex"), ("0x", "number"), ("-5", "number"),
                                       ("12", "octal")])
def test_parse_bytes_invalid(value, fmt):
    with pytest.raises(ValueError):
        formats.parse_bytes(value, fmt)


def test_parse_bytes_number_overflow():
    with pytest.raises(ValueError):
        formats.parse_bytes("65536", "number", 2)


@pytest.mark.parametrize("value,fmt,expected", [("3233", "number", 3233), ("0xCA1", "hex", 3233), ("ca1", "hex", 3233),
                                                ("AQAB", "base64", 65537)])
def test_parse_integer(value, fmt, expected):
    assert formats.parse_integer(value, fmt) == expected


@pytest.mark.parametrize("data,fmt,expected", [
    (b"Hi!", "base64", "SGkh"),
    (b"\x00\x01\xff", "hex", "0001FF"),
    (b"Hi!", "text", "Hi!"),
    (b"\xffHi", "text", "�Hi"),
    (b"\x01\x00", "number", "256"),
    (b"", "number", "0"),
])
def test_render_bytes(data, fmt, expected):
    assert formats.render_bytes(data, fmt) == expected


def test_render_integer():
    assert formats.render_integer(65537, "number") == "65537"
    assert formats.render_integer(65537, "hex") == "010001"


def test_render_unknown():
    with pytest.raises(ValueError):
        formats.render_bytes(b"", "octal")


@pytest.mark.parametrize("fmt", formats.FORMATS)
def test_number_formats_agree(fmt):
    data = b"\x01\x02\x03"
    assert formats.parse_integer(formats.render_bytes(data, fmt), fmt) == 0x010203
