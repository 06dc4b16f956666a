"""Textual representations of messages, ciphertexts and key components for the command line.

Supported formats are base64, hex, text (UTF-8) and number (decimal). Key components are integers and only accept
hex or number.

Typical usage example:

    data = parse_bytes("SGkh", "base64")
    render_bytes(data, "hex")  # "486921"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii

from textrsa.rsa import bytes_to_integer
from textrsa.rsa import integer_to_bytes

FORMATS = ("base64", "hex", "text", "number")
KEY_FORMATS = ("hex", "number")


def _strip_hex(value: str) -> str:
    value = value.strip()
    if value[:2].lower() == "0x":
        value = value[2:]
    if len(value) % 2:
        value = "0" + value
    return value


def parse_bytes(value: str, fmt: str, length: int | None = None) -> bytes:
    """Parses a textual value into bytes.

    Args:
        value: The text to parse.
        fmt: One of `FORMATS`.
        length: Only for the number format, the byte length to left-pad to, as leading zero octets are not
            representable in decimal.

    Returns:
        The parsed bytes.

    Raises:
        ValueError: If the value can not be parsed in the given format.
    """
    match fmt:
        case "base64":
            try:
                return base64.b64decode(value.strip(), validate=True)
            except binascii.Error as exc:
                raise ValueError(f"Invalid base64 value: {exc}") from exc
        case "hex":
            return bytes.fromhex(_strip_hex(value))
        case "text":
            return value.encode("utf-8")
        case "number":
            return integer_to_bytes(parse_integer(value, fmt), length)
    raise ValueError(f"Unknown format {fmt}.")


def parse_integer(value: str, fmt: str) -> int:
    """Parses a textual value into a non-negative integer.

    Args:
        value: The text to parse.
        fmt: One of `FORMATS`. Bytes formats are read as big-endian.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If the value can not be parsed or is negative.
    """
    if fmt == "number":
        number = int(value.strip())
        if number < 0:
            raise ValueError("Value must not be negative.")
        return number
    return bytes_to_integer(parse_bytes(value, fmt))


def render_integer(value: int, fmt: str) -> str:
    """Renders a non-negative integer, such as a key component, in the given format."""
    if fmt == "number":
        return str(value)
    return render_bytes(integer_to_bytes(value), fmt)


def render_bytes(data: bytes, fmt: str) -> str:
    """Renders bytes in the given format.

    Args:
        data: The bytes to render.
        fmt: One of `FORMATS`.

    Returns:
        The textual representation. Undecodable text is rendered with replacement characters.
    """
    match fmt:
        case "base64":
            return base64.b64encode(data).decode("ascii")
        case "hex":
            return data.hex().upper()
        case "text":
            return data.decode("utf-8", errors="replace")
        case "number":
            return str(bytes_to_integer(data))
    raise ValueError(f"Unknown format {fmt}.")
