"""The Command Line Interface for the utility, including Interactive elements.

What I would call a hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that automagically
generates the INTERACTIVE part on-the-fly based on the missing components of the CLI interaction, including the
option that none are included.

Keys are never stored. They are either generated on the spot, with their components printed, or imported from their
components given as hex or decimal numbers.

Typical usage example:

    textrsa
    OR
    python -m textrsa encrypt --modulus 3233 --pub-exponent 17 --no-padding --message A
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import time
import typing

import textrsa
from textrsa import errors
from textrsa import formats
from textrsa import keygen as rsakeygen
from textrsa import rsa
from textrsa.keys import KeyPair


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


CIPHERTEXT_FORMATS = ["base64", "hex", "number"]

help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in textrsa.",
            choices=["keygen", "encrypt", "decrypt"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "generate":
        HelpData("Generate a new key pair."),
    "import":
        HelpData("Import key components."),
    "padding":
        HelpData(
            description="Use PKCS #1 v1.5 padding? Unpadded RSA is unsecure.",
            choices=["Y", "N"],
            default="Y",
        ),
    "key_source":
        HelpData(
            description="Where the key comes from.",
            choices=["generate", "import"],
        ),
    "keysize":
        HelpData(
            description="Key size (number of bits in the RSA modulus n).",
            format=int,
            default=2048,
        ),
    "key_format":
        HelpData(description="Format of the key components.",
                 choices=list(formats.KEY_FORMATS),
                 advanced=True,
                 default="number"),
    "modulus":
        HelpData(description="RSA modulus n."),
    "pub_exponent":
        HelpData(description="RSA public exponent e."),
    "priv_exponent":
        HelpData(description="RSA private exponent d."),
    "message":
        HelpData(description="Message or path to file containing payload. If Path start with `P:`"),
    "message_format":
        HelpData(description="Format of the plaintext.", choices=list(formats.FORMATS), default="text"),
    "ciphertext_format":
        HelpData(description="Format of the ciphertext.", choices=CIPHERTEXT_FORMATS, default="base64"),
}

needs = {
    "keygen": ("padding", "keysize", "key_format"),
    "encrypt": ("message", "message_format", "ciphertext_format"),
    "decrypt": ("message", "ciphertext_format", "message_format"),
}

key_needs = {
    "generate": ("keysize", "key_format"),
    "import": ("key_format", "modulus", "pub_exponent"),
}

paddings = argparse.ArgumentParser(add_help=False)
paddings.add_argument("--padding", choices=help_dict["padding"].choices, help=help_dict["padding"].description)
paddings.add_argument("--no-padding", dest="padding", action="store_const", const="N", help="Shorthand for --padding N")
keysize = argparse.ArgumentParser(add_help=False)
keysize.add_argument("--keysize", "-k", type=help_dict["keysize"].format, help=help_dict["keysize"].description)
keyfmt = argparse.ArgumentParser(add_help=False)
keyfmt.add_argument("--key-format", "-K", choices=help_dict["key_format"].choices,
                    help=help_dict["key_format"].description)
keyimp = argparse.ArgumentParser(add_help=False)
keyimp.add_argument("--key-source", choices=help_dict["key_source"].choices, help=help_dict["key_source"].description)
keyimp.add_argument("--modulus", "-N", help=help_dict["modulus"].description)
keyimp.add_argument("--pub-exponent", "-E", help=help_dict["pub_exponent"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
payloads.add_argument("--message-format",
                      "-f",
                      choices=help_dict["message_format"].choices,
                      help=help_dict["message_format"].description)
payloads.add_argument("--ciphertext-format",
                      "-c",
                      choices=help_dict["ciphertext_format"].choices,
                      help=help_dict["ciphertext_format"].description)
corep = argparse.ArgumentParser(prog="textrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {textrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[paddings, keysize, keyfmt], help=help_dict["keygen"].description)
encrypt = commands.add_parser("encrypt",
                              parents=[paddings, keysize, keyfmt, keyimp, payloads],
                              help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt",
                              parents=[paddings, keysize, keyfmt, keyimp, payloads],
                              help=help_dict["decrypt"].description)
decrypt.add_argument("--priv-exponent", "-D", help=help_dict["priv_exponent"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just press enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just press enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def check_message(mess: str) -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding="utf-8") as f:
            mess = f.read()
    return mess


def check_keysize(size: int, padding: bool) -> None:
    """Validates a requested key size.

    Raises:
        ValueError: If the size is unusable, or too small for a padded block.
    """
    if size <= 0 or size % 16 > 0:
        raise ValueError("Key size must be a positive number and a multiple of 16.")
    if size < 32:
        raise ValueError("Key size must be at least 32.")
    if padding and size < 96:
        raise ValueError("Key size should be at least 96 (12 bytes) for PKCS #1 v1.5 padding to be used.")


def check_key(key: KeyPair, padding: bool) -> None:
    """Validates imported key components before use.

    Raises:
        ValueError: If a component is out of bounds.
    """
    if key.n < 10 or (padding and key.bsize <= 11):
        raise ValueError("Given modulus is too small.")
    if key.e <= 1 or key.e % 2 == 0:
        raise ValueError("RSA exponent e must be an odd number greater than 1.")
    if key.d is not None and (key.d <= 1 or key.d % 2 == 0):
        raise ValueError("RSA exponent d must be an odd number greater than 1.")


def gather(args: argparse.Namespace, reqs: typing.Iterable[str], pstatus: tuple[bool, bool],
           pspr: typing.Callable) -> None:
    """Fill in the missing arguments, interactively if allowed."""
    for req in reqs:
        if getattr(args, req, None) is None:
            if help_dict[req].choices is not None:
                res = choice_handler(req, pstatus, pspr)
            else:
                res = input_handler(req, pstatus, pspr)
            setattr(args, req, res)
        else:
            pspr(f"{req}: {getattr(args, req)}")


def elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def obtain_key(args: argparse.Namespace, padding: bool, pspr: typing.Callable) -> KeyPair:
    """Generate or import the key the arguments ask for."""
    if args.key_source == "generate":
        return generate(args, padding, pspr)
    n = formats.parse_integer(args.modulus, args.key_format)
    e = formats.parse_integer(args.pub_exponent, args.key_format)
    d = None
    if args.subcommand == "decrypt":
        d = formats.parse_integer(args.priv_exponent, args.key_format)
    key = KeyPair(n, e, d)
    check_key(key, padding)
    return key


def generate(args: argparse.Namespace, padding: bool, pspr: typing.Callable) -> KeyPair:
    """Generate a key pair and print its components, primes and totient included."""
    check_keysize(args.keysize, padding)
    start = time.perf_counter()
    key, (p, q) = rsakeygen.generate_keys(args.keysize, expose_primes=True)
    spent = elapsed_ms(start)
    for name, value in (("p", p), ("q", q), ("n", key.n), ("phiN", (p - 1) * (q - 1)), ("e", key.e), ("d", key.d)):
        print(f"{name}: {formats.render_integer(value, args.key_format)}")
    pspr(f"RSA keys generated in {spent:.3f} ms")
    return key


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to textrsa!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus, pspr)
    if args.subcommand == "keygen":
        gather(args, needs["keygen"], pstatus, pspr)
    else:
        if getattr(args, "key_source", None) is None and getattr(args, "modulus", None) is not None:
            args.key_source = "import"
        gather(args, ("padding", "key_source"), pstatus, pspr)
        reqs = key_needs[args.key_source]
        if args.key_source == "import" and args.subcommand == "decrypt":
            reqs = reqs + ("priv_exponent",)
        gather(args, reqs + needs[args.subcommand], pstatus, pspr)
    pspr("\nInput Complete! Executing...")
    padding = args.padding == "Y"
    try:
        match args.subcommand:
            case "keygen":
                generate(args, padding, pspr)
            case "encrypt":
                key = obtain_key(args, padding, pspr)
                message = formats.parse_bytes(check_message(args.message), args.message_format)
                start = time.perf_counter()
                ciph = rsa.encrypt(key, message, padding)
                pspr(f"Encrypted in {elapsed_ms(start):.3f} ms")
                pspr("Ciphertext:")
                print(formats.render_bytes(ciph, args.ciphertext_format))
            case "decrypt":
                key = obtain_key(args, padding, pspr)
                length = key.bsize if padding else None
                try:
                    ciph = formats.parse_bytes(check_message(args.message), args.ciphertext_format, length)
                except errors.IntegerTooLargeError as exc:
                    raise errors.DecryptionError("Decryption error.") from exc
                start = time.perf_counter()
                clear = rsa.decrypt(key, ciph, padding)
                pspr(f"Decrypted in {elapsed_ms(start):.3f} ms")
                pspr("Cleartext:")
                print(formats.render_bytes(clear, args.message_format))
    except (errors.RSAError, ValueError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    pspr("Thank you for using textrsa!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
