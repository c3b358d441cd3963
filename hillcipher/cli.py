#!/usr/bin/env python3
"""
Command-line driver: encrypt or decrypt a text with a Hill cipher key.

    python -m hillcipher.cli -t CONSUL -k FORTALEZA -a ABCDEFGHIJKLMNÑOPQRSTUVWXYZ -m e
"""
import argparse
import sys
from typing import List, Optional

from hillcipher.alphabet import Alphabet
from hillcipher.cipher import Cipher
from hillcipher.errors import HillCipherError
from hillcipher.matrix import DET_LAPLACE, DET_METHODS, validate_inverse_mod

MODE_ENCRYPT = "encrypt"
MODE_DECRYPT = "decrypt"
VALID_MODES = {
    "e": MODE_ENCRYPT,
    "encrypt": MODE_ENCRYPT,
    "d": MODE_DECRYPT,
    "decrypt": MODE_DECRYPT,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hill cipher encryption/decryption")
    parser.add_argument(
        "-t", "--text", required=True, help="the text that will be used in the cipher"
    )
    parser.add_argument(
        "-k", "--key", required=True, help="the key that will be used in the cipher"
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        required=True,
        help="the alphabet that will be used in the cipher",
    )
    parser.add_argument(
        "-m",
        "--mode",
        required=True,
        choices=sorted(VALID_MODES),
        help="the cipher mode, either 'encrypt'/'e' or 'decrypt'/'d'",
    )
    parser.add_argument(
        "--pad",
        nargs="?",
        const="",
        default=None,
        metavar="SYMBOL",
        help="Pad the text to whole blocks before encrypting "
        "(default pad symbol: last alphabet symbol)",
    )
    parser.add_argument(
        "--method",
        choices=DET_METHODS,
        default=DET_LAPLACE,
        help="Determinant algorithm (default: laplace)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print the key matrix and its inverse"
    )
    return parser


def print_key_details(cipher: Cipher, raw_key: str) -> None:
    """Print the key matrix, its inverse and the inverse check."""
    key = cipher.build_key(raw_key)
    inverse = key.inverse()
    print(f"Alphabet: {cipher.alphabet} (mod {cipher.mod})")
    print(f"Key matrix (order {key.order}):")
    print(key, end="")
    print(f"Inverse key matrix mod {cipher.mod}:")
    print(inverse, end="")
    validate_inverse_mod(key.matrix, inverse, cipher.mod, verbose=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function with command-line interface. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    mode = VALID_MODES[args.mode]
    if mode == MODE_DECRYPT and args.pad is not None:
        parser.error("--pad is only valid when encrypting")

    try:
        cipher = Cipher(Alphabet(args.alphabet), method=args.method)
    except HillCipherError as err:
        print(err, file=sys.stderr)
        return 1

    try:
        if mode == MODE_ENCRYPT and args.pad is not None:
            result = cipher.encrypt_with_padding(args.text, args.key, args.pad or None)
        elif mode == MODE_ENCRYPT:
            result = cipher.encrypt(args.text, args.key)
        else:
            result = cipher.decrypt(args.text, args.key)
        if args.verbose:
            print_key_details(cipher, args.key)
    except HillCipherError as err:
        print(f"an error occurred during cipher execution\n{err}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
