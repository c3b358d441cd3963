#!/usr/bin/env python3
"""
Encrypts and decrypts a fixed set of samples and reports the outcome of
each round trip as a table.
"""

import argparse
import os
import sys

import pandas as pd

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))
from hillcipher.alphabet import SPANISH_ALPHABET  # noqa: E402
from hillcipher.cipher import Cipher  # noqa: E402
from hillcipher.errors import HillCipherError  # noqa: E402

# (key, message) pairs per alphabet. Samples that fail validation (e.g. a
# 15-symbol message under an order 3 key) are reported, not raised.
EXAMPLES = {
    "Spanish alphabet (uppercase) without diacritics": {
        "alphabet": SPANISH_ALPHABET,
        "samples": [
            ("FORTALEZA", "CONSUL"),
            ("FORTALEZA", "UUNAMFCIENCIASS"),
            ("IKEY", "CRIPTOGRAFIA"),
            ("IAMAVERYLOONGKEY", "CRIPTOGRAFIA"),
            ("IAMAVERYLOONGKEYINFACTLONGERTHANPAST", "CRIPTOGRAFIA"),
        ],
    },
    "Binary alphabet": {
        "alphabet": "01",
        "samples": [("1011", "0110"), ("1101", "1111000011")],
    },
}


def run_sample(cipher: Cipher, key: str, msg: str) -> dict:
    """Encrypt then decrypt msg; never raises for cipher errors."""
    row = {"Key": key, "Message": msg, "Cipher Text": "", "Plain Text": ""}
    try:
        cipher_text = cipher.encrypt(msg, key)
        row["Cipher Text"] = cipher_text
        row["Plain Text"] = cipher.decrypt(cipher_text, key)
    except HillCipherError as err:
        row["Status"] = f"FAILED ({type(err).__name__})"
        return row
    row["Status"] = "SUCCESS" if row["Plain Text"] == msg else "MISMATCH"
    return row


def main():
    parser = argparse.ArgumentParser(description="Hill cipher usage examples")
    parser.add_argument(
        "--outfile", type=str, default=None, help="Also save the results to CSV"
    )
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args()

    results = []
    for name, example in EXAMPLES.items():
        if not args.quiet:
            print(f"\n--- {name} ---")
            print(f"  Alphabet: {example['alphabet']}")
        cipher = Cipher(example["alphabet"])
        for key, msg in example["samples"]:
            row = run_sample(cipher, key, msg)
            row["Alphabet"] = name
            results.append(row)
            if not args.quiet:
                print(f"  E(msg:{msg!r}, key:{key!r}) -> {row['Status']}")

    df = pd.DataFrame(
        results,
        columns=["Alphabet", "Key", "Message", "Cipher Text", "Plain Text", "Status"],
    )
    print("\n=== Hill Cipher Examples ===")
    print(df.to_string(index=False))

    if args.outfile:
        df.to_csv(args.outfile, index=False)
        print(f"\nResults saved to {args.outfile}")


if __name__ == "__main__":
    main()
