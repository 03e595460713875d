#!/usr/bin/env python3
"""
Command-line front end: hillcrt --key GYBNQKURP --ciphertext POH

Anything not given as an option is asked for interactively.
"""
import argparse
import sys

from .cipher import build_key_matrix, decrypt
from .crt import invert_key_matrix_mod26
from .errors import HillCipherError, MissingInput
from .matrix import format_matrix

KEY_PROMPT = "Enter 9-letter key (row-major, A-Z): "
CIPHERTEXT_PROMPT = "Enter ciphertext (any text; non-letters ignored): "

# ===============================
# Input helpers
# ===============================

def prompt_line(prompt: str, what: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        raise MissingInput(what) from None

def read_text_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        raise MissingInput("ciphertext", f"cannot read {path}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise MissingInput("ciphertext", f"{path} is not valid UTF-8: {exc.reason}") from exc

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hillcrt",
        description="Decrypt a 3x3 Hill cipher (mod 26) using a CRT-based key inverse",
    )
    p.add_argument("--key", help="9-letter key, row-major (case and non-letters ignored)")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--ciphertext", help="Ciphertext (any text; non-letters ignored)")
    src.add_argument("--ciphertext-file", help="Read the ciphertext from a UTF-8 text file")
    p.add_argument("--show-matrix", action="store_true",
                   help="Also print the key matrix and its inverse mod 26")
    return p

# ===============================
# CLI
# ===============================

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        key_text = args.key if args.key is not None else prompt_line(KEY_PROMPT, "key")
        # Validate the key before asking for the ciphertext
        key_matrix = build_key_matrix(key_text)

        if args.ciphertext is not None:
            ciphertext = args.ciphertext
        elif args.ciphertext_file is not None:
            ciphertext = read_text_file(args.ciphertext_file)
        else:
            ciphertext = prompt_line(CIPHERTEXT_PROMPT, "ciphertext")

        inverse_key = invert_key_matrix_mod26(key_matrix)
        plaintext = decrypt(ciphertext, inverse_key)
    except HillCipherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.show_matrix:
        print("Key Matrix:")
        print(format_matrix(key_matrix))
        print("\nInverse Key Matrix (mod 26):")
        print(format_matrix(inverse_key))
        print()
    print(f"Decrypted plaintext (uppercase): {plaintext}")
    return 0

def run() -> None:
    sys.exit(main())