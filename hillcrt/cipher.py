#!/usr/bin/env python3
"""
3x3 Hill cipher decryption over A-Z.

The key is 9 letters read row-major into the key matrix K; decryption
multiplies each 3-letter ciphertext block by K^-1 (mod 26).
"""
import string

from .crt import MOD_26, invert_key_matrix_mod26
from .errors import InvalidKeyCharacter, InvalidKeyLength
from .matrix import Matrix3, SIZE, multiply_matrix_vector_mod

ALPHABET = string.ascii_uppercase
BLOCK_SIZE = SIZE
KEY_LENGTH = SIZE * SIZE
PAD_LETTER = "X"

# ===============================
# Helpers
# ===============================

def letter_index(ch: str) -> int:
    """A=0 ... Z=25; -1 for anything that is not an uppercase Latin letter."""
    if len(ch) != 1:
        return -1
    return ALPHABET.find(ch)

def keep_letters_upper(text: str) -> str:
    """Keep only the Latin letters a-z / A-Z, uppercased."""
    return "".join(ch.upper() for ch in text if ch in string.ascii_letters)

def pad_to_block(letters: str) -> str:
    """
    Pad with 'X' on the right until the length is a multiple of 3.
    The padding is not removed after decryption.
    """
    padding_needed = (BLOCK_SIZE - len(letters) % BLOCK_SIZE) % BLOCK_SIZE
    return letters + PAD_LETTER * padding_needed

# ===============================
# Key matrix
# ===============================

def build_key_matrix(key_text: str) -> Matrix3:
    """
    Build the 3x3 key matrix from the letters of `key_text` (row-major).
    Case is ignored and non-letters are dropped first, so "gy-b N q!kurp"
    and "GYBNQKURP" give the same matrix.
    """
    # Length counts source characters; case mapping can turn one letter
    # into several (sharp s -> "SS") or fold it into A-Z (dotless i -> "I").
    letters = [ch for ch in key_text if ch.isalpha()]
    if len(letters) != KEY_LENGTH:
        raise InvalidKeyLength(len(letters))

    values = []
    for ch in letters:
        val = letter_index(ch.upper()) if ch in string.ascii_letters else -1
        if val < 0:
            raise InvalidKeyCharacter(ch)
        values.append(val)

    return tuple(
        tuple(values[row * SIZE:(row + 1) * SIZE]) for row in range(SIZE)
    )

# ===============================
# Decryption
# ===============================

def decrypt(ciphertext: str, inverse_key: Matrix3) -> str:
    """
    Decrypts the ciphertext with an already inverted key matrix.
    Non-letters are ignored, the letters are padded with 'X' to a multiple
    of 3 and every block is mapped through inverse_key (mod 26).
    """
    letters = pad_to_block(keep_letters_upper(ciphertext))

    plaintext = []
    for i in range(0, len(letters), BLOCK_SIZE):
        block_vector = tuple(letter_index(ch) for ch in letters[i:i + BLOCK_SIZE])
        plain_vector = multiply_matrix_vector_mod(inverse_key, block_vector, MOD_26)
        plaintext.append("".join(ALPHABET[num] for num in plain_vector))
    return "".join(plaintext)

def decrypt_with_key(key_text: str, ciphertext: str) -> str:
    """Build the key matrix, invert it modulo 26 and decrypt."""
    inverse_key = invert_key_matrix_mod26(build_key_matrix(key_text))
    return decrypt(ciphertext, inverse_key)
