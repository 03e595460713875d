import random
import string

import numpy as np
import pytest
from Crypto.Util.number import GCD

from hillcrt.matrix import determinant3x3

# Textbook example: GYBNQKURP encrypts ACT as POH
TEXTBOOK_KEY = "GYBNQKURP"
TEXTBOOK_MATRIX = ((6, 24, 1), (13, 16, 10), (20, 17, 15))
TEXTBOOK_INVERSE = ((8, 5, 10), (21, 8, 21), (21, 12, 8))


def hill_encrypt(plaintext, key_matrix):
    """Encrypt uppercase text (length a multiple of 3) with numpy: c = K.p mod 26."""
    k = np.array(key_matrix, dtype=np.int64)
    p = np.array([ord(ch) - ord("A") for ch in plaintext], dtype=np.int64).reshape(-1, 3)
    c = (p @ k.T) % 26
    return "".join(string.ascii_uppercase[n] for n in c.flatten())


def random_valid_keys(count, seed=2205):
    rng = random.Random(seed)
    keys = []
    while len(keys) < count:
        m = tuple(tuple(rng.randrange(26) for _ in range(3)) for _ in range(3))
        if GCD(determinant3x3(m) % 26, 26) == 1:
            keys.append(m)
    return keys


@pytest.fixture
def textbook_matrix():
    return TEXTBOOK_MATRIX


@pytest.fixture
def textbook_inverse():
    return TEXTBOOK_INVERSE
