"""3x3 Hill cipher decryption with a CRT (mod 2 / mod 13) matrix inverse."""

from .errors import (
    DeterminantNotInvertible,
    HillCipherError,
    InvalidKeyCharacter,
    InvalidKeyLength,
    MissingInput,
    NotInvertibleError,
    NotInvertibleMod2,
    NotInvertibleMod13,
)
from .modular import extended_gcd, modular_inverse, positive_mod
from .matrix import (
    adjugate3x3,
    determinant3x3,
    format_matrix,
    matrix_mod,
    multiply_matrix_vector_mod,
    scalar_multiply_mod,
)
from .crt import combine_residues_mod26, invert_key_matrix_mod26
from .cipher import (
    build_key_matrix,
    decrypt,
    decrypt_with_key,
    keep_letters_upper,
    letter_index,
    pad_to_block,
)

__version__ = "1.0.0"

__all__ = [
    "DeterminantNotInvertible",
    "HillCipherError",
    "InvalidKeyCharacter",
    "InvalidKeyLength",
    "MissingInput",
    "NotInvertibleError",
    "NotInvertibleMod2",
    "NotInvertibleMod13",
    "adjugate3x3",
    "build_key_matrix",
    "combine_residues_mod26",
    "decrypt",
    "decrypt_with_key",
    "determinant3x3",
    "extended_gcd",
    "format_matrix",
    "invert_key_matrix_mod26",
    "keep_letters_upper",
    "letter_index",
    "matrix_mod",
    "modular_inverse",
    "multiply_matrix_vector_mod",
    "pad_to_block",
    "positive_mod",
    "scalar_multiply_mod",
]
