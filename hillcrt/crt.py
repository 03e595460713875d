#!/usr/bin/env python3
"""
Inverse of a 3x3 key matrix modulo 26 through the Chinese Remainder Theorem.

26 = 2 * 13 with gcd(2, 13) = 1, so a matrix is invertible mod 26 exactly
when its determinant is invertible mod 2 and mod 13. The inverse is built
separately in both prime moduli (adj(K) * det^-1) and the two residues of
every entry are glued back together mod 26.
"""
from .errors import DeterminantNotInvertible, NotInvertibleMod2, NotInvertibleMod13
from .matrix import Matrix3, SIZE, adjugate3x3, determinant3x3, matrix_mod, scalar_multiply_mod
from .modular import modular_inverse, positive_mod

MOD_2 = 2
MOD_13 = 13
MOD_26 = MOD_2 * MOD_13

# CRT basis for 26 = 2 * 13:
#   13 = 13 * (13^-1 mod 2)  -> 13 = 1 (mod 2), 13 = 0 (mod 13)
#   14 =  2 * (2^-1 mod 13)  -> 14 = 0 (mod 2), 14 = 1 (mod 13)
CRT_COEFF_MOD2 = 13
CRT_COEFF_MOD13 = 14

def combine_residues_mod26(residue_mod2: int, residue_mod13: int) -> int:
    """
    Return the x in [0, 26) with x = residue_mod2 (mod 2) and
    x = residue_mod13 (mod 13):
        x = 13 * r2 + 14 * r13  (mod 26)
    """
    return positive_mod(
        CRT_COEFF_MOD2 * positive_mod(residue_mod2, MOD_2)
        + CRT_COEFF_MOD13 * positive_mod(residue_mod13, MOD_13),
        MOD_26,
    )

def invert_key_matrix_mod26(key_matrix: Matrix3) -> Matrix3:
    """
    Invert a 3x3 key matrix modulo 26 by inverting it modulo 2 and
    modulo 13 separately and combining entry by entry with CRT.

    Raises NotInvertibleMod2 / NotInvertibleMod13 when the determinant
    is divisible by 2 / 13 (the mod 2 check runs first).
    """
    det = determinant3x3(key_matrix)
    adj = adjugate3x3(key_matrix)

    det_mod2 = positive_mod(det, MOD_2)
    det_mod13 = positive_mod(det, MOD_13)
    if det_mod2 == 0:
        raise NotInvertibleMod2(det)
    if det_mod13 == 0:
        raise NotInvertibleMod13(det)

    det_inverse_mod2 = modular_inverse(det_mod2, MOD_2)
    if det_inverse_mod2 is None:
        raise DeterminantNotInvertible(det, MOD_2)
    det_inverse_mod13 = modular_inverse(det_mod13, MOD_13)
    if det_inverse_mod13 is None:
        raise DeterminantNotInvertible(det, MOD_13)

    # inverse = det^-1 * adj, in each prime modulus
    inverse_mod2 = scalar_multiply_mod(matrix_mod(adj, MOD_2), det_inverse_mod2, MOD_2)
    inverse_mod13 = scalar_multiply_mod(matrix_mod(adj, MOD_13), det_inverse_mod13, MOD_13)

    return tuple(
        tuple(
            combine_residues_mod26(inverse_mod2[r][c], inverse_mod13[r][c])
            for c in range(SIZE)
        )
        for r in range(SIZE)
    )
