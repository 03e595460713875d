#!/usr/bin/env python3
"""
Fixed-size 3x3 integer matrix helpers.

A matrix is a tuple of three row tuples, a vector is a 3-tuple. Nothing
here mutates its arguments; every operation returns a new tuple.
"""
from .modular import positive_mod

Matrix3 = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]
Vector3 = tuple[int, int, int]

SIZE = 3

def determinant3x3(m: Matrix3) -> int:
    """
    Determinant by cofactor expansion along the first row:
         det = a*(e*i - f*h) - b*(d*i - f*g) + c*(d*h - e*g)
    The result is a plain integer (not reduced).
    """
    (a, b, c), (d, e, f), (g, h, i) = m
    return a*(e*i - f*h) - b*(d*i - f*g) + c*(d*h - e*g)

def adjugate3x3(m: Matrix3) -> Matrix3:
    """
    The adjugate is the transpose of the cofactor matrix.
    Entries are left unreduced and may be negative.
    """
    (a, b, c), (d, e, f), (g, h, i) = m

    # Cofactors, row by row (with proper sign)
    c00 =  (e*i - f*h)
    c01 = -(d*i - f*g)
    c02 =  (d*h - e*g)
    c10 = -(b*i - c*h)
    c11 =  (a*i - c*g)
    c12 = -(a*h - b*g)
    c20 =  (b*f - c*e)
    c21 = -(a*f - c*d)
    c22 =  (a*e - b*d)

    return (
        (c00, c10, c20),
        (c01, c11, c21),
        (c02, c12, c22),
    )

def scalar_multiply_mod(m: Matrix3, scalar: int, mod: int) -> Matrix3:
    """Multiply every entry by `scalar`, reducing both factors and the product mod `mod`."""
    s = positive_mod(scalar, mod)
    return tuple(
        tuple(positive_mod(positive_mod(entry, mod) * s, mod) for entry in row)
        for row in m
    )

def matrix_mod(m: Matrix3, mod: int) -> Matrix3:
    return tuple(tuple(positive_mod(entry, mod) for entry in row) for row in m)

def multiply_matrix_vector_mod(m: Matrix3, v: Vector3, mod: int) -> Vector3:
    """
    Matrix times column vector, each component reduced into [0, mod).
    """
    if len(v) != SIZE:
        raise ValueError(f"Vector must have {SIZE} components (got {len(v)}).")
    return tuple(
        positive_mod(sum(row[c] * v[c] for c in range(SIZE)), mod)
        for row in m
    )

def format_matrix(m: Matrix3) -> str:
    """
    Render a matrix one row per line, numbers right-aligned in width 3:
          6  24   1
         13  16  10
    """
    return "\n".join(" ".join(f"{num:3}" for num in row) for row in m)
