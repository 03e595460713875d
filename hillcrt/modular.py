#!/usr/bin/env python3

# Integer helpers for arithmetic modulo small m (2, 13, 26).

def positive_mod(value: int, mod: int) -> int:
    """
    Return value mod `mod` as a representative in [0, mod).
    `mod` must be positive. Negative values wrap around, e.g.
    positive_mod(-1, 26) -> 25.
    """
    return value % mod

def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean algorithm.
    Returns (g, x, y) with g = gcd(a, b) and a*x + b*y = g.
    """
    if b == 0:
        return a, 1, 0
    g, x1, y1 = extended_gcd(b, a % b)
    return g, y1, x1 - (a // b) * y1

def modular_inverse(a: int, mod: int) -> int | None:
    """
    Returns x in [0, mod) with a*x = 1 (mod `mod`), or None when
    gcd(a, mod) != 1 and no inverse exists.
    """
    g, x, _ = extended_gcd(positive_mod(a, mod), mod)
    if g != 1:
        return None
    return positive_mod(x, mod)
