"""
Errors raised while building, inverting or using a Hill key.

Everything derives from ValueError, so code written against the plain
``raise ValueError(...)`` convention of the classroom ciphers still
catches them.
"""


class HillCipherError(ValueError):
    """Base class for every failure of a decryption attempt."""


class InvalidKeyLength(HillCipherError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Key must contain exactly 9 alphabetic characters (A-Z), got {length}."
        )


class InvalidKeyCharacter(HillCipherError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Key contains invalid character {char!r}.")


class NotInvertibleError(HillCipherError):
    """The key matrix has no inverse modulo 26."""

    def __init__(self, determinant: int, modulus: int, message: str | None = None):
        self.determinant = determinant
        self.modulus = modulus
        if message is None:
            message = (
                f"Key matrix determinant {determinant} is 0 modulo {modulus} "
                "-> not invertible mod 26."
            )
        super().__init__(message)


class NotInvertibleMod2(NotInvertibleError):
    def __init__(self, determinant: int):
        super().__init__(determinant, 2)


class NotInvertibleMod13(NotInvertibleError):
    def __init__(self, determinant: int):
        super().__init__(determinant, 13)


class DeterminantNotInvertible(NotInvertibleError):
    def __init__(self, determinant: int, modulus: int):
        super().__init__(
            determinant,
            modulus,
            f"Determinant {determinant} not invertible modulo {modulus}.",
        )


class MissingInput(HillCipherError):
    """No key or no ciphertext reached the front end."""

    def __init__(self, what: str, detail: str | None = None):
        self.what = what
        message = f"No {what} input provided"
        if detail:
            message += f" ({detail})"
        super().__init__(message + ".")
