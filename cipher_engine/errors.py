"""
Error types raised by the cipher engine.

Every failure is a ``CipherError`` (itself a ``ValueError``), so callers can
catch one type at the boundary and still branch on the concrete kind.
"""


class CipherError(ValueError):
    """Base class for all cipher validation failures."""
    pass


class EmptyInputError(CipherError):
    """Text (or key) is empty where a non-empty value is required."""
    pass


class InvalidKeyError(CipherError):
    """Key cannot be turned into a usable cipher key."""
    pass


class EmptyKeyError(InvalidKeyError, EmptyInputError):
    """An empty key is both an invalid key and an empty input."""
    pass


class InvalidCharacterError(CipherError):
    """Text contains a character outside the alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


# Short names used in the public interface
EmptyInput = EmptyInputError
InvalidKey = InvalidKeyError
InvalidCharacter = InvalidCharacterError
