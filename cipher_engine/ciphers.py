import re
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Type

from .alphabet import DEFAULT_ALPHABET, Alphabet
from .errors import EmptyKeyError, InvalidCharacterError, InvalidKeyError

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherStrategy(ABC):
    """Abstract base class that all ciphers must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @property
    def alphabet(self) -> Alphabet:
        return DEFAULT_ALPHABET

    @abstractmethod
    def encrypt(self, open_text: str) -> str:
        pass

    @abstractmethod
    def decrypt(self, cipher_text: str) -> str:
        pass


CIPHER_REGISTRY: Dict[str, Type[CipherStrategy]] = {}

def register_cipher(cls):
    """Decorator to auto-register ciphers. Ciphers need a key, so the class is stored."""
    CIPHER_REGISTRY[cls.name] = cls
    return cls

# ==========================================
#  METHOD 1: Repeating-keyword cipher
# ==========================================

@register_cipher
class KeywordCipher(CipherStrategy):
    """
    Polyalphabetic cipher driven by a repeating keyword.

    Each letter of the keyword becomes a shift value (its alphabet index).
    Position i of the text is shifted by key[i % len(key)], so the key
    repeats without ever being expanded to the length of the text.

    >>> KeywordCipher("key").encrypt("hello")
    'RIJVS'
    """

    name = "keyword"
    description = "Repeating-keyword shift (Vigenère style). Key: letters of the alphabet."

    def __init__(self, keyword: str):
        self._key = self._get_valid_key(keyword)

    @property
    def key(self) -> Tuple[int, ...]:
        return self._key

    def _get_valid_key(self, keyword: str) -> Tuple[int, ...]:
        if keyword is not None and not isinstance(keyword, str):
            raise InvalidKeyError(f"Invalid key: expected a string, got {type(keyword).__name__}")
        if not keyword:
            raise EmptyKeyError("Empty key")
        try:
            return tuple(self.alphabet.to_indices(keyword))
        except InvalidCharacterError as e:
            raise InvalidKeyError(f"Invalid key: {e}") from e

    def encrypt(self, open_text: str) -> str:
        size = len(self.alphabet)
        key_len = len(self._key)
        work = self.alphabet.to_indices(open_text)
        return self.alphabet.from_indices(
            (idx + self._key[i % key_len]) % size for i, idx in enumerate(work)
        )

    def decrypt(self, cipher_text: str) -> str:
        size = len(self.alphabet)
        key_len = len(self._key)
        work = self.alphabet.to_indices(cipher_text)
        return self.alphabet.from_indices(
            (idx - self._key[i % key_len] + size) % size for i, idx in enumerate(work)
        )

    def __repr__(self) -> str:
        return f"KeywordCipher(key_length={len(self._key)})"

# ==========================================
#  METHOD 2: Uniform shift (Caesar style)
# ==========================================

@register_cipher
class ShiftCipher(CipherStrategy):
    """
    Every letter is moved by the same offset. Equivalent to a KeywordCipher
    whose keyword is a single letter.
    """

    name = "shift"
    description = "Single integer shift (Caesar style). Key: an integer, may be negative."

    KEY_PATTERN = re.compile(r"[+-]?[0-9]+")

    def __init__(self, key_str: str):
        self._key = self._get_valid_key(key_str)

    @property
    def key(self) -> int:
        return self._key

    def _get_valid_key(self, key_str: str) -> int:
        if key_str is not None and not isinstance(key_str, str):
            raise InvalidKeyError(f"Invalid key: expected a string, got {type(key_str).__name__}")
        if key_str is None or not key_str.strip():
            raise EmptyKeyError("Empty key")
        raw = key_str.strip()
        if not self.KEY_PATTERN.fullmatch(raw):
            raise InvalidKeyError(f"Invalid key: {key_str!r} is not an integer")
        # Python's % already yields a value in [0, size) for negative keys
        return int(raw) % len(self.alphabet)

    def encrypt(self, open_text: str) -> str:
        size = len(self.alphabet)
        return self.alphabet.from_indices(
            (idx + self._key) % size for idx in self.alphabet.to_indices(open_text)
        )

    def decrypt(self, cipher_text: str) -> str:
        size = len(self.alphabet)
        return self.alphabet.from_indices(
            (idx - self._key + size) % size for idx in self.alphabet.to_indices(cipher_text)
        )

    def __repr__(self) -> str:
        return f"ShiftCipher(key={self._key})"
