"""Classical keyword and shift ciphers over a fixed alphabet."""
from .alphabet import Alphabet, DEFAULT_ALPHABET, LATIN
from .ciphers import CipherStrategy, CIPHER_REGISTRY, register_cipher, KeywordCipher, ShiftCipher
from .errors import (CipherError, EmptyInputError, InvalidKeyError, EmptyKeyError,
                     InvalidCharacterError, EmptyInput, InvalidKey, InvalidCharacter)

__version__ = "1.0.0"
