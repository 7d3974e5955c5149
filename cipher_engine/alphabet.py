from types import MappingProxyType
from typing import Iterable, List

from .errors import EmptyInputError, InvalidCharacterError

LATIN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Alphabet:
    """
    Ordered set of letters with a reverse (letter -> index) lookup.

    Case folding is driven by an explicit table built from the letters
    themselves, so membership never depends on the process locale:
    'a' folds to 'A', but 'ı' or 'ß' are simply not letters of this alphabet.
    """

    def __init__(self, letters: str):
        if not letters:
            raise ValueError("Alphabet needs at least one letter")
        if len(set(letters)) != len(letters):
            raise ValueError(f"Alphabet has repeated letters: {letters!r}")

        self._letters = letters
        self._index = MappingProxyType({char: i for i, char in enumerate(letters)})
        fold = {}
        for char in letters:
            lower = char.lower()
            if len(lower) == 1 and lower != char and lower not in self._index:
                fold[lower] = char
        self._fold = MappingProxyType(fold)

    @property
    def letters(self) -> str:
        return self._letters

    def __len__(self) -> int:
        return len(self._letters)

    def __contains__(self, char: str) -> bool:
        return self.normalize(char) in self._index

    def __repr__(self) -> str:
        return f"Alphabet({self._letters!r})"

    def normalize(self, char: str) -> str:
        """Fold a single character to the alphabet's case (unknowns pass through)."""
        return self._fold.get(char, char)

    def index_of(self, char: str) -> int:
        """Zero-based position of a letter; KeyError if it is not a member."""
        return self._index[self.normalize(char)]

    def letter_at(self, index: int) -> str:
        if not 0 <= index < len(self._letters):
            raise IndexError(f"Alphabet index {index} out of range [0, {len(self._letters)})")
        return self._letters[index]

    def validate(self, text: str) -> str:
        """
        Return ``text`` case-folded to the alphabet.

        Raises EmptyInputError for an empty string and InvalidCharacterError
        for the first character that does not belong to the alphabet.
        Nothing is dropped: one bad character rejects the whole text.
        """
        if not text:
            raise EmptyInputError("Empty text")
        out = []
        for pos, ch in enumerate(text):
            norm = self.normalize(ch)
            if norm not in self._index:
                raise InvalidCharacterError(ch, pos)
            out.append(norm)
        return "".join(out)

    def to_indices(self, text: str) -> List[int]:
        return [self._index[ch] for ch in self.validate(text)]

    def from_indices(self, indices: Iterable[int]) -> str:
        return "".join(self.letter_at(i) for i in indices)


LATIN = Alphabet(LATIN_LETTERS)

# The one alphabet every cipher in this package works over
DEFAULT_ALPHABET = LATIN
