import string
from dataclasses import dataclass


@dataclass(frozen=True)
class Alphabet:
    """
    Ordered set of letters a cipher engine operates on.

    Characters outside the alphabet pass through the engines unchanged.
    Lookups are case-insensitive; letters are stored uppercase.
    """

    letters: str = string.ascii_uppercase

    def __post_init__(self) -> None:
        letters = self.letters.upper()
        if not letters or len(set(letters)) != len(letters):
            raise ValueError("Alphabet letters must be non-empty and unique")
        object.__setattr__(self, "letters", letters)

    @property
    def size(self) -> int:
        return len(self.letters)

    def is_letter(self, char: str) -> bool:
        return len(char) == 1 and (char in self.letters or char in self.letters.lower())

    def index(self, char: str) -> int:
        return self.letters.index(char.upper())

    def letter(self, index: int, lower: bool = False) -> str:
        char = self.letters[index % self.size]
        return char.lower() if lower else char

    def only_letters(self, text: str) -> str:
        """Uppercased letters of text, everything else dropped."""
        return "".join(c.upper() for c in text if self.is_letter(c))


ENGLISH = Alphabet()
