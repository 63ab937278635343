import math
import random
from typing import Any, ClassVar

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import ENGLISH, Alphabet
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON");
    a doubled 'X' is separated by a 'Q' instead.
    An odd trailing letter is padded the same way, so a lone final 'X' gets 'Q'.

    Ciphertext letters are written back into the letter positions of the
    input, so punctuation and spacing survive. Letters produced beyond the
    input's letter count (fillers and padding) are appended at the end.
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    MERGED: ClassVar[tuple[str, str]] = ("J", "I")
    FILLER: ClassVar[str] = "X"
    ALT_FILLER: ClassVar[str] = "Q"
    COMMON_KEYS: ClassVar[list[str]] = [
        "PLAYFAIR", "SECRET", "KEYWORD", "CIPHER", "MONARCHY",
        "EXAMPLE", "CRYPTO", "HIDDEN", "SECURE", "SQUARE",
    ]

    def __init__(self, alphabet: Alphabet = ENGLISH):
        super().__init__(alphabet)
        self.square_letters = alphabet.letters.replace(self.MERGED[0], "")
        self.side = math.isqrt(len(self.square_letters))
        if self.side * self.side != len(self.square_letters):
            raise ValueError(
                f"Playfair needs a square number of letters, got {len(self.square_letters)}"
            )

    def encrypt(self, plaintext: str, key: Any) -> str:
        """Encrypt using Playfair cipher."""
        square = self.build_key_square(self.parse_key(key))
        slots, letters = self._extract_letters(plaintext)

        result = []
        for a, b in self._prepare_digraphs(letters):
            result.extend(self._transform_pair(square, a, b, 1))

        return self._reinsert(plaintext, slots, result)

    def decrypt(self, ciphertext: str, key: Any) -> str:
        """
        Decrypt using Playfair cipher.

        The output still contains any fillers inserted during encryption;
        see clean_decrypted().
        """
        square = self.build_key_square(self.parse_key(key))
        slots, letters = self._extract_letters(ciphertext)

        if len(letters) % 2 != 0:
            letters.append(self.FILLER)

        result = []
        for i in range(0, len(letters), 2):
            result.extend(self._transform_pair(square, letters[i], letters[i + 1], -1))

        return self._reinsert(ciphertext, slots, result)

    def clean_decrypted(self, text: str) -> str:
        """
        Best-effort removal of filler letters from decrypted text.

        Drops a filler standing between two identical letters at the second
        position of a digraph, and a trailing filler closing the last
        digraph. Remaining letters are laid back into the letter positions,
        so punctuation stays where it was.
        """
        slots, letters = self._extract_letters(text)

        dropped = set()
        for i in range(1, len(letters) - 1, 2):
            if letters[i - 1] == letters[i + 1] and letters[i] == self._filler_for(letters[i - 1]):
                dropped.add(i)

        last = len(letters) - 1
        if last > 0 and last % 2 == 1 and letters[last] == self._filler_for(letters[last - 1]):
            dropped.add(last)

        kept = iter(c for i, c in enumerate(letters) if i not in dropped)
        slot_set = set(slots)

        result = []
        for i, char in enumerate(text):
            if i not in slot_set:
                result.append(char)
                continue
            letter = next(kept, None)
            if letter is not None:
                result.append(self._match_case(letter, char))

        return "".join(result)

    def build_key_square(self, keyword: str) -> list[list[str]]:
        """Build the 5x5 key square from a keyword."""
        keyword = self.alphabet.only_letters(keyword).replace(*self.MERGED)

        # Remove duplicates while preserving order
        seen = set()
        key_letters = []
        for char in keyword + self.square_letters:
            if char not in seen:
                seen.add(char)
                key_letters.append(char)

        side = self.side
        return [key_letters[i * side:(i + 1) * side] for i in range(side)]

    def generate_random_key(self, rng: random.Random | None = None) -> str:
        """Pick a keyword from the common keys."""
        rng = rng or random
        return rng.choice(self.COMMON_KEYS)

    def parse_key(self, key: Any) -> str:
        """Parse key to an uppercase keyword."""
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise InvalidKeyError(f"Invalid key type: {type(key).__name__}")
        return key.upper()

    def explain(self, key: Any) -> str:
        """Generate human-readable explanation."""
        key_str = self.parse_key(key)
        square = self.build_key_square(key_str)

        square_preview = "\n".join(" ".join(row) for row in square)

        return (
            f"Playfair cipher with keyword '{key_str}'. "
            f"Key square:\n{square_preview}\n"
            f"Letters are encrypted in pairs using row/column rules."
        )

    def _filler_for(self, letter: str) -> str:
        return self.ALT_FILLER if letter == self.FILLER else self.FILLER

    def _extract_letters(self, text: str) -> tuple[list[int], list[str]]:
        """Positions of the letters in text, and the letters (uppercase, J as I)."""
        slots = [i for i, c in enumerate(text) if self.alphabet.is_letter(c)]
        letters = [text[i].upper().replace(*self.MERGED) for i in slots]
        return slots, letters

    def _prepare_digraphs(self, letters: list[str]) -> list[tuple[str, str]]:
        """
        Split letters into digraphs.

        - Insert a filler between double letters
        - Pad a trailing single letter with a filler
        """
        result = []
        i = 0
        while i < len(letters):
            a = letters[i]
            if i + 1 < len(letters) and letters[i + 1] != a:
                result.append((a, letters[i + 1]))
                i += 2
            else:
                result.append((a, self._filler_for(a)))
                i += 1

        return result

    def _find_position(self, square: list[list[str]], char: str) -> tuple[int, int]:
        """Find the row and column of a character in the square."""
        for row in range(self.side):
            for col in range(self.side):
                if square[row][col] == char:
                    return (row, col)
        raise InvalidKeyError(f"Character '{char}' not found in key square")

    def _transform_pair(
        self,
        square: list[list[str]],
        a: str,
        b: str,
        step: int,
    ) -> tuple[str, str]:
        """Apply the Playfair rules to one digraph; step is +1 to encrypt, -1 to decrypt."""
        row_a, col_a = self._find_position(square, a)
        row_b, col_b = self._find_position(square, b)
        side = self.side

        if row_a == row_b:
            # Same row: shift along the row
            return (
                square[row_a][(col_a + step) % side],
                square[row_b][(col_b + step) % side],
            )
        if col_a == col_b:
            # Same column: shift along the column
            return (
                square[(row_a + step) % side][col_a],
                square[(row_b + step) % side][col_b],
            )
        # Rectangle: swap columns
        return square[row_a][col_b], square[row_b][col_a]

    def _reinsert(self, text: str, slots: list[int], letters: list[str]) -> str:
        chars = list(text)
        for slot, letter in zip(slots, letters):
            chars[slot] = self._match_case(letter, text[slot])
        return "".join(chars) + "".join(letters[len(slots):])
