import random
from typing import Any

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.arithmetic import mod
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    The key position only advances on letters, so spaces and punctuation
    neither consume nor shift the keyword.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )

    def encrypt(self, plaintext: str, key: Any) -> str:
        """Encrypt using Vigenère cipher."""
        return self._shift(plaintext, self.parse_key(key), 1)

    def decrypt(self, ciphertext: str, key: Any) -> str:
        """Decrypt using Vigenère cipher."""
        return self._shift(ciphertext, self.parse_key(key), -1)

    def generate_random_key(self, rng: random.Random | None = None) -> str:
        """Generate a random keyword."""
        rng = rng or random
        length = rng.randint(4, 10)
        return "".join(rng.choice(self.alphabet.letters) for _ in range(length))

    def parse_key(self, key: Any) -> str:
        """
        Normalise keyword: non-letters stripped, uppercased.

        Raises:
            InvalidKeyError: if no letters remain
        """
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise InvalidKeyError(f"Invalid key type: {type(key).__name__}")

        key_str = self.alphabet.only_letters(key)
        if not key_str:
            raise InvalidKeyError("Invalid key: must contain at least one letter")

        return key_str

    def explain(self, key: Any) -> str:
        """Generate human-readable explanation."""
        key_str = self.parse_key(key)

        shifts = [self.alphabet.index(c) for c in key_str]
        shift_desc = ", ".join(f"{key_str[i]}={shifts[i]}" for i in range(len(key_str)))

        return (
            f"Vigenère cipher with keyword '{key_str}' (length {len(key_str)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter is shifted by the corresponding key letter's "
            f"position in the alphabet."
        )

    def _shift(self, text: str, key: str, direction: int) -> str:
        result = []
        m = self.alphabet.size
        key_idx = 0

        for char in text:
            if self.alphabet.is_letter(char):
                shift = self.alphabet.index(key[key_idx % len(key)])
                idx = mod(self.alphabet.index(char) + direction * shift, m)
                result.append(self.alphabet.letter(idx, char.islower()))
                key_idx += 1
            else:
                result.append(char)

        return "".join(result)
