import random
from typing import Any

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@EngineRegistry.register
class MonoalphabeticEngine(CipherEngine):
    """
    Monoalphabetic substitution cipher engine.

    Each letter is replaced with another letter according to a fixed permutation
    of the alphabet given as the key: the i-th plaintext letter maps to key[i].
    """

    name = "Monoalphabetic Substitution Cipher"
    cipher_type = CipherType.MONOALPHABETIC
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "Each letter is mapped to a different letter using a fixed permutation "
        "of the alphabet. With 26! (about 4 x 10^26) possible keys, brute force "
        "is impossible."
    )

    def encrypt(self, plaintext: str, key: Any) -> str:
        """Encrypt using substitution key."""
        key_str = self.parse_key(key)

        # Create mapping: ALPHABET[i] -> key[i]
        mapping = dict(zip(self.alphabet.letters, key_str))
        return self._substitute(plaintext, mapping)

    def decrypt(self, ciphertext: str, key: Any) -> str:
        """Decrypt using substitution key."""
        key_str = self.parse_key(key)

        # Inverse mapping: key[i] -> ALPHABET[i]
        inverse = dict(zip(key_str, self.alphabet.letters))
        return self._substitute(ciphertext, inverse)

    def generate_random_key(self, rng: random.Random | None = None) -> str:
        """Generate a random permutation of the alphabet."""
        rng = rng or random
        letters = list(self.alphabet.letters)
        rng.shuffle(letters)
        return "".join(letters)

    def parse_key(self, key: Any) -> str:
        """
        Parse key to an uppercase permutation string.

        Raises:
            InvalidKeyError: unless the key covers the alphabet exactly once
        """
        if isinstance(key, dict):
            key = key.get("key", key.get("permutation", ""))
        if not isinstance(key, str):
            raise InvalidKeyError(f"Invalid key type: {type(key).__name__}")

        key_upper = "".join(c.upper() if self.alphabet.is_letter(c) else c for c in key)
        size = self.alphabet.size

        if len(key_upper) != size:
            raise InvalidKeyError(
                f"Invalid key: must be {size} letters, got {len(key_upper)}",
                {"length": len(key_upper)},
            )
        if set(key_upper) != set(self.alphabet.letters):
            missing = sorted(set(self.alphabet.letters) - set(key_upper))
            raise InvalidKeyError(
                f"Invalid key: must be a {size}-letter permutation",
                {"missing": "".join(missing)},
            )

        return key_upper

    def explain(self, key: Any) -> str:
        """Generate human-readable explanation."""
        key_str = self.parse_key(key)

        # Show first few letter mappings
        sample_mappings = ", ".join(
            f"{self.alphabet.letters[i]}→{key_str[i]}"
            for i in range(min(5, len(key_str)))
        )

        return (
            f"Monoalphabetic substitution cipher with key: {key_str}. "
            f"The alphabet is mapped as: {sample_mappings}, etc."
        )

    def _substitute(self, text: str, mapping: dict[str, str]) -> str:
        result = []
        for char in text:
            if self.alphabet.is_letter(char):
                result.append(self._match_case(mapping[char.upper()], char))
            else:
                result.append(char)

        return "".join(result)
