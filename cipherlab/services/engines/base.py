import math
import random
from abc import ABC, abstractmethod
from typing import Any

from cipherlab.core.exceptions import CipherLabError, InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import ENGLISH, Alphabet


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext with a key
    - decrypt(): Decrypt ciphertext with a key
    - validate_key(): Check a key without transforming anything
    - generate_random_key(): Produce a valid key
    - explain(): Generate human-readable explanation

    Engines are stateless apart from their alphabet: every call validates
    its key eagerly and raises before producing any output.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    def __init__(self, alphabet: Alphabet = ENGLISH):
        self.alphabet = alphabet

    @abstractmethod
    def encrypt(self, plaintext: str, key: Any) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext

        Raises:
            InvalidKeyError: if the key is unusable
        """
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str, key: Any) -> str:
        """
        Decrypt ciphertext with the given key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            Plaintext

        Raises:
            InvalidKeyError: if the key is unusable
        """
        pass

    @abstractmethod
    def generate_random_key(self, rng: random.Random | None = None) -> Any:
        """
        Generate a random valid key for this cipher.

        Args:
            rng: Random source, defaults to the module-level generator

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def explain(self, key: Any) -> str:
        """
        Generate human-readable explanation of the cipher with this key.

        Args:
            key: The key used

        Returns:
            Explanation string
        """
        pass

    def validate_key(self, key: Any) -> bool:
        """
        Validate that a key is valid for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        try:
            self.parse_key(key)
        except CipherLabError:
            return False
        return True

    @abstractmethod
    def parse_key(self, key: Any) -> Any:
        """
        Normalise a key to the engine's canonical form.

        Raises:
            InvalidKeyError: if the key is malformed or mathematically unusable
        """
        pass

    def _integer(self, value: Any, label: str) -> int:
        """
        Integer key component. Integral floats are accepted.

        Raises:
            InvalidKeyError: for bools, non-numbers and non-integral or non-finite floats
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidKeyError(f"{label} must be integers, got {value!r}")
        if isinstance(value, float):
            if not math.isfinite(value) or not value.is_integer():
                raise InvalidKeyError(f"{label} must be finite integers, got {value!r}")
            return int(value)
        return value

    def _match_case(self, char: str, template: str) -> str:
        """Return char in the case of template."""
        return char.lower() if template.islower() else char.upper()
