import random
from typing import Any, NamedTuple

from cipherlab.core.exceptions import EmptyAnalysisError, InvalidKeyError, NoInverseError
from cipherlab.models.schemas import CipherFamily, CipherType, CrackCandidate
from cipherlab.services.analysis.statistics import StatisticalAnalyzer
from cipherlab.services.arithmetic import gcd, mod, mod_inverse
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


class AffineKey(NamedTuple):
    a: int
    b: int


@EngineRegistry.register
class AffineEngine(CipherEngine):
    """
    Affine cipher engine.

    The Affine cipher encrypts using the formula: E(x) = (ax + b) mod m
    where 'a' must be coprime with the alphabet size m (for English:
    1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25).

    Decryption uses: D(y) = a^(-1) * (y - b) mod m
    where a^(-1) is the modular multiplicative inverse of a mod m.
    """

    name = "Affine Cipher"
    cipher_type = CipherType.AFFINE
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A monoalphabetic substitution cipher using the formula E(x) = (ax + b) mod 26. "
        "Combines multiplicative and additive shifts. "
        "The 'a' value must be coprime with 26."
    )

    @property
    def valid_multipliers(self) -> list[int]:
        """Values of 'a' coprime with the alphabet size, ascending."""
        m = self.alphabet.size
        return [a for a in range(1, m) if gcd(a, m) == 1]

    def encrypt(self, plaintext: str, key: Any) -> str:
        """Encrypt using E(x) = (ax + b) mod m."""
        a, b = self.parse_key(key)
        m = self.alphabet.size

        result = []
        for char in plaintext:
            if self.alphabet.is_letter(char):
                x = self.alphabet.index(char)
                result.append(self.alphabet.letter(mod(a * x + b, m), char.islower()))
            else:
                result.append(char)

        return "".join(result)

    def decrypt(self, ciphertext: str, key: Any) -> str:
        """Decrypt using D(y) = a^(-1) * (y - b) mod m."""
        a, b = self.parse_key(key)
        m = self.alphabet.size
        a_inv = mod_inverse(a, m)

        result = []
        for char in ciphertext:
            if self.alphabet.is_letter(char):
                y = self.alphabet.index(char)
                result.append(self.alphabet.letter(mod(a_inv * (y - b), m), char.islower()))
            else:
                result.append(char)

        return "".join(result)

    def crack(
        self,
        ciphertext: str,
        plain1: str = "E",
        plain2: str = "T",
        top_k: int = 4,
        max_candidates: int = 10,
    ) -> list[CrackCandidate]:
        """
        Guess (a, b) from letter frequencies.

        The most frequent ciphertext letters are paired up and assumed to be
        the encryptions of plain1 and plain2; each pairing gives a linear
        system that is solved for (a, b). Pairings that cannot be solved are
        skipped. If no pairing works, every valid key is tried instead.

        Candidates come back in generation order, not ranked; chi_squared is
        attached for callers that want to rank them.

        Raises:
            EmptyAnalysisError: if the ciphertext has no letters
            InvalidKeyError: if plain1 or plain2 is not a single letter
        """
        for plain in (plain1, plain2):
            if not self.alphabet.is_letter(plain):
                raise InvalidKeyError(
                    f"Crack letters must be single alphabet letters, got {plain!r}",
                    {"plain1": plain1, "plain2": plain2},
                )

        analyzer = StatisticalAnalyzer(self.alphabet)
        top = analyzer.ranked_letters(ciphertext)
        if not top:
            raise EmptyAnalysisError()

        m = self.alphabet.size
        p1 = self.alphabet.index(plain1)
        p2 = self.alphabet.index(plain2)
        limit = min(top_k, len(top))
        candidates: list[CrackCandidate] = []

        for i in range(limit):
            for j in range(limit):
                if i == j:
                    continue

                c1 = self.alphabet.index(top[i])
                c2 = self.alphabet.index(top[j])

                # (C1 - C2) = a (P1 - P2) mod m
                try:
                    a = mod((c1 - c2) * mod_inverse(p1 - p2, m), m)
                except NoInverseError:
                    continue
                if gcd(a, m) != 1:
                    continue

                b = mod(c1 - a * p1, m)
                candidates.append(self._candidate(ciphertext, a, b, analyzer))

        if not candidates:
            for a in self.valid_multipliers:
                for b in range(m):
                    candidates.append(self._candidate(ciphertext, a, b, analyzer))

        return candidates[:max_candidates]

    def generate_random_key(self, rng: random.Random | None = None) -> AffineKey:
        """Generate random valid (a, b) values."""
        rng = rng or random
        return AffineKey(rng.choice(self.valid_multipliers), rng.randrange(self.alphabet.size))

    def parse_key(self, key: Any) -> AffineKey:
        """
        Parse key to (a, b).

        Accepts a tuple/list, a {"a": .., "b": ..} dict or an "a,b" string.
        'b' is reduced mod the alphabet size.

        Raises:
            InvalidKeyError: if the key is malformed or gcd(a, m) != 1
        """
        try:
            if isinstance(key, dict):
                a, b = key["a"], key["b"]
            elif isinstance(key, str):
                parts = key.replace(" ", "").split(",")
                if len(parts) != 2:
                    raise ValueError(key)
                a, b = int(parts[0]), int(parts[1])
            else:
                a, b = key
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidKeyError(f"Invalid affine key: {key!r}") from e
        a, b = self._integer(a, "Affine key values"), self._integer(b, "Affine key values")

        m = self.alphabet.size
        g = gcd(a, m)
        if g != 1:
            raise InvalidKeyError(
                f"Invalid 'a' value: {a}. Must be coprime with {m} (gcd={g}).",
                {"a": a, "gcd": g},
            )

        return AffineKey(a, mod(b, m))

    def explain(self, key: Any) -> str:
        """Generate human-readable explanation."""
        a, b = self.parse_key(key)
        m = self.alphabet.size

        return (
            f"Affine cipher with a={a} and b={b}. "
            f"Encryption formula: E(x) = ({a}x + {b}) mod {m}. "
            f"Decryption uses the modular inverse of {a}, which is {mod_inverse(a, m)}. "
            f"Each letter position is multiplied by {a}, then {b} is added."
        )

    def _candidate(
        self,
        ciphertext: str,
        a: int,
        b: int,
        analyzer: StatisticalAnalyzer,
    ) -> CrackCandidate:
        preview = self.decrypt(ciphertext, (a, b))
        return CrackCandidate(
            a=a,
            b=b,
            preview=preview,
            chi_squared=analyzer.english_score(preview),
        )
