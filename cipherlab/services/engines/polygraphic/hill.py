import math
import random
from typing import Any, ClassVar

from cipherlab.core.exceptions import InvalidKeyError, NotInvertibleError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.arithmetic import gcd, mod, mod_inverse
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry

Matrix = list[list[int]]


@EngineRegistry.register
class HillEngine(CipherEngine):
    """
    Hill cipher engine.

    The Hill cipher uses matrix multiplication for encryption.
    Plaintext is divided into vectors of length n, and each vector
    is multiplied by an n x n key matrix modulo 26.

    For a 2x2 matrix:
    [a b]   [p1]   [a*p1 + b*p2]
    [c d] x [p2] = [c*p1 + d*p2] (mod 26)

    The key matrix must be invertible modulo 26 for decryption.
    Padding letters completing the last block are appended in lowercase.
    """

    name = "Hill Cipher"
    cipher_type = CipherType.HILL
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A polygraphic cipher using linear algebra. "
        "Blocks of letters are encrypted by multiplying with a key matrix. "
        "The key matrix must be invertible modulo 26."
    )

    SIZES: ClassVar[tuple[int, ...]] = (2, 3)
    PAD_LETTER: ClassVar[str] = "X"

    def encrypt(self, plaintext: str, key: Any) -> str:
        """Encrypt using the key matrix."""
        return self._transform(plaintext, self.parse_key(key))

    def decrypt(self, ciphertext: str, key: Any) -> str:
        """
        Decrypt using the inverse key matrix.

        Raises:
            NotInvertibleError: if the key matrix has no inverse
        """
        return self._transform(ciphertext, self.inverse_matrix(key))

    def inverse_matrix(self, key: Any) -> Matrix:
        """
        Calculate the key matrix inverse modulo the alphabet size.

        inverse = det^(-1) * adjugate (mod m)

        Raises:
            NotInvertibleError: if gcd(det, m) != 1
        """
        matrix = self.parse_key(key)
        m = self.alphabet.size
        n = len(matrix)

        det = mod(self._determinant(matrix), m)
        g = gcd(det, m)
        if g != 1:
            raise NotInvertibleError(det, g, m)
        det_inv = mod_inverse(det, m)

        adj = self._adjugate(matrix)
        return [
            [mod(adj[i][j] * det_inv, m) for j in range(n)]
            for i in range(n)
        ]

    def try_inverse_matrix(self, key: Any) -> Matrix | None:
        """Inverse key matrix, or None if the matrix is not invertible."""
        try:
            return self.inverse_matrix(key)
        except NotInvertibleError:
            return None

    def strip_padding(self, text: str, block_size: int) -> str:
        """Remove up to block_size - 1 trailing lowercase padding letters."""
        pad = self.PAD_LETTER.lower()
        for _ in range(block_size - 1):
            if not text.endswith(pad):
                break
            text = text[:-1]
        return text

    def generate_random_key(self, rng: random.Random | None = None) -> Matrix:
        """Generate a random invertible 2x2 key matrix."""
        rng = rng or random
        m = self.alphabet.size
        while True:
            matrix = [[rng.randrange(m) for _ in range(2)] for _ in range(2)]
            if self.try_inverse_matrix(matrix) is not None:
                return matrix

    def parse_key(self, key: Any) -> Matrix:
        """
        Parse key to an integer matrix.

        Accepts a nested list, a {"matrix": [...]} dict, or a 4/9-letter
        string read row by row (e.g. "DDCF" is [[3, 3], [2, 5]]).

        Raises:
            InvalidKeyError: unless the key is a 2x2 or 3x3 matrix of finite integers
        """
        if isinstance(key, dict):
            key = key.get("matrix", key.get("key"))

        if isinstance(key, str):
            letters = self.alphabet.only_letters(key)
            n = math.isqrt(len(letters))
            if n not in self.SIZES or n * n != len(letters):
                raise InvalidKeyError("Invalid key format: expected 4 or 9 letters")
            values = [self.alphabet.index(c) for c in letters]
            return [values[i * n:(i + 1) * n] for i in range(n)]

        if not isinstance(key, (list, tuple)) or len(key) not in self.SIZES:
            raise InvalidKeyError("Key matrix must be 2x2 or 3x3")

        n = len(key)
        matrix = []
        for row in key:
            if not isinstance(row, (list, tuple)) or len(row) != n:
                raise InvalidKeyError("Key matrix must be square", {"size": n})
            matrix.append([self._entry(value) for value in row])

        return matrix

    def explain(self, key: Any) -> str:
        """Generate human-readable explanation."""
        matrix = self.parse_key(key)

        n = len(matrix)
        matrix_str = "\n".join(
            "[" + " ".join(f"{x:2d}" for x in row) + "]"
            for row in matrix
        )

        return (
            f"Hill cipher with {n}x{n} key matrix:\n{matrix_str}\n"
            f"Each group of {n} letters is multiplied by this matrix modulo "
            f"{self.alphabet.size}. Decryption uses the matrix inverse."
        )

    def _entry(self, value: Any) -> int:
        return self._integer(value, "Matrix entries")

    def _determinant(self, matrix: Matrix) -> int:
        """Determinant by cofactor expansion along the first row."""
        if len(matrix) == 1:
            return matrix[0][0]
        return sum(
            (-1) ** j * matrix[0][j] * self._determinant(self._minor(matrix, 0, j))
            for j in range(len(matrix))
        )

    def _minor(self, matrix: Matrix, row: int, col: int) -> Matrix:
        return [
            [value for j, value in enumerate(r) if j != col]
            for i, r in enumerate(matrix)
            if i != row
        ]

    def _adjugate(self, matrix: Matrix) -> Matrix:
        """Transpose of the cofactor matrix."""
        n = len(matrix)
        return [
            [(-1) ** (i + j) * self._determinant(self._minor(matrix, j, i)) for j in range(n)]
            for i in range(n)
        ]

    def _transform(self, text: str, matrix: Matrix) -> str:
        """Multiply each block of letters by matrix, keeping non-letters in place."""
        m = self.alphabet.size
        n = len(matrix)

        slots = [i for i, c in enumerate(text) if self.alphabet.is_letter(c)]
        values = [self.alphabet.index(text[i]) for i in slots]

        # Pad to multiple of block size
        pad = self.alphabet.index(self.PAD_LETTER)
        values.extend([pad] * (-len(values) % n))

        result = []
        for i in range(0, len(values), n):
            block = values[i:i + n]
            for row in matrix:
                result.append(mod(sum(row[j] * block[j] for j in range(n)), m))

        chars = list(text)
        for slot, value in zip(slots, result):
            chars[slot] = self.alphabet.letter(value, text[slot].islower())
        extra = "".join(self.alphabet.letter(v, lower=True) for v in result[len(slots):])

        return "".join(chars) + extra
