from typing import Any


class CipherLabError(Exception):
    """Base exception for all cipher library errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherLabError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a key fails a structural or mathematical precondition."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class NoInverseError(CipherLabError):
    """Raised when a modular inverse does not exist."""

    def __init__(self, value: int, gcd: int, modulus: int):
        self.value = value
        self.gcd = gcd
        self.modulus = modulus
        super().__init__(
            f"No modular inverse for {value} mod {modulus} (gcd={gcd})",
            {"value": value, "gcd": gcd, "modulus": modulus},
        )


class NotInvertibleError(NoInverseError):
    """Raised when a key matrix has no inverse modulo the alphabet size."""

    def __init__(self, determinant: int, gcd: int, modulus: int):
        super().__init__(determinant, gcd, modulus)
        self.message = (
            f"Key matrix is not invertible mod {modulus}: "
            f"determinant {determinant} shares factor {gcd} with {modulus}"
        )
        self.args = (self.message,)


class AnalysisError(CipherLabError):
    """Raised when statistical analysis fails."""

    pass


class EmptyAnalysisError(AnalysisError):
    """Raised when there are no letters to analyze."""

    def __init__(self) -> None:
        super().__init__("No letters to analyze")
