from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    AFFINE = "affine"
    MONOALPHABETIC = "monoalphabetic"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"
    HILL = "hill"


# ============================================================================
# Analysis Schemas
# ============================================================================


class CrackCandidate(BaseModel):
    """A guessed affine key with the ciphertext decrypted under it."""

    model_config = ConfigDict(frozen=True)

    a: int
    b: int
    preview: str
    # English fit of the preview (lower is better); informational only
    chi_squared: float | None = None


# ============================================================================
# Request Schemas
# ============================================================================


class AffineRequest(BaseModel):
    """Request schema for affine encrypt/decrypt."""

    text: str
    a: int
    b: int


class AffineCrackRequest(BaseModel):
    """Request schema for affine cracking."""

    text: str
    plain1: str | None = Field(default=None, min_length=1, max_length=1)
    plain2: str | None = Field(default=None, min_length=1, max_length=1)


class KeywordRequest(BaseModel):
    """Request schema for ciphers keyed by a string (mono, vigenere, playfair)."""

    text: str
    key: str


class HillRequest(BaseModel):
    """Request schema for Hill encrypt/decrypt."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    key_matrix: list[list[Any]] = Field(alias="keyMat")


class EuclidRequest(BaseModel):
    """Request schema for the extended Euclid endpoint."""

    a: int
    m: int


# ============================================================================
# Response Schemas
# ============================================================================


class TextResponse(BaseModel):
    """Result of a plain text transform."""

    result: str


class CrackResponse(BaseModel):
    """Ranked affine key guesses."""

    candidates: list[CrackCandidate]


class PlayfairResponse(BaseModel):
    """Playfair result with the key square used."""

    result: str
    matrix: list[list[str]]
    raw: str | None = None


class HillResponse(BaseModel):
    """Hill result with the inverse key matrix (null when not invertible)."""

    result: str
    inverse: list[list[int]] | None = None


class Coefficients(BaseModel):
    """Bezout coefficients."""

    x: int
    y: int


class EuclidResponse(BaseModel):
    """Extended Euclid result."""

    gcd: int
    inverse: int | None
    coefficients: Coefficients


class HealthResponse(BaseModel):
    """Service liveness."""

    status: str
    app_name: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error body returned with 400 and 500 responses."""

    detail: str
