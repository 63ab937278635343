"""Monoalphabetic cipher engines."""

from cipherlab.services.engines.monoalphabetic.affine import AffineEngine, AffineKey
from cipherlab.services.engines.monoalphabetic.substitution import MonoalphabeticEngine

__all__ = [
    "AffineEngine",
    "AffineKey",
    "MonoalphabeticEngine",
]
