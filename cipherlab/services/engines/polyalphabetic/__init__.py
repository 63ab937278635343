"""Polyalphabetic cipher engines."""

from cipherlab.services.engines.polyalphabetic.vigenere import VigenereEngine

__all__ = [
    "VigenereEngine",
]
