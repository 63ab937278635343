"""Polygraphic cipher engines."""

from cipherlab.services.engines.polygraphic.playfair import PlayfairEngine
from cipherlab.services.engines.polygraphic.hill import HillEngine

__all__ = [
    "PlayfairEngine",
    "HillEngine",
]
