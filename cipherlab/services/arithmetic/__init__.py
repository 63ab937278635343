"""Modular arithmetic shared by every cipher engine."""

from cipherlab.services.arithmetic.euclid import (
    EuclidResult,
    euclid,
    extended_gcd,
    gcd,
    mod,
    mod_inverse,
)

__all__ = [
    "EuclidResult",
    "euclid",
    "extended_gcd",
    "gcd",
    "mod",
    "mod_inverse",
]
