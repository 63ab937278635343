from dataclasses import dataclass

from cipherlab.core.exceptions import NoInverseError, ValidationError


@dataclass(frozen=True)
class EuclidResult:
    """Result of the combined extended Euclid / inverse computation."""

    gcd: int
    inverse: int | None
    x: int
    y: int


def gcd(x: int, y: int) -> int:
    """Greatest common divisor of |x| and |y|. gcd(0, 0) is 0."""
    x, y = abs(x), abs(y)
    while y != 0:
        x, y = y, x % y
    return x


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    if b == 0:
        return a, 1, 0
    g, x1, y1 = _extended_gcd(b, a % b)
    return g, y1, x1 - (a // b) * y1


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Returns (g, x, y) such that a*x + b*y == g, where g is the
    non-negative gcd of a and b.
    """
    g, x, y = _extended_gcd(a, b)
    if g < 0:
        return -g, -x, -y
    return g, x, y


def mod(x: int, m: int) -> int:
    """Euclidean modulo: always in [0, m), also for negative x."""
    if m <= 0:
        raise ValidationError(f"Modulus must be positive, got {m}", {"modulus": m})
    return ((x % m) + m) % m


def mod_inverse(a: int, m: int) -> int:
    """
    Modular multiplicative inverse of a mod m.

    Raises:
        NoInverseError: if gcd(a mod m, m) != 1
    """
    a = mod(a, m)
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise NoInverseError(a, g, m)
    return mod(x, m)


def euclid(a: int, m: int) -> EuclidResult:
    """Bezout coefficients of (a, m), plus the inverse of a mod m when it exists."""
    g, x, y = extended_gcd(a, m)
    inverse = mod_inverse(a, m) if g == 1 and m > 0 else None
    return EuclidResult(gcd=g, inverse=inverse, x=x, y=y)
