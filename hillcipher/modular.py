"""
Modular arithmetic primitives for the Hill cipher matrix engine.
"""

from typing import Tuple

from hillcipher.errors import NotCoprimeError


def residue(a: int, m: int) -> int:
    """
    Return the residue of a modulo m, always in [0, m) for m > 0.

    Unlike a truncating remainder, negative inputs map to their true
    representative: residue(-38, 26) == 14.
    """
    reminder = abs(a) % abs(m)
    if a >= 0:
        return reminder
    if reminder != 0:
        return m - reminder
    return 0


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Returns (x, y, g) such that g = gcd(a, b) and a*x + b*y = g. The signs
    of x and y follow the iterative recurrence below; callers that need a
    canonical Bezout pair must normalize it themselves.
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    if old_r < 0:
        return -old_s, -old_t, -old_r
    return old_s, old_t, old_r


def is_mod_unit(a: int, n: int) -> bool:
    """Whether a has a multiplicative inverse modulo n."""
    _, _, g = egcd(a, n)
    return g == 1


def modular_inverse(a: int, m: int) -> int:
    """
    Computes the modular inverse of a modulo m using the Extended Euclidean Algorithm.

    Every integer is congruent to 0 modulo 1, so modular_inverse(a, 1) is 0.

    Raises:
        NotCoprimeError: if gcd(a, m) != 1
    """
    if m == 1:
        return 0

    x, _, g = egcd(a, m)
    if g != 1:
        raise NotCoprimeError(f"{a} and {m} are not coprimes")

    # Bezout coefficient may be negative (or exceed m when a > m)
    return x % m
