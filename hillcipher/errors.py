"""
Exception hierarchy for the Hill cipher matrix engine and cipher layer.
"""


class HillCipherError(ValueError):
    """Base class for every failure raised by this package."""


class SizeMismatchError(HillCipherError):
    """Flat data length is not order^2, or vector length != matrix order."""


class UndefinedDeterminantError(HillCipherError):
    """Determinant (or a quantity built on it) requested for a degenerate order."""


class IndexOutOfBoundsError(HillCipherError, IndexError):
    """Row/column or symbol index outside its valid range."""


class NotInvertibleError(HillCipherError):
    """Matrix has no inverse modulo the requested base."""


class KeyNotInvertibleError(NotInvertibleError):
    """Cipher key could not be inverted for decryption."""


class NotCoprimeError(HillCipherError):
    """Modular inverse requested for a value that is not a unit."""


class InvalidModulusError(HillCipherError):
    """Modulus below 2 where a proper modulus is required."""


class AlphabetTooSmallError(HillCipherError):
    """Cipher alphabet has fewer than two symbols."""


class BadSymbolError(HillCipherError):
    """
    Input contains a symbol outside the alphabet (or the alphabet repeats one).

    Attributes:
        what: Name of the offending input, e.g. "message" or "key"
        symbol: The offending symbol when a single one is known
    """

    def __init__(self, message: str, what: str = "", symbol: str = ""):
        super().__init__(message)
        self.what = what
        self.symbol = symbol


class InvalidKeyError(HillCipherError):
    """Key text cannot be turned into a usable key matrix."""


class MessageNotBlockAlignedError(HillCipherError):
    """Message length is not a multiple of the key order."""
