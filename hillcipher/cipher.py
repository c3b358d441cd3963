"""
Hill cipher: a polygraphic substitution cipher that encrypts blocks of
symbols by multiplying them against an invertible key matrix modulo the
alphabet size.

The Hill cipher is broken by known-plaintext attacks. Use it for
experimentation and teaching only, never to protect real data.
"""

import math
from typing import List, Optional, Sequence, Tuple, Union

from hillcipher.alphabet import Alphabet
from hillcipher.errors import (
    AlphabetTooSmallError,
    BadSymbolError,
    HillCipherError,
    InvalidKeyError,
    InvalidModulusError,
    KeyNotInvertibleError,
    MessageNotBlockAlignedError,
    NotInvertibleError,
    SizeMismatchError,
)
from hillcipher.matrix import DET_LAPLACE, MIN_MODULUS, Matrix, check_method

MIN_KEY_ORDER = 2


class Key:
    """
    Hill cipher key matrix, invertible modulo mod.

    Invertibility is checked once, here; a constructed Key is never
    re-validated.
    """

    __slots__ = ("_matrix", "_mod", "_method")

    def __init__(self, data: Sequence[int], mod: int, method: str = DET_LAPLACE):
        """
        Args:
            data: Row-major key entries; len(data) must be a perfect square
            mod: Modulus the key must be invertible in (>= 2)
            method: Determinant algorithm used by the invertibility checks

        Raises:
            InvalidModulusError: if mod < 2
            SizeMismatchError: if len(data) is not a square number
            InvalidKeyError: if the derived order is below 2
            NotInvertibleError: if the matrix is not invertible modulo mod
        """
        check_method(method)
        if mod < MIN_MODULUS:
            raise InvalidModulusError(f"cannot create key for mod {mod} < {MIN_MODULUS}")
        order = math.isqrt(len(data))
        if order * order != len(data):
            raise SizeMismatchError(
                f"key size must be a square number, got {len(data)}"
            )
        if order < MIN_KEY_ORDER:
            raise InvalidKeyError(
                f"cannot create key of order {order} < {MIN_KEY_ORDER}"
            )
        matrix = Matrix(order, data)
        if not matrix.is_invertible_mod(mod, method):
            raise NotInvertibleError(f"key is not invertible modulo {mod}")

        self._matrix = matrix
        self._mod = mod
        self._method = method

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def order(self) -> int:
        return self._matrix.order

    @property
    def mod(self) -> int:
        return self._mod

    def rows(self) -> List[List[int]]:
        return self._matrix.rows()

    def determinant(self) -> int:
        return self._matrix.determinant(self._method)

    def inverse(self) -> Matrix:
        """Inverse key matrix modulo mod."""
        return self._matrix.inverse_mod(self._mod, self._method)

    def vector_product(self, *vector: int) -> List[int]:
        return self._matrix.vector_product_mod(self._mod, *vector)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._mod == other._mod and self._matrix == other._matrix

    def __hash__(self) -> int:
        return hash((self._mod, self._matrix))

    def __repr__(self) -> str:
        return f"Key(mod={self._mod}, rows={self.rows()})"

    def __str__(self) -> str:
        return str(self._matrix)


def pad_message(message: str, order: int, pad_symbol: str) -> str:
    """Append pad_symbol until len(message) is a multiple of order."""
    if order < 1:
        raise SizeMismatchError(f"cannot pad to blocks of size {order}")
    if len(pad_symbol) != 1:
        raise BadSymbolError(
            f"pad symbol must be a single symbol, got {pad_symbol!r}",
            what="pad symbol",
            symbol=pad_symbol,
        )
    remainder = len(message) % order
    if remainder == 0:
        return message
    return message + pad_symbol * (order - remainder)


class Cipher:
    """
    Hill cipher over a specific alphabet; the modulus is the alphabet size.

    Stateless after construction, so one instance can serve any number of
    concurrent encrypt/decrypt calls.
    """

    __slots__ = ("_alphabet", "_mod", "_method")

    def __init__(self, alphabet: Union[Alphabet, str], method: str = DET_LAPLACE):
        if isinstance(alphabet, str):
            alphabet = Alphabet(alphabet)
        check_method(method)
        n = len(alphabet)
        if n < MIN_MODULUS:
            raise AlphabetTooSmallError(
                f"alphabet must contain at least {MIN_MODULUS} symbols, got {n}"
            )
        self._alphabet = alphabet
        self._mod = n
        self._method = method

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def mod(self) -> int:
        return self._mod

    @property
    def method(self) -> str:
        return self._method

    def __repr__(self) -> str:
        return f"Cipher(alphabet={str(self._alphabet)!r}, method={self._method!r})"

    # --- Validation ---

    def _to_indices(self, text: str, what: str) -> List[int]:
        if not self._alphabet.belongs(text):
            raise BadSymbolError(
                f"{what} {text!r} does not belong to alphabet {str(self._alphabet)!r}",
                what=what,
            )
        return [self._alphabet.stoi(s) for s in text]

    def build_key(self, raw_key: str) -> Key:
        """
        Validate raw_key against this cipher and build its Key.

        Raises:
            BadSymbolError: if raw_key has symbols outside the alphabet
            InvalidKeyError: if raw_key is not a square, order >= 2, invertible matrix
        """
        key_ints = self._to_indices(raw_key, "key")
        try:
            return Key(key_ints, self._mod, self._method)
        except HillCipherError as err:
            raise InvalidKeyError(f"failed to create key for {raw_key!r}; {err}") from err

    def _verify_key_text_pair(
        self, text: str, raw_key: str, what: str
    ) -> Tuple[Key, List[int]]:
        """Check text and key against this cipher; return the key and text indices."""
        indices = self._to_indices(text, what)
        key = self.build_key(raw_key)
        if len(indices) % key.order != 0:
            raise MessageNotBlockAlignedError(
                f"{what} length {len(indices)} is not multiple of key order "
                f"{key.order}, consider using encrypt_with_padding"
            )
        return key, indices

    # --- Block processing ---

    def _apply(self, matrix: Matrix, indices: List[int]) -> str:
        """Multiply consecutive blocks by matrix; inputs are already validated."""
        order = matrix.order
        assert len(indices) % order == 0
        out = []
        for i in range(0, len(indices), order):
            block = matrix.vector_product_mod(self._mod, *indices[i : i + order])
            out.extend(self._alphabet.itos(x) for x in block)
        return "".join(out)

    def encrypt(self, message: str, key: str) -> str:
        """
        Encrypt message using key.

        Raises:
            BadSymbolError: if message or key has symbols outside the alphabet
            InvalidKeyError: if key is not a square, order >= 2, invertible matrix
            MessageNotBlockAlignedError: if len(message) is not a multiple of
                the key order
        """
        key_matrix, indices = self._verify_key_text_pair(message, key, "message")
        return self._apply(key_matrix.matrix, indices)

    def decrypt(self, cipher_text: str, key: str) -> str:
        """
        Decrypt cipher_text using key. Same validations as encrypt.

        Raises:
            KeyNotInvertibleError: if the key matrix cannot be inverted
        """
        key_matrix, indices = self._verify_key_text_pair(
            cipher_text, key, "cipher text"
        )
        try:
            inverse = key_matrix.inverse()
        except NotInvertibleError as err:
            raise KeyNotInvertibleError(
                f"failed to invert key\n{key_matrix}; {err}"
            ) from err
        return self._apply(inverse, indices)

    def encrypt_with_padding(
        self, message: str, key: str, pad_symbol: Optional[str] = None
    ) -> str:
        """
        Pad message up to a whole number of blocks, then encrypt it.

        pad_symbol defaults to the last symbol of the alphabet.
        """
        if pad_symbol is None:
            pad_symbol = self._alphabet.symbols[-1]
        if not self._alphabet.contains(pad_symbol):
            raise BadSymbolError(
                f"pad symbol {pad_symbol!r} does not belong to alphabet "
                f"{str(self._alphabet)!r}",
                what="pad symbol",
                symbol=pad_symbol,
            )
        indices = self._to_indices(message, "message")
        key_matrix = self.build_key(key)
        padded = pad_message(message, key_matrix.order, pad_symbol)
        indices += [self._alphabet.stoi(pad_symbol)] * (len(padded) - len(message))
        return self._apply(key_matrix.matrix, indices)
