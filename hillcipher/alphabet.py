"""
Alphabets: ordered symbol sets mapped onto the integers 0..n-1.
"""

from typing import Dict, Tuple

from hillcipher.errors import BadSymbolError, IndexOutOfBoundsError

ENGLISH_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SPANISH_ALPHABET = "ABCDEFGHIJKLMNÑOPQRSTUVWXYZ"


class Alphabet:
    """
    Set of symbols valid through a cipher, in a fixed order.

    Both lookup tables are built once here and never modified.
    """

    __slots__ = ("_symbols", "_symbol_index", "_int_index")

    def __init__(self, symbols: str):
        self._symbols: Tuple[str, ...] = tuple(symbols)
        self._symbol_index: Dict[str, int] = {}
        self._int_index: Dict[int, str] = {}
        for i, s in enumerate(self._symbols):
            if s in self._symbol_index:
                raise BadSymbolError(
                    f"symbol {s!r} is repeated in alphabet {symbols!r}",
                    what="alphabet",
                    symbol=s,
                )
            self._symbol_index[s] = i
            self._int_index[i] = s

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __str__(self) -> str:
        return "".join(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbol_index

    def contains(self, symbol: str) -> bool:
        """Whether a single symbol is defined in the alphabet."""
        return symbol in self._symbol_index

    def belongs(self, text: str) -> bool:
        """Whether every symbol of text is defined in the alphabet."""
        return all(s in self._symbol_index for s in text)

    def stoi(self, symbol: str) -> int:
        """Symbol to int."""
        try:
            return self._symbol_index[symbol]
        except KeyError:
            raise BadSymbolError(
                f"symbol {symbol!r} is not part of the alphabet", symbol=symbol
            ) from None

    def itos(self, index: int) -> str:
        """Int to symbol."""
        try:
            return self._int_index[index]
        except KeyError:
            raise IndexOutOfBoundsError(
                f"{index} cannot be mapped to a symbol of a {len(self)}-symbol alphabet"
            ) from None
