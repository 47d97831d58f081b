"""
Tabula Recta
============
The square substitution table behind the Vigenère cipher.

For an alphabet of N symbols the table has N rows of N symbols each.
Row i is the alphabet rotated left by i positions, so

    table[i][j] == alphabet[(i + j) % N]

Row 0 is the alphabet in its original order and doubles as the index
for both the plaintext (row) and the key (column) lookups.

The table is built once and never changes afterwards; engines only
read from it.
"""

import logging
from typing import Iterator, Tuple

from .alphabet import validate_alphabet
from .errors import InvalidAlphabet

logger = logging.getLogger(__name__)


def rotate_left(text: str, n: int) -> str:
    return text[n:] + text[:n]


class TabulaRecta:
    """
    Immutable N x N table of alphabet rotations.

    Prefer generate(). Rows passed in directly must form a tabula recta:
    row 0 holds distinct symbols and row i is row 0 rotated left by i.
    """

    __slots__ = ("_rows", "_index")

    def __init__(self, rows: Tuple[str, ...]):
        self._rows = tuple(rows)
        if not self._rows:
            raise InvalidAlphabet("Table must have at least one row.")
        alphabet = validate_alphabet(self._rows[0])
        if len(self._rows) != len(alphabet):
            raise InvalidAlphabet(
                f"Table needs {len(alphabet)} rows, got {len(self._rows)}."
            )
        for i, row in enumerate(self._rows):
            if row != rotate_left(alphabet, i):
                raise InvalidAlphabet(f"Row {i} is not row 0 rotated left by {i}.")
        self._index = {symbol: i for i, symbol in enumerate(self._rows[0])}

    @property
    def alphabet(self) -> str:
        return self._rows[0]

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    @property
    def size(self) -> int:
        return len(self._rows)

    def row(self, i: int) -> str:
        return self._rows[i]

    def index(self, symbol: str) -> int:
        """Position of `symbol` in row 0, or -1 when it is not in the alphabet."""
        return self._index.get(symbol, -1)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, i: int) -> str:
        return self._rows[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __eq__(self, other):
        if not isinstance(other, TabulaRecta):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"TabulaRecta({self.size}x{self.size})"


def generate(alphabet: str) -> TabulaRecta:
    """
    Build the tabula recta for `alphabet`.

    Raises InvalidAlphabet if the alphabet is empty or repeats a symbol.
    """
    alphabet = validate_alphabet(alphabet)
    table = TabulaRecta(rotate_left(alphabet, i) for i in range(len(alphabet)))
    logger.debug(f"Tabula recta generated: {table.size}x{table.size}")
    return table
