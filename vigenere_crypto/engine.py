"""
Vigenère Substitution Engine
============================
Polyalphabetic substitution driven by a repeating key.

Each message symbol is paired with the key symbol at the same position
and looked up in the tabula recta:

    encrypt:  row = plain symbol,  column = key symbol  -> table[row][col]
    decrypt:  row = key symbol,    find cipher in that row -> table[0][col]

The key is repeated by concatenating the original key onto itself until
it covers the message. With the default alphabet this is the classical
"le chiffre indéchiffrable" of 1553 -- breakable by Kasiski or Friedman
analysis, so treat it as an educational tool, not a security primitive.

An engine built without a table stays unusable: every substitution
raises TableNotGenerated. Use VigenereCipher.generate() to get a ready
engine. The table is never replaced, so a ready engine can be shared
between threads as-is.
"""

import logging
from typing import Optional

from .alphabet import DEFAULT_ALPHABET
from .errors import InvalidKey, SymbolNotFound, TableNotGenerated
from .tabula import TabulaRecta, generate

logger = logging.getLogger(__name__)


def extend_key(key: str, length: int) -> str:
    """
    Repeat `key` by self-concatenation until it is at least `length` long.

    The original key is appended each time, never the grown one. A key
    that is already long enough comes back untouched.
    """
    if not key:
        raise InvalidKey("Vigenère key must not be empty.")
    stream = key
    while len(stream) < length:
        stream += key
    return stream


class VigenereCipher:
    """Vigenère cipher over a fixed tabula recta."""

    def __init__(self, table: Optional[TabulaRecta] = None):
        """
        Pass a generated table, or omit it for an uninitialised engine.
        The table cannot be set or swapped later.
        """
        self._table = table

    @classmethod
    def generate(cls, alphabet: str = DEFAULT_ALPHABET) -> "VigenereCipher":
        """Build the tabula recta for `alphabet` and return a ready engine."""
        return cls(generate(alphabet))

    @property
    def table(self) -> TabulaRecta:
        return self._table

    @property
    def available(self) -> bool:
        return self._table is not None

    def _require_table(self) -> TabulaRecta:
        if self._table is None:
            raise TableNotGenerated()
        return self._table

    # ── single symbols ───────────────────────────────────────────────────────

    def substitute(self, char: str, keychar: str) -> str:
        """Forward lookup: plaintext symbol + key symbol -> ciphertext symbol."""
        table = self._require_table()

        row = table.index(char)
        if row < 0:
            raise SymbolNotFound(char, axis="row", role="message")

        col = table.index(keychar)
        if col < 0:
            raise SymbolNotFound(keychar, axis="column", role="key")

        return table[row][col]

    def reverse_substitute(self, char: str, keychar: str) -> str:
        """Inverse lookup: ciphertext symbol + key symbol -> plaintext symbol."""
        table = self._require_table()

        row = table.index(keychar)
        if row < 0:
            raise SymbolNotFound(keychar, axis="row", role="key")

        pos = table.index(char)
        if pos < 0:
            raise SymbolNotFound(char, axis="column", role="message")
        # table[row][col] == table[0][(row + col) % N]
        col = (pos - row) % table.size

        return table[0][col]

    # ── whole messages ───────────────────────────────────────────────────────

    def _transform(self, text: str, key: str, step) -> str:
        self._require_table()
        keystream = extend_key(key, len(text))
        result = []
        for i, ch in enumerate(text):
            try:
                result.append(step(ch, keystream[i]))
            except SymbolNotFound as exc:
                exc.position = i
                raise
        return "".join(result)

    def encrypt(self, plaintext: str, key: str) -> str:
        """
        Encrypt `plaintext` with `key`.

        Every symbol of both strings must be in the alphabet. The first
        symbol that is not aborts the call with SymbolNotFound; nothing
        is returned for the symbols before it.
        """
        logger.debug(f"Encrypt: {len(plaintext)} symbols, key period {len(key)}")
        return self._transform(plaintext, key, self.substitute)

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt `ciphertext` with `key`. Same rules as encrypt()."""
        logger.debug(f"Decrypt: {len(ciphertext)} symbols, key period {len(key)}")
        return self._transform(ciphertext, key, self.reverse_substitute)

    def __repr__(self):
        state = f"{self._table.size} symbols" if self._table else "no table"
        return f"VigenereCipher({state})"
