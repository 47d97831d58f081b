"""
Errors raised by the Vigenère core.

The core never prints or exits. Everything below is raised to the
caller, and the command-line layer decides what the user sees.
"""

from typing import Optional


class VigenereError(Exception):
    """Base class for every error raised by vigenere_crypto."""


class TableNotGenerated(VigenereError, RuntimeError):
    """Substitution attempted on an engine that has no tabula recta."""

    def __init__(self, message: str = "No Vigenère table generated."):
        super().__init__(message)


class InvalidAlphabet(VigenereError, ValueError):
    """Alphabet is empty or repeats a symbol."""


class InvalidKey(VigenereError, ValueError):
    """Key cannot drive a key stream (empty)."""


class SymbolNotFound(VigenereError, ValueError):
    """
    A message or key symbol lies outside the alphabet.

    axis     : "row" or "column", the table lookup that failed
    role     : "message" or "key", which input carried the symbol
    position : index in the message, filled in by encrypt/decrypt
    """

    def __init__(self, symbol: str, axis: str, role: str, position: Optional[int] = None):
        self.symbol   = symbol
        self.axis     = axis
        self.role     = role
        self.position = position
        super().__init__(symbol, axis, role, position)

    def __str__(self):
        where = f" at position {self.position}" if self.position is not None else ""
        return (f"{self.role} symbol {self.symbol!r}{where} not found "
                f"in table {self.axis}s.")
