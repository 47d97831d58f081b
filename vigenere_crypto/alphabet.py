"""
Alphabet
========
The ordered symbol set shared by plaintext, ciphertext and keys.

Row 0 of the tabula recta is the alphabet itself, so the order of the
symbols decides every substitution. Symbols must be distinct: a repeat
would make index lookups ambiguous and silently corrupt the output.
"""

from .errors import InvalidAlphabet

# 0-9, A-Z, a-z, comma, period, space -- 65 symbols
DEFAULT_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    ",. "
)


def validate_alphabet(alphabet: str) -> str:
    """Return `alphabet` unchanged, or raise InvalidAlphabet."""
    if not alphabet:
        raise InvalidAlphabet("Alphabet must not be empty.")
    seen = set()
    for symbol in alphabet:
        if symbol in seen:
            raise InvalidAlphabet(f"Alphabet repeats symbol {symbol!r}.")
        seen.add(symbol)
    return alphabet
