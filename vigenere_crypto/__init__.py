"""
vigenere_crypto
===============
Vigenère polyalphabetic cipher over a fixed 65-symbol alphabet:
digits, upper- and lower-case Latin letters, comma, period and space.

    from vigenere_crypto import VigenereCipher

    v  = VigenereCipher.generate()
    ct = v.encrypt("HELLO", "KEY")
    assert v.decrypt(ct, "KEY") == "HELLO"

Modules:
    alphabet: the fixed symbol set and its validation
    tabula: tabula recta generation
    engine: forward / inverse substitution and key repetition
    errors: exception hierarchy
    fingerprint: SHA-256 key fingerprints for logging
    cli: `vigenere encrypt|decrypt|help` command line

Not a security primitive: Vigenère falls to Kasiski/Friedman analysis.
"""

__version__ = "1.0.0"

from .alphabet    import DEFAULT_ALPHABET, validate_alphabet
from .tabula      import TabulaRecta, generate, rotate_left
from .engine      import VigenereCipher, extend_key
from .errors      import (VigenereError, TableNotGenerated, SymbolNotFound,
                          InvalidAlphabet, InvalidKey)
from .fingerprint import key_fingerprint

__all__ = [
    "DEFAULT_ALPHABET",
    "validate_alphabet",
    "TabulaRecta",
    "generate",
    "rotate_left",
    "VigenereCipher",
    "extend_key",
    "VigenereError",
    "TableNotGenerated",
    "SymbolNotFound",
    "InvalidAlphabet",
    "InvalidKey",
    "key_fingerprint",
]
