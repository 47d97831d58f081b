"""
Key fingerprint
===============
Short SHA-256 digest of a key, so logs can tell keys apart without
ever containing one.

Dependencies: cryptography >= 41.0
"""

from cryptography.hazmat.primitives import hashes


def key_fingerprint(key: str, length: int = 16) -> str:
    """First `length` hex digits of SHA-256(key encoded as UTF-8)."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(key.encode("utf-8"))
    return digest.finalize().hex()[:length]
