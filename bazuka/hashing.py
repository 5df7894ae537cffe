"""The hash function used for blocks, transactions and keys."""

import hashlib

HASH_SIZE = 32


def sha3_hash(data: bytes) -> bytes:
    """Return the 32-byte SHA3-256 digest of ``data``."""
    return hashlib.sha3_256(bytes(data)).digest()