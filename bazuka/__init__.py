"""Core primitives of a zero-knowledge blockchain node: money, hashing, Merkle trees, keys and storage."""

__version__ = "0.1.0"