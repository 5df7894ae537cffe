"""Key-value stores holding the chain state, with in-memory mirrors."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from .hashing import sha3_hash


class KvStoreError(Exception):
    """Raised when a key-value store cannot carry out an operation."""

    def __init__(self, message: str = "kvstore failure") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Put:
    """Write ``value`` under ``key``."""

    key: str
    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))


@dataclass(frozen=True)
class Remove:
    """Delete ``key``."""

    key: str


WriteOp = Put | Remove


def _encode_bytes(data: bytes) -> bytes:
    return struct.pack("<Q", len(data)) + data


def _encode_pairs(pairs: list[tuple[str, bytes]]) -> bytes:
    parts = [struct.pack("<Q", len(pairs))]
    for key, value in pairs:
        parts.append(_encode_bytes(key.encode("utf-8")))
        parts.append(_encode_bytes(value))
    return b"".join(parts)


def _check_op(op: object) -> WriteOp:
    if not isinstance(op, (Put, Remove)):
        raise KvStoreError(f"unknown write operation: {op!r}")
    return op


class KvStore(ABC):
    """A store of byte values under string keys."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the value under ``key``, or None when there is none."""

    @abstractmethod
    def update(self, ops: Iterable[WriteOp]) -> None:
        """Apply the write operations in order."""

    @abstractmethod
    def pairs(self, prefix: str) -> dict[str, bytes]:
        """Return every key-value pair whose key starts with ``prefix``."""

    def checksum(self) -> bytes:
        """Hash of the whole store, independent of insertion order."""
        kvs = sorted(self.pairs("").items())
        return sha3_hash(_encode_pairs(kvs))

    def mirror(self) -> RamMirrorKvStore:
        """Return an in-memory overlay that records writes without touching this store."""
        return RamMirrorKvStore(self)


class RamKvStore(KvStore):
    """A store kept entirely in memory."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def update(self, ops: Iterable[WriteOp]) -> None:
        for op in map(_check_op, ops):
            if isinstance(op, Put):
                self._data[op.key] = op.value
            else:
                self._data.pop(op.key, None)

    def pairs(self, prefix: str) -> dict[str, bytes]:
        return {k: v for k, v in self._data.items() if k.startswith(prefix)}


class RamMirrorKvStore(KvStore):
    """An overlay over another store; writes stay in memory until exported."""

    def __init__(self, store: KvStore) -> None:
        self._store = store
        self._overwrite: dict[str, bytes | None] = {}

    def rollback(self) -> list[WriteOp]:
        """Operations that would restore the underlying values of every touched key."""
        ops: list[WriteOp] = []
        for key in self._overwrite:
            value = self._store.get(key)
            ops.append(Remove(key) if value is None else Put(key, value))
        return ops

    def to_ops(self) -> list[WriteOp]:
        """Operations that apply the recorded writes to the underlying store."""
        return [
            Remove(key) if value is None else Put(key, value)
            for key, value in self._overwrite.items()
        ]

    def get(self, key: str) -> bytes | None:
        if key in self._overwrite:
            return self._overwrite[key]
        return self._store.get(key)

    def update(self, ops: Iterable[WriteOp]) -> None:
        for op in map(_check_op, ops):
            self._overwrite[op.key] = op.value if isinstance(op, Put) else None

    def pairs(self, prefix: str) -> dict[str, bytes]:
        result = self._store.pairs(prefix)
        for key, value in self._overwrite.items():
            if value is None:
                result.pop(key, None)
            elif key.startswith(prefix):
                result[key] = value
        return result