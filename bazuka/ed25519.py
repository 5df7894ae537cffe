"""Ed25519 signatures with keys derived from a seed."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey, VerifyKey

from .hashing import sha3_hash

_P = 2**255 - 19
_D = -121665 * pow(121666, -1, _P) % _P
_HEX_KEY = re.compile(r"0[xX][0-9a-fA-F]{64}")


class ParsePublicKeyError(ValueError):
    """Raised when a text is not a valid public key."""

    def __init__(self, message: str = "public key invalid") -> None:
        super().__init__(message)


def _decompresses(raw: bytes) -> bool:
    """Tell whether ``raw`` is the compressed form of a curve point."""
    y = (int.from_bytes(raw, "little") & ((1 << 255) - 1)) % _P
    yy = y * y % _P
    u = (yy - 1) % _P
    v = (_D * yy + 1) % _P
    if v == 0:
        return u == 0
    x2 = u * pow(v, -1, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte Ed25519 public key."""

    key: bytes

    @classmethod
    def parse(cls, text: str) -> PublicKey:
        """Read a key written as "0x" and 64 hex digits, most significant byte first."""
        if not _HEX_KEY.fullmatch(text):
            raise ParsePublicKeyError()
        raw = bytes.fromhex(text[2:])[::-1]
        if not _decompresses(raw):
            raise ParsePublicKeyError()
        return cls(raw)

    def __str__(self) -> str:
        return "0x" + self.key[::-1].hex()


@dataclass(frozen=True)
class Signature:
    """A 64-byte Ed25519 signature."""

    data: bytes


@dataclass(frozen=True)
class PrivateKey:
    """An Ed25519 secret seed together with its public key."""

    seed: bytes = field(repr=False)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(SigningKey(self.seed).verify_key.encode())


def generate_keys(seed: bytes) -> tuple[PublicKey, PrivateKey]:
    """Derive a key pair from an arbitrary seed."""
    secret = bytearray(sha3_hash(seed))
    secret[31] &= 0x7F
    private_key = PrivateKey(bytes(secret))
    return private_key.public_key, private_key


def sign(private_key: PrivateKey, message: bytes) -> Signature:
    return Signature(SigningKey(private_key.seed).sign(bytes(message)).signature)


def verify(public_key: PublicKey, message: bytes, signature: Signature) -> bool:
    try:
        VerifyKey(public_key.key).verify(bytes(message), signature.data)
    except (CryptoError, ValueError, TypeError):
        return False
    return True