"""Account addresses, account records and contract identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .ed25519 import ParsePublicKeyError, PublicKey
from .hashing import HASH_SIZE
from .money import Money

_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


class ParseAddressError(ValueError):
    """Raised when a text is not a valid address."""

    def __init__(self, message: str = "address invalid") -> None:
        super().__init__(message)


class ParseContractIdError(ValueError):
    """Raised when a text is not a valid contract id."""

    def __init__(self, message: str = "contract-id invalid") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Address:
    """Either the Treasury, which holds the initial supply, or a public key."""

    public_key: PublicKey | None = None

    @classmethod
    def treasury(cls) -> Address:
        return cls(None)

    @classmethod
    def parse(cls, text: str) -> Address:
        """Read an address written as a public key."""
        try:
            return cls(PublicKey.parse(text))
        except ParsePublicKeyError:
            raise ParseAddressError() from None

    def is_treasury(self) -> bool:
        return self.public_key is None

    def __str__(self) -> str:
        if self.public_key is None:
            return "Treasury"
        return str(self.public_key)


@dataclass
class Account:
    """The balance and the last used nonce of an address."""

    balance: Money
    nonce: int


@dataclass(frozen=True)
class ContractId:
    """A contract identifier: the hash of the transaction that created it."""

    digest: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.digest, (bytes, bytearray)) or len(self.digest) != HASH_SIZE:
            raise ValueError(f"contract id must be {HASH_SIZE} bytes")
        object.__setattr__(self, "digest", bytes(self.digest))

    @classmethod
    def parse(cls, text: str) -> ContractId:
        """Read a contract id written as hex digits."""
        if not _HEX.fullmatch(text):
            raise ParseContractIdError()
        raw = bytes.fromhex(text)
        if len(raw) != HASH_SIZE:
            raise ParseContractIdError()
        return cls(raw)

    def __str__(self) -> str:
        return self.digest.hex()