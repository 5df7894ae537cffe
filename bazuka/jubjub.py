"""Points of the twisted Edwards curve used for zero-knowledge signatures."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MODULUS = 52435875175126190479447740508185965837690552500527637822603658699938581184513

_HEX_BODY = re.compile(r"[0-9a-fA-F]{64}")


def _inv(value: int) -> int:
    value %= MODULUS
    if value == 0:
        raise ZeroDivisionError("zero has no inverse")
    return pow(value, -1, MODULUS)


def _two_adic() -> tuple[int, int]:
    q, s = MODULUS - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    return q, s


_Q, _S = _two_adic()


def _non_residue() -> int:
    z = 2
    while pow(z, (MODULUS - 1) // 2, MODULUS) != MODULUS - 1:
        z += 1
    return z


_Z = _non_residue()


def _sqrt(value: int) -> int:
    """Return a square root of ``value`` in the field, or raise ValueError."""
    n = value % MODULUS
    if n == 0:
        return 0
    if pow(n, (MODULUS - 1) // 2, MODULUS) != 1:
        raise ValueError("value has no square root")
    m, c = _S, pow(_Z, _Q, MODULUS)
    t, r = pow(n, _Q, MODULUS), pow(n, (_Q + 1) // 2, MODULUS)
    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % MODULUS
            i += 1
        b = pow(c, 1 << (m - i - 1), MODULUS)
        m, c = i, b * b % MODULUS
        t, r = t * c % MODULUS, r * b % MODULUS
    return r


A = MODULUS - 1
D = 19257038036680949359750312669786877991949435402254120286184196891950884077233
ORDER = 6554484396890773809930967563523245729705921265872317281365359162392183254199


class ParsePublicKeyError(ValueError):
    """Raised when a text is not a valid public key."""

    def __init__(self, message: str = "public key invalid") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PointCompressed:
    """A point stored as its x coordinate and the parity of its y coordinate."""

    x: int = 0
    odd: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % MODULUS)

    def decompress(self) -> PointAffine:
        x2 = self.x * self.x % MODULUS
        y = _sqrt(_inv(1 - D * x2) * (1 - A * x2))
        if bool(y & 1) != self.odd:
            y = (-y) % MODULUS
        return PointAffine(self.x, y)


@dataclass(frozen=True)
class PointAffine:
    """A point in affine coordinates."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % MODULUS)
        object.__setattr__(self, "y", self.y % MODULUS)

    @classmethod
    def zero(cls) -> PointAffine:
        return cls(0, 1)

    def is_on_curve(self) -> bool:
        x2, y2 = self.x * self.x, self.y * self.y
        return (y2 - x2) % MODULUS == (1 + D * x2 * y2) % MODULUS

    def is_infinity(self) -> bool:
        return self.x == 0 and self.y in (1, MODULUS - 1)

    def double(self) -> PointAffine:
        x2, y2 = self.x * self.x, self.y * self.y
        xx = _inv(A * x2 + y2)
        yy = _inv(2 - A * x2 - y2)
        return PointAffine(2 * self.x * self.y * xx, (y2 - A * x2) * yy)

    def __add__(self, other: PointAffine) -> PointAffine:
        if not isinstance(other, PointAffine):
            return NotImplemented
        if self == other:
            return self.double()
        t = D * self.x * other.x * self.y * other.y
        xx = _inv(1 + t)
        yy = _inv(1 - t)
        return PointAffine(
            (self.x * other.y + self.y * other.x) * xx,
            (self.y * other.y - A * self.x * other.x) * yy,
        )

    def multiply(self, scalar: int) -> PointAffine:
        """Multiply the point by a field scalar, using double-and-add."""
        result = PointProjective.zero()
        base = self.to_projective()
        for bit in bin(scalar % MODULUS)[2:]:
            result = result.double()
            if bit == "1":
                result = result + base
        return result.to_affine()

    def to_projective(self) -> PointProjective:
        return PointProjective(self.x, self.y, 1)

    def compress(self) -> PointCompressed:
        return PointCompressed(self.x, bool(self.y & 1))


@dataclass(frozen=True)
class PointProjective:
    """A point in projective coordinates (X : Y : Z)."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", self.x % MODULUS)
        object.__setattr__(self, "y", self.y % MODULUS)
        object.__setattr__(self, "z", self.z % MODULUS)

    @classmethod
    def zero(cls) -> PointProjective:
        return cls(0, 1, 0)

    def is_zero(self) -> bool:
        return self.z == 0

    def double(self) -> PointProjective:
        if self.is_zero():
            return PointProjective.zero()
        b = (self.x + self.y) ** 2
        c = self.x * self.x
        d = self.y * self.y
        e = A * c
        f = e + d
        h = self.z * self.z
        j = f - 2 * h
        return PointProjective((b - c - d) * j, f * (e - d), f * j)

    def __add__(self, other: PointProjective) -> PointProjective:
        if not isinstance(other, PointProjective):
            return NotImplemented
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        if self.to_affine() == other.to_affine():
            return self.double()
        a = self.z * other.z
        b = a * a
        c = self.x * other.x
        d = self.y * other.y
        e = D * c * d
        f = b - e
        g = b + e
        return PointProjective(
            a * f * ((self.x + self.y) * (other.x + other.y) - c - d),
            a * g * (d - A * c),
            f * g,
        )

    def to_affine(self) -> PointAffine:
        if self.is_zero():
            return PointAffine.zero()
        zinv = _inv(self.z)
        return PointAffine(self.x * zinv, self.y * zinv)


BASE = PointAffine(
    28867639725710769449342053336011988556061781325688749245863888315629457631946,
    18,
)
BASE_COFACTOR = BASE.multiply(8)


@dataclass(frozen=True)
class PublicKey:
    """A public key: a compressed curve point."""

    point: PointCompressed = field(default_factory=PointCompressed)

    @classmethod
    def parse(cls, text: str) -> PublicKey:
        """Read a key written as "0x2" or "0x3" and 64 hex digits of x."""
        if len(text) != 67:
            raise ParsePublicKeyError()
        if text.startswith("0x3"):
            odd = True
        elif text.startswith("0x2"):
            odd = False
        else:
            raise ParsePublicKeyError()
        body = text[3:]
        if not _HEX_BODY.fullmatch(body):
            raise ParsePublicKeyError()
        x = int(body, 16)
        if x >= MODULUS:
            raise ParsePublicKeyError()
        return cls(PointCompressed(x, odd))

    def __str__(self) -> str:
        prefix = 3 if self.point.odd else 2
        return f"0x{prefix}{self.point.x.to_bytes(32, 'big').hex()}"