"""Fixed-point amounts of the native currency."""

from __future__ import annotations

import re
from dataclasses import dataclass

UNIT_ZEROS = 9
UNIT = 10**UNIT_ZEROS
SYMBOL = "Ƶ"

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class ParseMoneyError(ValueError):
    """Raised when a text cannot be read as an amount of money."""

    def __init__(self, message: str = "money invalid") -> None:
        super().__init__(message)


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ParseMoneyError()
    value = int(text)
    if value > _U64_MAX:
        raise ParseMoneyError()
    return value


@dataclass(frozen=True, order=True)
class Money:
    """An amount counted in the smallest unit, held as an unsigned 64-bit integer."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("money value must be an integer")
        if not 0 <= self.value <= _U64_MAX:
            raise OverflowError("money value out of range")

    @classmethod
    def parse(cls, text: str) -> Money:
        """Read a decimal amount in whole units, such as "12.5"."""
        s = text.strip()
        dot = s.find(".")
        if dot < 0:
            try:
                return cls(_parse_u64(s) * UNIT)
            except OverflowError:
                raise ParseMoneyError() from None
        if s == ".":
            raise ParseMoneyError()
        frac_len = len(s) - 1 - dot
        if frac_len > UNIT_ZEROS:
            raise ParseMoneyError()
        digits = s[:dot] + s[dot + 1 :] + "0" * (UNIT_ZEROS - frac_len)
        return cls(_parse_u64(digits))

    def __str__(self) -> str:
        s = str(self.value).rjust(UNIT_ZEROS + 1, "0")
        s = f"{s[:-UNIT_ZEROS]}.{s[-UNIT_ZEROS:]}".rstrip("0")
        if s.endswith("."):
            s += "0"
        return f"{s}{SYMBOL}"

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value + other.value)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.value - other.value)

    def __floordiv__(self, divisor: int) -> Money:
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        return Money(self.value // divisor)