"""Strict conversion of command arguments from text to typed values."""

import math
import re
from enum import Enum

__all__ = [
    "BadConversion",
    "IntType",
    "parse_unsigned",
    "parse_signed",
    "parse_bool",
    "parse_char",
    "parse_float",
    "from_string",
]

_DIGITS = "0123456789"
_HEX_FLOAT = re.compile(r"[+-]?0[xX]")


class BadConversion(ValueError):
    """Raised when a string cannot be interpreted as the requested type."""

    def __init__(self):
        super().__init__(
            "bad from_string conversion: "
            "source string value could not be interpreted as target"
        )


class IntType(Enum):
    """Fixed-width integer kinds, each with its size in bits and signedness."""

    SIGNED_CHAR = ("signed char", 8, True)
    SHORT = ("short", 16, True)
    INT = ("int", 32, True)
    LONG = ("long", 64, True)
    LONG_LONG = ("long long", 64, True)
    UNSIGNED_CHAR = ("unsigned char", 8, False)
    UNSIGNED_SHORT = ("unsigned short", 16, False)
    UNSIGNED_INT = ("unsigned int", 32, False)
    UNSIGNED_LONG = ("unsigned long", 64, False)
    UNSIGNED_LONG_LONG = ("unsigned long long", 64, False)

    @property
    def bits(self):
        return self.value[1]

    @property
    def signed(self):
        return self.value[2]


def _digits(text, bits):
    if not text or any(c not in _DIGITS for c in text):
        raise BadConversion()
    value = int(text)
    if value >= 1 << bits:
        raise BadConversion()
    return value


def parse_unsigned(text, bits):
    """Parse an unsigned integer of ``bits`` bits, with an optional '+'."""
    if not text:
        raise BadConversion()
    if text[0] == "+":
        text = text[1:]
    return _digits(text, bits)


def parse_signed(text, bits):
    """Parse a two's complement integer of ``bits`` bits, with an optional sign."""
    if not text:
        raise BadConversion()
    limit = 1 << (bits - 1)
    if text[0] == "-":
        value = _digits(text[1:], bits)
        if value > limit:
            raise BadConversion()
        return -value
    if text[0] == "+":
        text = text[1:]
    value = _digits(text, bits)
    if value > limit - 1:
        raise BadConversion()
    return value


def parse_bool(text):
    """Parse 'true', 'false', or an integer equal to 1 or 0."""
    if text == "true":
        return True
    if text == "false":
        return False
    value = parse_signed(text, 64)
    if value == 1:
        return True
    if value == 0:
        return False
    raise BadConversion()


def parse_char(text):
    """Accept exactly one character."""
    if len(text) != 1:
        raise BadConversion()
    return text


def parse_float(text):
    """Parse a floating point number that must take up the whole string."""
    if not text.isascii() or "_" in text or any(c.isspace() for c in text):
        raise BadConversion()
    try:
        if _HEX_FLOAT.match(text):
            result = float.fromhex(text)
        else:
            result = float(text)
    except (ValueError, OverflowError):
        raise BadConversion() from None
    if math.isinf(result) and text.lstrip("+-").lower() not in ("inf", "infinity"):
        raise BadConversion()
    return result


def from_string(text, target):
    """Convert ``text`` to ``target``.

    ``target`` may be ``str``, ``None``, ``bool``, ``int`` (a 32-bit int),
    ``float``, an ``IntType`` member, or any callable that builds a value
    from a string; its failures are reported as BadConversion.
    """
    if target is str:
        return text
    if target is None or target is type(None):
        return None
    if target is bool:
        return parse_bool(text)
    if target is int:
        target = IntType.INT
    if target is float:
        return parse_float(text)
    if isinstance(target, IntType):
        if target.signed:
            return parse_signed(text, target.bits)
        return parse_unsigned(text, target.bits)
    try:
        return target(text.strip())
    except (ValueError, TypeError, ArithmeticError):
        raise BadConversion() from None