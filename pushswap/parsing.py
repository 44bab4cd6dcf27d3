"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""


def split_arguments(args: Iterable[str]) -> list[str]:
    """Join the arguments with spaces and split them into number tokens.

    Only the space character separates tokens. Each token may start with
    any run of ``+`` and ``-`` signs and must then hold one or more digits
    and nothing else.
    """
    tokens = [token for token in " ".join(args).split(" ") if token]
    for token in tokens:
        digits = token.lstrip("+-")
        if not digits or any(ch not in _DIGITS for ch in digits):
            raise ParseError(f"not a number: {token!r}")
    return tokens


def parse_int(token: str) -> int:
    """Read a 32-bit signed integer from the start of ``token``.

    Leading whitespace and a single sign are accepted; reading stops at the
    first character that is not a digit. A token that yields no digits or a
    value outside the 32-bit range is rejected, as is a result of -1 read
    from a token ten or more characters long.
    """
    rest = token.lstrip(_LEADING_SPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digit_count = len(rest) - len(rest.lstrip(_DIGITS))
    if digit_count == 0:
        raise ParseError(f"no digits in {token!r}")
    value = int(rest[:digit_count])
    if negative:
        value = -value
    if value < INT_MIN or value > INT_MAX:
        raise ParseError(f"out of range: {token!r}")
    if value == -1 and len(token) >= 10:
        raise ParseError(f"out of range: {token!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Split, validate and convert the arguments; reject duplicate values."""
    values = [parse_int(token) for token in split_arguments(args)]
    if len(set(values)) != len(values):
        raise ParseError("duplicate values")
    return values