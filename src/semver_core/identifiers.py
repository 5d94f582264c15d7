# SPDX-License-Identifier: MIT
"""Validation of dot-separated SemVer identifiers.

Three identifier grammars are recognised:
- numeric: 0, 7, 42 (no leading zeros)
- pre-release: 0, alpha, x-7, 1a (a numeric-looking token must not have leading zeros)
- build metadata: 001, exp, sha-5114f85 (leading zeros allowed)
"""

from __future__ import annotations

import re

from .errors import InvalidIdentifierError

NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"
PRERELEASE_IDENTIFIER = r"0|[1-9A-Za-z-][0-9A-Za-z-]*"
BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"


class IdentifierKind:
    """Identifier grammars accepted by validate_identifier."""

    NUMERIC = "numeric"
    PRERELEASE = "pre-release"
    BUILD = "build metadata"


_PATTERNS = {
    IdentifierKind.NUMERIC: re.compile(NUMERIC_IDENTIFIER),
    IdentifierKind.PRERELEASE: re.compile(PRERELEASE_IDENTIFIER),
    IdentifierKind.BUILD: re.compile(BUILD_IDENTIFIER),
}


def _pattern_for(kind: str) -> re.Pattern[str]:
    try:
        return _PATTERNS[kind]
    except KeyError:
        raise ValueError(f"Unknown identifier kind: {kind!r}") from None


def is_valid_identifier(token: str, kind: str) -> bool:
    """Check if a single token matches the grammar for ``kind``.

    Examples:
        >>> is_valid_identifier("alpha", IdentifierKind.PRERELEASE)
        True
        >>> is_valid_identifier("01", IdentifierKind.PRERELEASE)
        False
        >>> is_valid_identifier("01", IdentifierKind.BUILD)
        True
    """
    pattern = _pattern_for(kind)
    if not isinstance(token, str):
        return False
    # re.fullmatch treats the alternation as a whole, so "01" cannot match "0"
    return pattern.fullmatch(token) is not None


def validate_identifier(token: str, kind: str) -> str:
    """Validate a single identifier and return it unchanged.

    Args:
        token: The identifier to check. Must not contain dots.
        kind: One of the IdentifierKind constants

    Returns:
        The token itself

    Raises:
        InvalidIdentifierError: If the token is empty, not a string, or does
            not match the grammar
    """
    if not is_valid_identifier(token, kind):
        raise InvalidIdentifierError(token, kind)
    return token


def is_numeric_identifier(token: str) -> bool:
    """Return True if the token is a numeric identifier (no leading zeros)."""
    return is_valid_identifier(token, IdentifierKind.NUMERIC)


# Stays below sys.get_int_max_str_digits() (4300 by default)
_DIGIT_CHUNK = 4000


def numeric_to_int(token: str) -> int:
    """Convert a string of ASCII digits to an int of any length.

    ``int()`` refuses strings longer than the interpreter's digit limit, so
    long numerals are converted in chunks.

    Examples:
        >>> numeric_to_int("42")
        42
    """
    value = 0
    for start in range(0, len(token), _DIGIT_CHUNK):
        chunk = token[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_numeric(value: int) -> str:
    """Format a non-negative int as decimal digits, without the digit limit.

    Examples:
        >>> int_to_numeric(1024)
        '1024'
    """
    base = 10**_DIGIT_CHUNK
    if value < base:
        return str(value)
    chunks = []
    while value >= base:
        value, rest = divmod(value, base)
        chunks.append(f"{rest:0{_DIGIT_CHUNK}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


def numeric_sort_key(token: str) -> tuple[int, str]:
    """Return a key ordering numeric identifiers by value without converting them.

    Numeric identifiers have no leading zeros, so a shorter numeral is always
    smaller and numerals of equal length compare like strings.
    """
    return (len(token), token)


def split_identifiers(value: str, kind: str) -> tuple[str, ...]:
    """Split a dotted string and validate every segment.

    Args:
        value: Dot-separated identifiers, e.g. "alpha.1" or "exp.sha.5114f85"
        kind: One of the IdentifierKind constants

    Returns:
        The validated identifiers, in order

    Raises:
        InvalidIdentifierError: If the string is empty, or any segment is
            empty or invalid

    Examples:
        >>> split_identifiers("x.7.z.92", IdentifierKind.PRERELEASE)
        ('x', '7', 'z', '92')
    """
    if not isinstance(value, str):
        raise InvalidIdentifierError(value, kind)
    return tuple(validate_identifier(token, kind) for token in value.split("."))
