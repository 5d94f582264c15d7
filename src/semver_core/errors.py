# SPDX-License-Identifier: MIT
"""Exception classes raised while parsing and building versions.

Every failure is a subclass of :class:`SemVerError`, which itself derives
from :class:`ValueError`, so callers can catch either.
"""

from __future__ import annotations

from typing import Any


class ErrorCode:
    """Standard error codes carried by :class:`SemVerError`."""

    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    NO_IDENTIFIERS = "NO_IDENTIFIERS"
    NEGATIVE_COMPONENT = "NEGATIVE_COMPONENT"
    MALFORMED_VERSION = "MALFORMED_VERSION"


class SemVerError(ValueError):
    """Base exception for all version construction failures.

    Attributes:
        code: Error code from ErrorCode class
        message: Human-readable error message
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class InvalidIdentifierError(SemVerError):
    """A dot-separated identifier does not match its grammar.

    Attributes:
        identifier: The offending token (may be empty or not a string)
        kind: Identifier kind the token was validated against
    """

    def __init__(self, identifier: Any, kind: str, message: str = ""):
        self.identifier = identifier
        self.kind = kind
        super().__init__(
            ErrorCode.INVALID_IDENTIFIER,
            message or f"Invalid {kind} identifier: {identifier!r}",
        )


class NoIdentifiersError(SemVerError):
    """A pre-release or build metadata was built from zero identifiers."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            ErrorCode.NO_IDENTIFIERS,
            f"At least one {kind} identifier is required",
        )


class NegativeComponentError(SemVerError):
    """Major, minor or patch was given as a negative number."""

    def __init__(self, component: str, value: int):
        self.component = component
        self.value = value
        super().__init__(
            ErrorCode.NEGATIVE_COMPONENT,
            f"{component.capitalize()} version must be non-negative, got {value}",
        )


class MalformedVersionError(SemVerError):
    """The version string does not have the MAJOR.MINOR.PATCH[-pre][+build] shape."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        super().__init__(
            ErrorCode.MALFORMED_VERSION,
            message or f"Invalid semantic version: {version}",
        )
