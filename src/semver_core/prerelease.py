# SPDX-License-Identifier: MIT
"""Pre-release versions and their precedence.

Pre-release identifiers are compared left to right:
- numeric identifiers are compared as integers (of any size)
- alphanumeric identifiers are compared in ASCII order
- a numeric identifier always has lower precedence than an alphanumeric one
- when all shared identifiers are equal, the longer sequence wins

    1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional, Sequence

from .errors import NoIdentifiersError
from .identifiers import (
    IdentifierKind,
    is_numeric_identifier,
    numeric_sort_key,
    split_identifiers,
    validate_identifier,
)
from .ordering import Ordering


def _compare_identifier(left: str, right: str) -> Ordering:
    """Compare a single pair of pre-release identifiers."""
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        return Ordering.of(numeric_sort_key(left), numeric_sort_key(right))
    if left_numeric:
        # Numeric < alphanumeric per SemVer
        return Ordering.LESS
    if right_numeric:
        return Ordering.GREATER
    return Ordering.of(left, right)


def compare_identifiers(left: Sequence[str], right: Sequence[str]) -> Ordering:
    """Compare two pre-release identifier sequences by SemVer precedence.

    The identifiers are assumed to be valid; nothing is re-validated here.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Examples:
        >>> compare_identifiers(("alpha", "1"), ("alpha", "beta"))
        <Ordering.LESS: -1>
        >>> compare_identifiers(("beta", "11"), ("beta", "2"))
        <Ordering.GREATER: 1>
    """
    for left_id, right_id in zip_longest(left, right):
        # A larger set of fields has higher precedence when the prefix is equal
        if left_id is None:
            return Ordering.LESS
        if right_id is None:
            return Ordering.GREATER

        result = _compare_identifier(left_id, right_id)
        if result is not Ordering.EQUAL:
            return result

    return Ordering.EQUAL


@dataclass(frozen=True, slots=True)
class PreReleaseVersion:
    """An immutable, ordered sequence of pre-release identifiers.

    Instances are totally ordered by SemVer precedence through the usual
    comparison operators.

    Attributes:
        identifiers: The identifiers, most significant first
    """

    identifiers: tuple[str, ...]

    def __post_init__(self) -> None:
        identifiers = tuple(self.identifiers)
        if not identifiers:
            raise NoIdentifiersError(IdentifierKind.PRERELEASE)
        for identifier in identifiers:
            validate_identifier(identifier, IdentifierKind.PRERELEASE)
        object.__setattr__(self, "identifiers", identifiers)

    @classmethod
    def parse(cls, value: str) -> "PreReleaseVersion":
        """Parse a dotted pre-release string (without the leading ``-``).

        Raises:
            InvalidIdentifierError: If the string is empty or any segment is invalid

        Examples:
            >>> PreReleaseVersion.parse("alpha.1").identifiers
            ('alpha', '1')
        """
        return cls(split_identifiers(value, IdentifierKind.PRERELEASE))

    @classmethod
    def build(cls, identifiers: Iterable[str]) -> "PreReleaseVersion":
        """Build a pre-release from a sequence of identifiers.

        Each element may itself contain dots; it is split and every segment
        is validated.

        Raises:
            NoIdentifiersError: If the sequence is empty
            InvalidIdentifierError: If any segment is invalid
        """
        if isinstance(identifiers, str):
            identifiers = (identifiers,)
        return PreReleaseVersionBuilder().identifiers(*identifiers).build()

    def compare(self, other: "PreReleaseVersion") -> Ordering:
        """Compare precedence with another pre-release version."""
        return compare_identifiers(self.identifiers, other.identifiers)

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseVersion):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseVersion):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseVersion):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseVersion):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS


class PreReleaseVersionBuilder:
    """Mutable helper that collects identifiers and produces a PreReleaseVersion.

    Example:
        >>> str(PreReleaseVersionBuilder().identifiers("x", "7", "z", "92").build())
        'x.7.z.92'
    """

    def __init__(self) -> None:
        self._identifiers: list[str] = []

    @classmethod
    def from_string(cls, value: str) -> "PreReleaseVersionBuilder":
        """Create a builder pre-filled from a dotted string."""
        return cls().identifiers(value)

    @classmethod
    def from_instance(
        cls, prerelease: Optional[PreReleaseVersion]
    ) -> "PreReleaseVersionBuilder":
        """Create a builder pre-filled with an existing instance's identifiers."""
        builder = cls()
        if prerelease is not None:
            builder._identifiers.extend(prerelease.identifiers)
        return builder

    def identifiers(self, *identifiers: str) -> "PreReleaseVersionBuilder":
        """Append identifiers, validating each dot-separated segment immediately."""
        for identifier in identifiers:
            self._identifiers.extend(
                split_identifiers(identifier, IdentifierKind.PRERELEASE)
            )
        return self

    def clear(self) -> "PreReleaseVersionBuilder":
        """Remove all collected identifiers."""
        self._identifiers.clear()
        return self

    def build(self) -> PreReleaseVersion:
        """Produce an immutable PreReleaseVersion.

        Raises:
            NoIdentifiersError: If no identifiers were added
        """
        if not self._identifiers:
            raise NoIdentifiersError(IdentifierKind.PRERELEASE)
        return PreReleaseVersion(tuple(self._identifiers))
