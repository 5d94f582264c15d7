# SPDX-License-Identifier: MIT
"""Build metadata: the informational ``+exp.sha.5114f85`` suffix.

Build metadata never participates in precedence, so this module defines no
ordering. Identifiers may have leading zeros (``+001`` is valid).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .errors import NoIdentifiersError
from .identifiers import IdentifierKind, split_identifiers, validate_identifier


@dataclass(frozen=True, slots=True)
class BuildMetadata:
    """An immutable, ordered sequence of build metadata identifiers.

    Attributes:
        identifiers: The identifiers in serialization order
    """

    identifiers: tuple[str, ...]

    def __post_init__(self) -> None:
        identifiers = tuple(self.identifiers)
        if not identifiers:
            raise NoIdentifiersError(IdentifierKind.BUILD)
        for identifier in identifiers:
            validate_identifier(identifier, IdentifierKind.BUILD)
        object.__setattr__(self, "identifiers", identifiers)

    @classmethod
    def parse(cls, value: str) -> "BuildMetadata":
        """Parse a dotted build metadata string (without the leading ``+``).

        Raises:
            InvalidIdentifierError: If the string is empty or any segment is invalid

        Examples:
            >>> BuildMetadata.parse("exp.sha.5114f85").identifiers
            ('exp', 'sha', '5114f85')
        """
        return cls(split_identifiers(value, IdentifierKind.BUILD))

    @classmethod
    def build(cls, identifiers: Iterable[str]) -> "BuildMetadata":
        """Build metadata from a sequence of identifiers.

        Each element may itself contain dots; it is split and every segment
        is validated.

        Raises:
            NoIdentifiersError: If the sequence is empty
            InvalidIdentifierError: If any segment is invalid
        """
        if isinstance(identifiers, str):
            identifiers = (identifiers,)
        return BuildMetadataBuilder().identifiers(*identifiers).build()

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers)


class BuildMetadataBuilder:
    """Mutable helper that collects identifiers and produces BuildMetadata.

    Example:
        >>> str(BuildMetadataBuilder().identifiers("exp", "sha", "5114f85").build())
        'exp.sha.5114f85'
    """

    def __init__(self) -> None:
        self._identifiers: list[str] = []

    @classmethod
    def from_string(cls, value: str) -> "BuildMetadataBuilder":
        """Create a builder pre-filled from a dotted string."""
        return cls().identifiers(value)

    @classmethod
    def from_instance(cls, metadata: Optional[BuildMetadata]) -> "BuildMetadataBuilder":
        """Create a builder pre-filled with an existing instance's identifiers."""
        builder = cls()
        if metadata is not None:
            builder._identifiers.extend(metadata.identifiers)
        return builder

    def identifiers(self, *identifiers: str) -> "BuildMetadataBuilder":
        """Append identifiers, validating each dot-separated segment immediately."""
        for identifier in identifiers:
            self._identifiers.extend(split_identifiers(identifier, IdentifierKind.BUILD))
        return self

    def clear(self) -> "BuildMetadataBuilder":
        """Remove all collected identifiers."""
        self._identifiers.clear()
        return self

    def build(self) -> BuildMetadata:
        """Produce an immutable BuildMetadata.

        Raises:
            NoIdentifiersError: If no identifiers were added
        """
        if not self._identifiers:
            raise NoIdentifiersError(IdentifierKind.BUILD)
        return BuildMetadata(tuple(self._identifiers))
