# SPDX-License-Identifier: MIT
"""Semantic version parsing, construction and bumping.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20130313144700, +exp.sha.5114f85
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from .errors import MalformedVersionError, NegativeComponentError, SemVerError
from .identifiers import int_to_numeric, numeric_sort_key, numeric_to_int
from .metadata import BuildMetadata
from .ordering import Ordering
from .prerelease import PreReleaseVersion

logger = logging.getLogger(__name__)

# The core numbers are matched strictly here. The suffixes are only split off
# (pre-release runs up to the first "+") and validated by their own parsers.
SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>[^+]*))?"
    r"(?:\+(?P<buildmetadata>.*))?"
)

PreReleaseLike = Union[PreReleaseVersion, str, None]
BuildMetadataLike = Union[BuildMetadata, str, None]
ComponentUpdate = Union[int, Callable[[int], int]]


def _check_component(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name.capitalize()} version must be an int, got {type(value).__name__}")
    if value < 0:
        raise NegativeComponentError(name, value)
    return value


def _as_prerelease(value: PreReleaseLike) -> Optional[PreReleaseVersion]:
    if value is None or isinstance(value, PreReleaseVersion):
        return value
    if isinstance(value, str):
        return PreReleaseVersion.parse(value)
    raise TypeError(f"Expected PreReleaseVersion, str or None, got {type(value).__name__}")


def _as_build_metadata(value: BuildMetadataLike) -> Optional[BuildMetadata]:
    if value is None or isinstance(value, BuildMetadata):
        return value
    if isinstance(value, str):
        return BuildMetadata.parse(value)
    raise TypeError(f"Expected BuildMetadata, str or None, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Equality and hashing are structural and include build metadata. Ordering
    operators and :meth:`compare` follow SemVer precedence, where build
    metadata is ignored, so ``1.0.0+a`` and ``1.0.0+b`` are neither less
    nor greater than each other but are not ``==``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release (e.g., alpha.1, beta, rc.2)
        build_metadata: Optional build metadata (e.g., build.123, 20240101)
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[PreReleaseVersion] = None
    build_metadata: Optional[BuildMetadata] = None

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)
        object.__setattr__(self, "prerelease", _as_prerelease(self.prerelease))
        object.__setattr__(self, "build_metadata", _as_build_metadata(self.build_metadata))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a semantic version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @classmethod
    def build(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: PreReleaseLike = None,
        build_metadata: BuildMetadataLike = None,
    ) -> "Version":
        """Construct a version from its parts.

        No cascade is applied: the components are taken exactly as given.

        Raises:
            NegativeComponentError: If major, minor or patch is negative
            InvalidIdentifierError: If a string pre-release or build metadata is invalid
        """
        return cls(major, minor, patch, prerelease, build_metadata)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build_metadata is not None:
            version += f"+{self.build_metadata}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(int_to_numeric(n) for n in (self.major, self.minor, self.patch))

    # Bumping

    def bump_major(self) -> "Version":
        """Return the next major version; minor and patch reset, suffixes dropped.

        >>> str(Version.parse("0.1.2-rc.1").bump_major())
        '1.0.0'
        """
        return Version(self.major + 1, 0, 0)

    def bump_minor(self) -> "Version":
        """Return the next minor version; patch reset, suffixes dropped."""
        return Version(self.major, self.minor + 1, 0)

    def bump_patch(self) -> "Version":
        """Return the next patch version; suffixes dropped."""
        return Version(self.major, self.minor, self.patch + 1)

    # Copy-with-change

    def with_major(self, major: ComponentUpdate) -> "Version":
        """Return a copy with ``major`` set; a larger value resets minor and patch.

        ``major`` may be an int or a function of the current major version:

        >>> str(Version.parse("1.2.3").with_major(lambda n: n * 10))
        '10.0.0'
        """
        from .builder import VersionBuilder

        return VersionBuilder.from_version(self).major(major).build()

    def with_minor(self, minor: ComponentUpdate) -> "Version":
        """Return a copy with ``minor`` set or transformed; a larger value resets patch."""
        from .builder import VersionBuilder

        return VersionBuilder.from_version(self).minor(minor).build()

    def with_patch(self, patch: ComponentUpdate) -> "Version":
        """Return a copy with ``patch`` set or transformed."""
        from .builder import VersionBuilder

        return VersionBuilder.from_version(self).patch(patch).build()

    def with_prerelease(self, prerelease: PreReleaseLike) -> "Version":
        """Return a copy with the pre-release replaced, or removed with None."""
        return replace(self, prerelease=_as_prerelease(prerelease))

    def with_build_metadata(self, build_metadata: BuildMetadataLike) -> "Version":
        """Return a copy with the build metadata replaced, or removed with None."""
        return replace(self, build_metadata=_as_build_metadata(build_metadata))

    # Precedence

    def compare(self, other: "Version") -> Ordering:
        """Compare precedence with another version.

        Major, minor and patch are compared numerically. A pre-release
        version has lower precedence than the same normal version. Build
        metadata is ignored.
        """
        for attr in ("major", "minor", "patch"):
            result = Ordering.of(getattr(self, attr), getattr(other, attr))
            if result is not Ordering.EQUAL:
                return result

        if self.prerelease is None and other.prerelease is None:
            return Ordering.EQUAL
        if self.prerelease is None:
            return Ordering.GREATER  # Release > pre-release
        if other.prerelease is None:
            return Ordering.LESS  # Pre-release < release
        return self.prerelease.compare(other.prerelease)

    def precedence_key(self) -> tuple:
        """Return a sort key that orders versions by SemVer precedence.

        Two versions have equal keys exactly when :meth:`compare` returns
        EQUAL, so build metadata does not appear in the key.
        """
        # No pre-release becomes (1,) to sort after any (0, ...) pre-release
        if self.prerelease is None:
            prerelease_key: tuple = (1,)
        else:
            parts = []
            for part in self.prerelease.identifiers:
                if part.isdigit():
                    parts.append((0, numeric_sort_key(part)))
                else:
                    parts.append((1, part))
            prerelease_key = (0, tuple(parts))

        return (self.major, self.minor, self.patch, prerelease_key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build]). Surrounding whitespace
            is not stripped.

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the MAJOR.MINOR.PATCH shape does not match
        InvalidIdentifierError: If a pre-release or build metadata identifier is invalid

    Examples:
        >>> str(parse_version("1.0.0-beta+exp.sha.5114f85"))
        '1.0.0-beta+exp.sha.5114f85'
        >>> parse_version("1.0.0-alpha.1").prerelease.identifiers
        ('alpha', '1')
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise MalformedVersionError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        logger.debug("Rejected version string %r: shape mismatch", version_string)
        raise MalformedVersionError(version_string)

    try:
        prerelease = match.group("prerelease")
        build_metadata = match.group("buildmetadata")
        return Version(
            major=numeric_to_int(match.group("major")),
            minor=numeric_to_int(match.group("minor")),
            patch=numeric_to_int(match.group("patch")),
            prerelease=PreReleaseVersion.parse(prerelease) if prerelease is not None else None,
            build_metadata=(
                BuildMetadata.parse(build_metadata) if build_metadata is not None else None
            ),
        )
    except SemVerError as e:
        logger.debug("Rejected version string %r: %s", version_string, e)
        raise


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except SemVerError:
        return False
    return True
