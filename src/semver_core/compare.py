# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release identifiers are compared numerically or lexically; numeric
identifiers sort before alphanumeric ones.
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Union

from .ordering import Ordering
from .version import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        MalformedVersionError: If either version string is malformed
        InvalidIdentifierError: If either version string has an invalid identifier

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0+aaa", "1.0.0+zzz")
        <Ordering.EQUAL: 0>
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).precedence_key()


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse (where needed) and sort versions by precedence.

    The sort is stable, so versions differing only in build metadata keep
    their input order.
    """
    return sorted((_coerce(v) for v in versions), key=Version.precedence_key, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If no versions are given
    """
    return max((_coerce(v) for v in versions), key=Version.precedence_key)


def min_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the lowest precedence.

    Raises:
        ValueError: If no versions are given
    """
    return min((_coerce(v) for v in versions), key=Version.precedence_key)
