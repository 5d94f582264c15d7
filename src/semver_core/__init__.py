# SPDX-License-Identifier: MIT
"""Semantic Versioning 2.0.0 parsing, building and comparison.

This package provides immutable value types for versions, pre-release
versions and build metadata, builders that enforce the release cascade
(increasing major resets minor and patch), and SemVer precedence.

Example:
    >>> from semver_core import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version.prerelease)
    'alpha.1'
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    <Ordering.LESS: -1>
    >>> str(version.bump_minor())
    '1.3.0'
"""

__version__ = "0.1.0"

from .errors import (
    ErrorCode,
    SemVerError,
    InvalidIdentifierError,
    NoIdentifiersError,
    NegativeComponentError,
    MalformedVersionError,
)
from .identifiers import (
    IdentifierKind,
    is_valid_identifier,
    validate_identifier,
    is_numeric_identifier,
    split_identifiers,
    numeric_to_int,
    int_to_numeric,
)
from .ordering import Ordering
from .metadata import BuildMetadata, BuildMetadataBuilder
from .prerelease import PreReleaseVersion, PreReleaseVersionBuilder, compare_identifiers
from .version import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .builder import VersionBuilder
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
    min_version,
)

__all__ = [
    # Errors
    "ErrorCode",
    "SemVerError",
    "InvalidIdentifierError",
    "NoIdentifiersError",
    "NegativeComponentError",
    "MalformedVersionError",
    # Identifier validation
    "IdentifierKind",
    "is_valid_identifier",
    "validate_identifier",
    "is_numeric_identifier",
    "split_identifiers",
    "numeric_to_int",
    "int_to_numeric",
    # Value types
    "Ordering",
    "BuildMetadata",
    "PreReleaseVersion",
    "compare_identifiers",
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Builders
    "BuildMetadataBuilder",
    "PreReleaseVersionBuilder",
    "VersionBuilder",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    "min_version",
]
