# SPDX-License-Identifier: MIT
"""Fluent, mutable construction of Version objects.

Setting a component to a larger value cascades like a release would:
increasing major resets minor and patch to zero, increasing minor resets
patch. Setting a smaller or equal value does not cascade.

Example:
    >>> builder = VersionBuilder().major(0).minor(1).patch(2)
    >>> str(builder.build())
    '0.1.2'
    >>> str(builder.increase_major().build())
    '1.0.0'
"""

from __future__ import annotations

from typing import Optional, Union

from .metadata import BuildMetadata, BuildMetadataBuilder
from .prerelease import PreReleaseVersion, PreReleaseVersionBuilder
from .version import ComponentUpdate, Version, _check_component, parse_version


class VersionBuilder:
    """Mutable builder that produces immutable Version instances.

    A builder is meant to be used by a single owner; it is not thread-safe.
    """

    def __init__(self) -> None:
        self._major = 0
        self._minor = 0
        self._patch = 0
        self._prerelease: Optional[PreReleaseVersion] = None
        self._build_metadata: Optional[BuildMetadata] = None

    @classmethod
    def from_version(cls, version: Version) -> "VersionBuilder":
        """Create a builder holding every part of an existing version."""
        builder = cls()
        builder._major = version.major
        builder._minor = version.minor
        builder._patch = version.patch
        builder._prerelease = version.prerelease
        builder._build_metadata = version.build_metadata
        return builder

    @classmethod
    def from_string(cls, version_string: str) -> "VersionBuilder":
        """Create a builder from a version string.

        Raises:
            MalformedVersionError: If the string is not a semantic version
            InvalidIdentifierError: If a pre-release or build identifier is invalid
        """
        return cls.from_version(parse_version(version_string))

    def _resolve(self, name: str, value: ComponentUpdate) -> int:
        if callable(value):
            value = value(getattr(self, f"_{name}"))
        return _check_component(name, value)

    def major(self, value: ComponentUpdate) -> "VersionBuilder":
        """Set the major version; a larger value resets minor and patch.

        ``value`` may also be a function of the current major version, e.g.
        ``builder.major(lambda n: n + 2)``.
        """
        value = self._resolve("major", value)
        if value > self._major:
            self._minor = 0
            self._patch = 0
        self._major = value
        return self

    def minor(self, value: ComponentUpdate) -> "VersionBuilder":
        """Set the minor version, or apply a function to it; a larger value resets patch."""
        value = self._resolve("minor", value)
        if value > self._minor:
            self._patch = 0
        self._minor = value
        return self

    def patch(self, value: ComponentUpdate) -> "VersionBuilder":
        """Set the patch version, or apply a function to it."""
        self._patch = self._resolve("patch", value)
        return self

    def increase_major(self) -> "VersionBuilder":
        """Add one to major, resetting minor and patch."""
        return self.major(self._major + 1)

    def increase_minor(self) -> "VersionBuilder":
        """Add one to minor, resetting patch."""
        return self.minor(self._minor + 1)

    def increase_patch(self) -> "VersionBuilder":
        """Add one to patch."""
        return self.patch(self._patch + 1)

    def prerelease(
        self, value: Union[PreReleaseVersion, PreReleaseVersionBuilder, str, None]
    ) -> "VersionBuilder":
        """Set or clear (with None) the pre-release.

        Accepts an instance, a builder (built immediately) or a dotted string.
        """
        if isinstance(value, PreReleaseVersionBuilder):
            value = value.build()
        elif isinstance(value, str):
            value = PreReleaseVersion.parse(value)
        self._prerelease = value
        return self

    def build_metadata(
        self, value: Union[BuildMetadata, BuildMetadataBuilder, str, None]
    ) -> "VersionBuilder":
        """Set or clear (with None) the build metadata.

        Accepts an instance, a builder (built immediately) or a dotted string.
        """
        if isinstance(value, BuildMetadataBuilder):
            value = value.build()
        elif isinstance(value, str):
            value = BuildMetadata.parse(value)
        self._build_metadata = value
        return self

    def build(self) -> Version:
        """Produce an immutable Version from the current state."""
        return Version(
            self._major,
            self._minor,
            self._patch,
            self._prerelease,
            self._build_metadata,
        )
