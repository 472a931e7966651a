# SPDX-License-Identifier: MIT
"""Kubernetes API version parsing.

An API version has the ``[<GROUP>/]<VERSION>`` format, for example
``certificates.k8s.io/v1beta1``, ``extensions/v1beta1`` or ``v1``. The group
is absent for the legacy "core" API group.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import AmbiguousSeparatorError, EmptyGroupError
from .version import VERSION_REGEX, Version, _parse_version_component

API_VERSION_PATTERN = re.compile(rf"^(?:(?P<group>[^/]+)/)?{VERSION_REGEX}\Z")


@dataclass(frozen=True, slots=True)
class ApiVersion:
    """A parsed Kubernetes API version.

    Attributes:
        group: API group name, or None for the core group
        version: The resource version

    Ordering compares the version only. Two API versions that differ only by
    group are neither less nor greater than one another, although they are
    not equal.
    """

    group: Optional[str]
    version: Version

    def __post_init__(self) -> None:
        if self.group is not None:
            if not isinstance(self.group, str):
                raise TypeError(f"group must be a string, got {type(self.group).__name__}")
            if not self.group:
                raise ValueError("group must not be empty, use None for the core group")
            if "/" in self.group:
                raise ValueError(f"group must not contain '/', got {self.group!r}")
        if not isinstance(self.version, Version):
            raise TypeError(f"version must be a Version, got {type(self.version).__name__}")

    def __str__(self) -> str:
        """Return the canonical string representation of the API version."""
        if self.group is None:
            return str(self.version)
        return f"{self.group}/{self.version}"

    @classmethod
    def parse(cls, api_version: str) -> ApiVersion:
        """Parse an API version string. See :func:`parse_api_version`."""
        return parse_api_version(api_version)

    @property
    def is_core_group(self) -> bool:
        return self.group is None

    @property
    def is_stable(self) -> bool:
        return self.version.is_stable

    @property
    def is_prerelease(self) -> bool:
        return self.version.is_prerelease

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ApiVersion):
            return NotImplemented
        return self.version.rank < other.version.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ApiVersion):
            return NotImplemented
        return self.version.rank <= other.version.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ApiVersion):
            return NotImplemented
        return self.version.rank > other.version.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ApiVersion):
            return NotImplemented
        return self.version.rank >= other.version.rank


def parse_api_version(api_version: str) -> ApiVersion:
    """Parse a Kubernetes API version string into an ApiVersion object.

    Args:
        api_version: A string in ``[<GROUP>/]<VERSION>`` format

    Returns:
        An ApiVersion object; ``str()`` of it gives back the input

    Raises:
        ParseError: If the string is not a valid API version (a subclass names the reason)
        TypeError: If the input is not a string

    Examples:
        >>> parse_api_version("apps/v1")
        ApiVersion(group='apps', version=Version(major=1, prerelease=None))

        >>> str(parse_api_version("extensions/v1beta1").version)
        'v1beta1'
    """
    if not isinstance(api_version, str):
        raise TypeError(f"API version must be a string, got {type(api_version).__name__}")

    separators = api_version.count("/")
    if separators > 1:
        raise AmbiguousSeparatorError(
            api_version,
            f"Expected at most one '/' in {api_version!r}, found {separators}",
        )

    if separators == 0:
        return ApiVersion(None, _parse_version_component(api_version, api_version))

    group, version = api_version.split("/")
    if not group:
        raise EmptyGroupError(api_version, f"Empty group before '/' in {api_version!r}")

    return ApiVersion(group, _parse_version_component(version, api_version))


def is_valid_api_version(api_version: str) -> bool:
    """Check if a string is a valid Kubernetes API version.

    Examples:
        >>> is_valid_api_version("policy/v1beta1")
        True
        >>> is_valid_api_version("a/b/v1")
        False
    """
    if not isinstance(api_version, str):
        return False
    return API_VERSION_PATTERN.match(api_version) is not None
