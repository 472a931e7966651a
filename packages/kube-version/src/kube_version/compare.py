# SPDX-License-Identifier: MIT
"""Version comparison following Kubernetes precedence.

Stability ordering: alpha < beta < stable. Within a stability class the
larger major wins, then the larger minor. The group is not part of the
ordering; the preferred version is the maximum.
"""

from __future__ import annotations

from typing import Iterable, Literal, TypeVar, Union

from .api_version import ApiVersion, parse_api_version
from .version import Version

VersionLike = Union[str, Version, ApiVersion]
TieBreak = Literal["none", "group"]

TIE_BREAKS: tuple[str, ...] = ("none", "group")

_V = TypeVar("_V", str, Version, ApiVersion)


def _as_api_version(version: VersionLike) -> ApiVersion:
    if isinstance(version, ApiVersion):
        return version
    if isinstance(version, Version):
        return ApiVersion(None, version)
    return parse_api_version(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two Kubernetes API versions by precedence.

    Args:
        version1: First version (string, Version or ApiVersion)
        version2: Second version (string, Version or ApiVersion)

    Returns:
        -1 if version1 is less preferred than version2
        0 if both have the same rank
        1 if version1 is more preferred than version2

    Raises:
        ParseError: If either version string is invalid

    Note:
        Versions that differ only by group compare equal. Use
        :func:`group_version_key` when a deterministic order is needed.

    Examples:
        >>> compare_versions("v1", "v2beta1")
        1
        >>> compare_versions("v1alpha1", "v1beta1")
        -1
        >>> compare_versions("apps/v1", "extensions/v1")
        0
    """
    rank1 = _as_api_version(version1).version.rank
    rank2 = _as_api_version(version2).version.rank
    if rank1 == rank2:
        return 0
    return -1 if rank1 < rank2 else 1


def version_key(version: VersionLike) -> tuple[int, int, int]:
    """Return an ascending sort key for a version.

    The most preferred version sorts last.

    Examples:
        >>> sorted(["v1", "v1alpha1", "v2beta1"], key=version_key)
        ['v1alpha1', 'v2beta1', 'v1']
    """
    return _as_api_version(version).version.rank


def group_version_key(version: VersionLike) -> tuple[tuple[int, int, int], str]:
    """Return a sort key that breaks ties between equal-rank versions by group.

    The core group sorts as the empty string, before any named group.

    Examples:
        >>> sorted(["extensions/v1", "apps/v1", "v1"], key=group_version_key)
        ['v1', 'apps/v1', 'extensions/v1']
    """
    api_version = _as_api_version(version)
    return (api_version.version.rank, api_version.group or "")


def _key_for(tie_break: str):
    if tie_break == "none":
        return version_key
    if tie_break == "group":
        return group_version_key
    raise ValueError(f"Unknown tie-break {tie_break!r}, expected one of {', '.join(TIE_BREAKS)}")


def sort_versions(
    versions: Iterable[_V],
    *,
    most_preferred_first: bool = True,
    tie_break: TieBreak = "none",
) -> list[_V]:
    """Sort versions by Kubernetes precedence.

    Args:
        versions: Version strings or parsed versions
        most_preferred_first: Put the preferred version first (default) or last
        tie_break: "none" keeps the input order among equal-rank versions,
            "group" orders them by group name

    Returns:
        A new list holding the input objects in order

    Raises:
        ParseError: If any version string is invalid
        ValueError: If tie_break is unknown

    Examples:
        >>> sort_versions(["v1beta1", "v2", "v1", "v1alpha1", "v2alpha1"])
        ['v2', 'v1', 'v1beta1', 'v2alpha1', 'v1alpha1']
    """
    key = _key_for(tie_break)
    # Sort ascending on keys computed once, then reverse: equal-rank items
    # keep their input order in both directions.
    keyed = [(key(v), index, v) for index, v in enumerate(versions)]
    if most_preferred_first:
        keyed.sort(key=lambda item: (item[0], -item[1]))
        keyed.reverse()
    else:
        keyed.sort(key=lambda item: (item[0], item[1]))
    return [v for _, _, v in keyed]


def preferred_version(versions: Iterable[_V], *, tie_break: TieBreak = "none") -> _V:
    """Return the most preferred version.

    With ``tie_break="none"`` the first of several equal-rank candidates wins;
    with ``"group"`` the one whose group sorts last wins.

    Raises:
        ValueError: If no versions are given or tie_break is unknown
        ParseError: If any version string is invalid
    """
    ordered = sort_versions(versions, tie_break=tie_break)
    if not ordered:
        raise ValueError("No versions to choose from")
    return ordered[0]
