# SPDX-License-Identifier: MIT
"""Kubernetes API version parsing and ordering.

This package parses and validates Kubernetes-style API version identifiers
(``v1``, ``v1beta1``, ``apps/v1``) and orders them by Kubernetes precedence:
stable > beta > alpha, then higher major, then higher minor.

Example:
    >>> from kube_version import parse_api_version, compare_versions, sort_versions
    >>>
    >>> api_version = parse_api_version("extensions/v1beta1")
    >>> api_version.group
    'extensions'
    >>> api_version.version.minor
    1
    >>>
    >>> compare_versions("v1", "v2beta1")
    1
    >>>
    >>> sort_versions(["v1beta1", "v2", "v1alpha1"])
    ['v2', 'v1beta1', 'v1alpha1']
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    ParseErrorKind,
    MissingVersionPrefixError,
    InvalidMajorNumberError,
    InvalidPrereleaseStageError,
    InvalidMinorNumberError,
    TrailingGarbageError,
    EmptyGroupError,
    AmbiguousSeparatorError,
)
from .version import (
    Stage,
    Prerelease,
    Version,
    parse_version,
    is_valid_version,
    VERSION_PATTERN,
)
from .api_version import (
    ApiVersion,
    parse_api_version,
    is_valid_api_version,
    API_VERSION_PATTERN,
)
from .compare import (
    TIE_BREAKS,
    compare_versions,
    version_key,
    group_version_key,
    sort_versions,
    preferred_version,
)

__all__ = [
    # Errors
    "ParseError",
    "ParseErrorKind",
    "MissingVersionPrefixError",
    "InvalidMajorNumberError",
    "InvalidPrereleaseStageError",
    "InvalidMinorNumberError",
    "TrailingGarbageError",
    "EmptyGroupError",
    "AmbiguousSeparatorError",
    # Version parsing
    "Stage",
    "Prerelease",
    "Version",
    "parse_version",
    "is_valid_version",
    "VERSION_PATTERN",
    "ApiVersion",
    "parse_api_version",
    "is_valid_api_version",
    "API_VERSION_PATTERN",
    # Version comparison
    "TIE_BREAKS",
    "compare_versions",
    "version_key",
    "group_version_key",
    "sort_versions",
    "preferred_version",
]
