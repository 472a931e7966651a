# SPDX-License-Identifier: MIT
"""Kubernetes resource version parsing.

Supports the ``v<MAJOR>[alpha|beta<MINOR>]`` format:
- Stable: v1, v2, v10
- Beta: v1beta1, v2beta3
- Alpha: v1alpha1, v1alpha12

Numbers are positive and never carry a leading zero.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import (
    InvalidMajorNumberError,
    InvalidMinorNumberError,
    InvalidPrereleaseStageError,
    MissingVersionPrefixError,
    ParseError,
    TrailingGarbageError,
)

# Major and minor numbers stay within the unsigned 64-bit range
MAX_NUMBER_DIGITS = 19
_NUMBER_REGEX = rf"[1-9][0-9]{{0,{MAX_NUMBER_DIGITS - 1}}}"

# Full-match pattern for the version component
VERSION_REGEX = rf"v(?P<major>{_NUMBER_REGEX})(?:(?P<stage>alpha|beta)(?P<minor>{_NUMBER_REGEX}))?"
VERSION_PATTERN = re.compile(rf"^{VERSION_REGEX}\Z")

_DIGITS = re.compile(r"[0-9]*")
_LETTERS = re.compile(r"[a-zA-Z]*")


class Stage(str, Enum):
    """Pre-release stage keyword."""

    ALPHA = "alpha"
    BETA = "beta"

    def __str__(self) -> str:
        return self.value


# Stability class ordering (higher = more preferred)
_STABILITY_ORDER = {
    Stage.ALPHA: 0,
    Stage.BETA: 1,
    None: 2,
}


def _check_positive(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{what} must be a positive integer, got {value}")
    if value >= 10**MAX_NUMBER_DIGITS:
        raise ValueError(f"{what} must have at most {MAX_NUMBER_DIGITS} digits")


@dataclass(frozen=True, slots=True)
class Prerelease:
    """A pre-release qualifier such as ``beta1`` or ``alpha2``.

    Attributes:
        stage: Alpha or beta
        minor: Positive counter within the stage
    """

    stage: Stage
    minor: int

    def __post_init__(self) -> None:
        if not isinstance(self.stage, Stage):
            raise TypeError(f"stage must be a Stage, got {type(self.stage).__name__}")
        _check_positive(self.minor, "minor")

    def __str__(self) -> str:
        return f"{self.stage.value}{self.minor}"

    def __add__(self, other: int) -> Prerelease:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Prerelease(self.stage, self.minor + other)

    def __sub__(self, other: int) -> Prerelease:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Prerelease(self.stage, self.minor - other)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed Kubernetes resource version.

    Attributes:
        major: Major version number (>= 1)
        prerelease: Optional alpha/beta qualifier; None for stable (GA) versions

    Ordering follows Kubernetes precedence: stable > beta > alpha, then the
    larger major, then the larger minor.
    """

    major: int
    prerelease: Optional[Prerelease] = None

    def __post_init__(self) -> None:
        _check_positive(self.major, "major")
        if self.prerelease is not None and not isinstance(self.prerelease, Prerelease):
            raise TypeError(
                f"prerelease must be a Prerelease, got {type(self.prerelease).__name__}"
            )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if self.prerelease is None:
            return f"v{self.major}"
        return f"v{self.major}{self.prerelease}"

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @property
    def is_stable(self) -> bool:
        """Return True if this is a stable (GA) version."""
        return self.prerelease is None

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is an alpha or beta version."""
        return self.prerelease is not None

    @property
    def stage(self) -> Optional[Stage]:
        return self.prerelease.stage if self.prerelease else None

    @property
    def minor(self) -> Optional[int]:
        return self.prerelease.minor if self.prerelease else None

    @property
    def rank(self) -> tuple[int, int, int]:
        """Ascending precedence key: (stability class, major, minor)."""
        minor = self.prerelease.minor if self.prerelease else 0
        return (_STABILITY_ORDER[self.stage], self.major, minor)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.rank >= other.rank


def _take(pattern: re.Pattern[str], text: str, pos: int) -> tuple[str, int]:
    """Match ``pattern`` at ``pos`` and return the matched text and end offset."""
    match = pattern.match(text, pos)
    return match.group(), match.end()


def _check_number(digits: str, what: str, error: type[ParseError], source: str) -> int:
    if not digits:
        raise error(source, f"Missing {what} number in {source!r}")
    if digits[0] == "0":
        if len(digits) == 1:
            raise error(source, f"{what.capitalize()} number must not be zero in {source!r}")
        raise error(source, f"Unexpected leading zero in {what} number in {source!r}")
    if len(digits) > MAX_NUMBER_DIGITS:
        raise error(
            source,
            f"{what.capitalize()} number too large, at most {MAX_NUMBER_DIGITS} digits in {source!r}",
        )
    return int(digits)


def _parse_version_component(text: str, source: str) -> Version:
    """Parse the ``version`` production, reporting errors against ``source``."""
    if not text.startswith("v"):
        raise MissingVersionPrefixError(
            source, f"Expected version to start with 'v' in {source!r}"
        )

    digits, pos = _take(_DIGITS, text, 1)
    major = _check_number(digits, "major", InvalidMajorNumberError, source)

    if pos == len(text):
        return Version(major)

    keyword, pos = _take(_LETTERS, text, pos)
    if not keyword:
        raise TrailingGarbageError(
            source, f"Unexpected {text[pos:]!r} after version v{major} in {source!r}"
        )

    try:
        stage = Stage(keyword)
    except ValueError:
        raise InvalidPrereleaseStageError(
            source, f"Unknown stage {keyword!r}, expected 'alpha' or 'beta' in {source!r}"
        ) from None

    digits, pos = _take(_DIGITS, text, pos)
    minor = _check_number(digits, "minor", InvalidMinorNumberError, source)

    if pos != len(text):
        raise TrailingGarbageError(
            source,
            f"Unexpected {text[pos:]!r} after version v{major}{keyword}{minor} in {source!r}",
        )

    return Version(major, Prerelease(stage, minor))


def parse_version(version_string: str) -> Version:
    """Parse a Kubernetes resource version string into a Version object.

    Args:
        version_string: A string in ``v<MAJOR>[alpha|beta<MINOR>]`` format.
            Surrounding whitespace is not tolerated.

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string is not a valid version (a subclass names the reason)
        TypeError: If the input is not a string

    Examples:
        >>> parse_version("v1")
        Version(major=1, prerelease=None)

        >>> parse_version("v2beta1")
        Version(major=2, prerelease=Prerelease(stage=<Stage.BETA: 'beta'>, minor=1))
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")
    return _parse_version_component(version_string, version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid Kubernetes resource version.

    Examples:
        >>> is_valid_version("v1alpha1")
        True
        >>> is_valid_version("v01")
        False
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.match(version_string) is not None
