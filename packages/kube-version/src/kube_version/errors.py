# SPDX-License-Identifier: MIT
"""Parse errors raised for malformed Kubernetes API version strings.

Every failure carries the offending input, a machine-readable kind and a
human-readable message. Each kind has its own exception class so callers can
catch exactly the failures they care about, or ``ParseError`` for all of them.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """The reason a version string was rejected."""

    MISSING_VERSION_PREFIX = "MissingVersionPrefix"
    INVALID_MAJOR_NUMBER = "InvalidMajorNumber"
    INVALID_PRERELEASE_STAGE = "InvalidPrereleaseStage"
    INVALID_MINOR_NUMBER = "InvalidMinorNumber"
    TRAILING_GARBAGE = "TrailingGarbage"
    EMPTY_GROUP = "EmptyGroup"
    AMBIGUOUS_SEPARATOR = "AmbiguousSeparator"


class ParseError(ValueError):
    """Raised when a string is not a valid Kubernetes API version.

    Attributes:
        input: The raw string that failed to parse
        kind: The reason for the failure
        message: Human-readable description of the failure
    """

    kind: ParseErrorKind

    def __init__(self, input: str, message: str = ""):
        self.input = input
        self.message = message or f"Invalid Kubernetes API version: {input!r}"
        super().__init__(self.message)


class MissingVersionPrefixError(ParseError):
    """The version component does not start with ``v``."""

    kind = ParseErrorKind.MISSING_VERSION_PREFIX


class InvalidMajorNumberError(ParseError):
    """The major number is absent, zero or has a leading zero."""

    kind = ParseErrorKind.INVALID_MAJOR_NUMBER


class InvalidPrereleaseStageError(ParseError):
    """The text after the major number is not ``alpha`` or ``beta``."""

    kind = ParseErrorKind.INVALID_PRERELEASE_STAGE


class InvalidMinorNumberError(ParseError):
    """The minor number after a stage keyword is absent, zero or has a leading zero."""

    kind = ParseErrorKind.INVALID_MINOR_NUMBER


class TrailingGarbageError(ParseError):
    """A valid version prefix is followed by unrecognized characters."""

    kind = ParseErrorKind.TRAILING_GARBAGE


class EmptyGroupError(ParseError):
    """A ``/`` separator is present with nothing before it."""

    kind = ParseErrorKind.EMPTY_GROUP


class AmbiguousSeparatorError(ParseError):
    """The input contains more than one ``/``."""

    kind = ParseErrorKind.AMBIGUOUS_SEPARATOR
