# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, validate, sort

__all__ = ["parse", "validate", "sort"]
