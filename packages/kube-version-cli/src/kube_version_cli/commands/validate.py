# SPDX-License-Identifier: MIT
"""Validate Kubernetes API version strings."""

from __future__ import annotations

import click

from kube_version import ParseError, parse_api_version

from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_parse_error,
    echo_success,
    pass_context,
    read_versions,
)


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only report failures.",
)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Validate API versions.

    Reads versions from the arguments, or one per line from stdin when no
    arguments are given.

    \b
    Examples:
        kube-version validate apps/v1 v1beta1
        kubectl api-versions | kube-version validate
    """
    inputs = read_versions(versions)
    if not inputs:
        echo_error("No versions given")
        raise SystemExit(1)

    errors: list[ParseError] = []
    for text in inputs:
        try:
            api_version = parse_api_version(text)
        except ParseError as e:
            errors.append(e)
            continue
        if not quiet and ctx.verbose:
            echo_info(f"  {api_version}: valid")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_parse_error(error)
        echo_error(f"\nValidation failed for {len(errors)} of {len(inputs)} versions!")
        raise SystemExit(1)

    if not quiet:
        echo_success(f"All {len(inputs)} versions are valid.")
