# SPDX-License-Identifier: MIT
"""Order Kubernetes API versions by preference."""

from __future__ import annotations

from typing import Optional

import click

from kube_version import TIE_BREAKS, ApiVersion, ParseError, parse_api_version
from kube_version import preferred_version, sort_versions

from ..config import CLIConfig, ConfigError
from ..main import Context, echo_error, echo_info, echo_parse_error, pass_context, read_versions


def _load_config(ctx: Context) -> CLIConfig:
    try:
        return ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)


def _parse_all(versions: tuple[str, ...]) -> list[ApiVersion]:
    """Parse every input, reporting all failures before exiting."""
    inputs = read_versions(versions)
    if not inputs:
        echo_error("No versions given")
        raise SystemExit(1)

    parsed: list[ApiVersion] = []
    failed = False
    for text in inputs:
        try:
            parsed.append(parse_api_version(text))
        except ParseError as e:
            echo_parse_error(e)
            failed = True

    if failed:
        raise SystemExit(1)
    return parsed


tie_break_option = click.option(
    "--tie-break",
    type=click.Choice(TIE_BREAKS),
    default=None,
    help="How to order versions of equal rank: keep input order or order by group.",
)


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--ascending/--descending",
    default=None,
    help="Most preferred last (ascending) or first (descending).",
)
@tie_break_option
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    ascending: Optional[bool],
    tie_break: Optional[str],
) -> None:
    """Sort API versions, most preferred first.

    Reads versions from the arguments, or one per line from stdin when no
    arguments are given. Defaults come from [tool.kube-version] in the
    nearest pyproject.toml.

    \b
    Examples:
        kube-version sort v1beta1 v2 v1 v1alpha1
        kube-version sort --ascending --tie-break group apps/v1 extensions/v1
    """
    config = _load_config(ctx)
    parsed = _parse_all(versions)

    most_preferred_first = config.most_preferred_first if ascending is None else not ascending
    ordered = sort_versions(
        parsed,
        most_preferred_first=most_preferred_first,
        tie_break=tie_break or config.tie_break,
    )

    for api_version in ordered:
        echo_info(str(api_version))


@click.command()
@click.argument("versions", nargs=-1)
@tie_break_option
@pass_context
def preferred(ctx: Context, versions: tuple[str, ...], tie_break: Optional[str]) -> None:
    """Print the most preferred of the given API versions.

    \b
    Examples:
        kube-version preferred v1beta1 v1 v2alpha1
    """
    config = _load_config(ctx)
    parsed = _parse_all(versions)

    echo_info(str(preferred_version(parsed, tie_break=tie_break or config.tie_break)))
