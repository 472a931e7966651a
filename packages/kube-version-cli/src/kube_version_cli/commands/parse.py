# SPDX-License-Identifier: MIT
"""Show the components of Kubernetes API versions."""

from __future__ import annotations

import json
from typing import Any

import click

from kube_version import ApiVersion, ParseError, parse_api_version

from ..main import Context, echo_info, echo_parse_error, pass_context


def _describe(api_version: ApiVersion) -> dict[str, Any]:
    """Return the components of an API version as a JSON-friendly dict."""
    version = api_version.version
    return {
        "apiVersion": str(api_version),
        "group": api_version.group,
        "version": str(version),
        "major": version.major,
        "stage": version.stage.value if version.stage else None,
        "minor": version.minor,
        "stable": version.is_stable,
    }


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the parsed versions as a JSON list.",
)
@pass_context
def parse(ctx: Context, versions: tuple[str, ...], as_json: bool) -> None:
    """Parse API versions and print their components.

    \b
    Examples:
        kube-version parse v1
        kube-version parse --json apps/v1 extensions/v1beta1
    """
    parsed: list[dict[str, Any]] = []
    failed = False

    for text in versions:
        try:
            parsed.append(_describe(parse_api_version(text)))
        except ParseError as e:
            echo_parse_error(e)
            failed = True

    if as_json:
        echo_info(json.dumps(parsed, indent=2))
    else:
        for item in parsed:
            echo_info(item["apiVersion"])
            echo_info(f"  group: {item['group'] or '(core)'}")
            echo_info(f"  major: {item['major']}")
            if item["stable"]:
                echo_info("  stage: stable")
            else:
                echo_info(f"  stage: {item['stage']}")
                echo_info(f"  minor: {item['minor']}")

    if failed:
        raise SystemExit(1)
