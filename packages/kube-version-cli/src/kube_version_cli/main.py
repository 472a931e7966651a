# SPDX-License-Identifier: MIT
"""CLI entry point for kube-version command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from kube_version import ParseError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
            if self.verbose:
                source = self.config.source or "defaults"
                click.echo(f"Configuration: {source}", err=True)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_parse_error(error: ParseError) -> None:
    """Print a parse failure with its kind."""
    echo_error(f"{error.input!r}: [{error.kind.value}] {error.message}")


def read_versions(versions: tuple[str, ...]) -> list[str]:
    """Return the given arguments, or one version per non-empty stdin line.

    Only the line terminator is removed; other whitespace is left for the
    parser to reject.
    """
    if versions:
        return list(versions)
    with click.open_file("-") as stdin:
        lines = [line.rstrip("\r\n") for line in stdin]
    return [line for line in lines if line]


@click.group()
@click.version_option(package_name="kube-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look up configuration starting from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Kubernetes API version tool.

    Parse, validate, and order Kubernetes API versions such as v1,
    v1beta1, or apps/v1.

    \b
    Examples:
        kube-version parse apps/v1 extensions/v1beta1
        kube-version validate v1 v1beta0
        kube-version sort v1beta1 v2 v1 v1alpha1
        kube-version preferred v1beta1 v1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import parse, validate, sort

cli.add_command(parse.parse)
cli.add_command(validate.validate)
cli.add_command(sort.sort)
cli.add_command(sort.preferred)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
