# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from . import __version__
from .compare import compare_versions, sort_versions
from .config import CLIConfig
from .errors import SemVerError
from .identifiers import int_to_numeric
from .log import setup_logging
from .version import parse_version

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: CLIConfig = CLIConfig.from_env()


pass_context = click.make_pass_decorator(Context, ensure=True)


def _color(ctx: Optional[Context]) -> Optional[bool]:
    if ctx is None:
        return None
    return None if ctx.config.color else False


def echo_error(message: str, ctx: Optional[Context] = None) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True, color=_color(ctx))


def echo_success(message: str, ctx: Optional[Context] = None) -> None:
    """Print a success message."""
    click.secho(message, fg="green", color=_color(ctx))


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str, ctx: Optional[Context] = None) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True, color=_color(ctx))


@click.group()
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging (also SEMVER_VERBOSE=true).",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic Versioning 2.0.0 tool.

    Validate, inspect, compare, bump and sort version strings.

    \b
    Examples:
        semver validate 1.0.0-alpha+001
        semver compare 1.0.0-alpha.1 1.0.0-alpha.beta
        semver bump minor 1.0.1
        semver sort 1.0.0 1.0.0-rc.1 1.0.0-beta.11
    """
    if verbose:
        ctx.config.verbose = True
    setup_logging(ctx.config.verbose)


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version.

    Exits with status 1 if any of them is invalid.
    """
    failed = 0
    for version in versions:
        try:
            parse_version(version)
        except SemVerError as e:
            failed += 1
            echo_error(f"{version}: {e}", ctx)
        else:
            echo_success(f"Valid: {version}", ctx)

    if failed:
        logger.debug("%d of %d versions invalid", failed, len(versions))
        raise SystemExit(1)


@cli.command()
@click.argument("version")
@pass_context
def parse(ctx: Context, version: str) -> None:
    """Show the components of VERSION."""
    try:
        parsed = parse_version(version)
    except SemVerError as e:
        echo_error(str(e), ctx)
        raise SystemExit(1)

    echo_info(f"major: {int_to_numeric(parsed.major)}")
    echo_info(f"minor: {int_to_numeric(parsed.minor)}")
    echo_info(f"patch: {int_to_numeric(parsed.patch)}")
    echo_info(f"prerelease: {parsed.prerelease if parsed.prerelease is not None else ''}")
    echo_info(f"build: {parsed.build_metadata if parsed.build_metadata is not None else ''}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2 by precedence.

    Prints -1, 0 or 1. Build metadata is ignored.
    """
    try:
        result = compare_versions(version1, version2)
    except SemVerError as e:
        echo_error(str(e), ctx)
        raise SystemExit(1)

    echo_info(str(int(result)))


@cli.command()
@click.argument("part", type=click.Choice(["major", "minor", "patch"]))
@click.argument("version")
@pass_context
def bump(ctx: Context, part: str, version: str) -> None:
    """Increase PART of VERSION.

    Lower components reset to zero; pre-release and build metadata are dropped.
    """
    try:
        parsed = parse_version(version)
    except SemVerError as e:
        echo_error(str(e), ctx)
        raise SystemExit(1)

    if parsed.prerelease is not None or parsed.build_metadata is not None:
        echo_warning(f"Dropping pre-release and build metadata from {version}", ctx)

    bumped = {
        "major": parsed.bump_major,
        "minor": parsed.bump_minor,
        "patch": parsed.bump_patch,
    }[part]()
    echo_info(str(bumped))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Highest precedence first.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered by precedence, lowest first."""
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except SemVerError as e:
        echo_error(str(e), ctx)
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except SemVerError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
