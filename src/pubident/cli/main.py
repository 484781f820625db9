"""Command-line interface for pubident.

Provides CLI commands for normalizing and checking identifiers.
"""

import importlib.metadata
import logging
import sys
from pathlib import Path

import click

from pubident.identifiers import scheme_names

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("pubident")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.4.0"  # Fallback for development

_SCHEME_CHOICE = click.Choice(scheme_names(), case_sensitive=False)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@click.group()
@click.version_option(version=__version__, prog_name="pubident")
def cli() -> None:
    """Normalize and validate ISBN, ISSN, UPC, OCLC and LCCN identifiers.

    Use 'pubident COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--scheme",
    "-s",
    type=_SCHEME_CHOICE,
    default=None,
    help="Identifier scheme (default: resolved from each value)",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Reject a wrong UPC check digit instead of repairing it",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def normalize(
    values: tuple[str, ...],
    scheme: str | None,
    validate: bool,
    verbose: bool,
) -> None:
    """Print the normalized form of each of VALUES.

    Each line of output is the input, a tab, and either "scheme:value" or
    "INVALID". Exits with status 1 if any value is invalid.

    Examples
    --------
        pubident normalize "ISSN 0378-5955" ocm123456789
        pubident normalize -s upc 03600029145
    """
    from pubident.api import normalize_value
    from pubident.errors import ChecksumMismatchError
    from pubident.identifiers import create

    _configure_logging(verbose)

    failed = False
    for value in values:
        try:
            normalized = normalize_value(value, scheme, validate=validate)
        except ChecksumMismatchError as e:
            click.secho(f"{value}\tINVALID ({e})", fg="red")
            failed = True
            continue

        if normalized is None:
            click.secho(f"{value}\tINVALID", fg="red")
            failed = True
            continue

        name = scheme.lower() if scheme else create(value).scheme
        click.echo(f"{value}\t{name}:{normalized}")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--scheme",
    "-s",
    "schemes",
    type=_SCHEME_CHOICE,
    multiple=True,
    help="Restrict to this scheme (repeatable; default: all)",
)
@click.option(
    "--validate",
    is_flag=True,
    help="Report a wrong UPC check digit instead of repairing it",
)
@click.option(
    "--valid-only",
    is_flag=True,
    help="Omit rejected values from the output",
)
@click.option(
    "--events",
    type=click.Path(),
    default=None,
    help="Write a JSONL audit event log to this path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def check(
    input_path: str,
    output: str,
    schemes: tuple[str, ...],
    validate: bool,
    valid_only: bool,
    events: str | None,
    verbose: bool,
) -> None:
    """Check every identifier in INPUT_PATH and write results as JSONL.

    INPUT_PATH is a UTF-8 text file with one or more identifiers per line,
    separated by commas, semicolons, bars or tabs.

    Examples
    --------
        pubident check identifiers.txt -o results.jsonl
        pubident check ids.txt -o upc.jsonl -s upc --validate --events events.jsonl
    """
    from pubident.api import check_file, write_jsonl
    from pubident.config import CheckConfig

    _configure_logging(verbose)

    try:
        config = CheckConfig(
            schemes=list(schemes) or None,
            validate=validate,
            include_rejected=not valid_only,
            events_path=Path(events) if events else None,
        )

        if verbose:
            click.echo(f"Checking: {input_path}", err=True)
            click.echo(f"  Schemes: {', '.join(config.effective_schemes)}", err=True)
            if config.events_path:
                click.echo(f"  Events: {config.events_path}", err=True)

        results = check_file(input_path, config, command=sys.argv)
        write_jsonl(results, output)

        valid = sum(r.valid for r in results)
        click.secho(
            f"✓ Wrote {len(results)} results to {output} ({valid} valid)",
            fg="green",
        )

    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
