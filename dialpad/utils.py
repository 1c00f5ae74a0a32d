"""
Output and logging helpers for the Dialpad CLI.
"""

import json
import logging
import sys
from typing import Any, Optional

import click


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for the command line."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)
    # urllib3 connection chatter is only useful when debugging
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_json(data: Any) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2, default=str))


def print_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, hint: Optional[str] = None) -> None:
    """Print an error message (and optional hint) to stderr."""
    click.secho(f"✗ {message}", fg="red", err=True)
    if hint:
        click.echo(f"  {hint}", err=True)
