#!/usr/bin/env python3
"""roblox-places CLI - manage Roblox places from CI

Usage:
    roblox-places run
    roblox-places create <experience_id> [--name=NAME]
    roblox-places delete <experience_id> <place_id>
    roblox-places list <experience_id> [--json]
    roblox-places publish <experience_id> <place_id> <file> [--version-type=TYPE]
"""

import logging
import sys

import click

from ..config import __version__
from ..exceptions import RobloxPlacesError, UpstreamApiError
from .commands.action import run
from .commands.places import create, delete, list_places, publish


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
def cli(verbose: bool):
    """roblox-places CLI - manage Roblox places from CI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# GitHub Action entry
cli.add_command(run)

# Place commands
cli.add_command(create)
cli.add_command(delete)
cli.add_command(list_places)
cli.add_command(publish)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except UpstreamApiError as e:
        click.echo(f"Error: {e.message}", err=True)
        hint = {
            401: "Hint: Check that the .ROBLOSECURITY cookie is valid.",
            403: "Hint: The account or API key lacks permission for this experience.",
            404: "Hint: Check the experience and place IDs.",
            429: "Hint: Too many requests. Please wait and try again.",
        }.get(e.status_code)
        if hint:
            click.echo(hint, err=True)
        sys.exit(1)
    except RobloxPlacesError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except (click.Abort, KeyboardInterrupt):
        click.echo(err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
