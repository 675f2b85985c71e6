"""CLI commands for managing places directly."""

import asyncio
import json

import click

from ...client import RobloxPlaces
from ...config import API_KEY_ENV, ROBLOSECURITY_ENV
from ...models import DEFAULT_VERSION_TYPE, VERSION_TYPES


def credential_options(f):
    """Add the --roblosecurity and --api-key options."""
    f = click.option(
        "--api-key",
        envvar=API_KEY_ENV,
        default=None,
        help=f"Open Cloud API key (default: ${API_KEY_ENV})",
    )(f)
    f = click.option(
        "--roblosecurity",
        envvar=ROBLOSECURITY_ENV,
        required=True,
        help=f".ROBLOSECURITY cookie (default: ${ROBLOSECURITY_ENV})",
    )(f)
    return f


@click.command()
@click.argument("experience_id", type=int)
@click.option("--name", default=None, help="Display name for the new place")
@credential_options
def create(experience_id: int, name: str | None, roblosecurity: str, api_key: str | None):
    """Create a place in an experience."""

    async def _create() -> int:
        async with RobloxPlaces(roblosecurity=roblosecurity, api_key=api_key) as client:
            return await client.create_place(experience_id, name=name)

    place_id = asyncio.run(_create())
    click.echo(f"Created place: {place_id}")


@click.command()
@click.argument("experience_id", type=int)
@click.argument("place_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation prompt")
@credential_options
def delete(
    experience_id: int,
    place_id: int,
    force: bool,
    roblosecurity: str,
    api_key: str | None,
):
    """Remove a place from an experience."""
    if not force:
        click.confirm(f"Are you sure you want to delete place {place_id}?", abort=True)

    async def _delete() -> None:
        async with RobloxPlaces(roblosecurity=roblosecurity, api_key=api_key) as client:
            await client.delete_place(experience_id, place_id)

    asyncio.run(_delete())
    click.echo(f"Deleted place: {place_id}")


@click.command("list")
@click.argument("experience_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@credential_options
def list_places(experience_id: int, as_json: bool, roblosecurity: str, api_key: str | None):
    """List all places in an experience."""

    async def _list():
        async with RobloxPlaces(roblosecurity=roblosecurity, api_key=api_key) as client:
            return await client.list_places(experience_id)

    places = asyncio.run(_list())

    if as_json:
        click.echo(json.dumps([p.to_record() for p in places], indent=2))
        return

    if not places:
        click.echo("No places found.")
        return

    click.echo(f"{'ID':<14} {'NAME':<30} {'VERSION':<8} ROOT")
    for place in places:
        version = place.current_saved_version if place.current_saved_version is not None else "-"
        root = "yes" if place.is_root_place else ""
        click.echo(f"{place.id:<14} {place.name[:30]:<30} {version!s:<8} {root}")
    click.echo(f"\nFound {len(places)} place(s)")


@click.command()
@click.argument("experience_id", type=int)
@click.argument("place_id", type=int)
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.option(
    "--version-type",
    type=click.Choice(VERSION_TYPES),
    default=DEFAULT_VERSION_TYPE,
    show_default=True,
    help="Save a draft or publish a live version",
)
@credential_options
def publish(
    experience_id: int,
    place_id: int,
    file_path: str,
    version_type: str,
    roblosecurity: str,
    api_key: str | None,
):
    """Upload a place file as a new version."""

    async def _publish():
        async with RobloxPlaces(roblosecurity=roblosecurity, api_key=api_key) as client:
            return await client.publish_place(
                experience_id, place_id, file_path, version_type=version_type
            )

    version = asyncio.run(_publish())
    if version.version_number is not None:
        click.echo(f"Published place {place_id} (version {version.version_number})")
    else:
        click.echo(f"Published place {place_id}")
