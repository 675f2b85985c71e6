"""Run as a GitHub Action.

The `roblox-places run` command reads its inputs from INPUT_* environment
variables, writes outputs to $GITHUB_OUTPUT and marks the step failed on
any error.

Usage:
    INPUT_ACTION=list INPUT_ROBLOSECURITY=... INPUT_EXPERIENCE_ID=123 roblox-places run
"""

import asyncio
import sys

import click

from ...action import ActionInputs, ActionOutputs, run_action
from ...exceptions import RobloxPlacesError


@click.command()
def run() -> None:
    """Run the action described by INPUT_* environment variables."""
    try:
        inputs = ActionInputs.from_env()
        outputs = ActionOutputs()
        status = asyncio.run(run_action(inputs, outputs))
    except RobloxPlacesError as e:
        click.echo(f"::error::{e.message}")
        sys.exit(1)
    except Exception as e:
        click.echo(f"::error::{e}")
        sys.exit(1)

    click.echo(status)
