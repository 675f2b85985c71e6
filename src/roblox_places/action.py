"""GitHub Action runner: read inputs, call the API, write outputs."""

from __future__ import annotations

import json
import logging
import os
import uuid
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .client import RobloxPlaces
from .config import GITHUB_OUTPUT_ENV
from .exceptions import InputError, UnknownActionError
from .models import DEFAULT_VERSION_TYPE, VERSION_TYPES

logger = logging.getLogger(__name__)

ACTIONS: tuple[str, ...] = ("create", "delete", "list", "publish")


class ActionInputs(BaseModel):
    """Inputs of a single action invocation."""

    action: str
    roblosecurity: str = Field(..., repr=False)
    api_key: str | None = Field(None, repr=False)
    experience_id: int
    place_id: int | None = None
    place_name: str | None = None
    file_path: str | None = None
    version_type: str = DEFAULT_VERSION_TYPE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ActionInputs:
        """Build inputs from INPUT_<NAME> environment variables.

        Empty values are treated as absent, matching how the Actions
        runner passes unset optional inputs.

        Raises:
            InputError: If a required input is missing, an ID is not a number,
                or the version type is not supported.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            value = env.get(f"INPUT_{name.upper()}", "").strip()
            return value or None

        values = {
            "action": get("action"),
            "roblosecurity": get("roblosecurity"),
            "api_key": get("api_key"),
            "experience_id": _parse_id("experience_id", get("experience_id")),
            "place_id": _parse_id("place_id", get("place_id")),
            "place_name": get("place_name"),
            "file_path": get("file_path"),
            "version_type": get("version_type") or DEFAULT_VERSION_TYPE,
        }
        for required in ("action", "roblosecurity", "experience_id"):
            if values[required] is None:
                raise InputError(f"Input required and not supplied: {required}")
        if values["version_type"] not in VERSION_TYPES:
            raise InputError(
                f"Input version_type must be one of {', '.join(VERSION_TYPES)}, "
                f"got {values['version_type']!r}"
            )

        return cls.model_validate(values)


def _parse_id(name: str, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise InputError(f"Input {name} must be a number, got {value!r}") from e


class ActionOutputs:
    """Collects action outputs.

    Every output is kept in memory and, when GITHUB_OUTPUT is set, appended
    to that file as a key=value line.
    """

    def __init__(self, output_file: str | Path | None = None) -> None:
        if output_file is None:
            output_file = os.environ.get(GITHUB_OUTPUT_ENV) or None
        self.output_file = Path(output_file) if output_file else None
        self.values: dict[str, str] = {}

    def set_output(self, name: str, value: Any) -> None:
        """Record an output value."""
        text = str(value)
        self.values[name] = text

        if self.output_file is None:
            return

        if "\n" in text:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            line = f"{name}<<{delimiter}\n{text}\n{delimiter}\n"
        else:
            line = f"{name}={text}\n"
        with self.output_file.open("a", encoding="utf-8") as f:
            f.write(line)


ClientFactory = Callable[[ActionInputs], RobloxPlaces]


def _default_client(inputs: ActionInputs) -> RobloxPlaces:
    return RobloxPlaces(roblosecurity=inputs.roblosecurity, api_key=inputs.api_key)


def _require(inputs: ActionInputs, name: str) -> Any:
    value = getattr(inputs, name)
    if value is None:
        raise InputError(f"Input required and not supplied: {name}")
    return value


async def run_action(
    inputs: ActionInputs,
    outputs: ActionOutputs,
    client_factory: ClientFactory = _default_client,
) -> str:
    """Run one action and record its outputs.

    Args:
        inputs: Action inputs.
        outputs: Output sink.
        client_factory: Builds the API client from the inputs.

    Returns:
        A human-readable status line.

    Raises:
        UnknownActionError: If the action is not supported.
        RobloxPlacesError: If the API call fails.
    """
    action = inputs.action
    if action not in ACTIONS:
        raise UnknownActionError(action, ACTIONS)

    async with client_factory(inputs) as client:
        if action == "create":
            place_id = await client.create_place(inputs.experience_id, name=inputs.place_name)
            outputs.set_output("place_id", place_id)
            status = f"Created place: {place_id}"

        elif action == "delete":
            place_id = _require(inputs, "place_id")
            await client.delete_place(inputs.experience_id, place_id)
            status = f"Deleted place: {place_id}"

        elif action == "list":
            places = await client.list_places(inputs.experience_id)
            outputs.set_output("places", json.dumps([p.to_record() for p in places]))
            status = f"Found {len(places)} place(s)"

        else:
            place_id = _require(inputs, "place_id")
            file_path = _require(inputs, "file_path")
            version = await client.publish_place(
                inputs.experience_id,
                place_id,
                file_path,
                version_type=inputs.version_type,
            )
            outputs.set_output("success", "true")
            if version.version_number is not None:
                outputs.set_output("version_number", version.version_number)
                status = f"Published place {place_id} (version {version.version_number})"
            else:
                status = f"Published place {place_id}"

    logger.info(status)
    return status
