"""Manage Roblox places and experiences from CI pipelines.

Basic Usage:
    ```python
    from roblox_places import RobloxPlaces

    async with RobloxPlaces(roblosecurity="...", api_key="...") as client:
        place_id = await client.create_place(12345, name="Staging")
        version = await client.publish_place(12345, place_id, "game.rbxl")
        print(version.version_number)
    ```
"""

from .action import ACTIONS, ActionInputs, ActionOutputs, run_action
from .auth import Credentials, get_credentials
from .client import RobloxPlaces
from .config import __version__
from .exceptions import (
    ConfigurationError,
    ConnectionError,
    InputError,
    RobloxPlacesError,
    TimeoutError,
    UnknownActionError,
    UpstreamApiError,
)
from .models import (
    CloudPlace,
    CreatePlaceResponse,
    Place,
    PlacePage,
    PlaceSummary,
    PlaceVersion,
    VersionType,
)

__all__ = [
    # Version
    "__version__",
    # Client
    "RobloxPlaces",
    # Models
    "Place",
    "PlaceSummary",
    "PlacePage",
    "CreatePlaceResponse",
    "CloudPlace",
    "PlaceVersion",
    "VersionType",
    # Auth
    "Credentials",
    "get_credentials",
    # Action
    "ACTIONS",
    "ActionInputs",
    "ActionOutputs",
    "run_action",
    # Exceptions
    "RobloxPlacesError",
    "UpstreamApiError",
    "ConfigurationError",
    "InputError",
    "UnknownActionError",
    "ConnectionError",
    "TimeoutError",
]
