"""Shared fixtures and configuration for tests."""

from __future__ import annotations

from typing import Any

import pytest
import respx
from httpx import Response

from roblox_places.models import Place

APIS_URL = "https://apis.roblox.com"
DEVELOP_URL = "https://develop.roblox.com"

EXPERIENCE_ID = 1234567
PLACE_ID = 7654321

# ==================== MOCK DATA ====================


def make_place_dict(
    place_id: int = PLACE_ID,
    name: str = "Test Place",
    description: str = "A place for tests",
    max_player_count: int = 50,
    allow_copying: bool = False,
    is_root_place: bool = False,
    current_saved_version: int = 3,
) -> dict[str, Any]:
    """Create a mock place details dictionary."""
    return {
        "id": place_id,
        "universeId": EXPERIENCE_ID,
        "name": name,
        "description": description,
        "maxPlayerCount": max_player_count,
        "allowCopying": allow_copying,
        "socialSlotType": "Automatic",
        "customSocialSlotsCount": None,
        "isRootPlace": is_root_place,
        "currentSavedVersion": current_saved_version,
    }


def make_page_dict(
    place_ids: list[int],
    next_cursor: str | None = None,
    previous_cursor: str | None = None,
) -> dict[str, Any]:
    """Create a mock universe places listing page."""
    return {
        "previousPageCursor": previous_cursor,
        "nextPageCursor": next_cursor,
        "data": [
            {"id": pid, "universeId": EXPERIENCE_ID, "name": f"Place {pid}"} for pid in place_ids
        ],
    }


def csrf_challenge(token: str = "csrf-token-1") -> Response:
    """Create the 403 response the API sends to request a CSRF token."""
    return Response(
        403,
        json={"errors": [{"code": 0, "message": "Token Validation Failed"}]},
        headers={"x-csrf-token": token},
    )


# ==================== FIXTURES ====================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep credentials from the host environment out of tests."""
    for name in ("ROBLOSECURITY", "ROBLOX_API_KEY", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def roblosecurity() -> str:
    """Mock .ROBLOSECURITY cookie."""
    return "_|WARNING:-DO-NOT-SHARE-THIS.--test-cookie"


@pytest.fixture
def api_key() -> str:
    """Mock Open Cloud API key."""
    return "ock_test_12345678901234567890"


@pytest.fixture
def mock_place_data() -> dict[str, Any]:
    """Fixture for a mock place dictionary."""
    return make_place_dict()


@pytest.fixture
def mock_place(mock_place_data: dict[str, Any]) -> Place:
    """Fixture for a mock Place object."""
    return Place.model_validate(mock_place_data)


@pytest.fixture
def place_file(tmp_path):
    """Create a small binary place file."""
    path = tmp_path / "game.rbxl"
    path.write_bytes(b"<roblox!\x89\xff\r\n\x1a\n\x00\x00test")
    return path


@pytest.fixture
def respx_mock():
    """Fixture for respx mocking."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


# ==================== API MOCK HELPERS ====================


def mock_place_create(respx_mock, place_id: int = PLACE_ID, experience_id: int = EXPERIENCE_ID):
    """Mock the create place endpoint."""
    return respx_mock.post(
        f"{APIS_URL}/universes/v1/user/universes/{experience_id}/places"
    ).mock(return_value=Response(200, json={"placeId": place_id}))


def mock_place_get(respx_mock, place_data: dict[str, Any] | None = None):
    """Mock the place details endpoint."""
    place_data = place_data or make_place_dict()
    return respx_mock.get(f"{DEVELOP_URL}/v2/places/{place_data['id']}").mock(
        return_value=Response(200, json=place_data)
    )


def mock_place_update(
    respx_mock,
    place_id: int = PLACE_ID,
    experience_id: int = EXPERIENCE_ID,
    response: Response | None = None,
):
    """Mock the Open Cloud place update endpoint."""
    if response is None:
        response = Response(
            200,
            json={
                "path": f"universes/{experience_id}/places/{place_id}",
                "displayName": "Renamed",
                "serverSize": 50,
            },
        )
    return respx_mock.patch(
        host="apis.roblox.com",
        path=f"/cloud/v2/universes/{experience_id}/places/{place_id}",
    ).mock(return_value=response)


def mock_places_list(
    respx_mock,
    pages: dict[str | None, dict[str, Any]],
    experience_id: int = EXPERIENCE_ID,
):
    """Mock the listing endpoint, serving each page by its cursor."""

    def serve(request):
        return Response(200, json=pages[request.url.params.get("cursor")])

    return respx_mock.get(
        host="develop.roblox.com",
        path=f"/v1/universes/{experience_id}/places",
    ).mock(side_effect=serve)


def mock_place_publish(
    respx_mock,
    place_id: int = PLACE_ID,
    experience_id: int = EXPERIENCE_ID,
    version_number: int = 4,
):
    """Mock the place versions endpoint."""
    return respx_mock.post(
        host="apis.roblox.com",
        path=f"/universes/v1/{experience_id}/places/{place_id}/versions",
    ).mock(return_value=Response(200, json={"versionNumber": version_number}))
