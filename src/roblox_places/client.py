"""Async HTTP client for the Roblox place APIs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from .auth import Credentials, get_credentials
from .config import (
    API_KEY_HEADER,
    APIS_BASE_URL,
    CSRF_HEADER,
    DEVELOP_BASE_URL,
    TEMPLATE_PLACE_ID,
    USER_AGENT,
)
from .exceptions import (
    ConnectionError,
    InputError,
    TimeoutError,
    UpstreamApiError,
)
from .models import (
    DEFAULT_VERSION_TYPE,
    VERSION_TYPES,
    CloudPlace,
    CreatePlaceResponse,
    Place,
    PlacePage,
    PlaceVersion,
)

logger = logging.getLogger(__name__)


class RobloxPlaces:
    """Async client for Roblox places and experiences.

    Cookie-authenticated calls (create, delete, get, list) only need the
    .ROBLOSECURITY cookie. Update and publish go through Open Cloud and also
    need an API key.

    The CSRF token is learned from the first rejected request and kept for
    the lifetime of the instance.

    Example:
        ```python
        import asyncio
        from roblox_places import RobloxPlaces

        async def main():
            async with RobloxPlaces(roblosecurity="...", api_key="...") as client:
                place_id = await client.create_place(12345, name="Staging")
                places = await client.list_places(12345)
                await client.publish_place(12345, place_id, "game.rbxl")

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        roblosecurity: str | None = None,
        api_key: str | None = None,
        apis_base_url: str = APIS_BASE_URL,
        develop_base_url: str = DEVELOP_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            roblosecurity: .ROBLOSECURITY cookie. Falls back to the
                ROBLOSECURITY environment variable.
            api_key: Open Cloud API key. Falls back to ROBLOX_API_KEY.
            apis_base_url: Base URL of apis.roblox.com.
            develop_base_url: Base URL of develop.roblox.com.
            timeout: Request timeout in seconds. None keeps the httpx default.
        """
        self._credentials: Credentials = get_credentials(roblosecurity, api_key)
        self._apis_base_url = apis_base_url.rstrip("/")
        self._develop_base_url = develop_base_url.rstrip("/")
        self._timeout = timeout
        self._csrf_token: str | None = None
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> RobloxPlaces:
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the HTTP client is initialized."""
        if self._client is None:
            kwargs: dict[str, Any] = {"headers": {"User-Agent": USER_AGENT}}
            if self._timeout is not None:
                kwargs["timeout"] = httpx.Timeout(self._timeout)
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def csrf_token(self) -> str | None:
        """CSRF token learned from the API, if any."""
        return self._csrf_token

    @property
    def has_api_key(self) -> bool:
        """Whether update and publish are available."""
        return self._credentials.has_api_key

    def _get_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Get request headers including the cookie and CSRF token."""
        headers = {
            "Cookie": self._credentials.cookie_header(),
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        if self._csrf_token:
            headers[CSRF_HEADER] = self._csrf_token
        return headers

    async def request(
        self,
        method: str,
        url: str,
        json_data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request.

        A 403 carrying an x-csrf-token header, received while no token is
        cached, stores the token and reissues the request once. The reissue
        carries the token, so a second 403 is returned as an error.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            json_data: JSON body data.
            params: Query parameters.
            content: Raw request body.
            headers: Extra headers, overriding the defaults.

        Returns:
            Parsed JSON body, or an empty dict for non-JSON responses.

        Raises:
            UpstreamApiError: On a non-success status.
            ConnectionError: On connection errors.
            TimeoutError: On timeout.
        """
        client = await self._ensure_client()

        logger.debug("%s %s", method, url)
        try:
            response = await client.request(
                method,
                url,
                headers=self._get_headers(headers),
                json=json_data,
                params=params,
                content=content,
            )
        except httpx.ConnectError as e:
            raise ConnectionError(f"Cannot connect to Roblox API: {e}", e) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request to {url} timed out", e) from e

        if response.status_code == 403:
            new_token = response.headers.get("x-csrf-token")
            if new_token and not self._csrf_token:
                logger.debug("Received CSRF token, retrying %s %s", method, url)
                self._csrf_token = new_token
                return await self.request(
                    method,
                    url,
                    json_data=json_data,
                    params=params,
                    content=content,
                    headers=headers,
                )

        if not response.is_success:
            raise UpstreamApiError(response.status_code, response.text)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return {}

    # ==================== PLACES ====================

    async def create_place(self, experience_id: int, name: str | None = None) -> int:
        """Create a new place in an experience from the baseplate template.

        When a name is given the place is renamed through Open Cloud right
        after creation. The created place is kept if the rename fails.
        Without an API key a named create fails before anything is created.

        Args:
            experience_id: Universe ID.
            name: Optional display name.

        Returns:
            The new place ID.

        Raises:
            ConfigurationError: If a name is given without an API key.
            UpstreamApiError: If either call fails.
        """
        if name:
            self._credentials.require_api_key("rename a place")

        data = await self.request(
            "POST",
            f"{self._apis_base_url}/universes/v1/user/universes/{experience_id}/places",
            json_data={"templatePlaceId": TEMPLATE_PLACE_ID},
        )
        place_id = CreatePlaceResponse.model_validate(data).place_id
        logger.info("Created place %s in experience %s", place_id, experience_id)

        if name:
            await self.update_place(experience_id, place_id, {"displayName": name})

        return place_id

    async def update_place(
        self,
        experience_id: int,
        place_id: int,
        fields: dict[str, Any],
    ) -> CloudPlace:
        """Update place fields through Open Cloud.

        Only the given fields are sent, and the update mask lists exactly
        their names.

        Args:
            experience_id: Universe ID.
            place_id: Place ID.
            fields: Mapping of Open Cloud field names (e.g. displayName) to values.

        Returns:
            The updated place resource.

        Raises:
            ConfigurationError: If no API key is configured.
            ValueError: If no fields are given.
        """
        api_key = self._credentials.require_api_key("update a place")
        if not fields:
            raise ValueError("No fields to update")

        data = await self.request(
            "PATCH",
            f"{self._apis_base_url}/cloud/v2/universes/{experience_id}/places/{place_id}",
            json_data=dict(fields),
            params={"updateMask": ",".join(fields)},
            headers={API_KEY_HEADER: api_key},
        )
        return CloudPlace.model_validate(data)

    async def delete_place(self, experience_id: int, place_id: int) -> None:
        """Remove a place from an experience."""
        await self.request(
            "POST",
            f"{self._apis_base_url}/universes/v1/universes/{experience_id}"
            f"/places/{place_id}/remove-place",
        )
        logger.info("Deleted place %s from experience %s", place_id, experience_id)

    async def get_place(self, place_id: int) -> Place:
        """Get the details of a single place."""
        data = await self.request("GET", f"{self._develop_base_url}/v2/places/{place_id}")
        return Place.model_validate(data)

    async def list_places(self, experience_id: int) -> list[Place]:
        """List every place in an experience.

        Walks all pages of the listing and fetches the details of each place.
        Places are returned in the order the API lists them.

        Args:
            experience_id: Universe ID.

        Returns:
            All places in the experience.
        """
        places: list[Place] = []
        cursor: str | None = None

        while True:
            params = {"cursor": cursor} if cursor else None
            data = await self.request(
                "GET",
                f"{self._develop_base_url}/v1/universes/{experience_id}/places",
                params=params,
            )
            page = PlacePage.model_validate(data)

            for item in page.data:
                places.append(await self.get_place(item.id))

            cursor = page.next_page_cursor
            if not cursor:
                break

        return places

    async def publish_place(
        self,
        experience_id: int,
        place_id: int,
        file_path: str | Path,
        version_type: str = DEFAULT_VERSION_TYPE,
    ) -> PlaceVersion:
        """Upload a place file as a new version.

        Args:
            experience_id: Universe ID.
            place_id: Place ID.
            file_path: Path to a .rbxl or .rbxlx file.
            version_type: "Saved" or "Published".

        Returns:
            The upstream version payload.

        Raises:
            ConfigurationError: If no API key is configured.
            InputError: If the file does not exist or cannot be read.
            ValueError: If the version type is not supported.
        """
        api_key = self._credentials.require_api_key("publish a place")

        if version_type not in VERSION_TYPES:
            raise ValueError(
                f"Invalid version type: {version_type}. Use one of {', '.join(VERSION_TYPES)}."
            )

        path = Path(file_path)
        if not path.is_file():
            raise InputError(f"Place file not found: {path}")
        try:
            body = path.read_bytes()
        except OSError as e:
            raise InputError(f"Cannot read place file {path}: {e}") from e

        content_type = "application/xml" if path.suffix == ".rbxlx" else "application/octet-stream"

        data = await self.request(
            "POST",
            f"{self._apis_base_url}/universes/v1/{experience_id}/places/{place_id}/versions",
            params={"versionType": version_type},
            content=body,
            headers={API_KEY_HEADER: api_key, "Content-Type": content_type},
        )
        version = PlaceVersion.model_validate(data)
        logger.info(
            "Uploaded %s as %s version %s of place %s",
            path.name,
            version_type,
            version.version_number,
            place_id,
        )
        return version
