"""Pydantic models for Roblox API responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

VersionType = Literal["Saved", "Published"]

VERSION_TYPES: tuple[str, ...] = ("Saved", "Published")
DEFAULT_VERSION_TYPE: VersionType = "Published"


class Place(BaseModel):
    """Place record returned by the place details endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Place ID")
    name: str = Field(..., description="Place name")
    description: str | None = Field(None, description="Place description")
    max_player_count: int | None = Field(
        None, alias="maxPlayerCount", description="Server size"
    )
    allow_copying: bool = Field(
        default=False, alias="allowCopying", description="Whether the place is copyable"
    )
    is_root_place: bool = Field(
        default=False, alias="isRootPlace", description="Whether this is the start place"
    )
    current_saved_version: int | None = Field(
        None, alias="currentSavedVersion", description="Latest saved version number"
    )

    def to_record(self) -> dict[str, object]:
        """Serialise with the upstream camelCase keys."""
        return self.model_dump(by_alias=True)


class PlaceSummary(BaseModel):
    """Place entry on a listing page."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str = ""


class PlacePage(BaseModel):
    """One page of the universe places listing."""

    model_config = ConfigDict(populate_by_name=True)

    data: list[PlaceSummary] = Field(default_factory=list)
    next_page_cursor: str | None = Field(None, alias="nextPageCursor")
    previous_page_cursor: str | None = Field(None, alias="previousPageCursor")


class CreatePlaceResponse(BaseModel):
    """Response from the place creation endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    place_id: int = Field(..., alias="placeId")


class CloudPlace(BaseModel):
    """Open Cloud v2 place resource returned by an update."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    path: str | None = None
    display_name: str | None = Field(None, alias="displayName")
    description: str | None = None
    server_size: int | None = Field(None, alias="serverSize")
    create_time: str | None = Field(None, alias="createTime")
    update_time: str | None = Field(None, alias="updateTime")


class PlaceVersion(BaseModel):
    """Response from the place publishing endpoint.

    Unknown fields are kept so the upstream payload is returned as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    version_number: int | None = Field(None, alias="versionNumber")
