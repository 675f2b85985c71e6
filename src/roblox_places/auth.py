"""Credential handling for roblox-places."""

from __future__ import annotations

import os
from typing import cast

from pydantic import BaseModel, Field, SecretStr

from .config import API_KEY_ENV, ROBLOSECURITY_COOKIE, ROBLOSECURITY_ENV
from .exceptions import ConfigurationError


class Credentials(BaseModel):
    """Secrets used to authenticate against the Roblox API."""

    roblosecurity: SecretStr = Field(..., description=".ROBLOSECURITY session cookie")
    api_key: SecretStr | None = Field(None, description="Open Cloud API key")

    @property
    def has_api_key(self) -> bool:
        """Whether the Open Cloud surface (update/publish) is available."""
        return self.api_key is not None and bool(self.api_key.get_secret_value())

    def cookie_header(self) -> str:
        """Render the session cookie header value."""
        return f"{ROBLOSECURITY_COOKIE}={self.roblosecurity.get_secret_value()}"

    def require_api_key(self, operation: str) -> str:
        """Return the API key, or raise if it was not configured.

        Args:
            operation: Name of the operation, used in the error message.

        Raises:
            ConfigurationError: If no API key is available.
        """
        if not self.has_api_key:
            raise ConfigurationError(
                f"An Open Cloud API key is required to {operation}. "
                f"Pass api_key or set {API_KEY_ENV}."
            )
        return cast(SecretStr, self.api_key).get_secret_value()


def get_credentials(
    roblosecurity: str | None = None,
    api_key: str | None = None,
) -> Credentials:
    """Resolve credentials from explicit values or the environment.

    Checks in order of priority:
    1. Explicitly provided parameters
    2. ROBLOSECURITY / ROBLOX_API_KEY environment variables

    Args:
        roblosecurity: Explicit .ROBLOSECURITY cookie value.
        api_key: Explicit Open Cloud API key.

    Returns:
        Resolved credentials.

    Raises:
        ConfigurationError: If no session cookie can be found.
    """
    cookie = roblosecurity or os.environ.get(ROBLOSECURITY_ENV)
    if not cookie:
        raise ConfigurationError(
            f"No .ROBLOSECURITY cookie found. Pass roblosecurity or set {ROBLOSECURITY_ENV}."
        )

    key = api_key or os.environ.get(API_KEY_ENV) or None

    return Credentials(
        roblosecurity=SecretStr(cookie),
        api_key=SecretStr(key) if key else None,
    )
