"""Exception classes for roblox-places."""

from __future__ import annotations


class RobloxPlacesError(Exception):
    """Base exception for all roblox-places errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UpstreamApiError(RobloxPlacesError):
    """Non-success response from the Roblox API.

    Raised after the single permitted CSRF retry has been used up.

    Attributes:
        status_code: HTTP status code of the final response.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Roblox API error ({status_code}): {body}")


class ConfigurationError(RobloxPlacesError):
    """Required credential is missing.

    This error is raised when:
    - No .ROBLOSECURITY cookie is provided
    - An update or publish is requested without an Open Cloud API key
    """


class InputError(RobloxPlacesError):
    """Invalid or missing input.

    This error is raised when:
    - The place file to publish does not exist
    - A required action input is missing or malformed
    """


class UnknownActionError(RobloxPlacesError):
    """The requested action is not supported.

    Attributes:
        action: The rejected action name.
        valid_actions: The actions that are supported.
    """

    def __init__(self, action: str, valid_actions: tuple[str, ...]) -> None:
        self.action = action
        self.valid_actions = valid_actions
        choices = ", ".join(f"'{a}'" for a in valid_actions)
        super().__init__(f"Unknown action: {action}. Use one of {choices}.")


class ConnectionError(RobloxPlacesError):
    """Failed to connect to the Roblox API."""

    def __init__(
        self,
        message: str = "Failed to connect to Roblox API",
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message)


class TimeoutError(RobloxPlacesError):
    """Request timed out at the transport level."""

    def __init__(
        self,
        message: str = "Request timed out",
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message)
