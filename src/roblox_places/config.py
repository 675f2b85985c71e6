"""Roblox API configuration constants."""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("roblox-places")
except PackageNotFoundError:
    __version__ = "0.0.0"

APIS_BASE_URL = os.environ.get("ROBLOX_APIS_URL", "https://apis.roblox.com")
DEVELOP_BASE_URL = os.environ.get("ROBLOX_DEVELOP_URL", "https://develop.roblox.com")

USER_AGENT = f"roblox-places/{__version__}"

# Baseplate template used by the place creation endpoint
TEMPLATE_PLACE_ID = 95206881

ROBLOSECURITY_COOKIE = ".ROBLOSECURITY"
CSRF_HEADER = "X-CSRF-TOKEN"
API_KEY_HEADER = "x-api-key"

ROBLOSECURITY_ENV = "ROBLOSECURITY"
API_KEY_ENV = "ROBLOX_API_KEY"

# GitHub Actions output file
GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"
