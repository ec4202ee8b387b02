"""Shared HTTP client configuration."""

import httpx

from mambu_sdk._version import __version__
from mambu_sdk.config import MambuConfig

API_KEY_HEADER = "apiKey"


def create_http_client(config: MambuConfig) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        config: Tenant configuration supplying timeout and credentials.

    Returns:
        Configured httpx.Client instance.
    """
    headers = {"User-Agent": f"mambu-sdk/{__version__}"}
    auth: httpx.BasicAuth | None = None
    if config.api_key:
        headers[API_KEY_HEADER] = config.api_key
    else:
        auth = httpx.BasicAuth(config.username or "", config.password or "")

    return httpx.Client(timeout=config.timeout, headers=headers, auth=auth)
