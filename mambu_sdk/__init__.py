"""Mambu SDK for Python.

This SDK lets application code call the Mambu REST API without building
HTTP requests by hand.

Public API:
    MambuClient - User-facing client exposing per-resource services
    MambuConfig - Domain, credentials and transport settings

Internal (not for direct use):
    _internal.executor - Declarative API dispatch engine
"""

from mambu_sdk._version import __version__
from mambu_sdk.client import MambuClient
from mambu_sdk.config import MambuConfig
from mambu_sdk.exceptions import MambuApiException, MambuConfigError, MambuError

__all__ = [
    "__version__",
    "MambuClient",
    "MambuConfig",
    "MambuApiException",
    "MambuConfigError",
    "MambuError",
]
