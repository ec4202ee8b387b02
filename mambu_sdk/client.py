"""User-facing client for the Mambu API.

Example usage:
    from mambu_sdk import MambuClient, MambuConfig

    config = MambuConfig(domain="demo.mambu.com", api_key="your-api-key")
    with MambuClient(config) as client:
        currency = client.organization.get_currency()
        branches = client.organization.get_branches(offset=0, limit=30)
"""

from types import TracebackType

import httpx

from mambu_sdk._internal.executor.request import RequestExecutor
from mambu_sdk._internal.executor.service import ServiceExecutor
from mambu_sdk._internal.executor.urls import URLHelper
from mambu_sdk.config import MambuConfig
from mambu_sdk.services.organization import OrganizationService


class MambuClient:
    """Entry point holding the connection to one Mambu tenant.

    Services share one transport. Close the client, or use it as a context
    manager, to release the underlying HTTP connections.
    """

    def __init__(self, config: MambuConfig, *, http_client: httpx.Client | None = None) -> None:
        """Initialize the client.

        Args:
            config: Domain, credentials and timeout for the tenant.
            http_client: Optional preconfigured httpx.Client. When given, the
                caller is responsible for its auth headers and for closing it.
        """
        self._config = config
        self._request_executor = RequestExecutor(config, http_client=http_client)
        self._executor = ServiceExecutor(self._request_executor, URLHelper(config.domain))
        self._organization: OrganizationService | None = None

    @classmethod
    def from_env(cls) -> "MambuClient":
        """Create a client configured from MAMBU_* environment variables.

        See ``MambuConfig.from_env()`` for the variables read.
        """
        return cls(MambuConfig.from_env())

    @property
    def config(self) -> MambuConfig:
        return self._config

    @property
    def executor(self) -> ServiceExecutor:
        """The dispatch engine, for operations not covered by a service."""
        return self._executor

    @property
    def organization(self) -> OrganizationService:
        if self._organization is None:
            self._organization = OrganizationService(self._executor)
        return self._organization

    def close(self) -> None:
        self._request_executor.close()

    def __enter__(self) -> "MambuClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
