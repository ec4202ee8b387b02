"""Connection configuration for the Mambu SDK."""

import os

from pydantic import BaseModel, field_validator, model_validator

from mambu_sdk.exceptions import MambuConfigError

DEFAULT_TIMEOUT = 30.0


class MambuConfig(BaseModel):
    """Domain, credentials and transport settings for a Mambu tenant.

    Exactly one authentication scheme is used: ``api_key`` (sent as the
    ``apiKey`` header) when set, otherwise HTTP Basic with ``username`` and
    ``password``.
    """

    model_config = {"frozen": True}

    domain: str
    username: str | None = None
    password: str | None = None
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("domain")
    @classmethod
    def domain_is_host(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("domain must not be empty")
        if "://" in v or "/" in v:
            raise ValueError("domain must be a host name without scheme or path")
        return v

    @model_validator(mode="after")
    def credentials_present(self) -> "MambuConfig":
        if not self.api_key and not (self.username and self.password):
            raise ValueError("either api_key or username and password must be set")
        return self

    @classmethod
    def from_env(cls) -> "MambuConfig":
        """Create a config from environment variables.

        Required environment variables:
            MAMBU_DOMAIN: The tenant domain, e.g. ``demo.mambu.com``.
            MAMBU_API_KEY, or MAMBU_USERNAME and MAMBU_PASSWORD.

        Optional environment variables:
            MAMBU_TIMEOUT: Request timeout in seconds.

        Returns:
            A validated MambuConfig.

        Raises:
            MambuConfigError: If the domain or credentials are missing or invalid.
            ValueError: If MAMBU_TIMEOUT is not a number.
        """
        domain = os.environ.get("MAMBU_DOMAIN")
        if not domain:
            raise MambuConfigError("MAMBU_DOMAIN is not set")

        timeout = float(os.environ.get("MAMBU_TIMEOUT", str(DEFAULT_TIMEOUT)))

        try:
            return cls(
                domain=domain,
                username=os.environ.get("MAMBU_USERNAME"),
                password=os.environ.get("MAMBU_PASSWORD"),
                api_key=os.environ.get("MAMBU_API_KEY"),
                timeout=timeout,
            )
        except ValueError as e:
            raise MambuConfigError(str(e)) from e
