"""Public exceptions for the Mambu SDK."""

# Error codes for failures detected on the client side. HTTP failures carry
# the HTTP status code instead.
INVALID_INPUT = -1
CONNECTION_FAILURE = -2
INVALID_URL = -3
PARSING_FAILURE = -4


class MambuError(Exception):
    """Base exception for all Mambu SDK errors."""


class MambuApiException(MambuError):
    """Error raised by any API call.

    Callers are expected to branch on ``error_code`` rather than on subclasses.
    The original cause, if any, is available as ``__cause__``.
    """

    def __init__(
        self,
        error_code: int,
        message: str,
        *,
        error_message: str | None = None,
        return_code: int | None = None,
        error_source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.error_message = error_message or message
        self.return_code = return_code
        self.error_source = error_source

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class MambuConfigError(MambuError):
    """Configuration error (missing env vars, invalid config)."""
