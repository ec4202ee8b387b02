"""HTTP transport for the dispatch engine.

The executor deals in text only: it sends a URL, method, content type and
optional body, and returns the raw response body or raises a classified
MambuApiException.
"""

import logging
from enum import StrEnum
from types import TracebackType

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from mambu_sdk._internal.http import create_http_client
from mambu_sdk.config import MambuConfig
from mambu_sdk.exceptions import CONNECTION_FAILURE, MambuApiException

logger = logging.getLogger(__name__)


class Method(StrEnum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ContentType(StrEnum):
    WWW_FORM = "application/x-www-form-urlencoded; charset=UTF-8"
    JSON = "application/json; charset=UTF-8"


class MambuErrorResponse(BaseModel):
    """Machine-readable error body returned by Mambu on failures.

    Example: ``{"returnCode": 101, "returnStatus": "INVALID_CLIENT_ID"}``
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    return_code: int | None = None
    return_status: str | None = None
    error_source: str | None = None


class RequestExecutor:
    """Synchronous request/response exchange with the Mambu API.

    Either pass a configured ``httpx.Client`` or let one be created from the
    config. A client created here is closed by ``close()``.
    """

    def __init__(self, config: MambuConfig, *, http_client: httpx.Client | None = None) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or create_http_client(config)

    @property
    def config(self) -> MambuConfig:
        return self._config

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def execute(
        self,
        url: str,
        method: Method,
        content_type: ContentType,
        body: str | None = None,
    ) -> str:
        """Send one request and return the response body as text.

        Args:
            url: Fully built, percent-encoded URL including any query string.
            method: HTTP method.
            content_type: Encoding of the body; selects the Content-Type header.
            body: Form-encoded or JSON text. Only sent for POST and PATCH.

        Returns:
            The response body, possibly empty.

        Raises:
            MambuApiException: ``CONNECTION_FAILURE`` when no response was
                obtained, or the HTTP status code for non-2xx responses.
        """
        headers = {"Content-Type": content_type.value, "Accept": "application/json"}
        content = body.encode("utf-8") if body is not None and method in (Method.POST, Method.PATCH) else None

        logger.debug("Sending %s %s", method.value, url)
        try:
            response = self._client.request(method.value, url, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise MambuApiException(CONNECTION_FAILURE, f"Request timed out: {method.value} {url}") from e
        except httpx.TransportError as e:
            raise MambuApiException(CONNECTION_FAILURE, f"Connection failed: {e}") from e

        if not response.is_success:
            raise self._http_error(response)

        return response.text

    def _http_error(self, response: httpx.Response) -> MambuApiException:
        """Build the exception for a non-2xx response."""
        status_code = response.status_code
        text = response.text
        logger.warning("Mambu API returned HTTP %s for %s", status_code, response.request.url)

        error: MambuErrorResponse | None = None
        if text:
            try:
                error = MambuErrorResponse.model_validate_json(text)
            except ValidationError:
                error = None

        message = text or response.reason_phrase or f"HTTP {status_code}"
        if error is None:
            return MambuApiException(status_code, message)

        return MambuApiException(
            status_code,
            message,
            error_message=error.return_status,
            return_code=error.return_code,
            error_source=error.error_source,
        )
