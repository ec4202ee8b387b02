"""URL construction for Mambu API endpoints."""

import logging
from urllib.parse import quote

import httpx

from mambu_sdk._internal.executor import api_data
from mambu_sdk._internal.executor.params import ParamsMap
from mambu_sdk._internal.executor.request import ContentType, Method

logger = logging.getLogger(__name__)

WEB_PROTOCOL = "https"
API_ENDPOINT = "/api/"
DELIMITER = "?"
PATH_SAFE = "/:@!$&'()*+,;="


class URLHelper:
    """Builds ``https://{domain}/api/{path}`` URLs for one tenant domain."""

    def __init__(self, domain: str) -> None:
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def create_url(self, details: str | None) -> str:
        """Create a percent-encoded URL for the given path details.

        Spaces, non-ASCII characters and "%", "?", "#" in the path are
        percent-encoded.

        Returns:
            The URL, or an empty string if no valid URL can be built from the
            domain and details. The failure is logged.
        """
        details = details or ""
        path = API_ENDPOINT + quote(details, safe=PATH_SAFE)
        try:
            base = httpx.URL(f"{WEB_PROTOCOL}://{self._domain}")
            url = base.copy_with(path=path)
        except httpx.InvalidURL as e:
            logger.error(
                "Failed to create URL for domain=%r with details=%r: %s", self._domain, details, e
            )
            return ""
        return str(url)

    def create_url_with_params(self, url: str, params: ParamsMap | None) -> str:
        """Append the encoded params to a URL. Returns the URL unchanged for ``None``."""
        if params is None:
            return url
        return url + DELIMITER + params.get_url_string()

    def add_json_pagination_params(
        self,
        url: str,
        method: Method,
        content_type: ContentType,
        params: ParamsMap | None,
    ) -> str:
        """Move ``offset`` and ``limit`` into the query string for JSON POST calls.

        JSON search endpoints take the filter document in the body but still
        expect pagination in the URL, e.g. ``POST /api/loans/search?offset=0&limit=5``.
        For any other method or content type the URL is returned unchanged.

        The two keys are removed from ``params`` so they are not duplicated into
        the body. All other entries are left alone.
        """
        if params is None or not (method == Method.POST and content_type == ContentType.JSON):
            return url

        if params.get(api_data.OFFSET) is None and params.get(api_data.LIMIT) is None:
            return url

        pagination = ParamsMap()
        pagination.put(api_data.OFFSET, params.get(api_data.OFFSET))
        pagination.put(api_data.LIMIT, params.get(api_data.LIMIT))

        url_with_params = self.create_url_with_params(url, pagination)

        params.remove(api_data.OFFSET)
        params.remove(api_data.LIMIT)

        return url_with_params
