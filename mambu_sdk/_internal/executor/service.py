"""Orchestration of API calls described by ApiDefinition instances."""

import logging
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from mambu_sdk._internal.executor import api_data
from mambu_sdk._internal.executor.definitions import ApiDefinition, ApiReturnFormat
from mambu_sdk._internal.executor.params import ParamsMap
from mambu_sdk._internal.executor.request import ContentType, Method, RequestExecutor
from mambu_sdk._internal.executor.serialization import to_json
from mambu_sdk._internal.executor.urls import URLHelper
from mambu_sdk.exceptions import INVALID_INPUT, INVALID_URL, PARSING_FAILURE, MambuApiException

logger = logging.getLogger(__name__)


class RequestContext(BaseModel):
    """Everything needed to send one request. Built fresh for every call."""

    model_config = {"frozen": True}

    url: str
    method: Method
    content_type: ContentType
    body: str | None = None


@lru_cache(maxsize=256)
def _type_adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


class ServiceExecutor:
    """Runs API operations described by ApiDefinition instances.

    Builds the URL and body for a definition, sends it through the
    RequestExecutor and parses the response into the definition's return type:

    - OBJECT: one instance of the return type, ``None`` for an empty body
    - COLLECTION: a list of the return type, ``[]`` for an empty body
    - RESPONSE_STRING: the raw response text
    - BOOLEAN: ``True`` for any successful response

    Every failure is raised as MambuApiException.
    """

    def __init__(self, request_executor: RequestExecutor, url_helper: URLHelper | None = None) -> None:
        self._request_executor = request_executor
        self._url_helper = url_helper or URLHelper(request_executor.config.domain)

    def execute(
        self,
        definition: ApiDefinition,
        object_id: str | None = None,
        params: ParamsMap | None = None,
        *,
        related_id: str | None = None,
    ) -> Any:
        """Run a form/query operation.

        Args:
            definition: The operation to run.
            object_id: Entity ID or encoded key appended to the path, required
                by single-entity definitions.
            params: Query parameters for GET/DELETE, or form body for POST/PATCH.
                The caller's map is not modified.
            related_id: ID of the owned entity for DELETE_OWNED_ENTITY.

        Returns:
            The parsed result, shaped by ``definition.return_format``.

        Raises:
            MambuApiException: On invalid input, URL, transport, HTTP or
                parsing failure.
        """
        context = self.build_request(definition, object_id, params, related_id=related_id)
        return self._dispatch(definition, context)

    def execute_json(
        self,
        definition: ApiDefinition,
        body: Any,
        object_id: str | None = None,
        params: ParamsMap | None = None,
        *,
        related_id: str | None = None,
    ) -> Any:
        """Run an operation whose request body is a JSON document.

        ``body`` is serialized with the definition's ``json_date_format`` when
        set. Pagination entries in ``params`` go to the query string for POST.

        Raises:
            MambuApiException: ``INVALID_INPUT`` if ``body`` is ``None``, plus
                every failure ``execute()`` raises.
        """
        if body is None:
            raise MambuApiException(INVALID_INPUT, "JSON request body must not be None")

        json_body = to_json(body, definition.json_date_format)
        context = self.build_request(
            definition.with_overrides(content_type=ContentType.JSON),
            object_id,
            params,
            related_id=related_id,
            json_body=json_body,
        )
        return self._dispatch(definition, context)

    def build_request(
        self,
        definition: ApiDefinition,
        object_id: str | None = None,
        params: ParamsMap | None = None,
        *,
        related_id: str | None = None,
        json_body: str | None = None,
    ) -> RequestContext:
        """Compose the URL and body for a definition without sending anything."""
        path = self._make_url_path(definition, object_id, related_id)
        url = self._url_helper.create_url(path)
        if not url:
            raise MambuApiException(
                INVALID_URL,
                f"Cannot build a valid URL for domain {self._url_helper.domain!r} and path {path!r}",
            )

        params = ParamsMap({k: v for k, v in (params or {}).items() if v is not None})
        if definition.full_details:
            params.put(api_data.FULL_DETAILS, "true")

        method = definition.method
        content_type = definition.content_type
        body: str | None = None

        if method in (Method.GET, Method.DELETE):
            if json_body is not None:
                raise MambuApiException(
                    INVALID_INPUT, f"{method.value} {path} does not accept a request body"
                )
            if params:
                url = self._url_helper.create_url_with_params(url, params)
        elif content_type == ContentType.JSON:
            if json_body is None:
                raise MambuApiException(
                    INVALID_INPUT, f"{method.value} {path} requires a JSON request body"
                )
            url = self._url_helper.add_json_pagination_params(url, method, content_type, params)
            body = json_body
        elif params:
            body = params.get_url_string()

        return RequestContext(url=url, method=method, content_type=content_type, body=body)

    def _make_url_path(
        self,
        definition: ApiDefinition,
        object_id: str | None,
        related_id: str | None,
    ) -> str:
        """Build ``{path}[/{id}][/{owned}][/{relatedId}][/{suffix}]``."""
        if definition.requires_object_id and not object_id:
            raise MambuApiException(INVALID_INPUT, f"Entity ID must not be empty for {definition.url_path}")
        if definition.requires_related_id and not related_id:
            raise MambuApiException(
                INVALID_INPUT, f"Related entity ID must not be empty for {definition.url_path}"
            )

        parts = [definition.url_path]
        if object_id:
            parts.append(object_id)
        if definition.owned_path:
            parts.append(definition.owned_path)
        if related_id:
            parts.append(related_id)
        if definition.path_suffix:
            parts.append(definition.path_suffix)
        return "/".join(parts)

    def _dispatch(self, definition: ApiDefinition, context: RequestContext) -> Any:
        text = self._request_executor.execute(
            context.url, context.method, context.content_type, context.body
        )
        return self._parse_response(definition, text)

    def _parse_response(self, definition: ApiDefinition, text: str) -> Any:
        return_format = definition.return_format

        if return_format is ApiReturnFormat.RESPONSE_STRING:
            return text
        if return_format is ApiReturnFormat.BOOLEAN:
            return True

        stripped = text.strip() if text else ""
        return_type = definition.return_type or Any

        if return_format is ApiReturnFormat.COLLECTION:
            if not stripped or stripped == "null":
                return []
            return self._parse_into(list[return_type], stripped)

        if not stripped or stripped == "null":
            return None
        if return_type is str and not stripped.startswith('"'):
            # Plain text payloads such as base64 images are not JSON encoded
            return stripped
        return self._parse_into(return_type, stripped)

    def _parse_into(self, tp: Any, text: str) -> Any:
        try:
            return _type_adapter(tp).validate_json(text)
        except ValidationError as e:
            logger.error("Failed to parse response as %s", tp)
            raise MambuApiException(
                PARSING_FAILURE, f"Response does not match expected type {tp}: {e.error_count()} error(s)"
            ) from e
