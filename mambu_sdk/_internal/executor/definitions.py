"""Declarative descriptors of Mambu API operations.

An ApiDefinition says *what* an operation is (path, verb, content type and
response shape). The ServiceExecutor decides *how* to run it.

Definitions are immutable and safe to share as module-level constants. Use
``with_overrides()`` to get a variant with a different content type or JSON
date format instead of mutating a shared instance.
"""

from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel

from mambu_sdk._internal.executor import api_data
from mambu_sdk._internal.executor.request import ContentType, Method


class ApiType(Enum):
    """Intent of an operation. Selects the default verb, path shape and return format."""

    GET_ENTITY = "get_entity"
    GET_ENTITY_DETAILS = "get_entity_details"
    GET_LIST = "get_list"
    GET_OWNED_ENTITIES = "get_owned_entities"
    CREATE_FORM_ENTITY = "create_form_entity"
    CREATE_JSON_ENTITY = "create_json_entity"
    POST_OWNED_ENTITY = "post_owned_entity"
    SEARCH_ENTITIES = "search_entities"
    UPDATE_JSON = "update_json"
    PATCH_ENTITY = "patch_entity"
    DELETE_ENTITY = "delete_entity"
    DELETE_OWNED_ENTITY = "delete_owned_entity"


class ApiReturnFormat(Enum):
    OBJECT = "object"
    COLLECTION = "collection"
    RESPONSE_STRING = "response_string"
    BOOLEAN = "boolean"


class _TypeDefaults(NamedTuple):
    method: Method
    content_type: ContentType
    return_format: ApiReturnFormat
    requires_object_id: bool = False
    uses_owned_path: bool = False
    requires_related_id: bool = False
    full_details: bool = False
    returns_owned: bool = False
    path_suffix: str | None = None


_OBJECT = ApiReturnFormat.OBJECT
_COLLECTION = ApiReturnFormat.COLLECTION
_BOOLEAN = ApiReturnFormat.BOOLEAN

_DEFAULTS: dict[ApiType, _TypeDefaults] = {
    # GET /api/{entity}/{id}
    ApiType.GET_ENTITY: _TypeDefaults(Method.GET, ContentType.WWW_FORM, _OBJECT, requires_object_id=True),
    # GET /api/{entity}/{id}?fullDetails=true
    ApiType.GET_ENTITY_DETAILS: _TypeDefaults(
        Method.GET, ContentType.WWW_FORM, _OBJECT, requires_object_id=True, full_details=True
    ),
    # GET /api/{entity}
    ApiType.GET_LIST: _TypeDefaults(Method.GET, ContentType.WWW_FORM, _COLLECTION),
    # GET /api/{entity}/{id}/{owned}
    ApiType.GET_OWNED_ENTITIES: _TypeDefaults(
        Method.GET,
        ContentType.WWW_FORM,
        _COLLECTION,
        requires_object_id=True,
        uses_owned_path=True,
        returns_owned=True,
    ),
    # POST /api/{entity}
    ApiType.CREATE_FORM_ENTITY: _TypeDefaults(Method.POST, ContentType.WWW_FORM, _OBJECT),
    ApiType.CREATE_JSON_ENTITY: _TypeDefaults(Method.POST, ContentType.JSON, _OBJECT),
    # POST /api/{entity}/{id}/{owned}
    ApiType.POST_OWNED_ENTITY: _TypeDefaults(
        Method.POST,
        ContentType.WWW_FORM,
        _OBJECT,
        requires_object_id=True,
        uses_owned_path=True,
        returns_owned=True,
    ),
    # POST /api/{entity}/search
    ApiType.SEARCH_ENTITIES: _TypeDefaults(
        Method.POST, ContentType.JSON, _COLLECTION, path_suffix=api_data.SEARCH
    ),
    # POST /api/{entity}/{id}
    ApiType.UPDATE_JSON: _TypeDefaults(Method.POST, ContentType.JSON, _OBJECT, requires_object_id=True),
    # PATCH /api/{entity}/{id}
    ApiType.PATCH_ENTITY: _TypeDefaults(Method.PATCH, ContentType.JSON, _BOOLEAN, requires_object_id=True),
    # DELETE /api/{entity}/{id}
    ApiType.DELETE_ENTITY: _TypeDefaults(Method.DELETE, ContentType.WWW_FORM, _BOOLEAN, requires_object_id=True),
    # DELETE /api/{entity}/{id}/{owned}/{relatedId}
    ApiType.DELETE_OWNED_ENTITY: _TypeDefaults(
        Method.DELETE,
        ContentType.WWW_FORM,
        _BOOLEAN,
        requires_object_id=True,
        uses_owned_path=True,
        requires_related_id=True,
    ),
}


def resource_path(entity_type: type) -> str:
    """Return the conventional collection name of an entity type, e.g. ``branches``."""
    path = getattr(entity_type, "api_path", None)
    if not path:
        raise ValueError(f"{entity_type.__name__} does not declare an api_path")
    return path


class ApiDefinition(BaseModel):
    """Immutable descriptor of one API operation.

    Build one with ``for_type()`` for the entity-derived conventions or with
    ``custom()`` for endpoints with an explicit path, such as settings.
    """

    model_config = {"frozen": True}

    url_path: str
    method: Method
    content_type: ContentType
    return_format: ApiReturnFormat
    return_type: type | None = None

    api_type: ApiType | None = None
    entity_type: type | None = None
    owned_entity_type: type | None = None
    owned_path: str | None = None
    path_suffix: str | None = None
    requires_object_id: bool = False
    requires_related_id: bool = False
    full_details: bool = False
    json_date_format: str | None = None

    @classmethod
    def for_type(
        cls,
        api_type: ApiType,
        entity_type: type,
        owned_entity_type: type | None = None,
        **overrides: Any,
    ) -> "ApiDefinition":
        """Create a definition following the conventions of ``api_type``.

        Args:
            api_type: The operation intent.
            entity_type: Model class whose ``api_path`` gives the resource path.
            owned_entity_type: Model class of the nested resource for owned
                operations, e.g. IndexRate under IndexRateSource.
            **overrides: Any field to set explicitly, e.g. ``content_type`` or
                ``json_date_format``.

        Raises:
            ValueError: If an owned operation has no owned entity type or a
                type has no ``api_path``.
        """
        defaults = _DEFAULTS[api_type]
        if defaults.uses_owned_path and owned_entity_type is None:
            raise ValueError(f"{api_type.name} requires an owned entity type")

        owned_path = resource_path(owned_entity_type) if defaults.uses_owned_path else None
        if defaults.returns_owned:
            return_type = owned_entity_type
        else:
            return_type = entity_type

        fields: dict[str, Any] = {
            "api_type": api_type,
            "entity_type": entity_type,
            "owned_entity_type": owned_entity_type,
            "url_path": resource_path(entity_type),
            "owned_path": owned_path,
            "path_suffix": defaults.path_suffix,
            "method": defaults.method,
            "content_type": defaults.content_type,
            "return_format": defaults.return_format,
            "return_type": return_type,
            "requires_object_id": defaults.requires_object_id,
            "requires_related_id": defaults.requires_related_id,
            "full_details": defaults.full_details,
        }
        fields.update(overrides)
        return cls(**fields)

    @classmethod
    def custom(
        cls,
        url_path: str,
        method: Method,
        return_type: type | None,
        return_format: ApiReturnFormat,
        content_type: ContentType = ContentType.WWW_FORM,
        **overrides: Any,
    ) -> "ApiDefinition":
        """Create a definition for an explicit path, e.g. ``settings/general``."""
        return cls(
            url_path=url_path,
            method=method,
            content_type=content_type,
            return_format=return_format,
            return_type=return_type,
            **overrides,
        )

    def with_overrides(
        self,
        *,
        content_type: ContentType | None = None,
        json_date_format: str | None = None,
    ) -> "ApiDefinition":
        """Return a copy with a different content type and/or JSON date format."""
        update: dict[str, Any] = {}
        if content_type is not None:
            update["content_type"] = content_type
        if json_date_format is not None:
            update["json_date_format"] = json_date_format
        return self.model_copy(update=update)
