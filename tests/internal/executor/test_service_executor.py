"""Tests for ServiceExecutor."""

import json

import httpx
import pytest
import respx

from mambu_sdk._internal.executor.definitions import ApiDefinition, ApiReturnFormat, ApiType
from mambu_sdk._internal.executor.params import ParamsMap
from mambu_sdk._internal.executor.request import ContentType, Method, RequestExecutor
from mambu_sdk._internal.executor.service import ServiceExecutor
from mambu_sdk._internal.executor.urls import URLHelper
from mambu_sdk.config import MambuConfig
from mambu_sdk.exceptions import INVALID_INPUT, INVALID_URL, PARSING_FAILURE, MambuApiException
from mambu_sdk.models import Branch, MambuEntity

BASE = "https://demo.mambu.com/api"


class LineOfCredit(MambuEntity):
    api_path = "linesofcredit"

    id: str | None = None


class LoanAccount(MambuEntity):
    api_path = "loans"

    id: str | None = None


@pytest.fixture
def executor():
    request_executor = RequestExecutor(MambuConfig(domain="demo.mambu.com", api_key="test-key"))
    yield ServiceExecutor(request_executor)
    request_executor.close()


class TestBuildRequest:
    """Tests for URL and body composition."""

    def test_get_list_with_params(self, executor):
        """Should put params in the query string for GET."""
        params = ParamsMap(offset="0", limit="30")
        context = executor.build_request(ApiDefinition.for_type(ApiType.GET_LIST, Branch), params=params)
        assert context.url == f"{BASE}/branches?offset=0&limit=30"
        assert context.method == Method.GET
        assert context.body is None

    def test_get_list_without_params(self, executor):
        """Should not append a query string without params."""
        context = executor.build_request(ApiDefinition.for_type(ApiType.GET_LIST, Branch))
        assert context.url == f"{BASE}/branches"

    def test_none_params_are_dropped(self, executor):
        """Should leave out None-valued params entirely."""
        params = ParamsMap(offset=None, limit=None)
        context = executor.build_request(ApiDefinition.for_type(ApiType.GET_LIST, Branch), params=params)
        assert context.url == f"{BASE}/branches"

    def test_caller_params_not_modified(self, executor):
        """Should work on a copy of the caller's params."""
        params = ParamsMap(offset="5", limit="10")
        definition = ApiDefinition.for_type(ApiType.SEARCH_ENTITIES, Branch)
        executor.build_request(definition, params=params, json_body="{}")
        assert params == {"offset": "5", "limit": "10"}

    def test_entity_details(self, executor):
        """Should append the ID and request full details."""
        definition = ApiDefinition.for_type(ApiType.GET_ENTITY_DETAILS, Branch)
        context = executor.build_request(definition, "B1")
        assert context.url == f"{BASE}/branches/B1?fullDetails=true"

    def test_id_is_encoded(self, executor):
        """Should percent-encode IDs with spaces."""
        definition = ApiDefinition.for_type(ApiType.GET_ENTITY, Branch)
        context = executor.build_request(definition, "Head Office")
        assert context.url == f"{BASE}/branches/Head%20Office"

    def test_id_with_reserved_characters(self, executor):
        """Should keep ?, # and % inside the ID path segment."""
        definition = ApiDefinition.for_type(ApiType.GET_ENTITY, Branch)
        context = executor.build_request(definition, "B?1#2%3")
        assert context.url == f"{BASE}/branches/B%3F1%232%253"

    def test_owned_and_related_path(self, executor):
        """Should build the owner/owned/related path for DELETE_OWNED_ENTITY."""
        definition = ApiDefinition.for_type(ApiType.DELETE_OWNED_ENTITY, LineOfCredit, LoanAccount)
        context = executor.build_request(definition, "LOC1", related_id="L1")
        assert context.url == f"{BASE}/linesofcredit/LOC1/loans/L1"
        assert context.method == Method.DELETE

    def test_form_post_body(self, executor):
        """Should send params as a form body for POST."""
        definition = ApiDefinition.for_type(ApiType.CREATE_FORM_ENTITY, Branch)
        context = executor.build_request(definition, params=ParamsMap(name="Head Office"))
        assert context.url == f"{BASE}/branches"
        assert context.body == "name=Head%20Office"
        assert context.content_type == ContentType.WWW_FORM

    def test_json_search_pagination(self, executor):
        """Should move offset/limit to the URL and keep them out of the JSON body."""
        definition = ApiDefinition.for_type(ApiType.SEARCH_ENTITIES, Branch)
        params = ParamsMap(offset="5", limit="10", other="ignored")
        context = executor.build_request(definition, params=params, json_body='{"name":"x"}')
        assert context.url == f"{BASE}/branches/search?offset=5&limit=10"
        assert json.loads(context.body) == {"name": "x"}

    def test_missing_object_id(self, executor):
        """Should fail with INVALID_INPUT when the ID is missing."""
        definition = ApiDefinition.for_type(ApiType.GET_ENTITY, Branch)
        with pytest.raises(MambuApiException) as exc_info:
            executor.build_request(definition)
        assert exc_info.value.error_code == INVALID_INPUT

    def test_missing_related_id(self, executor):
        """Should fail with INVALID_INPUT when the related ID is missing."""
        definition = ApiDefinition.for_type(ApiType.DELETE_OWNED_ENTITY, LineOfCredit, LoanAccount)
        with pytest.raises(MambuApiException) as exc_info:
            executor.build_request(definition, "LOC1")
        assert exc_info.value.error_code == INVALID_INPUT

    def test_json_post_without_body(self, executor):
        """Should refuse a JSON POST with no body."""
        definition = ApiDefinition.for_type(ApiType.CREATE_JSON_ENTITY, Branch)
        with pytest.raises(MambuApiException) as exc_info:
            executor.build_request(definition)
        assert exc_info.value.error_code == INVALID_INPUT

    def test_json_body_on_get_rejected(self, executor):
        """Should refuse a JSON body for a verb that sends none."""
        definition = ApiDefinition.for_type(ApiType.GET_LIST, Branch)
        with pytest.raises(MambuApiException) as exc_info:
            executor.build_request(definition, json_body='{"name":"x"}')
        assert exc_info.value.error_code == INVALID_INPUT

    def test_invalid_url(self):
        """Should raise INVALID_URL when the URL cannot be built."""
        request_executor = RequestExecutor(MambuConfig(domain="demo.mambu.com", api_key="k"))
        executor = ServiceExecutor(request_executor, URLHelper("demo.mambu.com:notaport"))
        with pytest.raises(MambuApiException) as exc_info:
            executor.build_request(ApiDefinition.for_type(ApiType.GET_LIST, Branch))
        assert exc_info.value.error_code == INVALID_URL
        assert "notaport" in exc_info.value.message
        request_executor.close()


class TestExecuteResponses:
    """Tests for response parsing per return format."""

    @respx.mock
    def test_object(self, executor):
        """Should parse a single object."""
        respx.get(f"{BASE}/branches/B1").mock(
            return_value=httpx.Response(200, json={"id": "B1", "name": "Head Office", "branchState": "ACTIVE"})
        )
        branch = executor.execute(ApiDefinition.for_type(ApiType.GET_ENTITY, Branch), "B1")
        assert isinstance(branch, Branch)
        assert branch.name == "Head Office"
        assert branch.branch_state == "ACTIVE"

    @respx.mock
    def test_object_keeps_unknown_fields(self, executor):
        """Should keep fields not declared on the model."""
        respx.get(f"{BASE}/branches/B1").mock(
            return_value=httpx.Response(200, json={"id": "B1", "customFieldValues": []})
        )
        branch = executor.execute(ApiDefinition.for_type(ApiType.GET_ENTITY, Branch), "B1")
        assert branch.model_extra == {"customFieldValues": []}

    @respx.mock
    def test_collection(self, executor):
        """Should parse a list in order."""
        respx.get(f"{BASE}/branches").mock(
            return_value=httpx.Response(200, json=[{"id": "B1"}, {"id": "B2"}])
        )
        branches = executor.execute(ApiDefinition.for_type(ApiType.GET_LIST, Branch))
        assert [b.id for b in branches] == ["B1", "B2"]

    @respx.mock
    def test_empty_collection(self, executor):
        """Should return an empty list for an empty body."""
        respx.get(f"{BASE}/branches").mock(return_value=httpx.Response(200, text=""))
        assert executor.execute(ApiDefinition.for_type(ApiType.GET_LIST, Branch)) == []

    @respx.mock
    def test_null_collection(self, executor):
        """Should return an empty list for a null body."""
        respx.get(f"{BASE}/branches").mock(return_value=httpx.Response(200, text="null"))
        assert executor.execute(ApiDefinition.for_type(ApiType.GET_LIST, Branch)) == []

    @respx.mock
    def test_response_string(self, executor):
        """Should return the raw text unmodified."""
        raw = '{"name":"Org","address":{"city":"City"}}'
        respx.get(f"{BASE}/settings/organization").mock(return_value=httpx.Response(200, text=raw))
        definition = ApiDefinition.custom(
            "settings/organization", Method.GET, str, ApiReturnFormat.RESPONSE_STRING
        )
        assert executor.execute(definition) == raw

    @respx.mock
    def test_boolean(self, executor):
        """Should return True for a successful bodyless response."""
        respx.delete(f"{BASE}/branches/B1").mock(return_value=httpx.Response(204))
        assert executor.execute(ApiDefinition.for_type(ApiType.DELETE_ENTITY, Branch), "B1") is True

    @respx.mock
    def test_plain_text_string(self, executor):
        """Should return unquoted text for str return types."""
        respx.get(f"{BASE}/settings/branding/logo").mock(
            return_value=httpx.Response(200, text="data:image/PNG;base64,iVBORw0")
        )
        definition = ApiDefinition.custom("settings/branding/logo", Method.GET, str, ApiReturnFormat.OBJECT)
        assert executor.execute(definition) == "data:image/PNG;base64,iVBORw0"

    @respx.mock
    def test_json_string(self, executor):
        """Should decode a JSON string for str return types."""
        respx.get(f"{BASE}/settings/branding/icon").mock(
            return_value=httpx.Response(200, text='"data:image/PNG;base64,AAA"')
        )
        definition = ApiDefinition.custom("settings/branding/icon", Method.GET, str, ApiReturnFormat.OBJECT)
        assert executor.execute(definition) == "data:image/PNG;base64,AAA"

    @respx.mock
    def test_parsing_failure(self, executor):
        """Should raise PARSING_FAILURE when a 2xx body does not match the shape."""
        respx.get(f"{BASE}/branches").mock(return_value=httpx.Response(200, json={"id": "B1"}))
        with pytest.raises(MambuApiException) as exc_info:
            executor.execute(ApiDefinition.for_type(ApiType.GET_LIST, Branch))
        assert exc_info.value.error_code == PARSING_FAILURE

    @respx.mock
    def test_invalid_json(self, executor):
        """Should raise PARSING_FAILURE for a non-JSON body."""
        respx.get(f"{BASE}/branches/B1").mock(return_value=httpx.Response(200, text="<html></html>"))
        with pytest.raises(MambuApiException) as exc_info:
            executor.execute(ApiDefinition.for_type(ApiType.GET_ENTITY, Branch), "B1")
        assert exc_info.value.error_code == PARSING_FAILURE

    @respx.mock
    def test_http_error_propagates(self, executor):
        """Should surface HTTP failures as MambuApiException."""
        respx.get(f"{BASE}/branches/X").mock(
            return_value=httpx.Response(404, json={"returnCode": 2101, "returnStatus": "INVALID_BRANCH_ID"})
        )
        with pytest.raises(MambuApiException) as exc_info:
            executor.execute(ApiDefinition.for_type(ApiType.GET_ENTITY, Branch), "X")
        assert exc_info.value.error_code == 404
        assert exc_info.value.error_message == "INVALID_BRANCH_ID"


class TestExecuteJson:
    """Tests for execute_json()."""

    @respx.mock
    def test_paginated_search(self, executor):
        """Should send pagination in the URL and only the filter in the body."""
        route = respx.post(f"{BASE}/branches/search").mock(
            return_value=httpx.Response(200, json=[{"id": "B1"}])
        )
        definition = ApiDefinition.for_type(ApiType.SEARCH_ENTITIES, Branch)

        result = executor.execute_json(definition, {"name": "x"}, params=ParamsMap(offset="5", limit="10"))

        request = route.calls.last.request
        assert str(request.url) == f"{BASE}/branches/search?offset=5&limit=10"
        assert json.loads(request.content) == {"name": "x"}
        assert request.headers["content-type"] == "application/json; charset=UTF-8"
        assert [b.id for b in result] == ["B1"]

    @respx.mock
    def test_model_body(self, executor):
        """Should serialize a model body by alias."""
        route = respx.post(f"{BASE}/branches").mock(
            return_value=httpx.Response(201, json={"id": "B9", "name": "New"})
        )
        definition = ApiDefinition.for_type(ApiType.CREATE_JSON_ENTITY, Branch)

        created = executor.execute_json(definition, Branch(name="New", phone_number="555"))

        assert json.loads(route.calls.last.request.content) == {"name": "New", "phoneNumber": "555"}
        assert created.id == "B9"

    @respx.mock
    def test_json_body_on_form_definition(self, executor):
        """Should send JSON even when the definition defaults to form content."""
        route = respx.post(f"{BASE}/branches").mock(return_value=httpx.Response(201, json={"id": "B9"}))
        definition = ApiDefinition.for_type(ApiType.CREATE_FORM_ENTITY, Branch)

        executor.execute_json(definition, {"name": "New"})

        assert route.calls.last.request.headers["content-type"] == "application/json; charset=UTF-8"

    @respx.mock
    def test_none_body_fails_before_network(self, executor):
        """Should raise INVALID_INPUT without sending anything."""
        definition = ApiDefinition.for_type(ApiType.CREATE_JSON_ENTITY, Branch)
        with pytest.raises(MambuApiException) as exc_info:
            executor.execute_json(definition, None)
        assert exc_info.value.error_code == INVALID_INPUT
        assert respx.calls.call_count == 0

    @respx.mock
    def test_patch_returns_boolean(self, executor):
        """Should PATCH the entity and return True."""
        route = respx.patch(f"{BASE}/branches/B1").mock(
            return_value=httpx.Response(200, json={"returnCode": 0, "returnStatus": "SUCCESS"})
        )
        definition = ApiDefinition.for_type(ApiType.PATCH_ENTITY, Branch)

        assert executor.execute_json(definition, {"name": "Renamed"}, "B1") is True
        assert json.loads(route.calls.last.request.content) == {"name": "Renamed"}

    @respx.mock
    def test_body_on_delete_fails_before_network(self, executor):
        """Should raise INVALID_INPUT instead of dropping the body."""
        definition = ApiDefinition.for_type(ApiType.DELETE_ENTITY, Branch)
        with pytest.raises(MambuApiException) as exc_info:
            executor.execute_json(definition, {"reason": "closed"}, "B1")
        assert exc_info.value.error_code == INVALID_INPUT
        assert respx.calls.call_count == 0
