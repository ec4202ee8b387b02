"""Declarative dispatch engine for the Mambu API.

WARNING: This is a system-level module used by the service classes.
Do not call directly from user code.
"""

from mambu_sdk._internal.executor.definitions import ApiDefinition, ApiReturnFormat, ApiType
from mambu_sdk._internal.executor.params import ParamsMap
from mambu_sdk._internal.executor.request import ContentType, Method, RequestExecutor
from mambu_sdk._internal.executor.service import RequestContext, ServiceExecutor
from mambu_sdk._internal.executor.urls import URLHelper

__all__ = [
    "ApiDefinition",
    "ApiReturnFormat",
    "ApiType",
    "ContentType",
    "Method",
    "ParamsMap",
    "RequestContext",
    "RequestExecutor",
    "ServiceExecutor",
    "URLHelper",
]
