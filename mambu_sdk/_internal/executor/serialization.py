"""JSON encoding of request bodies."""

from datetime import date
from enum import Enum
from functools import partial
from typing import Any
from uuid import UUID

import simplejson
from pydantic import BaseModel


def to_json(body: Any, date_format: str | None = None) -> str:
    """Serialize a request body to JSON text.

    Pydantic models are dumped by alias with ``None`` fields left out. Dates
    and datetimes use ``date_format`` (a strftime pattern) when given, ISO 8601
    otherwise. Decimals are written as exact JSON numbers. A ``str`` body is
    taken to be JSON already and returned as is.

    Args:
        body: A pydantic model, a JSON-compatible dict/list, or JSON text.
        date_format: Optional strftime pattern for date-bearing fields.

    Returns:
        Compact JSON text.
    """
    if isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="python", by_alias=True, exclude_none=True)
    return simplejson.dumps(
        body,
        use_decimal=True,
        default=partial(_encode_value, date_format=date_format),
        separators=(",", ":"),
        ensure_ascii=False,
    )


def _encode_value(value: Any, *, date_format: str | None) -> Any:
    if isinstance(value, date):
        return value.strftime(date_format) if date_format else value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="python", by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
