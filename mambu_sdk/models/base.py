"""Base class for Mambu domain models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MambuEntity(BaseModel):
    """Plain data holder for a Mambu resource.

    Fields use snake_case in Python and camelCase on the wire. Fields not
    declared here are kept as extras.

    ``api_path`` is the resource collection name used to derive endpoint
    paths, e.g. ``branches`` for ``/api/branches``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    api_path: ClassVar[str | None] = None
