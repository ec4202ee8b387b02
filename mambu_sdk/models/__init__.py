"""Public Pydantic models for Mambu resources.

Example:
    from mambu_sdk.models import Branch

    branch = Branch.model_validate_json('{"id": "B1", "name": "Head Office"}')
"""

from mambu_sdk.models.base import MambuEntity
from mambu_sdk.models.organization import (
    Address,
    Branch,
    Centre,
    Currency,
    CustomField,
    CustomFieldSet,
    CustomFieldType,
    GeneralSettings,
    IdentificationDocumentTemplate,
    IndexRate,
    IndexRateSource,
    ObjectLabel,
    Organization,
    TransactionChannel,
)

__all__ = [
    "MambuEntity",
    "Address",
    "Branch",
    "Centre",
    "Currency",
    "CustomField",
    "CustomFieldSet",
    "CustomFieldType",
    "GeneralSettings",
    "IdentificationDocumentTemplate",
    "IndexRate",
    "IndexRateSource",
    "ObjectLabel",
    "Organization",
    "TransactionChannel",
]
