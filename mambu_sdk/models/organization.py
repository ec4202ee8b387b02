"""Pydantic models for organization-level Mambu resources."""

from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import Field

from mambu_sdk.models.base import MambuEntity

# =============================================================================
# Enums
# =============================================================================


class CustomFieldType(StrEnum):
    """Entity a custom field set applies to."""

    CLIENT_INFO = "CLIENT_INFO"
    GROUP_INFO = "GROUP_INFO"
    CENTRE_INFO = "CENTRE_INFO"
    BRANCH_INFO = "BRANCH_INFO"
    USER_INFO = "USER_INFO"
    LOAN_ACCOUNT_INFO = "LOAN_ACCOUNT_INFO"
    SAVINGS_ACCOUNT_INFO = "SAVINGS_ACCOUNT_INFO"
    TRANSACTION_CHANNEL_INFO = "TRANSACTION_CHANNEL_INFO"
    LINE_OF_CREDIT = "LINE_OF_CREDIT"


# =============================================================================
# Organization Structure
# =============================================================================


class Address(MambuEntity):
    encoded_key: str | None = None
    parent_key: str | None = None
    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    region: str | None = None
    postcode: str | None = None
    country: str | None = None


class Branch(MambuEntity):
    api_path = "branches"

    encoded_key: str | None = None
    id: str | None = None
    name: str | None = None
    branch_state: str | None = None
    phone_number: str | None = None
    email_address: str | None = None
    notes: str | None = None
    creation_date: datetime | None = None
    last_modified_date: datetime | None = None
    address: Address | None = None


class Centre(MambuEntity):
    api_path = "centres"

    encoded_key: str | None = None
    id: str | None = None
    name: str | None = None
    state: str | None = None
    assigned_branch_key: str | None = None
    meeting_day: str | None = None
    notes: str | None = None
    creation_date: datetime | None = None
    last_modified_date: datetime | None = None
    address: Address | None = None


class Organization(MambuEntity):
    """Organization settings, including the head office address.

    Returned by ``GET /api/settings/organization`` in a single document, e.g.
    ``{"name": "Org name", "timeZoneID": "PST", "address": {"line1": "1st Rd."}}``.
    """

    encoded_key: str | None = None
    name: str | None = None
    time_zone_id: str | None = Field(default=None, alias="timeZoneID")
    phone_no: str | None = None
    email_address: str | None = None
    currency: str | None = None
    creation_date: datetime | None = None
    last_modified_date: datetime | None = None
    address: Address | None = None


# =============================================================================
# Currencies and Rates
# =============================================================================


class Currency(MambuEntity):
    api_path = "currencies"

    code: str
    name: str | None = None
    symbol: str | None = None
    digits_after_decimal: int | None = None
    currency_symbol_position: str | None = None
    is_base_currency: bool | None = None


class IndexRateSource(MambuEntity):
    api_path = "indexratesources"

    encoded_key: str | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None
    notes: str | None = None


class IndexRate(MambuEntity):
    """A rate value valid from ``start_date``, posted under an IndexRateSource."""

    api_path = "indexrates"

    encoded_key: str | None = None
    start_date: date | None = None
    rate: Decimal | None = None
    notes: str | None = None
    assigned_index_rate_source_key: str | None = None


# =============================================================================
# Custom Fields
# =============================================================================


class CustomField(MambuEntity):
    api_path = "customfields"

    encoded_key: str | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None
    data_type: str | None = None
    value_length: str | None = None
    description: str | None = None
    is_default: bool | None = None
    is_required: bool | None = None


class CustomFieldSet(MambuEntity):
    api_path = "customfieldsets"

    encoded_key: str | None = None
    id: str | None = None
    name: str | None = None
    notes: str | None = None
    type: str | None = None
    custom_fields: list[CustomField] = Field(default_factory=list)


# =============================================================================
# Settings
# =============================================================================


class TransactionChannel(MambuEntity):
    api_path = "transactionchannels"

    encoded_key: str | None = None
    id: str | None = None
    name: str | None = None
    activated: bool | None = None


class IdentificationDocumentTemplate(MambuEntity):
    encoded_key: str | None = None
    document_type: str | None = None
    issuing_authority: str | None = None
    document_id_template: str | None = None
    mandatory_for_clients: bool | None = None
    allow_attachments: bool | None = None


class GeneralSettings(MambuEntity):
    decimal_separator: str | None = None
    date_format: str | None = None
    date_time_format: str | None = None
    default_client_state: str | None = None
    default_group_state: str | None = None
    max_allowed_journal_entry_documents: int | None = None
    max_allowed_undo_closure_period: int | None = None


class ObjectLabel(MambuEntity):
    encoded_key: str | None = None
    language: str | None = None
    type: str | None = None
    singular_value: str | None = None
    plural_value: str | None = None
    has_custom_value: bool | None = None
