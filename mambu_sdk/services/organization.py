"""Organization-level API operations: branches, centres, currencies, settings."""

from mambu_sdk._internal.executor import api_data
from mambu_sdk._internal.executor.definitions import ApiDefinition, ApiReturnFormat, ApiType
from mambu_sdk._internal.executor.params import ParamsMap
from mambu_sdk._internal.executor.request import ContentType, Method
from mambu_sdk._internal.executor.service import ServiceExecutor
from mambu_sdk.exceptions import INVALID_INPUT, MambuApiException
from mambu_sdk.models import (
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

BASE_CURRENCY_MUST_BE_DEFINED = "Base Currency must be defined"

# =============================================================================
# API Definitions
# =============================================================================

GET_BRANCH_DETAILS = ApiDefinition.for_type(ApiType.GET_ENTITY_DETAILS, Branch)
GET_BRANCHES = ApiDefinition.for_type(ApiType.GET_LIST, Branch)

GET_CENTRE_DETAILS = ApiDefinition.for_type(ApiType.GET_ENTITY_DETAILS, Centre)
GET_CENTRES = ApiDefinition.for_type(ApiType.GET_LIST, Centre)

GET_CUSTOM_FIELD = ApiDefinition.for_type(ApiType.GET_ENTITY, CustomField)
GET_CUSTOM_FIELD_SETS = ApiDefinition.for_type(ApiType.GET_LIST, CustomFieldSet)

GET_CURRENCIES = ApiDefinition.for_type(ApiType.GET_LIST, Currency)

GET_TRANSACTION_CHANNELS = ApiDefinition.for_type(ApiType.GET_LIST, TransactionChannel)

# POST /api/indexratesources/{sourceKey}/indexrates with dates as yyyy-MM-dd
POST_INDEX_INTEREST_RATE = ApiDefinition.for_type(
    ApiType.POST_OWNED_ENTITY,
    IndexRateSource,
    IndexRate,
    content_type=ContentType.JSON,
    json_date_format=api_data.YYYY_MM_DD_FORMAT,
)

GET_ID_DOCUMENT_TEMPLATES = ApiDefinition.custom(
    f"{api_data.SETTINGS}/{api_data.ID_DOCUMENT_TEMPLATES}",
    Method.GET,
    IdentificationDocumentTemplate,
    ApiReturnFormat.COLLECTION,
)
GET_ORGANIZATION = ApiDefinition.custom(
    f"{api_data.SETTINGS}/{api_data.ORGANIZATION}",
    Method.GET,
    Organization,
    ApiReturnFormat.OBJECT,
)
GET_GENERAL_SETTINGS = ApiDefinition.custom(
    f"{api_data.SETTINGS}/{api_data.GENERAL}",
    Method.GET,
    GeneralSettings,
    ApiReturnFormat.OBJECT,
)
GET_OBJECT_LABELS = ApiDefinition.custom(
    f"{api_data.SETTINGS}/{api_data.LABELS}",
    Method.GET,
    ObjectLabel,
    ApiReturnFormat.COLLECTION,
)
GET_BRANDING_LOGO = ApiDefinition.custom(
    f"{api_data.SETTINGS}/{api_data.BRANDING}/{api_data.LOGO}",
    Method.GET,
    str,
    ApiReturnFormat.OBJECT,
)
GET_BRANDING_ICON = ApiDefinition.custom(
    f"{api_data.SETTINGS}/{api_data.BRANDING}/{api_data.ICON}",
    Method.GET,
    str,
    ApiReturnFormat.OBJECT,
)


def _pagination(offset: str | int | None, limit: str | int | None) -> ParamsMap:
    params = ParamsMap()
    params.put(api_data.OFFSET, None if offset is None else str(offset))
    params.put(api_data.LIMIT, None if limit is None else str(limit))
    return params


class OrganizationService:
    """API operations available for the organization, like getting its currency."""

    def __init__(self, service_executor: ServiceExecutor) -> None:
        self._executor = service_executor

    def get_currency(self) -> Currency:
        """Get the organization's base currency.

        Raises:
            MambuApiException: ``INVALID_INPUT`` with "Base Currency must be
                defined" if the organization has no currencies.
        """
        currencies: list[Currency] = self._executor.execute(GET_CURRENCIES)
        if not currencies:
            raise MambuApiException(INVALID_INPUT, BASE_CURRENCY_MUST_BE_DEFINED)
        return currencies[0]

    def get_branches(self, offset: str | int | None = None, limit: str | int | None = None) -> list[Branch]:
        """Get a paginated list of branches.

        Args:
            offset: Offset of the first entry. The server defaults to 0.
            limit: Maximum number of entries. The server defaults to 50.
        """
        return self._executor.execute(GET_BRANCHES, params=_pagination(offset, limit))

    def get_branch(self, branch_id: str) -> Branch:
        """Get a branch with full details by ID or encoded key."""
        return self._executor.execute(GET_BRANCH_DETAILS, branch_id)

    def get_centre(self, centre_id: str) -> Centre:
        """Get a centre with full details by ID or encoded key."""
        return self._executor.execute(GET_CENTRE_DETAILS, centre_id)

    def get_centres(
        self,
        branch_id: str | None = None,
        offset: str | int | None = None,
        limit: str | int | None = None,
    ) -> list[Centre]:
        """Get a paginated list of centres.

        Args:
            branch_id: Only return centres of this branch. All centres when ``None``.
            offset: Offset of the first entry.
            limit: Maximum number of entries.
        """
        params = ParamsMap()
        params.add_param(api_data.BRANCH_ID, branch_id)
        params.update(_pagination(offset, limit))
        return self._executor.execute(GET_CENTRES, params=params)

    def get_custom_field(self, field_id: str) -> CustomField:
        return self._executor.execute(GET_CUSTOM_FIELD, field_id)

    def get_custom_field_sets(self, custom_field_type: CustomFieldType | None = None) -> list[CustomFieldSet]:
        """Get custom field sets, optionally only those of one type."""
        params = None
        if custom_field_type is not None:
            params = ParamsMap()
            params.add_param(api_data.CUSTOM_FIELD_SETS_TYPE, custom_field_type.value)
        return self._executor.execute(GET_CUSTOM_FIELD_SETS, params=params)

    def get_transaction_channels(self) -> list[TransactionChannel]:
        return self._executor.execute(GET_TRANSACTION_CHANNELS)

    def post_index_interest_rate(self, index_rate_source_key: str, index_rate: IndexRate) -> IndexRate:
        """Post a new rate under an index rate source.

        Args:
            index_rate_source_key: Encoded key of the index rate source.
            index_rate: The rate to post. Dates are sent as ``yyyy-MM-dd``.

        Returns:
            The created IndexRate.

        Raises:
            ValueError: If ``index_rate`` is ``None``.
            MambuApiException: If the source key is empty or the call fails.
        """
        if index_rate is None:
            raise ValueError("Index Rate must not be None")
        return self._executor.execute_json(POST_INDEX_INTEREST_RATE, index_rate, index_rate_source_key)

    def get_identification_document_templates(self) -> list[IdentificationDocumentTemplate]:
        """Get all identification document templates. Not paginated."""
        return self._executor.execute(GET_ID_DOCUMENT_TEMPLATES)

    def get_organization(self) -> Organization | None:
        """Get the organization details together with its address."""
        return self._executor.execute(GET_ORGANIZATION)

    def get_general_settings(self) -> GeneralSettings:
        return self._executor.execute(GET_GENERAL_SETTINGS)

    def get_object_labels(self) -> list[ObjectLabel]:
        """Get object labels for all languages supported by Mambu."""
        return self._executor.execute(GET_OBJECT_LABELS)

    def get_branding_logo(self) -> str:
        """Get the organization logo, e.g. ``data:image/PNG;base64,iVBORw0...``."""
        return self._executor.execute(GET_BRANDING_LOGO)

    def get_branding_icon(self) -> str:
        """Get the organization icon as a base64 data URI."""
        return self._executor.execute(GET_BRANDING_ICON)
