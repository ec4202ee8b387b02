"""Parameter names, path segments and date formats used by the Mambu API."""

# =============================================================================
# Query Parameters
# =============================================================================

OFFSET = "offset"
LIMIT = "limit"
FULL_DETAILS = "fullDetails"
BRANCH_ID = "branchId"
CUSTOM_FIELD_SETS_TYPE = "customFieldType"

# =============================================================================
# Path Segments
# =============================================================================

SEARCH = "search"
SETTINGS = "settings"
ORGANIZATION = "organization"
GENERAL = "general"
LABELS = "labels"
BRANDING = "branding"
LOGO = "logo"
ICON = "icon"
ID_DOCUMENT_TEMPLATES = "iddocumenttemplates"

# =============================================================================
# Date Formats (strftime patterns)
# =============================================================================

YYYY_MM_DD_FORMAT = "%Y-%m-%d"
