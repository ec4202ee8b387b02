"""Per-resource services built on the dispatch engine."""

from mambu_sdk.services.organization import OrganizationService

__all__ = ["OrganizationService"]
