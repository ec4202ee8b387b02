"""Internal modules for Mambu SDK.

WARNING: This package contains the dispatch engine used by the service classes.
These are not intended for direct use in application code.

Modules:
    executor - Declarative API dispatch engine
    http - Shared HTTP client configuration
"""
