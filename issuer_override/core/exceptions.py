"""Mapper-specific exceptions for error handling."""
from __future__ import annotations
from typing import Optional


class MapperError(Exception):
    """Base exception for all protocol mapper operations."""
    pass


class ConfigurationMissingError(MapperError):
    """Required mapper configuration value is absent or empty.

    Attributes:
        key: Configuration key that was looked up
        provider_id: Identifier of the mapper that needed it
    """

    def __init__(self, key: str, provider_id: Optional[str] = None):
        self.key = key
        self.provider_id = provider_id
        where = f" for mapper '{provider_id}'" if provider_id else ""
        super().__init__(f"Required configuration '{key}' is missing{where}")


class MapperNotFoundError(MapperError):
    """No mapper is registered under the requested identifier."""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        super().__init__(f"No protocol mapper registered as '{provider_id}'")
