"""Static lookup table of protocol mappers keyed by provider identifier."""
from __future__ import annotations
from typing import Dict, List

from .exceptions import MapperNotFoundError
from .mapper import RealmIssuerOverrideMapper

_MAPPERS: Dict[str, object] = {}


def register_mapper(mapper, replace: bool = False) -> None:
    """Register a mapper under its ``PROVIDER_ID``.

    Raises:
        ValueError: If the identifier is taken and replace is False
    """
    provider_id = mapper.PROVIDER_ID
    if provider_id in _MAPPERS and not replace:
        raise ValueError(f"Protocol mapper '{provider_id}' is already registered")
    _MAPPERS[provider_id] = mapper


def get_mapper(provider_id: str):
    """Return the mapper registered as provider_id.

    Raises:
        MapperNotFoundError: If nothing is registered under that identifier
    """
    try:
        return _MAPPERS[provider_id]
    except KeyError:
        raise MapperNotFoundError(provider_id) from None


def available_mappers() -> List[str]:
    return sorted(_MAPPERS)


register_mapper(RealmIssuerOverrideMapper())
