"""Backing logic: catalog providers and the session context store."""

from .catalog_provider import CatalogProvider, InMemoryCatalogProvider, JsonCatalogProvider
from .context_store import ContextStore

__all__ = [
    "CatalogProvider",
    "ContextStore",
    "InMemoryCatalogProvider",
    "JsonCatalogProvider",
]
