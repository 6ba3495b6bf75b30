"""Catalog lookup: search paths, string tables and the catalog loader."""

from .catalog import (
    CATALOG_ADDON_PRIORITY,
    CATALOG_MIME_TYPE,
    AmigaCatalog,
    create_catalog,
    instantiate,
)
from .locator import SearchPaths, available_languages, candidate_paths
from .string_table import HashMapStringTable, StringTable

__all__ = [
    "AmigaCatalog",
    "instantiate",
    "create_catalog",
    "CATALOG_ADDON_PRIORITY",
    "CATALOG_MIME_TYPE",
    "SearchPaths",
    "candidate_paths",
    "available_languages",
    "StringTable",
    "HashMapStringTable",
]
