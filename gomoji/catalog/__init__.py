"""Gitmoji Catalog Package"""

from gomoji.catalog.errors import CatalogError, Diagnostic, DiagnosticKind, SUPPORTED_LOCALES
from gomoji.catalog.loader import (
    BUNDLED_CATALOG_PATH,
    load_bundled_catalog,
    load_catalog,
    load_catalog_file,
    try_load_catalog,
)
from gomoji.catalog.models import ABSENT, Absent, Catalog, Entry, Present, SEMVER_TOKENS

__all__ = [
    "ABSENT",
    "Absent",
    "BUNDLED_CATALOG_PATH",
    "Catalog",
    "CatalogError",
    "Diagnostic",
    "DiagnosticKind",
    "Entry",
    "Present",
    "SEMVER_TOKENS",
    "SUPPORTED_LOCALES",
    "load_bundled_catalog",
    "load_catalog",
    "load_catalog_file",
    "try_load_catalog",
]
