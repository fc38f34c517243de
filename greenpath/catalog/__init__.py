"""Catalog sources."""

from greenpath.catalog.loader import load_catalog
from greenpath.catalog.mock import default_catalog

__all__ = ["default_catalog", "load_catalog"]
