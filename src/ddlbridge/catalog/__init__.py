"""
Scalar catalog queries used by dialect existence checks.
"""

from .executor import AdapterCatalogExecutor, CatalogQueryExecutor

__all__ = ["AdapterCatalogExecutor", "CatalogQueryExecutor"]
