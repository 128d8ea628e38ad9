"""
DDL dialects, one per supported engine.
"""

from .base import (
    CatalogConnectionError,
    DDLDialect,
    DDLError,
    DialectCapabilities,
    DialectConfigurationError,
    UnsupportedFeatureError,
)
from .firebird import FirebirdDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .registry import available_dialects, create_dialect, register_dialect
from .sqlite import SQLiteDialect

__all__ = [
    "CatalogConnectionError",
    "DDLDialect",
    "DDLError",
    "DialectCapabilities",
    "DialectConfigurationError",
    "UnsupportedFeatureError",
    "FirebirdDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "available_dialects",
    "create_dialect",
    "register_dialect",
]
