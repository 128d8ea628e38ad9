"""
ddlbridge public package initialization.

Exposes the dialect contract, the built-in dialects and the pieces needed to
wire a dialect to a live database catalog.
"""

from .adapters import ConnectionConfig, FirebirdAdapter, SQLiteAdapter  # noqa: F401
from .catalog import AdapterCatalogExecutor, CatalogQueryExecutor  # noqa: F401
from .core import BaseType, ClassMapping, ColumnMapping  # noqa: F401
from .dialects import (  # noqa: F401
    DDLDialect,
    DialectCapabilities,
    FirebirdDialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    available_dialects,
    create_dialect,
    register_dialect,
)
from .errors import (  # noqa: F401
    CatalogConnectionError,
    DDLError,
    DialectConfigurationError,
    UnsupportedFeatureError,
)

__all__ = [
    "AdapterCatalogExecutor",
    "BaseType",
    "CatalogConnectionError",
    "CatalogQueryExecutor",
    "ClassMapping",
    "ColumnMapping",
    "ConnectionConfig",
    "DDLDialect",
    "DDLError",
    "DialectCapabilities",
    "DialectConfigurationError",
    "FirebirdAdapter",
    "FirebirdDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteAdapter",
    "SQLiteDialect",
    "UnsupportedFeatureError",
    "available_dialects",
    "create_dialect",
    "register_dialect",
]
