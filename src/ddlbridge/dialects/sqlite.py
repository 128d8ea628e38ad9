"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..core.mapping import ClassMapping
from ..core.types import BaseType
from .base import DDLDialect, DialectCapabilities, UnsupportedFeatureError

TABLE_COUNT_SQL: Final[str] = (
    "SELECT count(*) FROM sqlite_master WHERE type = 'table' AND lower(name) = lower(?)"
)


class SQLiteDialect(DDLDialect):
    """
    SQLite dialect. Table names are matched case-insensitively, the way
    SQLite resolves them.
    """

    name: Final[str] = "sqlite"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_auto_increment=True,
        supports_sequences=False,
        supports_native_boolean=False,
        identifier_case="preserve",
    )

    def auto_increment_type(self, base_type: BaseType | type | str) -> str:
        resolved = BaseType.coerce(base_type)
        if resolved not in (BaseType.INTEGER, BaseType.LONG):
            raise UnsupportedFeatureError(
                f"SQLite cannot auto-increment {resolved.value} columns."
            )
        return "INTEGER PRIMARY KEY AUTOINCREMENT"

    def byte_array_type(self) -> str:
        return "BLOB"

    def long_type(self) -> str:
        return "INTEGER"

    def timestamp_type(self) -> str:
        return "TIMESTAMP"

    def boolean_type(self) -> str:
        return "INTEGER"

    def string_type(self) -> str:
        return "TEXT"

    def float_type(self) -> str:
        return "REAL"

    def sequence_exists(self, name: str) -> bool:
        raise UnsupportedFeatureError("SQLite does not have sequences.")

    def table_missing(self, mapping: ClassMapping) -> bool:
        return self._count(TABLE_COUNT_SQL, (mapping.table,)) == 0
