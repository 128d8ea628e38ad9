"""
Firebird dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..core.mapping import ClassMapping
from ..core.types import BaseType
from .base import DDLDialect, DialectCapabilities, UnsupportedFeatureError

SEQUENCE_COUNT_SQL: Final[str] = (
    "SELECT count(*) FROM RDB$GENERATORS WHERE RDB$GENERATOR_NAME = ?"
)
TABLE_COUNT_SQL: Final[str] = "SELECT count(*) FROM RDB$RELATIONS WHERE RDB$RELATION_NAME = ?"


class FirebirdDialect(DDLDialect):
    """
    Firebird dialect.

    Unquoted identifiers are stored upper case, so catalog lookups upper-case
    the supplied name. Firebird does not expose ``information_schema``; the
    ``RDB$`` system tables are queried instead.
    """

    name: Final[str] = "firebird"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_auto_increment=False,
        supports_sequences=True,
        supports_native_boolean=False,
        identifier_case="upper",
    )

    def auto_increment_type(self, base_type: BaseType | type | str) -> str:
        raise UnsupportedFeatureError("Firebird does not have autonumbers, use a sequence.")

    def byte_array_type(self) -> str:
        return "BLOB"

    def long_type(self) -> str:
        return "INT64"

    def timestamp_type(self) -> str:
        return "TIMESTAMP"

    def boolean_type(self) -> str:
        return "SMALLINT"

    def string_type(self) -> str:
        """
        No character set clause: the column uses the database default
        encoding. ``CHARACTER SET UTF8`` is not reliably accepted here.
        """
        return "VARCHAR(2000)"

    def sequence_exists(self, name: str) -> bool:
        return self._count(SEQUENCE_COUNT_SQL, (self.normalize_identifier(name),)) > 0

    def table_missing(self, mapping: ClassMapping) -> bool:
        return self._count(TABLE_COUNT_SQL, (self.normalize_identifier(mapping.table),)) == 0
