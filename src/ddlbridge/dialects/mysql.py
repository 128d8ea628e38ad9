"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..core.mapping import ClassMapping
from ..core.types import BaseType
from .base import DDLDialect, DialectCapabilities, UnsupportedFeatureError

TABLE_COUNT_SQL: Final[str] = (
    "SELECT count(*) FROM information_schema.tables "
    "WHERE table_schema = DATABASE() AND table_name = %s"
)

_AUTO_TYPES: Final[dict[BaseType, str]] = {
    BaseType.INTEGER: "INTEGER AUTO_INCREMENT",
    BaseType.LONG: "BIGINT AUTO_INCREMENT",
}


class MySQLDialect(DDLDialect):
    """
    MySQL dialect.

    Table name case sensitivity depends on ``lower_case_table_names`` on the
    server, so identifiers are passed through unchanged.
    """

    name: Final[str] = "mysql"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_auto_increment=True,
        supports_sequences=False,
        supports_native_boolean=False,
        identifier_case="preserve",
    )

    def auto_increment_type(self, base_type: BaseType | type | str) -> str:
        resolved = BaseType.coerce(base_type)
        try:
            return _AUTO_TYPES[resolved]
        except KeyError:
            raise UnsupportedFeatureError(
                f"MySQL cannot auto-increment {resolved.value} columns."
            ) from None

    def byte_array_type(self) -> str:
        return "LONGBLOB"

    def long_type(self) -> str:
        return "BIGINT"

    def timestamp_type(self) -> str:
        return "DATETIME"

    def boolean_type(self) -> str:
        return "TINYINT"

    def string_type(self) -> str:
        return "VARCHAR(2000) CHARACTER SET utf8mb4"

    def sequence_exists(self, name: str) -> bool:
        raise UnsupportedFeatureError("MySQL does not have sequences, use AUTO_INCREMENT.")

    def table_missing(self, mapping: ClassMapping) -> bool:
        return self._count(TABLE_COUNT_SQL, (self.normalize_identifier(mapping.table),)) == 0
