"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..core.mapping import ClassMapping
from ..core.types import BaseType
from .base import DDLDialect, DialectCapabilities, UnsupportedFeatureError

SEQUENCE_COUNT_SQL: Final[str] = (
    "SELECT count(*) FROM information_schema.sequences "
    "WHERE sequence_schema = current_schema() AND sequence_name = %s"
)
TABLE_COUNT_SQL: Final[str] = (
    "SELECT count(*) FROM information_schema.tables "
    "WHERE table_schema = current_schema() AND table_name = %s"
)

_SERIAL_TYPES: Final[dict[BaseType, str]] = {
    BaseType.INTEGER: "SERIAL",
    BaseType.LONG: "BIGSERIAL",
}


class PostgresDialect(DDLDialect):
    """
    PostgreSQL dialect; unquoted identifiers fold to lower case.
    """

    name: Final[str] = "postgresql"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_auto_increment=True,
        supports_sequences=True,
        supports_native_boolean=True,
        identifier_case="lower",
    )

    def auto_increment_type(self, base_type: BaseType | type | str) -> str:
        resolved = BaseType.coerce(base_type)
        try:
            return _SERIAL_TYPES[resolved]
        except KeyError:
            raise UnsupportedFeatureError(
                f"PostgreSQL has no serial type for {resolved.value} columns."
            ) from None

    def byte_array_type(self) -> str:
        return "BYTEA"

    def long_type(self) -> str:
        return "BIGINT"

    def timestamp_type(self) -> str:
        return "TIMESTAMP"

    def boolean_type(self) -> str:
        return "BOOLEAN"

    def string_type(self) -> str:
        return "TEXT"

    def sequence_exists(self, name: str) -> bool:
        return self._count(SEQUENCE_COUNT_SQL, (self.normalize_identifier(name),)) > 0

    def table_missing(self, mapping: ClassMapping) -> bool:
        return self._count(TABLE_COUNT_SQL, (self.normalize_identifier(mapping.table),)) == 0
