"""
DDL dialect contract consumed by the generic DDL layer.

A dialect answers engine-specific questions (SQL type fragments, catalog
existence checks). It never executes DDL; the caller decides when and in
which order statements run.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from ..catalog.executor import CatalogQueryExecutor
from ..core.mapping import ClassMapping, as_table_name
from ..core.types import BaseType
from ..errors import (  # noqa: F401
    CatalogConnectionError,
    DDLError,
    DialectConfigurationError,
    UnsupportedFeatureError,
)


IdentifierCase = Literal["upper", "lower", "preserve"]


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_auto_increment: bool = True
    supports_sequences: bool = True
    supports_native_boolean: bool = True
    identifier_case: IdentifierCase = "preserve"


class DDLDialect(abc.ABC):
    """
    One engine's answers to the questions the generic DDL layer cannot
    answer itself.

    Subclasses must implement every abstract operation; a partial
    implementation cannot be instantiated.
    """

    name: ClassVar[str]
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities()

    def __init__(self, executor: CatalogQueryExecutor) -> None:
        self.executor = executor

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"

    # ------------------------------------------------------------------ #
    # Type fragments
    # ------------------------------------------------------------------ #
    @abc.abstractmethod
    def auto_increment_type(self, base_type: BaseType | type | str) -> str:
        """
        Return the column type of an automatically incrementing column.

        Engines that store autonumbers in a single column type may ignore
        ``base_type``. Raises ``UnsupportedFeatureError`` when the engine has
        no autonumber mechanism.
        """

    @abc.abstractmethod
    def byte_array_type(self) -> str:
        """Return the SQL type used to store a byte array."""

    @abc.abstractmethod
    def long_type(self) -> str:
        """Return the SQL type used to store a 64-bit signed integer."""

    @abc.abstractmethod
    def timestamp_type(self) -> str:
        """Return the SQL type used to store a date and time."""

    @abc.abstractmethod
    def boolean_type(self) -> str:
        """Return the SQL type used to store a boolean."""

    @abc.abstractmethod
    def string_type(self) -> str:
        """Return the SQL type used to store a variable-length string."""

    def integer_type(self) -> str:
        return "INTEGER"

    def float_type(self) -> str:
        return "DOUBLE PRECISION"

    def column_type(self, base_type: BaseType | type | str, *, auto_increment: bool = False) -> str:
        """
        Resolve ``base_type`` to this engine's column type.
        """

        resolved = BaseType.coerce(base_type)
        if auto_increment:
            return self.auto_increment_type(resolved)
        return getattr(self, _FRAGMENTS[resolved])()

    # ------------------------------------------------------------------ #
    # Catalog checks
    # ------------------------------------------------------------------ #
    @abc.abstractmethod
    def sequence_exists(self, name: str) -> bool:
        """
        Return whether a sequence with this name exists.

        Raises ``CatalogConnectionError`` when the catalog cannot be queried.
        """

    @abc.abstractmethod
    def table_missing(self, mapping: ClassMapping) -> bool:
        """
        Return whether the table for ``mapping`` still has to be created.

        The check is "missing" rather than "exists" so the generic layer can
        ask it before storing anything.
        """

    def table_exists(self, mapping: ClassMapping | str) -> bool:
        if isinstance(mapping, str):
            mapping = ClassMapping(table=as_table_name(mapping))
        return not self.table_missing(mapping)

    def normalize_identifier(self, name: str) -> str:
        """
        Apply this engine's case policy for unquoted identifiers.
        """

        case = self.capabilities.identifier_case
        if case == "upper":
            return name.upper()
        if case == "lower":
            return name.lower()
        return name

    def _count(self, sql: str, params: Any) -> int:
        return self.executor.scalar_int(sql, params)


_FRAGMENTS = {
    BaseType.BYTES: "byte_array_type",
    BaseType.INTEGER: "integer_type",
    BaseType.LONG: "long_type",
    BaseType.FLOAT: "float_type",
    BaseType.DATETIME: "timestamp_type",
    BaseType.BOOLEAN: "boolean_type",
    BaseType.STRING: "string_type",
}
