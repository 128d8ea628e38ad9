"""
Minimal class-to-table mapping consumed by dialect existence checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from ..utils.naming import camel_to_snake
from .types import BaseType


@dataclass(frozen=True)
class ColumnMapping:
    name: str
    base_type: BaseType
    nullable: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_type", BaseType.coerce(self.base_type))


@dataclass(frozen=True)
class ClassMapping:
    """
    Storage description of one object type.

    Dialects only ever read ``table``; the column list belongs to the generic
    DDL layer.
    """

    table: str
    columns: tuple[ColumnMapping, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.table or not self.table.strip():
            raise ValueError("ClassMapping requires a non-empty table name.")
        object.__setattr__(self, "columns", tuple(self.columns))

    @classmethod
    def for_class(
        cls,
        model: type,
        *,
        table: str | None = None,
        columns: Iterable[ColumnMapping] = (),
    ) -> "ClassMapping":
        """
        Build a mapping for ``model``, deriving the table from the class name
        (``ParcelOwner`` -> ``parcel_owner``) when ``table`` is not given.
        """

        return cls(table=table or camel_to_snake(model.__name__), columns=tuple(columns))

    def column(self, name: str) -> ColumnMapping:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Table '{self.table}' has no column '{name}'")

    def __str__(self) -> str:
        return self.table


def as_table_name(target: Any) -> str:
    """
    Return the table name of a ``ClassMapping`` or pass a plain string through.
    """

    if isinstance(target, ClassMapping):
        return target.table
    if isinstance(target, str) and target.strip():
        return target
    raise TypeError(f"Expected a ClassMapping or table name, got {target!r}")
