"""
Parcel registry example: a toy DDL pass driven by a dialect.

The dialect only answers questions; this module decides what to create and
in which order.
"""

from __future__ import annotations

from typing import List

from ddlbridge.adapters import ConnectionConfig, SQLiteAdapter
from ddlbridge.catalog import AdapterCatalogExecutor
from ddlbridge.core import ClassMapping
from ddlbridge.dialects import DDLDialect, create_dialect

from .models import MAPPINGS


def _id_column_type(dialect: DDLDialect, mapping: ClassMapping) -> str:
    id_column = mapping.column("id")
    if dialect.capabilities.supports_auto_increment:
        return dialect.auto_increment_type(id_column.base_type)
    return f"{dialect.column_type(id_column.base_type)} NOT NULL PRIMARY KEY"


def create_table_sql(dialect: DDLDialect, mapping: ClassMapping) -> str:
    columns = []
    for column in mapping.columns:
        if column.name == "id":
            column_type = _id_column_type(dialect, mapping)
        else:
            column_type = dialect.column_type(column.base_type)
            if not column.nullable:
                column_type += " NOT NULL"
        columns.append(f"{column.name} {column_type}")
    return f"CREATE TABLE {mapping.table} ({', '.join(columns)})"


def ensure_schema(adapter, dialect: DDLDialect) -> List[str]:
    """
    Create whatever tables and sequences are still missing; return the
    statements that were executed.
    """

    executed: List[str] = []
    for mapping in MAPPINGS:
        if not dialect.capabilities.supports_auto_increment:
            sequence = f"{mapping.table}_id_seq"
            if not dialect.sequence_exists(sequence):
                executed.append(f"CREATE SEQUENCE {sequence}")
        if dialect.table_missing(mapping):
            executed.append(create_table_sql(dialect, mapping))
    for statement in executed:
        adapter.execute(statement)
    return executed


def run_demo(dsn: str = "sqlite:///:memory:") -> List[List[str]]:
    config = ConnectionConfig.from_dsn(dsn)
    adapter = SQLiteAdapter()
    adapter.connect(config)
    try:
        dialect = create_dialect(config, AdapterCatalogExecutor(adapter))
        return [ensure_schema(adapter, dialect), ensure_schema(adapter, dialect)]
    finally:
        adapter.close()
