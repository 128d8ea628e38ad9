import pytest

from ddlbridge.core import BaseType, ClassMapping
from ddlbridge.dialects import MySQLDialect, UnsupportedFeatureError


def test_mysql_type_fragments(catalog):
    dialect = MySQLDialect(catalog)
    assert dialect.byte_array_type() == "LONGBLOB"
    assert dialect.long_type() == "BIGINT"
    assert dialect.timestamp_type() == "DATETIME"
    assert dialect.boolean_type() == "TINYINT"
    assert dialect.string_type() == "VARCHAR(2000) CHARACTER SET utf8mb4"


def test_mysql_auto_increment(catalog):
    dialect = MySQLDialect(catalog)
    assert dialect.auto_increment_type(BaseType.INTEGER) == "INTEGER AUTO_INCREMENT"
    assert dialect.column_type("long", auto_increment=True) == "BIGINT AUTO_INCREMENT"
    with pytest.raises(UnsupportedFeatureError):
        dialect.auto_increment_type(bytes)


def test_mysql_has_no_sequences(catalog):
    with pytest.raises(UnsupportedFeatureError):
        MySQLDialect(catalog).sequence_exists("orders_seq")
    assert catalog.queries == []


def test_mysql_table_names_are_not_case_folded(catalog):
    catalog.tables.add("Parcels")
    dialect = MySQLDialect(catalog)
    assert dialect.table_missing(ClassMapping(table="Parcels")) is False
    assert dialect.table_missing(ClassMapping(table="parcels")) is True
