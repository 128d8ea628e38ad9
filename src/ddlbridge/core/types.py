"""
Logical column types requested by the generic DDL layer.
"""

from __future__ import annotations

import datetime
import decimal
import enum
from typing import Any


class BaseType(str, enum.Enum):
    """
    Engine-neutral description of what a column stores.
    """

    BYTES = "bytes"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    STRING = "string"

    @classmethod
    def coerce(cls, value: Any) -> "BaseType":
        """
        Accept a ``BaseType``, its name or value, or a Python type.

        ``int`` maps to ``INTEGER``; ask for ``LONG`` explicitly when the
        column needs 64 bits.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if lowered in (member.value, member.name.lower()):
                    return member
            raise TypeError(f"Unknown base type name: {value!r}")
        if isinstance(value, type):
            # bool before int: bool is a subclass of int
            for python_type, member in _PYTHON_TYPES:
                if issubclass(value, python_type):
                    return member
        raise TypeError(f"Cannot map {value!r} to a base type")


_PYTHON_TYPES: tuple[tuple[type, BaseType], ...] = (
    (bool, BaseType.BOOLEAN),
    (int, BaseType.INTEGER),
    (float, BaseType.FLOAT),
    (decimal.Decimal, BaseType.FLOAT),
    (datetime.datetime, BaseType.DATETIME),
    (datetime.date, BaseType.DATETIME),
    (bytes, BaseType.BYTES),
    (bytearray, BaseType.BYTES),
    (memoryview, BaseType.BYTES),
    (str, BaseType.STRING),
)
