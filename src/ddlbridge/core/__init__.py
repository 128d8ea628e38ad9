"""
Value types shared between the generic DDL layer and the dialects.
"""

from .mapping import ClassMapping, ColumnMapping
from .types import BaseType

__all__ = ["BaseType", "ClassMapping", "ColumnMapping"]
