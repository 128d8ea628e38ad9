"""
Storage mappings for the parcel registry example.
"""

from ddlbridge.core import BaseType, ClassMapping, ColumnMapping


class ParcelOwner:
    pass


class Parcel:
    pass


OWNER_MAPPING = ClassMapping.for_class(
    ParcelOwner,
    columns=(
        ColumnMapping("id", BaseType.LONG, nullable=False),
        ColumnMapping("name", BaseType.STRING, nullable=False),
        ColumnMapping("verified", BaseType.BOOLEAN),
    ),
)

PARCEL_MAPPING = ClassMapping.for_class(
    Parcel,
    columns=(
        ColumnMapping("id", BaseType.LONG, nullable=False),
        ColumnMapping("owner_id", BaseType.LONG),
        ColumnMapping("area", BaseType.FLOAT),
        ColumnMapping("geometry", BaseType.BYTES),
        ColumnMapping("registered_at", BaseType.DATETIME),
    ),
)

MAPPINGS = (OWNER_MAPPING, PARCEL_MAPPING)
