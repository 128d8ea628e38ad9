import datetime

import pytest

from ddlbridge.core import BaseType


@pytest.mark.parametrize(
    "value, expected",
    [
        (bool, BaseType.BOOLEAN),
        (int, BaseType.INTEGER),
        (float, BaseType.FLOAT),
        (datetime.datetime, BaseType.DATETIME),
        (bytes, BaseType.BYTES),
        (str, BaseType.STRING),
        ("LONG", BaseType.LONG),
        ("datetime", BaseType.DATETIME),
        (BaseType.BYTES, BaseType.BYTES),
    ],
)
def test_coerce(value, expected):
    assert BaseType.coerce(value) is expected


@pytest.mark.parametrize("value", [object, "uuid", 42, None])
def test_coerce_rejects_unknown_values(value):
    with pytest.raises(TypeError):
        BaseType.coerce(value)
