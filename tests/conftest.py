import pytest

from ddlbridge.errors import CatalogConnectionError


class FakeCatalog:
    """
    Stand-in for a live catalog: answers the count(*) queries dialects issue
    from in-memory sets of object names.
    """

    def __init__(self):
        self.sequences = set()
        self.tables = set()
        self.queries = []
        self.fail_with = None

    def scalar_int(self, sql, params=None):
        self.queries.append((sql, tuple(params or ())))
        if self.fail_with is not None:
            raise self.fail_with
        (name,) = params
        lowered = sql.lower()
        if "rdb$generators" in lowered or "information_schema.sequences" in lowered:
            pool = self.sequences
        elif "rdb$relations" in lowered or "information_schema.tables" in lowered:
            pool = self.tables
        else:
            raise AssertionError(f"Unexpected catalog query: {sql}")
        return sum(1 for candidate in pool if candidate == name)


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def broken_catalog():
    catalog = FakeCatalog()
    catalog.fail_with = CatalogConnectionError("network unreachable")
    return catalog
