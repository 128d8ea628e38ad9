"""
Catalog query executors.

Dialects only need one thing from the database: run a ``count(*)`` style
query and hand back the integer. Everything connection related stays with the
adapter the executor wraps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence

from ..errors import CatalogConnectionError
from ..security.redaction import redact_params
from ..utils import get_logger, time_call
from ..utils.performance import resolve_slow_query_ms

if TYPE_CHECKING:
    from ..adapters.base import ConnectionConfig, DatabaseAdapter


class CatalogQueryExecutor(Protocol):
    def scalar_int(self, sql: str, params: Sequence[Any] | None = None) -> int:
        """
        Execute ``sql`` and return the first column of the first row as an int.

        Raises ``CatalogConnectionError`` when the query cannot be executed.
        """


class AdapterCatalogExecutor:
    """
    Runs catalog queries through a ``DatabaseAdapter``.

    When ``config`` is supplied and the adapter is not connected yet, the
    first query connects it. The executor never closes the adapter.
    """

    def __init__(
        self,
        adapter: "DatabaseAdapter",
        config: "ConnectionConfig | None" = None,
        *,
        slow_query_ms: int | None = None,
    ) -> None:
        self.adapter = adapter
        self.config = config
        self.logger = get_logger("catalog.executor")
        self.slow_query_ms = resolve_slow_query_ms(default=250, override=slow_query_ms)

    def scalar_int(self, sql: str, params: Sequence[Any] | None = None) -> int:
        params = tuple(params or ())
        with time_call(
            "catalog.scalar_int",
            self.logger,
            sql=sql,
            params=redact_params(params),
            threshold_ms=self.slow_query_ms,
        ):
            try:
                self._ensure_connected()
                row = self._fetch_first_row(sql, params)
            except CatalogConnectionError:
                raise
            except Exception as exc:
                raise CatalogConnectionError(f"Catalog query failed: {exc}") from exc
        return self._to_int(sql, row)

    def _fetch_first_row(self, sql: str, params: tuple) -> Any:
        cursor = self.adapter.execute(sql, params)
        try:
            return cursor.fetchone()
        finally:
            close = getattr(cursor, "close", None)
            if callable(close):
                close()
            end_read = getattr(self.adapter, "end_read_transaction", None)
            if callable(end_read):
                end_read()

    def _ensure_connected(self) -> None:
        if self.adapter.is_connected:
            return
        if self.config is None:
            raise CatalogConnectionError(
                "Catalog adapter is not connected and no ConnectionConfig was supplied."
            )
        self.adapter.connect(self.config)

    @staticmethod
    def _to_int(sql: str, row: Any) -> int:
        if not row:
            raise CatalogConnectionError(f"Catalog query returned no rows: {sql}")
        value = row[0]
        if isinstance(value, bool) or value is None:
            raise CatalogConnectionError(f"Catalog query returned a non-integer value: {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise CatalogConnectionError(
                f"Catalog query returned a non-integer value: {value!r}"
            ) from exc
