"""
Explicit dialect selection.

There is no process-wide "current dialect": every call builds a new
instance that the caller passes on to whatever generates DDL, so several
engines can be targeted side by side.
"""

from __future__ import annotations

import threading
from typing import Callable

from ..adapters.base import ConnectionConfig
from ..catalog.executor import CatalogQueryExecutor
from ..utils import get_logger
from .base import DDLDialect, DialectConfigurationError
from .firebird import FirebirdDialect
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

DialectFactory = Callable[[CatalogQueryExecutor], DDLDialect]

logger = get_logger("dialects.registry")

_lock = threading.Lock()
_factories: dict[str, DialectFactory] = {}
_aliases: dict[str, str] = {}


def register_dialect(name: str, factory: DialectFactory, *aliases: str) -> None:
    """
    Register ``factory`` under ``name`` and any ``aliases``.

    Registering an existing name replaces the previous factory.
    """

    canonical = name.lower()
    with _lock:
        _factories[canonical] = factory
        _aliases[canonical] = canonical
        for alias in aliases:
            _aliases[alias.lower()] = canonical


def available_dialects() -> list[str]:
    with _lock:
        return sorted(_factories)


def resolve_dialect_name(target: str | ConnectionConfig) -> str:
    if isinstance(target, ConnectionConfig):
        engine = target.engine
        if not engine:
            raise DialectConfigurationError(
                f"Cannot infer a dialect from {target.descriptive_label()}."
            )
    else:
        engine = target.split("+", 1)[0]
    with _lock:
        canonical = _aliases.get(engine.strip().lower())
    if canonical is None:
        raise DialectConfigurationError(
            f"Unknown dialect '{engine}'. Available: {', '.join(available_dialects())}"
        )
    return canonical


def create_dialect(target: str | ConnectionConfig, executor: CatalogQueryExecutor) -> DDLDialect:
    """
    Build the dialect named by ``target``.

    ``target`` is either a dialect name or a ``ConnectionConfig`` whose DSN
    scheme names the engine (``firebird+fdb://...`` resolves to Firebird).
    """

    canonical = resolve_dialect_name(target)
    with _lock:
        factory = _factories[canonical]
    dialect = factory(executor)
    logger.debug("Selected %s dialect (%s)", canonical, type(dialect).__name__)
    return dialect


register_dialect("firebird", FirebirdDialect, "interbase")
register_dialect("postgresql", PostgresDialect, "postgres", "psql")
register_dialect("mysql", MySQLDialect, "mariadb")
register_dialect("sqlite", SQLiteDialect, "sqlite3")
