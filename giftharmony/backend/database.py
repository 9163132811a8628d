"""PostgreSQL connection pool bootstrap and startup connectivity check."""

from __future__ import annotations

import logging
from typing import Any

from .config import DatabaseSettings

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 10.0


def connection_kwargs(settings: DatabaseSettings) -> dict[str, Any]:
    return {
        "host": settings.host,
        "user": settings.user,
        "password": settings.password,
        "dbname": settings.database,
        "port": settings.port,
        "sslmode": settings.sslmode,
    }


def create_pool(settings: DatabaseSettings) -> Any:
    """Build a closed ``psycopg_pool.ConnectionPool``; the caller opens it."""
    from psycopg_pool import ConnectionPool

    return ConnectionPool(
        kwargs=connection_kwargs(settings),
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=False,
        name="giftharmony",
    )


def check_connection(pool: Any, timeout: float = CONNECT_TIMEOUT_SECONDS) -> bool:
    """Borrow one connection, run a trivial query and hand it back.

    Failures are logged rather than raised so startup can continue and report.
    """
    import psycopg

    try:
        with pool.connection(timeout=timeout) as conn:
            conn.execute("SELECT 1")
    except psycopg.Error as exc:
        logger.error("Database connection failed: %s", exc)
        return False
    logger.info("Database connected successfully")
    return True


def ping_database(settings: DatabaseSettings, timeout: float = CONNECT_TIMEOUT_SECONDS) -> bool:
    """Open and close one direct connection so failures log the driver's own message."""
    import psycopg

    try:
        with psycopg.connect(**connection_kwargs(settings), connect_timeout=int(timeout)) as conn:
            conn.execute("SELECT 1")
    except psycopg.Error as exc:
        logger.error("Database connection failed: %s", exc)
        return False
    logger.info("Database connected successfully")
    return True


def start_database(settings: DatabaseSettings) -> tuple[Any, bool]:
    ok = ping_database(settings)
    pool = create_pool(settings)
    pool.open()
    return pool, ok
