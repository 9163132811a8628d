"""Database bootstrap for the GiftHarmony backend."""

from .config import DatabaseSettings, load_database_settings
from .database import check_connection, connection_kwargs, create_pool, ping_database, start_database

__all__ = [
    "check_connection",
    "connection_kwargs",
    "create_pool",
    "DatabaseSettings",
    "load_database_settings",
    "ping_database",
    "start_database",
]
