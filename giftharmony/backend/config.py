"""Configuration helpers for the database bootstrap."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DatabaseSettings:
    host: str
    user: str
    password: str
    database: str
    port: int
    environment: str
    pool_min_size: int = 1
    pool_max_size: int = 10

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def sslmode(self) -> str:
        # "require" encrypts without verifying the server certificate.
        return "require" if self.is_production else "disable"


def load_database_settings() -> DatabaseSettings:
    port_raw = os.getenv("GIFTHARMONY_DB_PORT", "5432")
    return DatabaseSettings(
        host=os.getenv("GIFTHARMONY_DB_HOST", "localhost"),
        user=os.getenv("GIFTHARMONY_DB_USER", "postgres"),
        password=os.getenv("GIFTHARMONY_DB_PASSWORD", "password"),
        database=os.getenv("GIFTHARMONY_DB_NAME", "giftharmony_db"),
        port=int(port_raw),
        environment=os.getenv("GIFTHARMONY_ENV", "development"),
        pool_min_size=int(os.getenv("GIFTHARMONY_DB_POOL_MIN", "1")),
        pool_max_size=int(os.getenv("GIFTHARMONY_DB_POOL_MAX", "10")),
    )
