"""API client for the GiftHarmony shop."""

from .api import GiftHarmonyClient, build_query, create_client
from .config import ClientSettings, load_client_settings
from .errors import NetworkError, RequestFailed
from .session import TOKEN_STORAGE_KEY, TokenSession
from .storage import InMemoryStorage, JsonFileStorage, KeyValueStorage, StorageError, create_storage

__all__ = [
    "build_query",
    "ClientSettings",
    "create_client",
    "create_storage",
    "GiftHarmonyClient",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "load_client_settings",
    "NetworkError",
    "RequestFailed",
    "StorageError",
    "TOKEN_STORAGE_KEY",
    "TokenSession",
]
