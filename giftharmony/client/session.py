"""Bearer token state and request header construction."""

from __future__ import annotations

from .storage import KeyValueStorage

TOKEN_STORAGE_KEY = "auth_token"


class TokenSession:
    """Holds the current bearer token and mirrors it into durable storage."""

    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage
        self._token: str | None = storage.get_item(TOKEN_STORAGE_KEY) or None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str | None) -> None:
        """Replace the held token; None or an empty string signs out."""
        if token:
            self._storage.set_item(TOKEN_STORAGE_KEY, token)
            self._token = token
        else:
            self._storage.remove_item(TOKEN_STORAGE_KEY)
            self._token = None

    def build_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers
