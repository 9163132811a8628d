"""Configuration helpers for the API client."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "http://localhost:5000/api"


def get_user_config_dir() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / "giftharmony"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "giftharmony"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "giftharmony"
    return Path.home() / ".config" / "giftharmony"


def load_env_file(path: Path | None = None) -> bool:
    """Merge a .env file into the process environment; variables already set win.

    Without a path, the nearest .env at or above the working directory is used.
    Returns False when no file was found.
    """
    env_path = str(path) if path is not None else find_dotenv(usecwd=True)
    if not env_path or not Path(env_path).is_file():
        return False
    return load_dotenv(env_path, override=False)


@dataclass(frozen=True)
class ClientSettings:
    api_url: str
    storage_path: Path | None


def load_client_settings() -> ClientSettings:
    """Read the API base URL and token storage file from the environment.

    ``GIFTHARMONY_STORAGE_PATH=""`` opts out of the file and keeps the token in memory.
    """
    storage_raw = os.getenv("GIFTHARMONY_STORAGE_PATH")
    if storage_raw is None:
        storage_path: Path | None = get_user_config_dir() / "storage.json"
    elif storage_raw:
        storage_path = Path(storage_raw).expanduser()
    else:
        storage_path = None
    return ClientSettings(
        api_url=os.getenv("GIFTHARMONY_API_URL") or DEFAULT_API_URL,
        storage_path=storage_path,
    )
