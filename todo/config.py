import logging
import os
from pathlib import Path

import yaml

TODO_DIR = Path.home() / ".todo"
STORE_PATH = TODO_DIR / "tasks.json"
CONFIG_PATH = TODO_DIR / "config.yaml"
LOG_DIR = TODO_DIR

STORE_ENV = "TODO_STORE"

logger = logging.getLogger(__name__)


class Config:
    """Single-instance config manager. Load once, cache in memory."""

    _instance: "Config | None" = None
    _data: dict[str, object]

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._data = {}
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next access rereads the file."""
        cls._instance = None

    def _load(self) -> None:
        """Load config from disk."""
        if not CONFIG_PATH.exists():
            self._data = {}
            return
        try:
            with CONFIG_PATH.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, e)
            data = {}
        if not isinstance(data, dict):
            logger.warning("ignoring config %s: expected a mapping", CONFIG_PATH)
            data = {}
        self._data = data

    def get(self, key: str, default: object = None) -> object:
        """Get config value."""
        return self._data.get(key, default)


def get_store_path() -> Path:
    """Task store location: $TODO_STORE, then `store:` in config.yaml, then ~/.todo/tasks.json."""
    env = os.getenv(STORE_ENV)
    if env:
        return Path(env).expanduser().resolve()
    val = Config().get("store")
    if val:
        return Path(str(val)).expanduser().resolve()
    return STORE_PATH


def use_color() -> bool:
    if os.getenv("NO_COLOR"):
        return False
    return bool(Config().get("color", True))


def is_verbose() -> bool:
    return bool(Config().get("verbose", False))
