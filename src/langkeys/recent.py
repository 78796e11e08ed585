"""Most recently checked directories, kept in a pluggable key-value store."""
import logging
import pathlib
from typing import Any, Protocol

import yaml

logger = logging.getLogger(__name__)

RECENT_DIRECTORIES_KEY = "recentDirectories"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class YamlFileStore:
    """Stores values as a flat mapping in a YAML file."""

    def __init__(self, path: str) -> None:
        self.path = pathlib.Path(path)

    def _load(self) -> dict[str, Any]:
        try:
            data = yaml.safe_load(self.path.read_text("utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning(f"Ignoring unreadable store {self.path}: {exc}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Any:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(yaml.safe_dump(data, allow_unicode=True), "utf-8")
        except OSError as exc:
            logger.warning(f"Cannot save {key} to {self.path}: {exc}")


class RecentDirectories:
    def __init__(self, store: KeyValueStore, max_items: int = 5) -> None:
        self.store = store
        self.max_items = max_items

    def items(self) -> list[str]:
        saved = self.store.get(RECENT_DIRECTORIES_KEY)
        if not isinstance(saved, list):
            return []
        return [directory for directory in saved if directory and isinstance(directory, str)]

    def add(self, directory: str) -> list[str]:
        if not directory:
            return self.items()
        directories = [directory] + [d for d in self.items() if d != directory]
        directories = directories[: self.max_items]
        self.store.set(RECENT_DIRECTORIES_KEY, directories)
        return directories

    def clear(self) -> None:
        self.store.set(RECENT_DIRECTORIES_KEY, [])
