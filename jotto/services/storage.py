"""
Key-Value Storage

The persistence port used for high scores and the first-visit flag, with an
in-memory implementation for tests and a JSON file implementation for local
play.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..exceptions import StorageError

logger = logging.getLogger('jotto_game.storage')


class KeyValueStore(ABC):
    """Synchronous string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore(KeyValueStore):
    """Store that lives only as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.

    The whole file is rewritten on every set. A missing file reads as empty.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Could not read store {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Store {self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError:
            logger.warning(f"Overwriting unreadable store {self.path}")
            data = {}
        data[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StorageError(f"Could not write store {self.path}: {e}") from e
