"""
Storage - Memory Storage

Stockage en mémoire, pour tests et sessions non persistées.
"""

from typing import Dict, Optional

from .interfaces import IDurableStorage


class MemoryStorage(IDurableStorage):
    """Stockage clé/valeur volatile."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
