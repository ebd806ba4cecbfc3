"""
Storage - File Storage

Stockage durable dans un fichier JSON unique (objet clé → chaîne).

Les écritures passent par un fichier temporaire puis `os.replace`, de sorte
qu'un arrêt brutal laisse soit l'ancien contenu, soit le nouveau.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from ..logging import StructuredLogger
from .interfaces import IDurableStorage, StorageError


class FileStorage(IDurableStorage):
    """
    Stockage clé/valeur persistant sur disque.

    Un fichier illisible (dont UTF-8 invalide) ou qui ne contient pas un
    objet JSON de chaînes est traité comme vide.

    Example:
        storage = FileStorage(Path("~/.access_gate/storage.json").expanduser())
        storage.write("currentUser", '{"username": "alice"}')
    """

    def __init__(self, path: Path, logger: Optional[StructuredLogger] = None):
        """
        Args:
            path: Chemin du fichier JSON
            logger: Logger structuré
        """
        self.path = Path(path)
        self._logger = logger or StructuredLogger("file-storage")

    def read(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._dump(data)

    def _load(self) -> Dict[str, str]:
        """Lit le fichier; contenu absent ou corrompu → dictionnaire vide."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        # ValueError couvre JSONDecodeError et UnicodeDecodeError
        except (OSError, ValueError) as e:
            self._logger.warn("Storage file unreadable, treated as empty", path=str(self.path), error=str(e))
            return {}

        if not isinstance(raw, dict):
            self._logger.warn("Storage file is not a JSON object, treated as empty", path=str(self.path))
            return {}

        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _dump(self, data: Dict[str, str]) -> None:
        """
        Écrit le fichier de manière atomique.

        Raises:
            StorageError: Écriture impossible
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write storage file {self.path}: {e}") from e
