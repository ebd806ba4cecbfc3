"""
Storage

Stockage durable clé/valeur de la copie de session.
"""

from .interfaces import IDurableStorage, StorageError
from .memory_storage import MemoryStorage
from .file_storage import FileStorage

__all__ = [
    # Interfaces
    "IDurableStorage",
    # Implementations
    "MemoryStorage",
    "FileStorage",
    # Exceptions
    "StorageError",
]
