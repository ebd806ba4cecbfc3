"""
Storage - Interfaces

Contrat clé/valeur du stockage durable local (équivalent localStorage).
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorageError(Exception):
    """Échec d'écriture ou de suppression dans le stockage durable."""

    pass


class IDurableStorage(ABC):
    """
    Stockage clé/valeur persistant entre deux démarrages.

    Les écritures et suppressions sont terminées au retour de l'appel.
    """

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Retourne la valeur stockée ou None."""
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """
        Écrit (ou remplace) la valeur.

        Raises:
            StorageError: Écriture impossible
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Supprime la clé. Sans effet si absente.

        Raises:
            StorageError: Suppression impossible
        """
        pass
