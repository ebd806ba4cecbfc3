"""
Logging - Structured Logger

Logger JSON structuré utilisé par la session et les gardes de navigation.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from .interfaces import (
    IStructuredLogger,
    ISensitiveMasker,
    LogConfig,
    LogEntry,
    LogLevel,
)
from .sensitive_masker import SensitiveMasker


class MissingRequiredFieldError(Exception):
    """Champ obligatoire manquant dans une entrée de log."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Required field missing: {field_name}")


class StructuredLogger(IStructuredLogger):
    """
    Logger JSON structuré.

    Chaque entrée est capturée en mémoire puis transmise à l'output handler
    s'il est défini. Les clés sensibles de `extra` sont masquées.

    Example:
        logger = StructuredLogger("session-manager")
        logger.info("Login succeeded", username="alice")
    """

    def __init__(
        self,
        component: str,
        config: Optional[LogConfig] = None,
        masker: Optional[ISensitiveMasker] = None,
        output_handler: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Args:
            component: Nom du composant émetteur
            config: Configuration optionnelle
            masker: Masker pour données sensibles
            output_handler: Handler de sortie JSON (stderr, fichier, tests)

        Raises:
            ValueError: Si component vide
        """
        if not component or not component.strip():
            raise ValueError("Logger component cannot be empty")

        self._component = component.strip()
        self._config = config or LogConfig()
        self._masker = masker or SensitiveMasker()
        self._output_handler = output_handler
        self._entries: List[LogEntry] = []

    @property
    def component(self) -> str:
        return self._component

    @property
    def config(self) -> LogConfig:
        return self._config

    def child(self, component: str) -> "StructuredLogger":
        """
        Crée un logger pour un sous-composant.

        Le logger enfant partage configuration, masker et output handler.

        Args:
            component: Nom du sous-composant

        Returns:
            Nouveau StructuredLogger
        """
        return StructuredLogger(
            f"{self._component}.{component}",
            config=self._config,
            masker=self._masker,
            output_handler=self._output_handler,
        )

    def log(
        self,
        level: LogLevel,
        message: str,
        correlation_id: Optional[str] = None,
        **extra: Any,
    ) -> Optional[LogEntry]:
        """
        Crée et émet une entrée de log.

        Args:
            level: Niveau de log
            message: Message à logger
            correlation_id: ID de corrélation (ou default, ou généré)
            **extra: Données supplémentaires

        Returns:
            LogEntry créé ou None si filtré

        Raises:
            MissingRequiredFieldError: Si message vide
        """
        if not self._should_log(level):
            return None

        if not message:
            raise MissingRequiredFieldError("message")

        resolved_correlation = (
            correlation_id
            or self._config.default_correlation_id
            or str(uuid.uuid4())
        )

        masked_extra = {}
        if extra and self._config.include_extra:
            masked_extra = self._masker.mask(dict(extra)) if self._config.mask_sensitive else dict(extra)

        entry = LogEntry(
            timestamp=self._generate_timestamp(),
            level=level,
            correlation_id=resolved_correlation,
            component=self._component,
            message=message,
            extra=masked_extra,
        )

        self._entries.append(entry)

        if self._output_handler:
            self._output_handler(entry.to_json())

        return entry

    def _generate_timestamp(self) -> str:
        """
        Génère timestamp ISO 8601 UTC avec millisecondes.

        Format: 2024-12-04T14:30:00.123Z
        """
        now = datetime.now(timezone.utc)
        return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"

    def _should_log(self, level: LogLevel) -> bool:
        return LogLevel.get_priority(level) >= LogLevel.get_priority(self._config.min_level)

    def debug(self, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau DEBUG."""
        return self.log(LogLevel.DEBUG, message, **extra)

    def info(self, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau INFO."""
        return self.log(LogLevel.INFO, message, **extra)

    def warn(self, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau WARN."""
        return self.log(LogLevel.WARN, message, **extra)

    def error(self, message: str, **extra: Any) -> Optional[LogEntry]:
        """Log niveau ERROR."""
        return self.log(LogLevel.ERROR, message, **extra)

    def get_entries(self) -> List[LogEntry]:
        """Retourne les entrées de log capturées."""
        return list(self._entries)

    def get_entries_by_level(self, level: LogLevel) -> List[LogEntry]:
        """Filtre les entrées par niveau."""
        return [e for e in self._entries if e.level == level]

    def clear_entries(self) -> None:
        """Efface les entrées capturées."""
        self._entries.clear()
