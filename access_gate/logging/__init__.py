"""
Logging

Logging structuré JSON avec masquage des données sensibles.
"""

from .interfaces import (
    LogLevel,
    LogEntry,
    LogConfig,
    IStructuredLogger,
    ISensitiveMasker,
)
from .sensitive_masker import SensitiveMasker
from .structured_logger import StructuredLogger, MissingRequiredFieldError

__all__ = [
    # Enums
    "LogLevel",
    # Dataclasses
    "LogEntry",
    "LogConfig",
    # Interfaces
    "IStructuredLogger",
    "ISensitiveMasker",
    # Implementations
    "SensitiveMasker",
    "StructuredLogger",
    # Exceptions
    "MissingRequiredFieldError",
]
