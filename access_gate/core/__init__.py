"""
Core: Configuration
"""

from .interfaces import (
    AuthServiceConfig,
    StorageConfig,
    ProtectedRouteConfig,
    RoutesConfig,
    LoggingConfig,
    GateConfig,
)
from .config_loader import ConfigLoader, ConfigIntegrityError

__all__ = [
    # Models
    "AuthServiceConfig",
    "StorageConfig",
    "ProtectedRouteConfig",
    "RoutesConfig",
    "LoggingConfig",
    "GateConfig",
    # Implementations
    "ConfigLoader",
    # Exceptions
    "ConfigIntegrityError",
]
