"""
Auth: Session & échanges d'authentification

Règles couvertes:
- Une seule identité résidente, remplacée en entier
- Copie durable cohérente avec la session mémoire
- Échecs retournés sous forme typée, jamais appliqués partiellement
"""

from .interfaces import (
    Role,
    Identity,
    Credentials,
    RegistrationRequest,
    ExchangeErrorKind,
    ExchangeError,
    ExchangeResult,
    ISessionStore,
    IAuthClient,
    ISessionManager,
)
from .session_store import SessionStore
from .session_manager import SessionManager
from .auth_client import HttpAuthClient, AuthClientError, AuthRejectedError, AuthTransportError

__all__ = [
    # Interfaces
    "ISessionStore",
    "IAuthClient",
    "ISessionManager",
    # Data classes
    "Role",
    "Identity",
    "Credentials",
    "RegistrationRequest",
    "ExchangeErrorKind",
    "ExchangeError",
    "ExchangeResult",
    # Implementations
    "SessionStore",
    "SessionManager",
    "HttpAuthClient",
    # Exceptions
    "AuthClientError",
    "AuthRejectedError",
    "AuthTransportError",
]
