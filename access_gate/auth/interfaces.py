"""
Auth - Interfaces

Définit les contrats de session et d'échange avec le service d'authentification.
Toute implémentation DOIT respecter ces interfaces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator


# ══════════════════════════════════════════════════════════════════════════════
# TYPES
# ══════════════════════════════════════════════════════════════════════════════


class Role(str, Enum):
    """Rôles applicatifs (ensemble fermé)."""

    CUSTOMER = "customer"
    ADMIN = "admin"


class Identity(BaseModel):
    """
    Utilisateur authentifié, tel que renvoyé par le service d'authentification.

    Attributes:
        username: Identifiant unique, non vide (espaces de bord retirés)
        email: Adresse email (validée uniquement à l'inscription)
        address: Adresse postale libre
        role: Rôle applicatif, None si aucun rôle attribué
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: str = ""
    address: str = ""
    role: Optional[Role] = None

    @field_validator("role", mode="before")
    @classmethod
    def _unknown_role_is_absent(cls, value: Any) -> Any:
        """Un tag de rôle hors ensemble fermé équivaut à aucun rôle."""
        if isinstance(value, Role) or value is None:
            return value
        try:
            return Role(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Credentials:
    """Identifiants de connexion."""

    username: str
    password: str = field(repr=False)

    def to_payload(self) -> Dict[str, str]:
        return {"username": self.username, "password": self.password}


@dataclass(frozen=True)
class RegistrationRequest:
    """
    Demande d'inscription.

    La confirmation du mot de passe n'est jamais transmise au service:
    `to_payload()` l'écarte.
    """

    username: str
    email: str
    password: str = field(repr=False)
    password_confirmation: str = field(repr=False)
    address: str = ""

    def to_payload(self) -> Dict[str, str]:
        return {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "address": self.address,
        }


class ExchangeErrorKind(Enum):
    """Types d'échec d'un échange login/register."""

    INVALID_CREDENTIALS = "invalid_credentials"
    REGISTRATION_REJECTED = "registration_rejected"
    TRANSPORT_FAILURE = "transport_failure"
    PERSISTENCE_FAILURE = "persistence_failure"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class ExchangeError:
    """Échec typé, affichable tel quel par le formulaire."""

    kind: ExchangeErrorKind
    message: str


@dataclass(frozen=True)
class ExchangeResult:
    """Résultat d'un échange login/register."""

    success: bool
    identity: Optional[Identity] = None
    error: Optional[ExchangeError] = None

    @classmethod
    def ok(cls, identity: Identity) -> "ExchangeResult":
        return cls(success=True, identity=identity)

    @classmethod
    def failed(cls, kind: ExchangeErrorKind, message: str) -> "ExchangeResult":
        return cls(success=False, error=ExchangeError(kind=kind, message=message))


SessionListener = Callable[[Optional[Identity]], None]


# ══════════════════════════════════════════════════════════════════════════════
# INTERFACES
# ══════════════════════════════════════════════════════════════════════════════


class ISessionStore(ABC):
    """
    Source unique de l'utilisateur connecté.

    Écrit uniquement par le SessionManager, lu par les gardes et l'affichage.
    """

    @abstractmethod
    def current(self) -> Optional[Identity]:
        """Retourne l'identité résidente ou None. Sans effet de bord."""
        pass

    @abstractmethod
    def set(self, identity: Optional[Identity]) -> None:
        """Remplace la valeur résidente en entier (pas de fusion)."""
        pass

    @abstractmethod
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Enregistre un listener notifié à chaque changement.

        Returns:
            Fonction de désabonnement
        """
        pass


class IAuthClient(ABC):
    """
    Service distant d'authentification.

    Raises (toutes méthodes):
        AuthRejectedError: Le service refuse la demande
        AuthTransportError: Service injoignable ou réponse inexploitable
    """

    @abstractmethod
    async def login(self, credentials: Credentials) -> Identity:
        """Authentifie l'utilisateur."""
        pass

    @abstractmethod
    async def register(self, request: RegistrationRequest) -> Identity:
        """Inscrit un nouvel utilisateur."""
        pass


class ISessionManager(ABC):
    """
    Gestion des échanges login/register/logout.

    Les échecs sont retournés sous forme d'ExchangeResult, jamais levés.
    """

    @abstractmethod
    async def login(self, credentials: Credentials) -> ExchangeResult:
        """Connexion; en cas de succès, session et copie durable mises à jour."""
        pass

    @abstractmethod
    async def register(self, request: RegistrationRequest) -> ExchangeResult:
        """Inscription; même contrat que login."""
        pass

    @abstractmethod
    def logout(self) -> None:
        """Vide la session et supprime la copie durable. Idempotent."""
        pass

    @abstractmethod
    def restore(self) -> Optional[Identity]:
        """Recharge la copie durable au démarrage, sans appel réseau."""
        pass
