"""
Navigation - Interfaces

Contrats des gardes de navigation et du routeur.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..auth.interfaces import Role


# ══════════════════════════════════════════════════════════════════════════════
# TYPES
# ══════════════════════════════════════════════════════════════════════════════


class GateOutcome(Enum):
    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class GateDecision:
    """
    Décision d'une garde.

    Attributes:
        outcome: ALLOW ou DENY
        redirect_to: Cible de redirection si DENY
        reason: Motif (logs)
    """

    outcome: GateOutcome
    redirect_to: Optional[str] = None
    reason: str = ""

    @property
    def allowed(self) -> bool:
        return self.outcome is GateOutcome.ALLOW

    @classmethod
    def allow(cls) -> "GateDecision":
        return cls(outcome=GateOutcome.ALLOW)

    @classmethod
    def deny(cls, redirect_to: str, reason: str) -> "GateDecision":
        return cls(outcome=GateOutcome.DENY, redirect_to=redirect_to, reason=reason)


@dataclass(frozen=True)
class RouteConfig:
    """
    Configuration statique d'une route.

    Attributes:
        path: Chemin ("/admin")
        view: Identifiant de la vue rendue
        requires_auth: Garde d'authentification active
        required_role: Rôle exigé (garde d'autorisation), None si aucun
    """

    path: str
    view: str
    requires_auth: bool = False
    required_role: Optional[Role] = None

    def __post_init__(self):
        if not self.path.startswith("/"):
            raise ValueError(f"Route path must start with '/', got {self.path!r}")
        if self.required_role is not None and not self.requires_auth:
            raise ValueError(f"Route {self.path} requires a role but not authentication")


@dataclass(frozen=True)
class NavigationRequest:
    """Tentative de navigation vers une route résolue."""

    path: str
    route: RouteConfig


class NavigationStatus(Enum):
    RENDERED = "rendered"
    REDIRECTED = "redirected"


@dataclass(frozen=True)
class NavigationResult:
    """Issue d'une navigation: vue rendue ou redirection."""

    status: NavigationStatus
    path: str
    view: Optional[str] = None
    redirect_to: Optional[str] = None

    @property
    def rendered(self) -> bool:
        return self.status is NavigationStatus.RENDERED


# ══════════════════════════════════════════════════════════════════════════════
# INTERFACES
# ══════════════════════════════════════════════════════════════════════════════


class IRouter(ABC):
    """Collaborateur de routage."""

    @abstractmethod
    def redirect(self, path: str) -> None:
        """Navigation fire-and-forget vers `path`."""
        pass


class INavigationGate(ABC):
    """Garde évaluée avant l'entrée dans une vue protégée."""

    @abstractmethod
    def check(self, request: NavigationRequest) -> GateDecision:
        """
        Évalue la navigation.

        En cas de DENY, la garde a déjà demandé la redirection au routeur.
        """
        pass
