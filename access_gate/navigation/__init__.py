"""
Navigation

Gardes de navigation (authentification puis rôle) et table des routes.
"""

from .interfaces import (
    GateOutcome,
    GateDecision,
    RouteConfig,
    NavigationRequest,
    NavigationStatus,
    NavigationResult,
    IRouter,
    INavigationGate,
)
from .router import InMemoryRouter
from .route_table import RouteTable, RouteTableError, normalize_path
from .authentication_gate import AuthenticationGate
from .authorization_gate import AuthorizationGate, GateConfigurationError
from .navigator import Navigator

__all__ = [
    # Interfaces
    "IRouter",
    "INavigationGate",
    # Data classes
    "GateOutcome",
    "GateDecision",
    "RouteConfig",
    "NavigationRequest",
    "NavigationStatus",
    "NavigationResult",
    # Implementations
    "InMemoryRouter",
    "RouteTable",
    "AuthenticationGate",
    "AuthorizationGate",
    "Navigator",
    "normalize_path",
    # Exceptions
    "RouteTableError",
    "GateConfigurationError",
]
