"""
Navigation - Route Table

Table des routes de l'application et vues d'accueil par rôle.
"""

from typing import Dict, Iterable, List, Optional

from ..auth.interfaces import Role
from .interfaces import RouteConfig


class RouteTableError(Exception):
    """Table de routes incohérente."""

    pass


def normalize_path(path: str) -> str:
    """
    Normalise un chemin: sans query/fragment, sans slash final, "/" par défaut.

    Examples:
        normalize_path("/admin/?tab=1") → "/admin"
        normalize_path("") → "/"
    """
    for separator in ("?", "#"):
        path = path.split(separator, 1)[0]
    path = path.strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


class RouteTable:
    """
    Table statique des routes.

    Example:
        table = RouteTable.default()
        route = table.resolve("/admin")
        assert route.required_role is Role.ADMIN
    """

    def __init__(
        self,
        routes: Iterable[RouteConfig],
        login_path: str = "/login",
        default_path: str = "/",
        role_homes: Optional[Dict[Role, str]] = None,
    ):
        """
        Args:
            routes: Routes de l'application
            login_path: Vue de connexion (redirection si non authentifié)
            default_path: Vue par défaut (redirection si rôle refusé)
            role_homes: Vue d'accueil de chaque rôle

        Raises:
            RouteTableError: Doublon, ou login/default absents ou protégés
        """
        self._routes: Dict[str, RouteConfig] = {}
        for route in routes:
            path = normalize_path(route.path)
            if path in self._routes:
                raise RouteTableError(f"Duplicate route: {path}")
            self._routes[path] = route

        self.login_path = normalize_path(login_path)
        self.default_path = normalize_path(default_path)
        self.role_homes: Dict[Role, str] = {
            role: normalize_path(path) for role, path in (role_homes or {}).items()
        }

        for name, path in (("login", self.login_path), ("default", self.default_path)):
            route = self._routes.get(path)
            if route is None:
                raise RouteTableError(f"The {name} route {path} is not declared")
            if route.requires_auth:
                raise RouteTableError(f"The {name} route {path} must not be protected")

        for role, path in self.role_homes.items():
            if path not in self._routes:
                raise RouteTableError(f"Home route {path} for role {role.value} is not declared")

    @classmethod
    def default(cls) -> "RouteTable":
        """Table de l'application boutique: accueil, connexion, espaces client et admin."""
        return cls(
            routes=[
                RouteConfig("/", "home"),
                RouteConfig("/login", "login"),
                RouteConfig("/register", "register"),
                RouteConfig("/customer", "customer-home", requires_auth=True, required_role=Role.CUSTOMER),
                RouteConfig("/admin", "admin-home", requires_auth=True, required_role=Role.ADMIN),
            ],
            login_path="/login",
            default_path="/",
            role_homes={Role.CUSTOMER: "/customer", Role.ADMIN: "/admin"},
        )

    @property
    def routes(self) -> List[RouteConfig]:
        return list(self._routes.values())

    def resolve(self, path: str) -> Optional[RouteConfig]:
        """Retourne la route du chemin, ou None si inconnue."""
        return self._routes.get(normalize_path(path))

    def home_for(self, role: Optional[Role]) -> Optional[str]:
        """Vue d'accueil du rôle, None si rôle absent ou sans accueil."""
        if role is None:
            return None
        return self.role_homes.get(role)
