"""
Navigation - Authorization Gate

Seconde garde: le rôle de l'identité doit être exactement le rôle exigé par
la route.

Règles:
    - Comparaison exacte, sans hiérarchie (admin ne satisfait PAS customer)
    - Identité sans rôle → toujours refusée
    - Refus → redirection vers la vue par défaut
"""

from typing import Optional

from ..auth.interfaces import ISessionStore, Role
from ..logging import StructuredLogger
from .interfaces import GateDecision, INavigationGate, IRouter, NavigationRequest


class GateConfigurationError(Exception):
    """Garde invoquée sur une route sans rôle exigé."""

    pass


class AuthorizationGate(INavigationGate):
    """
    Vérificateur de rôle par route.

    Example:
        gate = AuthorizationGate(store, router)
        decision = gate.check(NavigationRequest("/admin", admin_route))
    """

    def __init__(
        self,
        store: ISessionStore,
        router: IRouter,
        default_path: str = "/",
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            store: Session courante
            router: Routeur pour la redirection
            default_path: Vue par défaut en cas de refus
            logger: Logger structuré
        """
        self._store = store
        self._router = router
        self.default_path = default_path
        self._logger = logger or StructuredLogger("authorization-gate")

    def check(self, request: NavigationRequest) -> GateDecision:
        """
        Compare le rôle de l'identité au rôle exigé par la route.

        Raises:
            GateConfigurationError: Route sans rôle exigé
        """
        required_role = request.route.required_role
        if required_role is None:
            raise GateConfigurationError(f"Route {request.route.path} has no required role")

        identity = self._store.current()
        if identity is not None and self.role_satisfies(identity.role, required_role):
            return GateDecision.allow()

        self._logger.info(
            "Navigation denied: role mismatch",
            path=request.path,
            required_role=required_role.value,
            role=identity.role.value if identity and identity.role else None,
            redirect_to=self.default_path,
        )
        self._router.redirect(self.default_path)
        return GateDecision.deny(self.default_path, "role_mismatch")

    @staticmethod
    def role_satisfies(role: Optional[Role], required_role: Role) -> bool:
        """Égalité stricte des rôles; None ne satisfait rien."""
        return role is not None and role is required_role
