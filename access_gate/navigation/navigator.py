"""
Navigation - Navigator

Enchaîne les gardes pour chaque navigation:
    requête → AuthenticationGate → AuthorizationGate → rendu de la vue
"""

from typing import Optional

from ..logging import StructuredLogger
from .interfaces import (
    INavigationGate,
    IRouter,
    NavigationRequest,
    NavigationResult,
    NavigationStatus,
)
from .route_table import RouteTable, normalize_path


class Navigator:
    """
    Pipeline de navigation.

    Seules les routes `requires_auth` passent par la garde d'authentification,
    et seules celles portant un `required_role` par la garde d'autorisation.
    Un chemin inconnu redirige vers la vue par défaut.
    """

    def __init__(
        self,
        routes: RouteTable,
        router: IRouter,
        authentication_gate: INavigationGate,
        authorization_gate: INavigationGate,
        logger: Optional[StructuredLogger] = None,
    ):
        self._routes = routes
        self._router = router
        self._authentication_gate = authentication_gate
        self._authorization_gate = authorization_gate
        self._logger = logger or StructuredLogger("navigator")

    def navigate(self, path: str) -> NavigationResult:
        """
        Évalue une tentative de navigation.

        Args:
            path: Chemin demandé

        Returns:
            NavigationResult RENDERED (vue) ou REDIRECTED (cible)
        """
        path = normalize_path(path)
        route = self._routes.resolve(path)

        if route is None:
            self._logger.info("Unknown route", path=path, redirect_to=self._routes.default_path)
            self._router.redirect(self._routes.default_path)
            return NavigationResult(
                status=NavigationStatus.REDIRECTED,
                path=path,
                redirect_to=self._routes.default_path,
            )

        request = NavigationRequest(path=path, route=route)

        gates = []
        if route.requires_auth:
            gates.append(self._authentication_gate)
        if route.required_role is not None:
            gates.append(self._authorization_gate)

        for gate in gates:
            decision = gate.check(request)
            if not decision.allowed:
                return NavigationResult(
                    status=NavigationStatus.REDIRECTED,
                    path=path,
                    redirect_to=decision.redirect_to,
                )

        self._logger.debug("View rendered", path=path, view=route.view)
        return NavigationResult(status=NavigationStatus.RENDERED, path=path, view=route.view)
