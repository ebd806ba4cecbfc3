"""
Navigation - Authentication Gate

Première garde: une identité doit être résidente.
"""

from typing import Optional

from ..auth.interfaces import ISessionStore
from ..logging import StructuredLogger
from .interfaces import GateDecision, INavigationGate, IRouter, NavigationRequest


class AuthenticationGate(INavigationGate):
    """
    Refuse toute navigation protégée sans identité et redirige vers la connexion.

    La route cible n'intervient pas dans la décision. Aucune écriture de
    session.
    """

    def __init__(
        self,
        store: ISessionStore,
        router: IRouter,
        login_path: str = "/login",
        logger: Optional[StructuredLogger] = None,
    ):
        self._store = store
        self._router = router
        self.login_path = login_path
        self._logger = logger or StructuredLogger("authentication-gate")

    def check(self, request: NavigationRequest) -> GateDecision:
        if self._store.current() is not None:
            return GateDecision.allow()

        self._logger.info("Navigation denied: not signed in", path=request.path, redirect_to=self.login_path)
        self._router.redirect(self.login_path)
        return GateDecision.deny(self.login_path, "not_authenticated")
