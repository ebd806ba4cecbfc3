"""
Forms - Sign Out
"""

from ..auth.interfaces import ISessionManager
from ..navigation import IRouter, RouteTable


class SignOutAction:
    """Déconnexion puis retour à la vue de connexion."""

    def __init__(self, manager: ISessionManager, router: IRouter, routes: RouteTable):
        self._manager = manager
        self._router = router
        self._routes = routes

    def run(self) -> None:
        self._manager.logout()
        self._router.redirect(self._routes.login_path)
