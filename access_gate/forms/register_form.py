"""
Forms - Register Form

Le mot de passe et sa confirmation doivent correspondre avant tout envoi.
"""

from typing import Optional

from ..auth.interfaces import ExchangeResult, ISessionManager
from ..logging import StructuredLogger
from ..navigation import IRouter, RouteTable
from .base import AuthForm
from .validation import FormValidator


class RegisterForm(AuthForm):
    """Formulaire d'inscription."""

    def __init__(
        self,
        manager: ISessionManager,
        router: IRouter,
        routes: RouteTable,
        validator: Optional[FormValidator] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        super().__init__(router, routes, validator=validator, logger=logger)
        self._manager = manager

    async def submit(
        self,
        username: str,
        email: str,
        password: str,
        password_confirmation: str,
        address: str,
    ) -> Optional[ExchangeResult]:
        """
        Valide puis soumet l'inscription.

        Returns:
            ExchangeResult, ou None si saisie invalide (aucun appel réseau)
        """
        async def exchange() -> ExchangeResult:
            request = self._validator.build_registration(
                username, email, password, password_confirmation, address
            )
            return await self._manager.register(request)

        return await self._run(exchange)
