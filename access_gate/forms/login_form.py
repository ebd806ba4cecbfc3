"""
Forms - Login Form
"""

from typing import Optional

from ..auth.interfaces import ExchangeResult, ISessionManager
from ..logging import StructuredLogger
from ..navigation import IRouter, RouteTable
from .base import AuthForm
from .validation import FormValidator


class LoginForm(AuthForm):
    """
    Formulaire de connexion.

    Example:
        form = LoginForm(manager, router, routes)
        await form.submit("alice", "s3cret")
        if form.state.error_message:
            print(form.state.error_message)
    """

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

    async def submit(self, username: str, password: str) -> Optional[ExchangeResult]:
        async def exchange() -> ExchangeResult:
            credentials = self._validator.build_credentials(username, password)
            return await self._manager.login(credentials)

        return await self._run(exchange)
