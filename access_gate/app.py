"""
Access Gate - Application Wiring

Assemble logger, stockage, session, gardes, navigation et formulaires à
partir d'une GateConfig. Les collaborateurs sont injectés explicitement.
"""

import sys
from pathlib import Path
from typing import Optional

from .auth import HttpAuthClient, IAuthClient, Role, SessionManager, SessionStore
from .core import GateConfig
from .forms import LoginForm, RegisterForm, SignOutAction
from .logging import LogConfig, StructuredLogger
from .navigation import (
    AuthenticationGate,
    AuthorizationGate,
    InMemoryRouter,
    IRouter,
    Navigator,
    RouteConfig,
    RouteTable,
)
from .storage import FileStorage, IDurableStorage, MemoryStorage


def build_route_table(config: GateConfig) -> RouteTable:
    """Construit la table des routes depuis la section `routes`."""
    routes_config = config.routes
    routes = [RouteConfig(path, path.strip("/") or "home") for path in routes_config.public]
    routes.extend(
        RouteConfig(route.path, route.view, requires_auth=True, required_role=route.role)
        for route in routes_config.protected
    )

    role_homes = {}
    if routes_config.customer_home:
        role_homes[Role.CUSTOMER] = routes_config.customer_home
    if routes_config.admin_home:
        role_homes[Role.ADMIN] = routes_config.admin_home

    return RouteTable(
        routes,
        login_path=routes_config.login,
        default_path=routes_config.default,
        role_homes=role_homes,
    )


class AccessGateApp:
    """
    Racine de composition.

    Example:
        config = ConfigLoader("configs").load("shop")
        app = AccessGateApp.from_config(config)
        await app.login_form.submit("alice", "s3cret")
        result = app.navigator.navigate("/customer")
        await app.aclose()
    """

    def __init__(
        self,
        config: GateConfig,
        auth_client: IAuthClient,
        storage: IDurableStorage,
        router: IRouter,
        logger: StructuredLogger,
        owns_auth_client: bool = False,
    ):
        self.config = config
        self.logger = logger
        self.auth_client = auth_client
        self.storage = storage
        self.router = router
        self._owns_auth_client = owns_auth_client

        self.routes = build_route_table(config)
        self.store = SessionStore(logger=logger.child("session-store"))
        self.session_manager = SessionManager(
            auth_client,
            self.store,
            storage,
            session_key=config.storage.session_key,
            logger=logger.child("session-manager"),
        )
        self.authentication_gate = AuthenticationGate(
            self.store, router, login_path=self.routes.login_path, logger=logger.child("authentication-gate")
        )
        self.authorization_gate = AuthorizationGate(
            self.store, router, default_path=self.routes.default_path, logger=logger.child("authorization-gate")
        )
        self.navigator = Navigator(
            self.routes,
            router,
            self.authentication_gate,
            self.authorization_gate,
            logger=logger.child("navigator"),
        )
        self.login_form = LoginForm(self.session_manager, router, self.routes, logger=logger.child("login-form"))
        self.register_form = RegisterForm(
            self.session_manager, router, self.routes, logger=logger.child("register-form")
        )
        self.sign_out = SignOutAction(self.session_manager, router, self.routes)

        # Lecture unique de la copie durable au démarrage
        self.session_manager.restore()

    @classmethod
    def from_config(
        cls,
        config: GateConfig,
        auth_client: Optional[IAuthClient] = None,
        storage: Optional[IDurableStorage] = None,
        router: Optional[IRouter] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> "AccessGateApp":
        """
        Crée l'application; les collaborateurs non fournis sont construits
        depuis la configuration.
        """
        if logger is None:
            output = (lambda line: print(line, file=sys.stderr)) if config.logging.stderr else None
            logger = StructuredLogger(
                "access-gate",
                config=LogConfig(min_level=config.logging.min_level),
                output_handler=output,
            )

        if storage is None:
            if config.storage.path:
                storage = FileStorage(Path(config.storage.path).expanduser(), logger=logger.child("storage"))
            else:
                storage = MemoryStorage()

        owns_auth_client = auth_client is None
        if auth_client is None:
            auth_client = HttpAuthClient(
                config.auth.base_url,
                login_path=config.auth.login_path,
                register_path=config.auth.register_path,
                connect_timeout=config.auth.connect_timeout,
                request_timeout=config.auth.request_timeout,
                logger=logger.child("auth-client"),
            )

        return cls(
            config,
            auth_client,
            storage,
            router or InMemoryRouter(),
            logger,
            owns_auth_client=owns_auth_client,
        )

    async def aclose(self) -> None:
        """Ferme le client HTTP s'il a été créé ici."""
        if self._owns_auth_client and isinstance(self.auth_client, HttpAuthClient):
            await self.auth_client.aclose()
