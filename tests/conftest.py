"""
Access Gate - Pytest Configuration
Fixtures partagées pour tous les tests.
"""

from pathlib import Path
from typing import List, Optional

import pytest

from access_gate.auth import (
    AuthRejectedError,
    Credentials,
    IAuthClient,
    Identity,
    RegistrationRequest,
    Role,
    SessionManager,
    SessionStore,
)
from access_gate.logging import LogConfig, LogLevel, StructuredLogger
from access_gate.navigation import InMemoryRouter, RouteTable
from access_gate.storage import MemoryStorage


class FakeAuthClient(IAuthClient):
    """
    Service d'authentification simulé.

    Retourne `identity`, ou lève `error` si défini. Enregistre les appels.
    """

    def __init__(self, identity: Optional[Identity] = None, error: Optional[Exception] = None):
        self.identity = identity
        self.error = error
        self.login_calls: List[Credentials] = []
        self.register_calls: List[RegistrationRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.login_calls) + len(self.register_calls)

    async def login(self, credentials: Credentials) -> Identity:
        self.login_calls.append(credentials)
        return self._answer()

    async def register(self, request: RegistrationRequest) -> Identity:
        self.register_calls.append(request)
        return self._answer()

    def _answer(self) -> Identity:
        if self.error is not None:
            raise self.error
        if self.identity is None:
            raise AuthRejectedError("Invalid username or password.", status_code=401)
        return self.identity


@pytest.fixture
def fixtures_path() -> Path:
    """Chemin vers le dossier fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def logger() -> StructuredLogger:
    return StructuredLogger("tests", config=LogConfig(min_level=LogLevel.DEBUG))


@pytest.fixture
def customer() -> Identity:
    return Identity(username="alice", email="alice@example.com", address="1 Main St", role=Role.CUSTOMER)


@pytest.fixture
def admin() -> Identity:
    return Identity(username="root", email="root@example.com", address="HQ", role=Role.ADMIN)


@pytest.fixture
def roleless() -> Identity:
    return Identity(username="ghost", email="ghost@example.com", address="", role=None)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(logger) -> SessionStore:
    return SessionStore(logger=logger)


@pytest.fixture
def auth_client(customer) -> FakeAuthClient:
    return FakeAuthClient(identity=customer)


@pytest.fixture
def session_manager(auth_client, store, storage, logger) -> SessionManager:
    return SessionManager(auth_client, store, storage, logger=logger)


@pytest.fixture
def router() -> InMemoryRouter:
    return InMemoryRouter()


@pytest.fixture
def routes() -> RouteTable:
    return RouteTable.default()
