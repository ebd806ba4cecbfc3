"""
Tests d'intégration: scénarios de navigation de bout en bout

Application complète (AccessGateApp) avec client HTTP réel sur
httpx.MockTransport et stockage fichier.
"""

import json

import httpx
import pytest

from access_gate import AccessGateApp
from access_gate.auth import HttpAuthClient, Identity, Role
from access_gate.core import ConfigLoader
from access_gate.navigation import NavigationStatus
from access_gate.storage import FileStorage


USERS = {
    "alice": {"username": "alice", "email": "alice@example.com", "address": "1 Main St", "role": "customer"},
    "root": {"username": "root", "email": "root@example.com", "address": "HQ", "role": "admin"},
}


class FakeAuthService:
    """Service d'authentification derrière httpx.MockTransport."""

    def __init__(self):
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content)
        if request.url.path.endswith("/auth/login"):
            user = USERS.get(body["username"])
            if user is None or body["password"] != "pw":
                return httpx.Response(401, json={"message": "Invalid username or password."})
            return httpx.Response(200, json=user)
        if request.url.path.endswith("/auth/register"):
            if body["username"] in USERS:
                return httpx.Response(409, json={"message": "Username already taken."})
            return httpx.Response(201, json={**body, "role": "customer"})
        return httpx.Response(404)


@pytest.fixture
def config(fixtures_path):
    return ConfigLoader(fixtures_path / "configs").load("valid_minimal")


@pytest.fixture
def service():
    return FakeAuthService()


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "storage.json"


def start_app(config, service, storage_path) -> AccessGateApp:
    """Simule un démarrage de processus."""
    client = HttpAuthClient(config.auth.base_url, transport=httpx.MockTransport(service))
    return AccessGateApp.from_config(config, auth_client=client, storage=FileStorage(storage_path))


class TestNavigationScenarios:
    """Scénarios A à D."""

    def test_scenario_a_fresh_session_redirected_to_login(self, config, service, storage_path):
        app = start_app(config, service, storage_path)

        result = app.navigator.navigate("/customer")

        assert result.status is NavigationStatus.REDIRECTED
        assert result.redirect_to == "/login"
        assert app.router.last_redirect == "/login"

    @pytest.mark.asyncio
    async def test_scenario_b_customer_denied_admin(self, config, service, storage_path):
        app = start_app(config, service, storage_path)
        await app.login_form.submit("alice", "pw")

        result = app.navigator.navigate("/admin")

        assert app.store.current().role is Role.CUSTOMER
        assert result.status is NavigationStatus.REDIRECTED
        assert result.redirect_to == "/"
        await app.auth_client.aclose()

    @pytest.mark.asyncio
    async def test_scenario_c_admin_enters_admin(self, config, service, storage_path):
        app = start_app(config, service, storage_path)
        await app.login_form.submit("root", "pw")

        result = app.navigator.navigate("/admin")

        assert app.router.history == ["/admin"]
        assert result.rendered is True
        assert result.view == "admin-home"
        await app.auth_client.aclose()

    @pytest.mark.asyncio
    async def test_scenario_d_restart_restores_session_without_network(self, config, service, storage_path):
        first = start_app(config, service, storage_path)
        await first.login_form.submit("alice", "pw")
        await first.auth_client.aclose()
        requests_before = len(service.requests)

        second = start_app(config, service, storage_path)

        assert second.store.current() == Identity.model_validate(USERS["alice"])
        assert len(service.requests) == requests_before
        assert second.navigator.navigate("/customer").rendered is True


class TestSessionLifecycle:
    """Inscription, échec, déconnexion."""

    @pytest.mark.asyncio
    async def test_register_then_enter_customer_area(self, config, service, storage_path):
        app = start_app(config, service, storage_path)

        result = await app.register_form.submit("carol", "carol@example.com", "pw", "pw", "3 Elm St")

        assert result.success is True
        assert app.router.last_redirect == "/customer"
        assert app.navigator.navigate("/customer").rendered is True
        sent = json.loads(service.requests[-1].content)
        assert "password_confirmation" not in sent
        await app.auth_client.aclose()

    @pytest.mark.asyncio
    async def test_failed_login_keeps_user_logged_out(self, config, service, storage_path):
        app = start_app(config, service, storage_path)

        await app.login_form.submit("alice", "wrong")

        assert app.login_form.state.error_message == "Invalid username or password."
        assert app.store.current() is None
        assert not storage_path.exists()
        assert app.navigator.navigate("/customer").redirect_to == "/login"
        await app.auth_client.aclose()

    @pytest.mark.asyncio
    async def test_sign_out_then_restart_is_logged_out(self, config, service, storage_path):
        app = start_app(config, service, storage_path)
        await app.login_form.submit("root", "pw")

        app.sign_out.run()
        await app.auth_client.aclose()

        restarted = start_app(config, service, storage_path)
        assert restarted.store.current() is None
        assert restarted.navigator.navigate("/admin").redirect_to == "/login"

    @pytest.mark.asyncio
    async def test_auth_only_route_from_config(self, config, service, storage_path):
        app = start_app(config, service, storage_path)
        assert app.navigator.navigate("/account").redirect_to == "/login"

        await app.login_form.submit("alice", "pw")

        assert app.navigator.navigate("/account").view == "account"
        await app.auth_client.aclose()


class TestAppWiring:
    """Construction depuis la configuration."""

    @pytest.mark.asyncio
    async def test_defaults_build_http_client_and_memory_storage(self, config):
        app = AccessGateApp.from_config(config)

        assert isinstance(app.auth_client, HttpAuthClient)
        assert app.store.current() is None
        assert app.routes.home_for(Role.ADMIN) == "/admin"
        await app.aclose()

    def test_file_storage_from_config(self, tmp_path):
        config = ConfigLoader().parse({"version": "1.0", "storage": {"path": str(tmp_path / "s.json")}})

        app = AccessGateApp.from_config(config)

        assert isinstance(app.storage, FileStorage)
