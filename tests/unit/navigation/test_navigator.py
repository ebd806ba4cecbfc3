"""
Tests unitaires Navigator, RouteTable et InMemoryRouter
"""

import pytest

from access_gate.auth import Role
from access_gate.navigation import (
    AuthenticationGate,
    AuthorizationGate,
    InMemoryRouter,
    NavigationStatus,
    Navigator,
    RouteConfig,
    RouteTable,
    RouteTableError,
    normalize_path,
)


@pytest.fixture
def navigator(store, router, routes, logger):
    return Navigator(
        routes,
        router,
        AuthenticationGate(store, router, login_path=routes.login_path, logger=logger),
        AuthorizationGate(store, router, default_path=routes.default_path, logger=logger),
        logger=logger,
    )


# ══════════════════════════════════════════════════════════════════════════════
# TESTS NAVIGATOR
# ══════════════════════════════════════════════════════════════════════════════


class TestNavigator:
    """Enchaînement des gardes."""

    @pytest.mark.parametrize("path,view", [("/", "home"), ("/login", "login"), ("/register", "register")])
    def test_public_routes_render_without_session(self, navigator, router, path, view):
        result = navigator.navigate(path)

        assert result.status is NavigationStatus.RENDERED
        assert result.view == view
        assert router.history == []

    def test_protected_route_without_session_redirects_to_login(self, navigator, router):
        result = navigator.navigate("/admin")

        assert result.status is NavigationStatus.REDIRECTED
        assert result.redirect_to == "/login"
        assert router.history == ["/login"]

    def test_role_mismatch_redirects_to_default(self, navigator, store, router, customer):
        store.set(customer)

        result = navigator.navigate("/admin")

        assert result.redirect_to == "/"
        assert router.history == ["/"]

    def test_matching_role_renders(self, navigator, store, admin):
        store.set(admin)

        result = navigator.navigate("/admin")

        assert result.rendered is True
        assert result.view == "admin-home"

    def test_authorization_gate_not_run_when_authentication_denies(self, navigator, router):
        navigator.navigate("/customer")
        assert router.history == ["/login"]

    def test_auth_only_route_skips_role_gate(self, store, router, logger, roleless):
        routes = RouteTable(
            [RouteConfig("/", "home"), RouteConfig("/login", "login"), RouteConfig("/account", "account", True)]
        )
        navigator = Navigator(
            routes,
            router,
            AuthenticationGate(store, router, logger=logger),
            AuthorizationGate(store, router, logger=logger),
            logger=logger,
        )
        store.set(roleless)

        assert navigator.navigate("/account").view == "account"

    def test_unknown_path_redirects_to_default(self, navigator, router):
        result = navigator.navigate("/nowhere")

        assert result.redirect_to == "/"
        assert router.history == ["/"]

    def test_path_normalized(self, navigator, store, customer):
        store.set(customer)
        result = navigator.navigate("/customer/?tab=orders")
        assert result.rendered is True
        assert result.path == "/customer"


# ══════════════════════════════════════════════════════════════════════════════
# TESTS ROUTE TABLE
# ══════════════════════════════════════════════════════════════════════════════


class TestRouteTable:
    """Table des routes."""

    def test_default_table(self, routes):
        assert routes.resolve("/customer").required_role is Role.CUSTOMER
        assert routes.resolve("/admin").required_role is Role.ADMIN
        assert routes.resolve("/").requires_auth is False

    def test_home_for_role(self, routes):
        assert routes.home_for(Role.CUSTOMER) == "/customer"
        assert routes.home_for(Role.ADMIN) == "/admin"
        assert routes.home_for(None) is None

    def test_duplicate_route_rejected(self):
        with pytest.raises(RouteTableError, match="Duplicate"):
            RouteTable([RouteConfig("/", "home"), RouteConfig("/", "other"), RouteConfig("/login", "login")])

    def test_protected_login_rejected(self):
        with pytest.raises(RouteTableError, match="must not be protected"):
            RouteTable([RouteConfig("/", "home"), RouteConfig("/login", "login", requires_auth=True)])

    def test_missing_default_rejected(self):
        with pytest.raises(RouteTableError, match="not declared"):
            RouteTable([RouteConfig("/login", "login")])

    def test_undeclared_home_rejected(self):
        with pytest.raises(RouteTableError):
            RouteTable(
                [RouteConfig("/", "home"), RouteConfig("/login", "login")],
                role_homes={Role.ADMIN: "/admin"},
            )


class TestRouteConfig:
    def test_role_requires_authentication(self):
        with pytest.raises(ValueError):
            RouteConfig("/admin", "admin-home", requires_auth=False, required_role=Role.ADMIN)

    def test_path_must_be_absolute(self):
        with pytest.raises(ValueError):
            RouteConfig("admin", "admin-home")


class TestNormalizePath:
    @pytest.mark.parametrize(
        "raw,expected",
        [("", "/"), ("/", "/"), ("/admin/", "/admin"), ("admin", "/admin"), ("/a?x=1#top", "/a")],
    )
    def test_normalize(self, raw, expected):
        assert normalize_path(raw) == expected


class TestInMemoryRouter:
    def test_redirect_records_history(self):
        router = InMemoryRouter()
        assert router.current_path == "/"
        assert router.last_redirect is None

        router.redirect("/login")
        router.redirect("/customer")

        assert router.history == ["/login", "/customer"]
        assert router.current_path == "/customer"
