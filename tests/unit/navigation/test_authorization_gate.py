"""
Tests unitaires AuthorizationGate

Vérifie:
- ALLOW ssi rôle identique au rôle exigé
- Aucune hiérarchie: admin ne satisfait pas customer
- Identité sans rôle toujours refusée
"""

import itertools

import pytest

from access_gate.auth import Identity, Role
from access_gate.navigation import (
    AuthorizationGate,
    GateConfigurationError,
    GateOutcome,
    NavigationRequest,
    RouteConfig,
)


def request_for(role: Role) -> NavigationRequest:
    path = f"/{role.value}"
    return NavigationRequest(path=path, route=RouteConfig(path, f"{role.value}-home", True, role))


@pytest.fixture
def gate(store, router, logger):
    return AuthorizationGate(store, router, default_path="/", logger=logger)


class TestAuthorizationGateMatrix:
    """Toutes les combinaisons (rôle identité, rôle exigé)."""

    @pytest.mark.parametrize(
        "identity_role,required_role",
        list(itertools.product([Role.CUSTOMER, Role.ADMIN, None], [Role.CUSTOMER, Role.ADMIN])),
    )
    def test_allow_iff_exact_match(self, gate, store, router, identity_role, required_role):
        store.set(Identity(username="u", role=identity_role))

        decision = gate.check(request_for(required_role))

        expected = identity_role is required_role
        assert decision.allowed is expected
        assert router.history == ([] if expected else ["/"])


class TestAuthorizationGateRules:
    """Cas particuliers."""

    def test_admin_does_not_satisfy_customer(self, gate, store, admin):
        store.set(admin)

        decision = gate.check(request_for(Role.CUSTOMER))

        assert decision.outcome is GateOutcome.DENY
        assert decision.redirect_to == "/"
        assert decision.reason == "role_mismatch"

    def test_roleless_identity_always_denied(self, gate, store, roleless):
        store.set(roleless)
        for role in Role:
            assert gate.check(request_for(role)).allowed is False

    def test_no_identity_denied(self, gate):
        assert gate.check(request_for(Role.ADMIN)).allowed is False

    def test_route_without_role_is_configuration_error(self, gate, store, admin):
        store.set(admin)
        request = NavigationRequest("/account", RouteConfig("/account", "account", requires_auth=True))

        with pytest.raises(GateConfigurationError):
            gate.check(request)

    def test_custom_default_path(self, store, router, logger, customer):
        store.set(customer)
        gate = AuthorizationGate(store, router, default_path="/home", logger=logger)

        assert gate.check(request_for(Role.ADMIN)).redirect_to == "/home"
        assert router.last_redirect == "/home"

    def test_role_satisfies(self):
        assert AuthorizationGate.role_satisfies(Role.ADMIN, Role.ADMIN) is True
        assert AuthorizationGate.role_satisfies(Role.ADMIN, Role.CUSTOMER) is False
        assert AuthorizationGate.role_satisfies(None, Role.CUSTOMER) is False
