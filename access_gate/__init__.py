"""
Access Gate

Session côté client et contrôle d'accès par rôle (customer/admin):
    - auth: session, échanges login/register/logout
    - storage: copie durable de la session
    - navigation: gardes d'authentification et d'autorisation
    - forms: validation et redirection par rôle
    - core: configuration
    - logging: logs JSON structurés
"""

from .app import AccessGateApp, build_route_table

__all__ = [
    "AccessGateApp",
    "build_route_table",
]
