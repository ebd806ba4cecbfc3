"""
Core - Configuration Models

Modèles pydantic de la configuration applicative.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..auth.interfaces import Role
from ..logging import LogLevel


# ══════════════════════════════════════════════════════════════════════════════
# TYPES
# ══════════════════════════════════════════════════════════════════════════════


class AuthServiceConfig(BaseModel):
    """Service distant d'authentification."""

    base_url: str = "http://localhost:8080/api"
    login_path: str = "/auth/login"
    register_path: str = "/auth/register"
    connect_timeout: float = Field(default=10.0, gt=0, le=10.0)
    request_timeout: float = Field(default=30.0, gt=0, le=30.0)


class StorageConfig(BaseModel):
    """Stockage durable de la copie de session. path=None → mémoire."""

    path: Optional[str] = None
    session_key: str = Field(default="currentUser", min_length=1)


class ProtectedRouteConfig(BaseModel):
    path: str
    view: str
    role: Optional[Role] = None


class RoutesConfig(BaseModel):
    """Vues de l'application."""

    login: str = "/login"
    default: str = "/"
    public: List[str] = Field(default_factory=lambda: ["/", "/login", "/register"])
    protected: List[ProtectedRouteConfig] = Field(
        default_factory=lambda: [
            ProtectedRouteConfig(path="/customer", view="customer-home", role=Role.CUSTOMER),
            ProtectedRouteConfig(path="/admin", view="admin-home", role=Role.ADMIN),
        ]
    )
    customer_home: Optional[str] = "/customer"
    admin_home: Optional[str] = "/admin"

    @model_validator(mode="after")
    def _login_and_default_are_public(self) -> "RoutesConfig":
        for name, path in (("login", self.login), ("default", self.default)):
            if path not in self.public:
                raise ValueError(f"routes.{name} ({path}) must be listed in routes.public")
        return self


class LoggingConfig(BaseModel):
    min_level: LogLevel = LogLevel.INFO
    stderr: bool = False

    @field_validator("min_level", mode="before")
    @classmethod
    def _upper(cls, value):
        return value.upper() if isinstance(value, str) else value


class GateConfig(BaseModel):
    """Configuration complète du contrôle d'accès."""

    version: str
    auth: AuthServiceConfig = Field(default_factory=AuthServiceConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    routes: RoutesConfig = Field(default_factory=RoutesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
