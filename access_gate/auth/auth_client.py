"""
Auth - HTTP Auth Client

Adaptateur httpx vers le service distant d'authentification/inscription.

Sécurité: les mots de passe ne sont jamais loggés ni conservés; ils sont
uniquement transmis dans le corps de la requête.
"""

from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..logging import StructuredLogger
from .interfaces import Credentials, IAuthClient, Identity, RegistrationRequest


class AuthClientError(Exception):
    """Erreur d'échange avec le service d'authentification."""

    pass


class AuthRejectedError(AuthClientError):
    """Le service a refusé la demande (réponse non-2xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthTransportError(AuthClientError):
    """Service injoignable, timeout ou réponse inexploitable."""

    pass


class HttpAuthClient(IAuthClient):
    """
    Client HTTP du service d'authentification.

    Example:
        client = HttpAuthClient("https://shop.example.com/api")
        identity = await client.login(Credentials("alice", "s3cret"))
        await client.aclose()
    """

    DEFAULT_LOGIN_FAILURE = "Invalid username or password."
    DEFAULT_REGISTER_FAILURE = "Registration was rejected."

    def __init__(
        self,
        base_url: str,
        login_path: str = "/auth/login",
        register_path: str = "/auth/register",
        connect_timeout: float = 10.0,
        request_timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            base_url: URL de base du service
            login_path: Chemin de l'endpoint de connexion
            register_path: Chemin de l'endpoint d'inscription
            connect_timeout: Timeout de connexion (secondes)
            request_timeout: Timeout global de requête (secondes)
            transport: Transport httpx personnalisé (tests)
            logger: Logger structuré
        """
        self.login_path = login_path
        self.register_path = register_path
        self._logger = logger or StructuredLogger("auth-client")
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(request_timeout, connect=connect_timeout),
            transport=transport,
        )

    async def login(self, credentials: Credentials) -> Identity:
        return await self._exchange(self.login_path, credentials.to_payload(), self.DEFAULT_LOGIN_FAILURE)

    async def register(self, request: RegistrationRequest) -> Identity:
        return await self._exchange(self.register_path, request.to_payload(), self.DEFAULT_REGISTER_FAILURE)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _exchange(self, path: str, payload: Dict[str, str], default_failure: str) -> Identity:
        """
        POST JSON et conversion de la réponse en Identity.

        Raises:
            AuthRejectedError: Réponse non-2xx
            AuthTransportError: Erreur réseau ou corps 2xx invalide
        """
        try:
            response = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            self._logger.warn("Auth service unreachable", path=path, error=type(e).__name__)
            raise AuthTransportError(f"Auth service unreachable: {e}") from e

        if not response.is_success:
            message = self._failure_message(response) or default_failure
            self._logger.info("Auth service rejected request", path=path, status=response.status_code)
            raise AuthRejectedError(message, status_code=response.status_code)

        try:
            return Identity.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            self._logger.error("Auth service returned an invalid identity", path=path, status=response.status_code)
            raise AuthTransportError("Auth service returned an invalid identity") from e

    @staticmethod
    def _failure_message(response: httpx.Response) -> Optional[str]:
        """Extrait `message`, `error` ou `detail` d'un corps JSON d'erreur."""
        try:
            body: Any = response.json()
        except ValueError:
            return None

        if not isinstance(body, dict):
            return None

        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None
