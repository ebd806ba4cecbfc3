"""
Auth - Session Manager Implementation

Échanges login/register/logout et cohérence session mémoire / copie durable.

Règles:
    - Une identité n'est résidente qu'après un échange réussi
    - Copie durable écrite AVANT le commit mémoire
    - Un échec laisse session et copie durable intactes
    - Une réponse arrivée après un logout ou un échange plus récent est ignorée
"""

from typing import Awaitable, Callable, Optional

from pydantic import ValidationError

from ..logging import StructuredLogger
from ..storage import IDurableStorage, StorageError
from .auth_client import AuthRejectedError, AuthTransportError
from .interfaces import (
    Credentials,
    ExchangeErrorKind,
    ExchangeResult,
    IAuthClient,
    Identity,
    ISessionManager,
    ISessionStore,
    RegistrationRequest,
)


class SessionManager(ISessionManager):
    """
    Seul écrivain du SessionStore.

    Chaque échange capture un numéro de génération; logout et tout nouvel
    échange l'incrémentent. Une réponse dont la génération n'est plus
    courante n'est jamais appliquée.

    Example:
        manager = SessionManager(auth_client, store, storage)
        manager.restore()
        result = await manager.login(Credentials("alice", "s3cret"))
        if not result.success:
            print(result.error.message)
    """

    SESSION_KEY = "currentUser"
    # Écrit à la place de la copie durable quand sa suppression échoue
    TOMBSTONE = "null"

    TRANSPORT_FAILURE_MESSAGE = "Unable to reach the authentication service. Please try again."
    PERSISTENCE_FAILURE_MESSAGE = "Unable to save your session on this device. Please try again."
    SUPERSEDED_MESSAGE = "Your session changed while signing in. Please try again."

    def __init__(
        self,
        auth_client: IAuthClient,
        store: ISessionStore,
        storage: IDurableStorage,
        session_key: str = SESSION_KEY,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            auth_client: Service distant d'authentification
            store: SessionStore à alimenter
            storage: Stockage durable de la copie de session
            session_key: Clé de la copie durable (défaut: "currentUser")
            logger: Logger structuré
        """
        self._auth_client = auth_client
        self._store = store
        self._storage = storage
        self.session_key = session_key
        self._logger = logger or StructuredLogger("session-manager")
        self._generation = 0
        self._purge_pending = False

    @property
    def generation(self) -> int:
        return self._generation

    async def login(self, credentials: Credentials) -> ExchangeResult:
        """
        Connexion.

        Args:
            credentials: Identifiants saisis

        Returns:
            ExchangeResult (succès avec identité, ou échec typé)
        """
        return await self._exchange(
            "login",
            credentials.username,
            lambda: self._auth_client.login(credentials),
            ExchangeErrorKind.INVALID_CREDENTIALS,
        )

    async def register(self, request: RegistrationRequest) -> ExchangeResult:
        """
        Inscription.

        La correspondance mot de passe / confirmation est vérifiée par le
        formulaire appelant, pas ici.

        Args:
            request: Demande d'inscription

        Returns:
            ExchangeResult (succès avec identité, ou échec typé)
        """
        return await self._exchange(
            "register",
            request.username,
            lambda: self._auth_client.register(request),
            ExchangeErrorKind.REGISTRATION_REJECTED,
        )

    def logout(self) -> None:
        """
        Vide la session et supprime la copie durable.

        Toujours réussi et idempotent; un échange en cours sera ignoré à
        son retour. Si la suppression échoue, la copie est remplacée par
        TOMBSTONE; si cette écriture échoue aussi, la suppression est
        retentée au prochain restore() et aucune identité n'est restaurée.
        """
        self._generation += 1
        self._store.set(None)
        self._purge_pending = not self._purge_durable_copy()
        self._logger.info("Logged out")

    def _purge_durable_copy(self) -> bool:
        """
        Supprime la copie durable, ou à défaut la remplace par TOMBSTONE.

        Returns:
            True si plus aucune identité ne peut être restaurée
        """
        try:
            self._storage.delete(self.session_key)
            return True
        except StorageError as e:
            delete_error = str(e)

        try:
            self._storage.write(self.session_key, self.TOMBSTONE)
        except StorageError as e:
            self._logger.error(
                "Durable session copy could not be removed and may be restored on next start",
                delete_error=delete_error,
                write_error=str(e),
            )
            return False

        self._logger.warn("Durable session copy replaced by a logged-out marker", delete_error=delete_error)
        return True

    def restore(self) -> Optional[Identity]:
        """
        Recharge la copie durable au démarrage.

        Copie absente, mal formée ou TOMBSTONE → session vide, sans erreur.

        Returns:
            Identité restaurée ou None
        """
        if self._purge_pending:
            # Logout précédent sans suppression effective: nouvelle tentative
            self._purge_pending = not self._purge_durable_copy()
            self._store.set(None)
            return None

        raw = self._storage.read(self.session_key)
        if raw is None or raw == self.TOMBSTONE:
            self._store.set(None)
            return None

        try:
            identity = Identity.model_validate_json(raw)
        except ValidationError as e:
            self._logger.warn("Malformed persisted session ignored", errors=e.error_count())
            self._store.set(None)
            return None

        self._store.set(identity)
        self._logger.info("Session restored", username=identity.username)
        return identity

    async def _exchange(
        self,
        operation: str,
        username: str,
        call: Callable[[], Awaitable[Identity]],
        rejected_kind: ExchangeErrorKind,
    ) -> ExchangeResult:
        """
        Exécute un échange et applique son résultat s'il est encore courant.

        Args:
            operation: "login" ou "register" (logs)
            username: Utilisateur concerné (logs)
            call: Appel au service distant
            rejected_kind: Type d'échec si le service refuse

        Returns:
            ExchangeResult
        """
        self._generation += 1
        generation = self._generation
        self._logger.debug("Exchange started", operation=operation, username=username)

        try:
            identity = await call()
        except AuthRejectedError as e:
            self._logger.info("Exchange rejected", operation=operation, username=username, status=e.status_code)
            return ExchangeResult.failed(rejected_kind, e.message)
        except AuthTransportError as e:
            self._logger.warn("Exchange transport failure", operation=operation, username=username, error=str(e))
            return ExchangeResult.failed(ExchangeErrorKind.TRANSPORT_FAILURE, self.TRANSPORT_FAILURE_MESSAGE)

        if generation != self._generation:
            self._logger.warn("Stale exchange response discarded", operation=operation, username=username)
            return ExchangeResult.failed(ExchangeErrorKind.SUPERSEDED, self.SUPERSEDED_MESSAGE)

        try:
            self._storage.write(self.session_key, identity.model_dump_json())
        except StorageError as e:
            self._logger.error("Durable session copy could not be written", operation=operation, error=str(e))
            return ExchangeResult.failed(ExchangeErrorKind.PERSISTENCE_FAILURE, self.PERSISTENCE_FAILURE_MESSAGE)

        self._store.set(identity)
        self._logger.info(
            "Exchange succeeded",
            operation=operation,
            username=identity.username,
            role=identity.role.value if identity.role else None,
        )
        return ExchangeResult.ok(identity)
