"""
Auth - Session Store

Détenteur en mémoire de l'identité courante, observable par listeners.
"""

from typing import Callable, List, Optional

from ..logging import StructuredLogger
from .interfaces import Identity, ISessionStore, SessionListener


class SessionStore(ISessionStore):
    """
    Valeur observable contenant l'identité connectée (ou None).

    Les écritures remplacent la valeur en entier; les listeners sont notifiés
    après le commit, avec la nouvelle valeur.

    Example:
        store = SessionStore()
        unsubscribe = store.subscribe(lambda identity: print(identity))
        store.set(identity)
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._identity: Optional[Identity] = None
        self._listeners: List[SessionListener] = []
        self._logger = logger or StructuredLogger("session-store")

    def current(self) -> Optional[Identity]:
        return self._identity

    def is_authenticated(self) -> bool:
        return self._identity is not None

    def set(self, identity: Optional[Identity]) -> None:
        previous = self._identity
        self._identity = identity
        if previous == identity:
            return

        # Copie: un listener peut se désabonner pendant la notification
        for listener in list(self._listeners):
            try:
                listener(identity)
            except Exception as e:
                self._logger.error("Session listener failed", error=repr(e))

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
