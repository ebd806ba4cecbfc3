"""
Navigation - In-Memory Router

Routeur minimal qui enregistre l'historique des redirections.
"""

from typing import List, Optional

from .interfaces import IRouter


class InMemoryRouter(IRouter):
    """
    Routeur en mémoire.

    Example:
        router = InMemoryRouter()
        router.redirect("/login")
        assert router.current_path == "/login"
    """

    def __init__(self, initial_path: str = "/"):
        self._current_path = initial_path
        self._history: List[str] = []

    @property
    def current_path(self) -> str:
        return self._current_path

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def last_redirect(self) -> Optional[str]:
        return self._history[-1] if self._history else None

    def redirect(self, path: str) -> None:
        self._history.append(path)
        self._current_path = path
