"""
Forms - Base

État commun des formulaires d'authentification et redirection par rôle.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Optional

from ..auth.interfaces import ExchangeResult, Identity
from ..logging import StructuredLogger
from ..navigation import IRouter, RouteTable
from .validation import FormValidator, ValidationFailure


@dataclass
class FormState:
    """
    État affichable d'un formulaire.

    Attributes:
        loading: Requête en cours (bouton de soumission désactivé)
        error_message: Échec renvoyé par le SessionManager
        field_errors: Erreurs de validation par champ
    """

    loading: bool = False
    error_message: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)


class AuthForm:
    """
    Base des formulaires login/register.

    Une soumission pendant qu'une autre est en cours est ignorée. Après
    succès, l'utilisateur est envoyé vers l'accueil de son rôle; rôle
    inconnu ou absent → aucune navigation.
    """

    def __init__(
        self,
        router: IRouter,
        routes: RouteTable,
        validator: Optional[FormValidator] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._router = router
        self._routes = routes
        self._validator = validator or FormValidator()
        self._logger = logger or StructuredLogger(type(self).__name__)
        self.state = FormState()

    async def _run(self, build: Callable[[], Awaitable[ExchangeResult]]) -> Optional[ExchangeResult]:
        """
        Soumet le formulaire.

        Args:
            build: Valide la saisie et lance l'échange

        Returns:
            ExchangeResult, ou None si soumission ignorée ou saisie invalide
        """
        if self.state.loading:
            self._logger.debug("Submit ignored: request already in flight")
            return None

        self.state = FormState(loading=True)
        try:
            result = await build()
        except ValidationFailure as e:
            self.state = FormState(field_errors=dict(e.report.field_errors))
            return None
        except Exception:
            self.state = FormState()
            raise

        if not result.success:
            self.state = FormState(error_message=result.error.message if result.error else None)
            return result

        self.state = FormState()
        self.dispatch_by_role(result.identity)
        return result

    def dispatch_by_role(self, identity: Optional[Identity]) -> Optional[str]:
        """
        Redirige vers l'accueil du rôle.

        Returns:
            Chemin cible, None si aucune navigation
        """
        target = self._routes.home_for(identity.role) if identity else None
        if target is None:
            self._logger.info("No home view for role, staying on current view")
            return None

        self._router.redirect(target)
        return target
