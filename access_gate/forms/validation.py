"""
Forms - Validation

Validation côté formulaire, avant tout appel réseau.
Retourne TOUTES les erreurs par champ (pas fail-fast).
"""

import re
from dataclasses import dataclass, field
from typing import Dict

from ..auth.interfaces import Credentials, RegistrationRequest


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class ValidationReport:
    """Erreurs par champ; vide si valide."""

    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.field_errors


class ValidationFailure(Exception):
    """Saisie invalide; ne doit jamais atteindre le SessionManager."""

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        super().__init__(f"Invalid fields: {', '.join(sorted(report.field_errors))}")


class FormValidator:
    """Règles de saisie des formulaires de connexion et d'inscription."""

    REQUIRED_MESSAGE = "This field is required."
    EMAIL_MESSAGE = "Enter a valid email address."
    MISMATCH_MESSAGE = "Passwords do not match."

    def validate_login(self, username: str, password: str) -> ValidationReport:
        report = ValidationReport()
        self._require(report, username=username, password=password)
        return report

    def validate_registration(
        self,
        username: str,
        email: str,
        password: str,
        password_confirmation: str,
        address: str,
    ) -> ValidationReport:
        """
        Valide une inscription.

        Args:
            username: Identifiant souhaité
            email: Adresse email
            password: Mot de passe
            password_confirmation: Confirmation
            address: Adresse postale

        Returns:
            ValidationReport avec toutes les erreurs
        """
        report = ValidationReport()
        self._require(
            report,
            username=username,
            email=email,
            password=password,
            password_confirmation=password_confirmation,
            address=address,
        )

        if "email" not in report.field_errors and not EMAIL_PATTERN.match(email.strip()):
            report.field_errors["email"] = self.EMAIL_MESSAGE

        if "password_confirmation" not in report.field_errors and password != password_confirmation:
            report.field_errors["password_confirmation"] = self.MISMATCH_MESSAGE

        return report

    def build_credentials(self, username: str, password: str) -> Credentials:
        """
        Raises:
            ValidationFailure: Saisie invalide
        """
        report = self.validate_login(username, password)
        if not report.valid:
            raise ValidationFailure(report)
        return Credentials(username=username.strip(), password=password)

    def build_registration(
        self,
        username: str,
        email: str,
        password: str,
        password_confirmation: str,
        address: str,
    ) -> RegistrationRequest:
        """
        Raises:
            ValidationFailure: Saisie invalide (dont mots de passe différents)
        """
        report = self.validate_registration(username, email, password, password_confirmation, address)
        if not report.valid:
            raise ValidationFailure(report)
        return RegistrationRequest(
            username=username.strip(),
            email=email.strip(),
            password=password,
            password_confirmation=password_confirmation,
            address=address.strip(),
        )

    def _require(self, report: ValidationReport, **values: str) -> None:
        for name, value in values.items():
            if value is None or not str(value).strip():
                report.field_errors[name] = self.REQUIRED_MESSAGE
