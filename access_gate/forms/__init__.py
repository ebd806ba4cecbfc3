"""
Forms

Logique côté formulaire: validation, état de chargement, redirection par rôle.
"""

from .validation import FormValidator, ValidationReport, ValidationFailure, EMAIL_PATTERN
from .base import AuthForm, FormState
from .login_form import LoginForm
from .register_form import RegisterForm
from .sign_out import SignOutAction

__all__ = [
    # Data classes
    "FormState",
    "ValidationReport",
    # Implementations
    "FormValidator",
    "AuthForm",
    "LoginForm",
    "RegisterForm",
    "SignOutAction",
    "EMAIL_PATTERN",
    # Exceptions
    "ValidationFailure",
]
