"""
Auth package: form validation and the login/register/logout flow.
"""

from .validators import ValidationResult, validate_login, validate_register
from .service import AuthService

__all__ = [
    'AuthService',
    'ValidationResult',
    'validate_login',
    'validate_register',
]
