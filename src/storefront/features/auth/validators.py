# Login and registration form validation

from dataclasses import dataclass
from typing import Any, Dict, Optional

MIN_USERNAME_LENGTH = 6
MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: Optional[str] = None


PASSED = ValidationResult(True)


def _field(form: Dict[str, Any], name: str) -> str:
    value = form.get(name)
    return "" if value is None else str(value)


def _check_required(username: str, password: str) -> Optional[ValidationResult]:
    if not username:
        return ValidationResult(False, "Username is a required field")
    if not password:
        return ValidationResult(False, "Password is a required field")
    return None


def validate_login(form: Dict[str, Any]) -> ValidationResult:
    # Login only checks that both fields are filled in; lengths are not enforced
    failed = _check_required(_field(form, "username"), _field(form, "password"))
    return failed or PASSED


def validate_register(form: Dict[str, Any]) -> ValidationResult:
    username = _field(form, "username")
    password = _field(form, "password")

    failed = _check_required(username, password)
    if failed:
        return failed
    if len(username) < MIN_USERNAME_LENGTH:
        return ValidationResult(False, f"Username must be at least {MIN_USERNAME_LENGTH} characters")
    if len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult(False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password != _field(form, "confirm_password"):
        return ValidationResult(False, "Passwords do not match")
    return PASSED
