from typing import Any, Mapping

from devconnect.validation.common import ValidationResult, is_email, is_empty, result, text


def validate_login_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = {}

    email = text(data, "email")
    if is_empty(email):
        errors["email"] = "Email field is required"
    elif not is_email(email):
        errors["email"] = "Email is invalid"

    if is_empty(text(data, "password")):
        errors["password"] = "Password field is required"

    return result(errors)
