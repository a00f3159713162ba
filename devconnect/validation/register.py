from typing import Any, Mapping

from devconnect.validation.common import ValidationResult, is_email, is_empty, is_length, raw, result, text


def validate_register_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = {}

    name = text(data, "name")
    email = text(data, "email")
    # passwords are hashed as sent, so length and match use the raw values
    password = raw(data, "password")
    password2 = raw(data, "password2")

    if is_empty(name):
        errors["name"] = "Name field is required"
    elif not is_length(name, min=2, max=30):
        errors["name"] = "Name must be between 2 and 30 characters"

    if is_empty(email):
        errors["email"] = "Email field is required"
    elif not is_email(email):
        errors["email"] = "Email is invalid"

    if is_empty(password.strip()):
        errors["password"] = "Password field is required"
    elif not is_length(password, min=6, max=30):
        errors["password"] = "Password must be at least 6 characters"

    if is_empty(password2.strip()):
        errors["password2"] = "Confirm Password field is required"
    elif password != password2:
        errors["password2"] = "Passwords must match"

    return result(errors)
