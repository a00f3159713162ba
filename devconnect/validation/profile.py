from typing import Any, Mapping

from devconnect.models import SOCIAL_KEYS
from devconnect.validation.common import ValidationResult, is_empty, is_length, is_url, result, text

URL_FIELDS = ("website",) + SOCIAL_KEYS


def validate_profile_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = {}

    handle = text(data, "handle")
    if is_empty(handle):
        errors["handle"] = "Profile handle is required"
    elif not is_length(handle, min=2, max=40):
        errors["handle"] = "Handle needs to be between 2 and 40 characters"

    if is_empty(text(data, "status")):
        errors["status"] = "Status field is required"

    if is_empty(text(data, "skills")):
        errors["skills"] = "Skills field is required"

    # optional links, checked only when given
    for field in URL_FIELDS:
        value = text(data, field)
        if not is_empty(value) and not is_url(value):
            errors[field] = "Not a valid URL"

    return result(errors)
