# devconnect/validation/common.py
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Mapping, NamedTuple

from email_validator import EmailNotValidError, validate_email
from pydantic import HttpUrl, TypeAdapter, ValidationError

_url = TypeAdapter(HttpUrl)


class ValidationResult(NamedTuple):
    errors: Dict[str, str]
    is_valid: bool


def result(errors: Dict[str, str]) -> ValidationResult:
    return ValidationResult(errors=errors, is_valid=not errors)


def text(data: Mapping[str, Any], key: str) -> str:
    """Field as a stripped string; missing/None become ''."""
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value).strip()
    return str(value).strip()


def raw(data: Mapping[str, Any], key: str) -> str:
    """Field exactly as sent (no stripping); missing/None become ''."""
    value = data.get(key)
    return "" if value is None else str(value)


def is_empty(value: str) -> bool:
    return not value


def is_length(value: str, min: int = 0, max: int | None = None) -> bool:
    if len(value) < min:
        return False
    return max is None or len(value) <= max


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_url(value: str) -> bool:
    candidate = value if "://" in value else f"http://{value}"
    try:
        parsed = _url.validate_python(candidate)
    except ValidationError:
        return False
    # "http://foo" parses, but a bare word is not a link
    return bool(parsed.host) and "." in parsed.host


def is_iso_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
