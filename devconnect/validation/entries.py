# devconnect/validation/entries.py
"""Validators for the experience / education sub-records of a profile."""
from typing import Any, Dict, Mapping

from devconnect.validation.common import ValidationResult, is_empty, is_iso_date, result, text


def _check_dates(data: Mapping[str, Any], errors: Dict[str, str], from_message: str) -> None:
    start = text(data, "from")
    if is_empty(start):
        errors["from"] = from_message
    elif not is_iso_date(start):
        errors["from"] = "From date must be in YYYY-MM-DD format"

    end = text(data, "to")
    if not is_empty(end) and not is_iso_date(end):
        errors["to"] = "To date must be in YYYY-MM-DD format"


def validate_experience_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = {}

    if is_empty(text(data, "title")):
        errors["title"] = "Job title field is required"
    if is_empty(text(data, "company")):
        errors["company"] = "Company field is required"
    _check_dates(data, errors, "From date field is required")

    return result(errors)


def validate_education_input(data: Mapping[str, Any]) -> ValidationResult:
    errors = {}

    if is_empty(text(data, "school")):
        errors["school"] = "School field is required"
    if is_empty(text(data, "degree")):
        errors["degree"] = "Degree field is required"
    if is_empty(text(data, "fieldofstudy")):
        errors["fieldofstudy"] = "Field of study field is required"
    _check_dates(data, errors, "From date field is required")

    return result(errors)
