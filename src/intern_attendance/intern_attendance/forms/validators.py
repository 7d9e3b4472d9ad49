from __future__ import annotations

from typing import Any, Callable, Mapping

from ..attendance.service import parse_status
from ..common.validators import require_email, require_iso_date, require_min_length, require_non_empty
from ..core.exceptions import ValidationError


def _collect(errors: dict[str, str], field: str, check: Callable[[], Any]) -> None:
    try:
        check()
    except ValidationError as e:
        errors[field] = str(e)


def validate_intern_form(values: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    _collect(errors, "trainee_id", lambda: require_non_empty(values.get("trainee_id"), "Trainee ID"))
    _collect(
        errors,
        "trainee_name",
        lambda: require_min_length(require_non_empty(values.get("trainee_name"), "Trainee name"), "Trainee name", 2),
    )
    _collect(
        errors,
        "field_of_specialization",
        lambda: require_non_empty(values.get("field_of_specialization"), "Field of specialization"),
    )
    if values.get("email"):
        _collect(errors, "email", lambda: require_email(values.get("email"), "Email"))
    return errors


def validate_mark_request(values: Mapping[str, Any]) -> dict[str, str]:
    errors: dict[str, str] = {}
    _collect(errors, "intern_id", lambda: require_non_empty(values.get("intern_id"), "Intern ID"))
    _collect(errors, "status", lambda: parse_status(values.get("status")))
    _collect(errors, "date", lambda: require_iso_date(values.get("date"), "Date"))
    return errors
