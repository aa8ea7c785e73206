"""Field-level validation shared by the page forms.

Forms report one human-readable message per field, using the wording of the
form labels ("Job title is required"), so the frontend can render each
message next to its input.
"""
from datetime import date
from typing import Any

from pydantic import AfterValidator, BeforeValidator, HttpUrl, TypeAdapter, ValidationError

_http_url = TypeAdapter(HttpUrl)
_iso_date = TypeAdapter(date)


def required(message: str) -> BeforeValidator:
    def _check(value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(message)
        return value

    return BeforeValidator(_check)


def optional_text() -> BeforeValidator:
    def _blank_to_none(value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    return BeforeValidator(_blank_to_none)


def http_url(message: str) -> AfterValidator:
    def _check(value: str) -> str:
        try:
            _http_url.validate_python(value.strip())
        except ValidationError:
            raise ValueError(message) from None
        return value.strip()

    return AfterValidator(_check)


def iso_date(message: str) -> AfterValidator:
    def _check(value: str) -> str:
        try:
            return _iso_date.validate_python(value.strip()).isoformat()
        except ValidationError:
            raise ValueError(message) from None

    return AfterValidator(_check)


def one_of(choices: tuple[str, ...], message: str) -> AfterValidator:
    def _check(value: str) -> str:
        if value not in choices:
            raise ValueError(message)
        return value

    return AfterValidator(_check)


def collect_field_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a pydantic error into ``{field: message}``, first error per field wins."""
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "form"
        if field in errors:
            continue
        if err["type"] == "value_error":
            errors[field] = str(err["ctx"]["error"])
        else:
            errors[field] = err["msg"]
    return errors


def parse_form(model: type, data: Any) -> tuple[Any, dict[str, str]]:
    """Validate ``data`` against a form model; returns ``(form, {})`` or ``(None, errors)``."""
    try:
        return model.model_validate(data or {}), {}
    except ValidationError as exc:
        return None, collect_field_errors(exc)
